#!/usr/bin/env python3
"""
raw_entry.py
-------------------

Intermediate, unvalidated parse results for one export entry.

The grammar produces these directly: they keep every recognized field in
source order, duplicates included, and hold text as Span views into the
parsed document instead of copies. MTIFEntry.from_raw() turns a RawEntry
into the public, validated record.

Types:
    Span: (source, start, end) view into the input text
    MetadataKey: Tag of a metadata field
    RawField: One parsed `KEY: value` metadata line
    SectionKind: Tag of a multi-line section
    RawTextSection: BODY / EXTENDED BODY / EXCERPT / KEYWORDS block
    RawComment: COMMENT block with its sub-fields
    RawPing: PING block with its sub-fields
    RawEntry: All raw fields and sections of one entry
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Union


# ----- Text spans -----
@dataclass(frozen=True)
class Span:
    """
    A slice of the source text, kept as offsets.

    Attributes:
        source (str): The whole parsed document.
        start (int): Offset of the first character.
        end (int): Offset one past the last character.
    """

    source: str = field(repr=False)
    start: int
    end: int

    @property
    def text(self) -> str:
        return self.source[self.start : self.end]

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return self.end - self.start


# ----- Metadata -----
class MetadataKey(str, Enum):
    """
    Tag of a metadata field; the value is the key as written in exports.
    """

    AUTHOR = "AUTHOR"
    TITLE = "TITLE"
    BASENAME = "BASENAME"
    STATUS = "STATUS"
    ALLOW_COMMENTS = "ALLOW COMMENTS"
    ALLOW_PINGS = "ALLOW PINGS"
    CONVERT_BREAKS = "CONVERT BREAKS"
    CATEGORY = "CATEGORY"
    PRIMARY_CATEGORY = "PRIMARY CATEGORY"
    TAGS = "TAGS"
    DATE = "DATE"
    NO_ENTRY = "NO ENTRY"
    IMAGE = "IMAGE"


@dataclass(frozen=True)
class RawField:
    """
    One metadata line.

    The value type depends on the key:
        AUTHOR, TITLE, BASENAME, CATEGORY, PRIMARY CATEGORY, IMAGE -> Span
        STATUS -> Status
        ALLOW COMMENTS, ALLOW PINGS -> bool
        CONVERT BREAKS -> ConvertBreaks
        TAGS -> List[Span]
        DATE -> datetime
        NO ENTRY -> None (presence only)
    """

    key: MetadataKey
    value: Any = None


# ----- Multi-line sections -----
class SectionKind(str, Enum):
    """Tag of a multi-line section; the value is its header without ':'."""

    BODY = "BODY"
    EXTENDED_BODY = "EXTENDED BODY"
    EXCERPT = "EXCERPT"
    KEYWORDS = "KEYWORDS"
    COMMENT = "COMMENT"
    PING = "PING"


@dataclass(frozen=True)
class RawTextSection:
    """A plain BODY, EXTENDED BODY, EXCERPT or KEYWORDS block."""

    kind: SectionKind
    text: Span


@dataclass(frozen=True)
class RawComment:
    """A COMMENT block: optional sub-fields, then the comment text."""

    text: Span
    author: Optional[Span] = None
    email: Optional[Span] = None
    url: Optional[Span] = None
    ip: Optional[Span] = None
    date: Optional[datetime] = None

    @property
    def kind(self) -> SectionKind:
        return SectionKind.COMMENT


@dataclass(frozen=True)
class RawPing:
    """A PING block: optional sub-fields, then the excerpt of the pinging post."""

    text: Span
    title: Optional[Span] = None
    url: Optional[Span] = None
    ip: Optional[Span] = None
    blog_name: Optional[Span] = None
    date: Optional[datetime] = None

    @property
    def kind(self) -> SectionKind:
        return SectionKind.PING


RawMultilineField = Union[RawTextSection, RawComment, RawPing]


# ----- Entry -----
@dataclass(frozen=True)
class RawEntry:
    """
    Direct output of parsing one entry block.

    Attributes:
        metadata (List[RawField]): Metadata lines in source order.
        multiline_data (List[RawMultilineField]): Sections in source order.
        start (int): Offset of the entry in the source text.
        end (int): Offset just past the end-of-entry marker.
    """

    metadata: List[RawField]
    multiline_data: List[RawMultilineField]
    start: int = 0
    end: int = 0

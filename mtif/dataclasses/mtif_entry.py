#!/usr/bin/env python3
"""
mtif_entry.py
-------------------

Defines the MTIFEntry dataclass: one blog post read from a Movable Type
export file, with its metadata, text blocks, comments and pings.

Each MTIFEntry instance contains:
- metadata (MetaData)
    - date (always present)
    - author, title, basename, status, ... (optional)
    - category, tags (possibly empty)
- body, extended_body, excerpt, keywords (optional)
- comments and pings in source order

Entries are built from RawEntry records by MTIFEntry.from_raw(), which
resolves duplicate keys with a fixed per-key merge policy and enforces
the one mandatory field (DATE). They are frozen: the parser is a one-shot
batch transform, not an editable document model.
"""
# ---- Annotations ----
from __future__ import annotations

# ---- Standard library imports ----
import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

# ---- Third party ----
from ftfy import fix_text  # type: ignore

# ---- Local imports ----
from mtif.core.exceptions import MissingRequiredFieldError
from mtif.dataclasses.enums import ConvertBreaks, Status
from mtif.dataclasses.raw_entry import (
    MetadataKey,
    RawComment,
    RawEntry,
    RawField,
    RawPing,
    SectionKind,
    Span,
)
from mtif.grammar.document import parse_raw_document
from mtif.grammar.format import format_field, format_section
from mtif.grammar.primitives import END_OF_ENTRY, SECTION_SEPARATOR


# ----- Logging ----
logger = logging.getLogger(__name__)


# ----- Merge policies -----
class MergePolicy(Enum):
    """How repeated occurrences of a key combine into one value."""

    TAKE_FIRST = "take_first"
    COLLECT_ALL = "collect_all"
    PRESENCE = "presence"


METADATA_MERGE_POLICY: Dict[MetadataKey, MergePolicy] = {
    MetadataKey.AUTHOR: MergePolicy.TAKE_FIRST,
    MetadataKey.TITLE: MergePolicy.TAKE_FIRST,
    MetadataKey.BASENAME: MergePolicy.TAKE_FIRST,
    MetadataKey.STATUS: MergePolicy.TAKE_FIRST,
    MetadataKey.ALLOW_COMMENTS: MergePolicy.TAKE_FIRST,
    MetadataKey.ALLOW_PINGS: MergePolicy.TAKE_FIRST,
    MetadataKey.CONVERT_BREAKS: MergePolicy.TAKE_FIRST,
    MetadataKey.CATEGORY: MergePolicy.COLLECT_ALL,
    MetadataKey.PRIMARY_CATEGORY: MergePolicy.TAKE_FIRST,
    MetadataKey.TAGS: MergePolicy.TAKE_FIRST,
    MetadataKey.DATE: MergePolicy.TAKE_FIRST,
    MetadataKey.NO_ENTRY: MergePolicy.PRESENCE,
    MetadataKey.IMAGE: MergePolicy.TAKE_FIRST,
}

SECTION_MERGE_POLICY: Dict[SectionKind, MergePolicy] = {
    SectionKind.BODY: MergePolicy.TAKE_FIRST,
    SectionKind.EXTENDED_BODY: MergePolicy.TAKE_FIRST,
    SectionKind.EXCERPT: MergePolicy.TAKE_FIRST,
    SectionKind.KEYWORDS: MergePolicy.TAKE_FIRST,
    SectionKind.COMMENT: MergePolicy.COLLECT_ALL,
    SectionKind.PING: MergePolicy.COLLECT_ALL,
}


def _owned(value: Any) -> Any:
    """Copy spans (and lists of spans) out of the source text."""
    if isinstance(value, Span):
        return value.text
    if isinstance(value, list):
        return tuple(_owned(item) for item in value)
    return value


def _owned_optional(value: Optional[Span]) -> Optional[str]:
    return None if value is None else value.text


def _merge(merged: Dict[Any, Any], key: Any, value: Any, policy: MergePolicy) -> None:
    if policy is MergePolicy.TAKE_FIRST:
        merged.setdefault(key, value)
    elif policy is MergePolicy.COLLECT_ALL:
        merged.setdefault(key, []).append(value)
    else:
        merged[key] = True


# ----- Dataclasses -----
@dataclass(frozen=True)
class MetaData:
    """
    Metadata of an entry after merging.

    Attributes:
        date (datetime): Authored date; the only mandatory field.
        author, title, basename, primary_category, image (Optional[str])
        status (Optional[Status])
        allow_comments, allow_pings (Optional[bool])
        convert_breaks (Optional[ConvertBreaks])
        category (Tuple[str, ...]): Every CATEGORY line, in order.
        tags (Tuple[str, ...]): Tags of the first TAGS line.
        no_entry (bool): True iff a NO ENTRY line was present.
    """

    date: datetime
    author: Optional[str] = None
    title: Optional[str] = None
    basename: Optional[str] = None
    status: Optional[Status] = None
    allow_comments: Optional[bool] = None
    allow_pings: Optional[bool] = None
    convert_breaks: Optional[ConvertBreaks] = None
    primary_category: Optional[str] = None
    category: Tuple[str, ...] = ()
    no_entry: bool = False
    tags: Tuple[str, ...] = ()
    image: Optional[str] = None

    @classmethod
    def from_raw_fields(cls, fields: Iterable[RawField]) -> MetaData:
        """
        Merge raw metadata fields in a single pass.

        Raises:
            MissingRequiredFieldError: No DATE field
        """
        merged: Dict[MetadataKey, Any] = {}
        for raw_field in fields:
            _merge(
                merged,
                raw_field.key,
                _owned(raw_field.value),
                METADATA_MERGE_POLICY[raw_field.key],
            )

        if MetadataKey.DATE not in merged:
            raise MissingRequiredFieldError("date")

        return cls(
            date=merged[MetadataKey.DATE],
            author=merged.get(MetadataKey.AUTHOR),
            title=merged.get(MetadataKey.TITLE),
            basename=merged.get(MetadataKey.BASENAME),
            status=merged.get(MetadataKey.STATUS),
            allow_comments=merged.get(MetadataKey.ALLOW_COMMENTS),
            allow_pings=merged.get(MetadataKey.ALLOW_PINGS),
            convert_breaks=merged.get(MetadataKey.CONVERT_BREAKS),
            primary_category=merged.get(MetadataKey.PRIMARY_CATEGORY),
            category=tuple(merged.get(MetadataKey.CATEGORY, ())),
            no_entry=merged.get(MetadataKey.NO_ENTRY, False),
            tags=merged.get(MetadataKey.TAGS, ()),
            image=merged.get(MetadataKey.IMAGE),
        )

    def to_raw_fields(self) -> List[RawField]:
        """Fields in the order export files usually list them."""
        fields: List[RawField] = []

        def add(key: MetadataKey, value: Any) -> None:
            if value is not None:
                fields.append(RawField(key, value))

        add(MetadataKey.AUTHOR, self.author)
        add(MetadataKey.TITLE, self.title)
        add(MetadataKey.BASENAME, self.basename)
        add(MetadataKey.STATUS, self.status)
        add(MetadataKey.ALLOW_COMMENTS, self.allow_comments)
        add(MetadataKey.ALLOW_PINGS, self.allow_pings)
        add(MetadataKey.CONVERT_BREAKS, self.convert_breaks)
        add(MetadataKey.PRIMARY_CATEGORY, self.primary_category)
        for category in self.category:
            add(MetadataKey.CATEGORY, category)
        if self.tags:
            add(MetadataKey.TAGS, list(self.tags))
        add(MetadataKey.DATE, self.date)
        if self.no_entry:
            fields.append(RawField(MetadataKey.NO_ENTRY))
        add(MetadataKey.IMAGE, self.image)
        return fields

    def to_dict(self) -> Dict[str, Any]:
        return {
            "author": self.author,
            "title": self.title,
            "basename": self.basename,
            "status": self.status.value if self.status else None,
            "allow_comments": self.allow_comments,
            "allow_pings": self.allow_pings,
            "convert_breaks": self.convert_breaks.value if self.convert_breaks else None,
            "primary_category": self.primary_category,
            "category": list(self.category),
            "date": self.date.isoformat(),
            "no_entry": self.no_entry,
            "tags": list(self.tags),
            "image": self.image,
        }


@dataclass(frozen=True)
class Comment:
    """A reader comment on an entry."""

    text: str
    author: Optional[str] = None
    email: Optional[str] = None
    url: Optional[str] = None
    ip: Optional[str] = None
    date: Optional[datetime] = None

    @classmethod
    def from_raw(cls, raw: RawComment) -> Comment:
        return cls(
            text=raw.text.text,
            author=_owned_optional(raw.author),
            email=_owned_optional(raw.email),
            url=_owned_optional(raw.url),
            ip=_owned_optional(raw.ip),
            date=raw.date,
        )

    def to_mtif(self) -> str:
        return format_section(
            SectionKind.COMMENT,
            self.text,
            [
                ("AUTHOR", self.author),
                ("EMAIL", self.email),
                ("URL", self.url),
                ("IP", self.ip),
                ("DATE", self.date),
            ],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "author": self.author,
            "email": self.email,
            "url": self.url,
            "ip": self.ip,
            "date": self.date.isoformat() if self.date else None,
            "text": self.text,
        }


@dataclass(frozen=True)
class Ping:
    """A trackback ping received by an entry."""

    text: str
    title: Optional[str] = None
    url: Optional[str] = None
    ip: Optional[str] = None
    blog_name: Optional[str] = None
    date: Optional[datetime] = None

    @classmethod
    def from_raw(cls, raw: RawPing) -> Ping:
        return cls(
            text=raw.text.text,
            title=_owned_optional(raw.title),
            url=_owned_optional(raw.url),
            ip=_owned_optional(raw.ip),
            blog_name=_owned_optional(raw.blog_name),
            date=raw.date,
        )

    def to_mtif(self) -> str:
        return format_section(
            SectionKind.PING,
            self.text,
            [
                ("TITLE", self.title),
                ("URL", self.url),
                ("IP", self.ip),
                ("BLOG NAME", self.blog_name),
                ("DATE", self.date),
            ],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "url": self.url,
            "ip": self.ip,
            "blog_name": self.blog_name,
            "date": self.date.isoformat() if self.date else None,
            "text": self.text,
        }


@dataclass(frozen=True)
class MTIFEntry:
    """
    Represents a single entry parsed from a Movable Type export file.

    Attributes:
        metadata (MetaData): Merged metadata block.
        body (Optional[str]): BODY text.
        extended_body (Optional[str]): EXTENDED BODY text.
        excerpt (Optional[str]): EXCERPT text.
        keywords (Optional[str]): KEYWORDS text.
        comments (Tuple[Comment, ...]): COMMENT sections in order.
        pings (Tuple[Ping, ...]): PING sections in order.
    """

    # ---- Attributes ----
    metadata: MetaData
    body: Optional[str] = None
    extended_body: Optional[str] = None
    excerpt: Optional[str] = None
    keywords: Optional[str] = None
    comments: Tuple[Comment, ...] = ()
    pings: Tuple[Ping, ...] = ()

    # ---- Public constructors ----
    @classmethod
    def from_raw(cls, raw: RawEntry) -> MTIFEntry:
        """
        Assemble a raw entry into its final record.

        Singular keys and text blocks keep their first occurrence;
        CATEGORY lines, comments and pings are all kept in order.
        Spans are copied into plain strings here, so the result no
        longer refers to the parsed document.

        Raises:
            MissingRequiredFieldError: The entry has no DATE line
        """
        metadata = MetaData.from_raw_fields(raw.metadata)

        sections: Dict[SectionKind, Any] = {}
        for section in raw.multiline_data:
            if isinstance(section, RawComment):
                value: Any = Comment.from_raw(section)
            elif isinstance(section, RawPing):
                value = Ping.from_raw(section)
            else:
                value = section.text.text
            _merge(sections, section.kind, value, SECTION_MERGE_POLICY[section.kind])

        return cls(
            metadata=metadata,
            body=sections.get(SectionKind.BODY),
            extended_body=sections.get(SectionKind.EXTENDED_BODY),
            excerpt=sections.get(SectionKind.EXCERPT),
            keywords=sections.get(SectionKind.KEYWORDS),
            comments=tuple(sections.get(SectionKind.COMMENT, ())),
            pings=tuple(sections.get(SectionKind.PING, ())),
        )

    @classmethod
    def from_text(cls, text: str) -> List[MTIFEntry]:
        """
        Parse and assemble every entry of an export document.

        Raises:
            ParseError: The text does not follow the export grammar
            MissingRequiredFieldError: An entry has no DATE line
        """
        return [cls.from_raw(raw) for raw in parse_raw_document(text)]

    @classmethod
    def from_file(
        cls,
        path: Path,
        fix_encoding: bool = False,
        verbose: bool = False,
    ) -> List[MTIFEntry]:
        """
        Parse an export file. Generate a list of entries.

        Args:
            path: Export file (UTF-8)
            fix_encoding: Repair mojibake with ftfy before parsing
            verbose: Emit debug logging
        """
        if verbose:
            logger.debug(f"Reading file: {str(path)}")

        try:
            text = Path(path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            logger.error(f"Cannot read export file: {str(path)}")
            raise

        if fix_encoding:
            # Keep typographic quotes; only undo encoding damage
            text = fix_text(text, uncurl_quotes=False)

        entries = cls.from_text(text)
        if verbose:
            logger.debug(f"Entries found: {len(entries)}")

        logger.info(f"Successfully parsed {len(entries)} entries from {Path(path).name}")
        return entries

    # ---- Serialization ----
    def to_mtif(self) -> str:
        """
        Export text for this entry, ending with its ``--------`` marker.

        Raises:
            ValueError: A value cannot be written in export syntax
        """
        parts: List[str] = [format_field(f) for f in self.metadata.to_raw_fields()]
        parts.append(SECTION_SEPARATOR)
        for kind, text in (
            (SectionKind.BODY, self.body),
            (SectionKind.EXTENDED_BODY, self.extended_body),
            (SectionKind.EXCERPT, self.excerpt),
            (SectionKind.KEYWORDS, self.keywords),
        ):
            if text is not None:
                parts.append(format_section(kind, text))
        parts.extend(comment.to_mtif() for comment in self.comments)
        parts.extend(ping.to_mtif() for ping in self.pings)
        parts.append(END_OF_ENTRY)
        return "".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict (ISO dates, enum literals) for YAML or JSON output."""
        return {
            "metadata": self.metadata.to_dict(),
            "body": self.body,
            "extended_body": self.extended_body,
            "excerpt": self.excerpt,
            "keywords": self.keywords,
            "comments": [comment.to_dict() for comment in self.comments],
            "pings": [ping.to_dict() for ping in self.pings],
        }


# ----- Module API -----
def parse_document(text: str) -> List[MTIFEntry]:
    """
    Parse an entire export document into assembled entries.

    Fails on the first grammar mismatch or missing DATE anywhere in the
    document; no partial result is returned.
    """
    return MTIFEntry.from_text(text)


def format_document(entries: Iterable[MTIFEntry]) -> str:
    """Export text for several entries, one newline between them."""
    return "\n".join(entry.to_mtif() for entry in entries)

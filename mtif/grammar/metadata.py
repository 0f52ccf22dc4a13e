#!/usr/bin/env python3
"""
metadata.py
--------------------
Metadata block of an export entry.

    AUTHOR: Foo Bar
    TITLE: A dummy title
    DATE: 01/31/2002 03:31:05 PM
    -----

Each recognized key has its own element matching ``KEY: value`` plus the
line terminator. The block is any number of those lines, in any order,
closed by a ``-----`` line. Keys are case-sensitive; the values of the
enumerated keys (STATUS, CONVERT BREAKS) are not.

Every line before the separator must be a metadata field, so a bad line
is reported where it goes wrong (``STATUS: Hidden`` at ``Hidden``)
instead of as a missing separator.

Functions:
    parse_field: Any one metadata line
    parse_metadata_section: Whole block including its separator
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import List, Tuple, Type, Union

# --- Third party imports ---
from pyparsing import MatchFirst, ParserElement, ZeroOrMore

# --- Local imports ---
from mtif.dataclasses.enums import ConvertBreaks, Status
from mtif.dataclasses.raw_entry import MetadataKey, RawField
from mtif.grammar.dates import DATE_VALUE
from mtif.grammar.primitives import (
    SECTION_SEPARATOR,
    bool_flag,
    caseless_literal,
    line_end,
    line_value,
    literal,
    parse_prefix,
)
from mtif.grammar.tags import TAGS_LINE


EnumClass = Union[Type[Status], Type[ConvertBreaks]]

NO_ENTRY_LINE = f"{MetadataKey.NO_ENTRY.value}: 1\n"


def field_prefix(key: MetadataKey) -> str:
    """``KEY: `` as it starts a metadata line."""
    return f"{key.value}: "


# ----- Field builders -----
def _keyed(key: MetadataKey, value: ParserElement) -> ParserElement:
    """``KEY: `` followed by ``value``, yielding a RawField."""
    element = literal(field_prefix(key)).suppress() + value
    return element.set_parse_action(lambda tokens: RawField(key, tokens[0])).set_name(key.value)


def _enum_value(enum_cls: EnumClass) -> ParserElement:
    """
    One alternative per literal, each followed by the line terminator,
    tried in ``enum_cls.choices()`` order.
    """
    alternatives = [caseless_literal(choice) + line_end() for choice in enum_cls.choices()]
    return MatchFirst(alternatives).set_parse_action(
        lambda tokens: enum_cls.from_literal(tokens[0])
    )


# ----- Field elements -----
AUTHOR = _keyed(MetadataKey.AUTHOR, line_value())
TITLE = _keyed(MetadataKey.TITLE, line_value())
BASENAME = _keyed(MetadataKey.BASENAME, line_value())
CATEGORY = _keyed(MetadataKey.CATEGORY, line_value())
PRIMARY_CATEGORY = _keyed(MetadataKey.PRIMARY_CATEGORY, line_value())
# Hatena export extension
IMAGE = _keyed(MetadataKey.IMAGE, line_value())

ALLOW_COMMENTS = _keyed(MetadataKey.ALLOW_COMMENTS, bool_flag())
ALLOW_PINGS = _keyed(MetadataKey.ALLOW_PINGS, bool_flag())

# STATUS: Draft|Publish|Future
STATUS = _keyed(MetadataKey.STATUS, _enum_value(Status))
# CONVERT BREAKS: 0|1|markdown_with_smartypants|markdown|richtext|textile_2
CONVERT_BREAKS = _keyed(MetadataKey.CONVERT_BREAKS, _enum_value(ConvertBreaks))

DATE = _keyed(MetadataKey.DATE, DATE_VALUE + line_end())

NO_ENTRY = literal(NO_ENTRY_LINE).set_parse_action(
    lambda: RawField(MetadataKey.NO_ENTRY)
)

# Keys are disjoint, so the order here does not change what matches.
FIELD = MatchFirst(
    [
        AUTHOR,
        TITLE,
        BASENAME,
        STATUS,
        ALLOW_COMMENTS,
        ALLOW_PINGS,
        CONVERT_BREAKS,
        PRIMARY_CATEGORY,
        CATEGORY,
        DATE,
        TAGS_LINE,
        NO_ENTRY,
        IMAGE,
    ]
).set_name("metadata field")

_SEPARATOR = literal(SECTION_SEPARATOR)

METADATA_SECTION = ZeroOrMore(~_SEPARATOR - FIELD) + _SEPARATOR.suppress()


def parse_field(text: str) -> Tuple[RawField, int]:
    """Parse the metadata line at the start of ``text``."""
    tokens, end = parse_prefix(FIELD, text)
    return tokens[0], end


def parse_metadata_section(text: str) -> Tuple[List[RawField], int]:
    """
    Parse metadata lines up to and including the ``-----`` separator.

    Returns:
        Fields in source order (duplicates kept) and the offset after the
        separator line

    Examples:
        >>> fields, end = parse_metadata_section("AUTHOR: Foo Bar\\nTITLE: Baz Qux\\n-----\\n")
        >>> [(f.key.value, f.value.text) for f in fields]
        [('AUTHOR', 'Foo Bar'), ('TITLE', 'Baz Qux')]
    """
    tokens, end = parse_prefix(METADATA_SECTION, text)
    return list(tokens), end

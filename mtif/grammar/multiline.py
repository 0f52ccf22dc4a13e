#!/usr/bin/env python3
"""
multiline.py
--------------------
Multi-line sections of an export entry.

    BODY:
    This is the body.
    -----
    COMMENT:
    AUTHOR: Foo
    DATE: 01/31/2002 03:47:06 PM
    This is
    the body of this comment.
    -----

Plain sections (BODY, EXTENDED BODY, EXCERPT, KEYWORDS) are a header line
and free text up to a ``-----`` line. COMMENT and PING sections put any
number of ``KEY: value`` sub-field lines, in any order, between the header
and the text. A repeated sub-field keeps its first value. A line that
looks like a sub-field but does not parse as one is where the text
begins.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Dict, List, Tuple

# --- Third party imports ---
from pyparsing import Group, MatchFirst, ParserElement, ParseResults, ZeroOrMore

# --- Local imports ---
from mtif.dataclasses.raw_entry import (
    RawComment,
    RawMultilineField,
    RawPing,
    RawTextSection,
    SectionKind,
)
from mtif.grammar.dates import DATE_VALUE
from mtif.grammar.primitives import (
    END_OF_ENTRY,
    LINE_END,
    line_end,
    line_value,
    literal,
    parse_prefix,
    section_text,
)


COMMENT_SUBFIELDS = ("AUTHOR", "EMAIL", "URL", "IP")
PING_SUBFIELDS = ("TITLE", "URL", "IP", "BLOG NAME")


def section_header(kind: SectionKind) -> str:
    """Header line opening a section, e.g. ``EXTENDED BODY:\\n``."""
    return f"{kind.value}:{LINE_END}"


def subfield_attribute(key: str) -> str:
    """Attribute name of a sub-field key: ``BLOG NAME`` -> ``blog_name``."""
    return key.lower().replace(" ", "_")


# ----- Plain sections -----
def _text_section(kind: SectionKind) -> ParserElement:
    element = literal(section_header(kind)).suppress() + section_text()
    return element.set_parse_action(lambda tokens: RawTextSection(kind, tokens[0])).set_name(
        kind.value
    )


BODY = _text_section(SectionKind.BODY)
EXTENDED_BODY = _text_section(SectionKind.EXTENDED_BODY)
EXCERPT = _text_section(SectionKind.EXCERPT)
KEYWORDS = _text_section(SectionKind.KEYWORDS)


# ----- Sub-fields -----
def _subfield(key: str, value: ParserElement) -> ParserElement:
    attribute = subfield_attribute(key)
    element = literal(f"{key}: ").suppress() + value
    return element.set_parse_action(lambda tokens: (attribute, tokens[0]))


def _subfields(keys: Tuple[str, ...]) -> ParserElement:
    alternatives = [_subfield(key, line_value()) for key in keys]
    alternatives.append(_subfield("DATE", DATE_VALUE + line_end()))
    return Group(ZeroOrMore(MatchFirst(alternatives)))


def _first_values(subfields: ParseResults) -> Dict[str, object]:
    values: Dict[str, object] = {}
    for attribute, value in subfields:
        values.setdefault(attribute, value)
    return values


# ----- Comment / Ping -----
# Sub-fields: AUTHOR, EMAIL, URL, IP, DATE
COMMENT = (
    literal(section_header(SectionKind.COMMENT)).suppress()
    + _subfields(COMMENT_SUBFIELDS)
    + section_text()
).set_parse_action(lambda tokens: RawComment(text=tokens[1], **_first_values(tokens[0])))

# Sub-fields: TITLE, URL, IP, BLOG NAME, DATE
PING = (
    literal(section_header(SectionKind.PING)).suppress()
    + _subfields(PING_SUBFIELDS)
    + section_text()
).set_parse_action(lambda tokens: RawPing(text=tokens[1], **_first_values(tokens[0])))


# Headers are disjoint, so the order here does not change what matches.
SECTION = MatchFirst(
    [BODY, EXTENDED_BODY, EXCERPT, KEYWORDS, COMMENT, PING]
).set_name("multi-line section")

# Sections run until the end-of-entry marker; anything else there is an error
MULTILINE_SECTION = ZeroOrMore(~literal(END_OF_ENTRY) - SECTION)


def parse_section(text: str) -> Tuple[RawMultilineField, int]:
    """Parse the multi-line section at the start of ``text``."""
    tokens, end = parse_prefix(SECTION, text)
    return tokens[0], end


def parse_multiline_section(text: str) -> Tuple[List[RawMultilineField], int]:
    """
    Parse consecutive multi-line sections.

    Stops before the ``--------`` end-of-entry marker, which is not
    consumed. Any other line where a section should start raises.
    """
    tokens, end = parse_prefix(MULTILINE_SECTION, text)
    return list(tokens), end

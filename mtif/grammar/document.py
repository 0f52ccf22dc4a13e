#!/usr/bin/env python3
"""
document.py
--------------------
Whole export documents.

    document := [entry ("\\n" entry)* ["\\n"]]
    entry    := metadata-section multiline-section "--------"

An empty document has no entries. One trailing newline after the last
end-of-entry marker is accepted. Any failure aborts the whole document;
no partial list of entries is ever returned.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import List, Tuple

# --- Third party imports ---
from pyparsing import Group, Located, Opt, ParseResults, ZeroOrMore

# --- Local imports ---
from mtif.core.exceptions import ParseError
from mtif.dataclasses.raw_entry import RawEntry
from mtif.grammar.metadata import METADATA_SECTION
from mtif.grammar.multiline import MULTILINE_SECTION
from mtif.grammar.primitives import (
    END_OF_ENTRY,
    line_end,
    literal,
    parse_prefix,
    string_end,
)


def _to_raw_entry(tokens: ParseResults) -> RawEntry:
    start, (metadata, sections), end = tokens
    return RawEntry(
        metadata=list(metadata),
        multiline_data=list(sections),
        start=start,
        end=end,
    )


ENTRY = Located(
    Group(METADATA_SECTION) + Group(MULTILINE_SECTION) + literal(END_OF_ENTRY).suppress()
).set_parse_action(_to_raw_entry).set_name("entry")

DOCUMENT = string_end() | (
    ENTRY
    + ZeroOrMore(line_end() + ~string_end() + ENTRY)
    + Opt(line_end())
    + string_end()
)


def parse_entry(text: str) -> Tuple[RawEntry, int]:
    """
    Parse one entry: metadata, sections, and the ``--------`` marker.

    Returns:
        The raw entry and the offset just past its end marker
    """
    tokens, end = parse_prefix(ENTRY, text)
    return tokens[0], end


def parse_raw_document(text: str) -> List[RawEntry]:
    """
    Parse every entry of an export document without assembling them.

    Raises:
        ParseError: First point of failure, with line and column set
    """
    try:
        tokens, _ = parse_prefix(DOCUMENT, text)
    except ParseError as error:
        error.locate(text)
        raise
    return list(tokens)

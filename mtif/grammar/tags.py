#!/usr/bin/env python3
"""
tags.py
--------------------
TAGS metadata line.

    TAGS: "Movable Type",foo,bar

A tag is either double-quoted (anything but quotes and newlines, spaces
kept, quotes stripped) or unquoted (a non-empty run without whitespace
or commas). Tags are separated by a bare comma, with no trailing comma.
Order and duplicates are kept as written.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Tuple

# --- Third party imports ---
from pyparsing import Group, Opt, Regex, ZeroOrMore

# --- Local imports ---
from mtif.dataclasses.raw_entry import MetadataKey, RawField
from mtif.grammar.primitives import line_end, literal, parse_prefix, spanned


TAGS_PREFIX = f"{MetadataKey.TAGS.value}: "
TAG_SEPARATOR = ","

QUOTED_TAG = (
    literal('"').suppress()
    + spanned(Regex(r'[^"\n]*').leave_whitespace())
    + literal('"').suppress()
).set_name("quoted tag")

UNQUOTED_TAG = spanned(Regex(r"[^\s,]+").leave_whitespace()).set_name("tag")

# Quoted first: an unquoted tag may itself start with '"'
TAG = QUOTED_TAG | UNQUOTED_TAG

# A separator not followed by a tag is left unconsumed
TAG_LIST = Opt(TAG + ZeroOrMore(literal(TAG_SEPARATOR).suppress() + TAG))

TAGS_LINE = (
    literal(TAGS_PREFIX).suppress() + Group(TAG_LIST) + line_end()
).set_parse_action(lambda tokens: RawField(MetadataKey.TAGS, list(tokens[0])))


def parse_tags(text: str) -> Tuple[RawField, int]:
    """
    ``TAGS: <list>`` line at the start of ``text``.

    Examples:
        >>> field, _ = parse_tags('TAGS: "Movable Type",foo,bar\\n')
        >>> [tag.text for tag in field.value]
        ['Movable Type', 'foo', 'bar']
    """
    tokens, end = parse_prefix(TAGS_LINE, text)
    return tokens[0], end

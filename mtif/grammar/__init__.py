"""
grammar package
---------------
pyparsing grammar for the Movable Type export format.

Each module builds its elements once at import time and exposes
``parse_*(text)`` helpers returning ``(value, end_offset)``; text values
are Span views into ``text``. Modules:

- primitives: whitespace-sensitive literals, lines, digits, flags, section text
- dates: ``MM/DD/YYYY HH:MM:SS[ AM|PM]``
- tags: ``TAGS:`` lists
- metadata: ``KEY: value`` block
- multiline: BODY / EXTENDED BODY / EXCERPT / KEYWORDS / COMMENT / PING
- document: entries and whole documents
- format: the reverse direction, values back to export lines
"""
from mtif.grammar.dates import parse_date_value
from mtif.grammar.document import parse_entry, parse_raw_document
from mtif.grammar.metadata import parse_field, parse_metadata_section
from mtif.grammar.multiline import parse_multiline_section, parse_section
from mtif.grammar.tags import parse_tags

__all__ = [
    "parse_date_value",
    "parse_entry",
    "parse_field",
    "parse_metadata_section",
    "parse_multiline_section",
    "parse_raw_document",
    "parse_section",
    "parse_tags",
]

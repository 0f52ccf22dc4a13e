"""
mtif
====

Parser for the Movable Type Import Format (MTIF), the plain-text export
format of Movable Type blogs.

An export file is a sequence of entries. Each entry has a block of
``KEY: value`` metadata lines, a ``-----`` separator, any number of
multi-line sections (BODY, EXTENDED BODY, EXCERPT, KEYWORDS, COMMENT,
PING), and a closing ``--------`` marker.

Main Components:
    - grammar: Cursor parsers and the reverse formatters
    - dataclasses: Raw parse results and assembled MTIFEntry records
    - pipeline: Export file -> YAML conversion and the ``mtif`` CLI
    - core: Exceptions, logging, paths and CLI statistics

Example Usage:
    >>> from mtif import parse_document
    >>> entries = parse_document(Path("export.txt").read_text())
    >>> entries[0].metadata.title
    'A dummy title'
"""

__version__ = "0.1.0"

from mtif.core.exceptions import (
    FieldValueError,
    GrammarMismatchError,
    IncompleteInputError,
    MissingRequiredFieldError,
    ParseError,
)
from mtif.dataclasses import (
    Comment,
    ConvertBreaks,
    MetaData,
    MTIFEntry,
    Ping,
    Status,
    format_document,
    parse_document,
)

__all__ = [
    "Comment",
    "ConvertBreaks",
    "FieldValueError",
    "GrammarMismatchError",
    "IncompleteInputError",
    "MetaData",
    "MissingRequiredFieldError",
    "MTIFEntry",
    "ParseError",
    "Ping",
    "Status",
    "format_document",
    "parse_document",
]

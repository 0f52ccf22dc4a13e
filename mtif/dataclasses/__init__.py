"""
dataclasses package
-------------------
Dataclass definitions for raw and assembled export entries.
"""
# Raw types and enums first; mtif_entry depends on the grammar, which uses them
from mtif.dataclasses.raw_entry import RawEntry, RawField, Span
from mtif.dataclasses.enums import ConvertBreaks, Status
from mtif.dataclasses.mtif_entry import (
    Comment,
    MetaData,
    MTIFEntry,
    Ping,
    format_document,
    parse_document,
)

__all__ = [
    "Comment",
    "ConvertBreaks",
    "MetaData",
    "MTIFEntry",
    "Ping",
    "RawEntry",
    "RawField",
    "Span",
    "Status",
    "format_document",
    "parse_document",
]

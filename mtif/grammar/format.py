#!/usr/bin/env python3
"""
format.py
--------------------
Write values back in export syntax.

The inverse of the parsers: ``parse_field(format_field(field))`` gives
back an equal field value. Values that the format cannot carry (a
newline inside a one-line value, a ``-----`` line inside section text,
a tag containing a double quote) raise ValueError instead of producing
a file that would parse differently.

Comment and ping text that starts with a line shaped like one of their
sub-fields (``URL: ...``) reads back as that sub-field.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from datetime import datetime
from typing import Iterable, List, Optional, Sequence, Union

# --- Local imports ---
from mtif.dataclasses.raw_entry import MetadataKey, RawField, SectionKind, Span
from mtif.grammar.metadata import NO_ENTRY_LINE, field_prefix
from mtif.grammar.multiline import section_header
from mtif.grammar.primitives import LINE_END, SECTION_SEPARATOR


TextValue = Union[str, Span]

_NEEDS_QUOTES = re.compile(r"[\s,]")


def _plain(value: TextValue) -> str:
    return value.text if isinstance(value, Span) else value


def _one_line(value: TextValue, what: str) -> str:
    value = _plain(value)
    if LINE_END in value:
        raise ValueError(f"{what} cannot span several lines: {value!r}")
    return value


def format_date(value: datetime, twelve_hour: bool = False) -> str:
    """
    ``MM/DD/YYYY HH:MM:SS`` (24-hour), or with an AM/PM suffix.

    In twelve-hour form the PM hour is written as ``hour - 12``, the
    exact inverse of how the parser reads PM, so 12:30 becomes
    ``00:30:00 PM``.
    """
    stamp = f"{value.month:02d}/{value.day:02d}/{value.year:04d}"
    if not twelve_hour:
        return f"{stamp} {value:%H:%M:%S}"
    meridiem = "PM" if value.hour >= 12 else "AM"
    hour = value.hour - 12 if value.hour >= 12 else value.hour
    return f"{stamp} {hour:02d}:{value:%M:%S} {meridiem}"


def format_tag(tag: TextValue) -> str:
    """One tag, quoted when it holds whitespace or a comma (or is empty)."""
    tag = _plain(tag)
    if '"' in tag or LINE_END in tag:
        raise ValueError(f"tag cannot contain quotes or newlines: {tag!r}")
    if tag == "" or _NEEDS_QUOTES.search(tag):
        return f'"{tag}"'
    return tag


def format_tags(tags: Iterable[TextValue]) -> str:
    return ",".join(format_tag(tag) for tag in tags)


def format_field(field: RawField) -> str:
    """
    One metadata line, terminator included.

    Examples:
        >>> format_field(RawField(MetadataKey.ALLOW_PINGS, True))
        'ALLOW PINGS: 1\\n'
    """
    key = field.key
    if key is MetadataKey.NO_ENTRY:
        return NO_ENTRY_LINE

    value = field.value
    if key in (MetadataKey.ALLOW_COMMENTS, MetadataKey.ALLOW_PINGS):
        rendered = "1" if value else "0"
    elif key in (MetadataKey.STATUS, MetadataKey.CONVERT_BREAKS):
        rendered = value.value
    elif key is MetadataKey.DATE:
        rendered = format_date(value)
    elif key is MetadataKey.TAGS:
        rendered = format_tags(value)
    else:
        rendered = _one_line(value, key.value)
    return f"{field_prefix(key)}{rendered}{LINE_END}"


def format_section_text(text: TextValue) -> str:
    """
    Section text followed by its separator line.

    A ``-----`` first line is fine: the separator search starts at the
    text, so only a ``-----`` line after a line terminator closes it.

    Raises:
        ValueError: The text holds a line that would close the section
    """
    text = _plain(text)
    if LINE_END + SECTION_SEPARATOR in text + LINE_END:
        raise ValueError("section text cannot contain a '-----' line")
    return f"{text}{LINE_END}{SECTION_SEPARATOR}"


def format_section(
    kind: SectionKind,
    text: TextValue,
    subfields: Optional[Sequence[tuple]] = None,
) -> str:
    """
    A whole multi-line section.

    Args:
        kind: Section kind
        text: Free text of the section
        subfields: ``(KEY, value)`` pairs written between header and
            text; None values are skipped, datetimes use format_date

    Examples:
        >>> format_section(SectionKind.BODY, "Hello.")
        'BODY:\\nHello.\\n-----\\n'
    """
    lines: List[str] = [section_header(kind)]
    for key, value in subfields or ():
        if value is None:
            continue
        if isinstance(value, datetime):
            value = format_date(value)
        lines.append(f"{key}: {_one_line(value, key)}{LINE_END}")
    lines.append(format_section_text(text))
    return "".join(lines)

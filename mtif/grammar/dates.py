#!/usr/bin/env python3
"""
dates.py
--------------------
Date/time values as written in export files.

Format:
    MM/DD/YYYY HH:MM:SS
    MM/DD/YYYY HH:MM:SS AM
    MM/DD/YYYY HH:MM:SS PM

Every component has a fixed width. Without a suffix the hour is already
on a 24-hour clock. With ``AM`` the hour is used as written; with ``PM``
twelve hours are added to the time of day, wrapping within the same day.
Hour 12 gets no special treatment in either case, so ``12:00:00 AM`` is
noon and ``12:30:00 PM`` is half past midnight of the same date.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import datetime
from typing import Tuple

# --- Third party imports ---
from pyparsing import Opt, ParserElement, ParseResults

# --- Local imports ---
from mtif.core.exceptions import FieldValueError
from mtif.grammar.primitives import fixed_digits, literal, parse_prefix


HOURS_PER_HALF_DAY = 12


def _to_datetime(source: str, loc: int, tokens: ParseResults) -> datetime:
    month, day, year, hour, minute, second = tokens[:6]
    meridiem = tokens[6] if len(tokens) > 6 else None

    try:
        value = datetime(year, month, day, hour, minute, second)
    except ValueError as e:
        written = f"{month:02d}/{day:02d}/{year:04d} {hour:02d}:{minute:02d}:{second:02d}"
        raise FieldValueError(f"invalid date/time {written!r}: {e}", loc) from e

    if meridiem == "PM":
        value = value.replace(hour=(hour + HOURS_PER_HALF_DAY) % 24)
    return value


def build_date_grammar() -> ParserElement:
    """
    Build the ``MM/DD/YYYY HH:MM:SS[ AM|PM]`` element.

    The element yields a naive datetime and leaves the line terminator
    unconsumed. A well-formed but impossible value (02/31, 24:00:00)
    raises FieldValueError from the parse action, which no enclosing
    alternative backtracks over.
    """
    slash = literal("/").suppress()
    colon = literal(":").suppress()
    meridiem = (literal(" AM") | literal(" PM")).set_parse_action(
        lambda tokens: tokens[0].strip()
    )

    stamp = (
        fixed_digits(2) + slash + fixed_digits(2) + slash + fixed_digits(4)
        + literal(" ").suppress()
        + fixed_digits(2) + colon + fixed_digits(2) + colon + fixed_digits(2)
        + Opt(meridiem)
    )
    return stamp.set_parse_action(_to_datetime).set_name("date")


DATE_VALUE = build_date_grammar()


def parse_date_value(text: str) -> Tuple[datetime, int]:
    """
    Parse a date/time value at the start of ``text``.

    Returns:
        Naive datetime and the offset after the value

    Raises:
        GrammarMismatchError: Wrong shape (missing digit, separator...)
        IncompleteInputError: Input ends inside the value
        FieldValueError: Well-formed but impossible date or time

    Examples:
        >>> parse_date_value("12/31/2012 01:34:56 PM")
        (datetime.datetime(2012, 12, 31, 13, 34, 56), 22)
    """
    tokens, end = parse_prefix(DATE_VALUE, text)
    return tokens[0], end

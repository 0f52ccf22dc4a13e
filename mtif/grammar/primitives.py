#!/usr/bin/env python3
"""
primitives.py
--------------------
pyparsing building blocks shared by every export grammar rule.

Export files are whitespace- and line-sensitive, so every element built
here has pyparsing's whitespace skipping turned off. Text values come
back as Span views into the parsed document, built from the offsets
that ``Located`` reports.

Failures leave pyparsing as ParseBaseException and are translated at
the ``parse_prefix`` boundary:

- a failure at end of input is an IncompleteInputError
- any other failure is a GrammarMismatchError
- a FieldValueError raised from a parse action is passed through

Elements:
    literal: Exact literal
    caseless_literal: Literal ignoring ASCII case
    line_end: One line terminator (suppressed)
    spanned: Wrap an element so it yields a Span
    line_value: Rest of the line as a Span, then its terminator
    fixed_digits: Exactly n ASCII digits as an int
    bool_flag: ``0`` / ``1`` line as a bool
    section_text: Multi-line text up to a ``-----`` line
    string_end: End of input
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Callable, Tuple

# --- Third party imports ---
from pyparsing import (
    CaselessLiteral,
    Literal,
    Located,
    ParseBaseException,
    ParseException,
    ParseFatalException,
    ParseResults,
    ParserElement,
    SkipTo,
    StringEnd,
    Word,
    nums,
    rest_of_line,
)

# --- Local imports ---
from mtif.core.exceptions import GrammarMismatchError, IncompleteInputError, ParseError
from mtif.dataclasses.raw_entry import Span


# ----- Constants -----
LINE_END = "\n"
SECTION_SEPARATOR = "-----" + LINE_END
"""Closes the metadata block and every multi-line section."""
END_OF_ENTRY = "--------"
"""Closes an entry; the newline after it belongs to the document."""

SEPARATOR_LINE = LINE_END + SECTION_SEPARATOR


# ----- Failure handling -----
def _input_ends_early(is_truncated: Callable[[str], bool]):
    """
    Fail action moving a failure to end of input.

    Applied when the unread input is a truncated form of what the
    element accepts, so the failure reads as incomplete input.
    """

    def fail_action(text: str, loc: int, expr: ParserElement, error: Exception) -> None:
        if loc < len(text) and is_truncated(text[loc:]):
            raise ParseException(text, len(text), f"input ends too early, expected {expr}", expr)

    return fail_action


def _section_never_closed(text: str, loc: int, expr: ParserElement, error: Exception) -> None:
    raise ParseFatalException(text, len(text), "section is never closed", expr)


def translate_error(error: ParseBaseException) -> ParseError:
    """Map a pyparsing failure onto the project's ParseError classes."""
    if error.loc >= len(error.pstr):
        return IncompleteInputError(error.msg, error.loc)
    return GrammarMismatchError(error.msg, error.loc)


def parse_prefix(element: ParserElement, text: str) -> Tuple[ParseResults, int]:
    """
    Match ``element`` at the start of ``text``.

    Input after the match is left alone; end the element with
    ``string_end()`` to require the whole text.

    Returns:
        Tokens produced by the element, offset just past the match

    Raises:
        GrammarMismatchError: Input does not match
        IncompleteInputError: Input ends inside the match
        FieldValueError: Raised by a parse action, passed through
    """
    try:
        _, tokens, end = Located(element).parse_with_tabs().parse_string(text)
    except ParseBaseException as error:
        raise translate_error(error) from None
    return tokens, end


# ----- Literals -----
def literal(text: str) -> ParserElement:
    """Exact, case-sensitive literal."""
    element = Literal(text).leave_whitespace()
    element.set_fail_action(
        _input_ends_early(lambda rest: len(rest) < len(text) and text.startswith(rest))
    )
    return element


def caseless_literal(text: str) -> ParserElement:
    """
    Literal ignoring ASCII case; yields ``text`` as given here.

    Non-ASCII look-alikes (``ſ`` for ``s``) do not match.
    """
    element = CaselessLiteral(text).leave_whitespace()
    return element.add_condition(
        lambda source, loc, tokens: source[loc : loc + len(text)].isascii(),
        message=f"expected {text!r}",
    )


def line_end() -> ParserElement:
    return literal(LINE_END).set_name("end of line").suppress()


def string_end() -> ParserElement:
    return StringEnd().leave_whitespace()


# ----- Values -----
def spanned(element: ParserElement) -> ParserElement:
    """Replace what ``element`` matched with a Span over the source."""
    return Located(element).set_parse_action(
        lambda source, loc, tokens: Span(source, tokens[0], tokens[2])
    )


def line_value() -> ParserElement:
    """
    Rest of the current line as a Span, then its terminator.

    The terminator is not part of the value; a ``\\r`` before it is.
    """
    return spanned(rest_of_line.copy()) + line_end()


def fixed_digits(width: int) -> ParserElement:
    """Exactly ``width`` ASCII decimal digits as an unsigned int."""
    element = Word(nums, exact=width).leave_whitespace().set_name(f"{width} digits")
    element.set_fail_action(
        _input_ends_early(lambda rest: len(rest) < width and all(c in nums for c in rest))
    )
    return element.set_parse_action(lambda tokens: int(tokens[0]))


def bool_flag() -> ParserElement:
    """``0`` or ``1``, then the line terminator, as False / True."""
    flag = (literal("0") | literal("1")).set_name("'0' or '1'")
    return flag.set_parse_action(lambda tokens: tokens[0] == "1") + line_end()


def section_text() -> ParserElement:
    """
    Multi-line text up to the next ``-----`` line, which is consumed.

    The search starts where the text starts, and the line terminator
    just before the separator line belongs to the separator. An empty
    text is therefore written as an empty line before ``-----``; a
    ``-----`` line directly after the header is part of the text.
    Blank lines before the separator stay in the text.

    A missing separator is a fatal IncompleteInputError.
    """
    text = SkipTo(Literal(SEPARATOR_LINE).leave_whitespace()).leave_whitespace()
    text.set_fail_action(_section_never_closed)
    return spanned(text) + Literal(SEPARATOR_LINE).leave_whitespace().suppress()

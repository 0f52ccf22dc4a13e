#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the mtif project.

This module defines a hierarchy of exceptions used throughout the project
to handle specific error conditions in the grammar, the entry assembler,
and the conversion pipeline.

Exception Hierarchy:
    Exception (built-in)
    ├── ParseError - Base for all grammar failures
    │   ├── GrammarMismatchError - Input does not match any alternative
    │   ├── IncompleteInputError - Input ends before a required terminator
    │   └── FieldValueError - Well-formed token with an invalid value
    ├── ValidationError - Data validation failures
    │   └── EntryValidationError - Entry-level validation failures
    │       └── MissingRequiredFieldError - Required field absent
    └── Mtif2YamlError - Export file to YAML conversion errors

Usage:
    from mtif.core.exceptions import ParseError, MissingRequiredFieldError

    try:
        entries = parse_document(text)
    except MissingRequiredFieldError as e:
        logger.error(f"Entry is incomplete: {e}")
    except ParseError as e:
        logger.error(f"Export file is malformed: {e}")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Optional


class ParseError(Exception):
    """
    Base exception for grammar failures.

    Raised when the export text at some position cannot be parsed.
    Catch this to handle any grammar error, or catch specific
    subclasses for more granular error handling.

    Attributes:
        message: Error description
        position: Offset into the source text where parsing failed
        expected: Description of what the grammar expected at that offset
        line: 1-based line number (None until located)
        column: 1-based column number (None until located)

    Examples:
        >>> raise GrammarMismatchError("no metadata field matches", position=42)
        >>> raise IncompleteInputError("missing line terminator", position=97)

    See Also:
        GrammarMismatchError, IncompleteInputError, FieldValueError
    """

    def __init__(
        self,
        message: str,
        position: int = 0,
        expected: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.position = position
        self.expected = expected
        self.line: Optional[int] = None
        self.column: Optional[int] = None

    def locate(self, text: str) -> ParseError:
        """
        Compute line and column of the failure within text.

        Args:
            text: Source text the position refers to

        Returns:
            self, so the call can be chained in a raise statement
        """
        prefix = text[: self.position]
        self.line = prefix.count("\n") + 1
        self.column = self.position - (prefix.rfind("\n") + 1) + 1
        return self

    def __str__(self) -> str:
        where = (
            f"line {self.line}, column {self.column}"
            if self.line is not None
            else f"offset {self.position}"
        )
        if self.expected:
            return f"{self.message} at {where} (expected {self.expected})"
        return f"{self.message} at {where}"


class GrammarMismatchError(ParseError):
    """
    Exception for input that matches no alternative of the active rule.

    Raised by literal, digit and choice parsers. An ordered choice treats
    it as a soft failure and moves on to its next alternative.

    Examples:
        >>> raise GrammarMismatchError("unexpected input", 10, "'-----'")
    """

    pass


class IncompleteInputError(ParseError):
    """
    Exception for input that ends before a required terminator.

    Raised when end of input is reached while looking for:
    - a line terminator after a scalar value
    - the closing quote of a quoted tag
    - the separator line closing a multi-line section
    - the end-of-entry marker

    The whole document is always buffered, so this never means
    "feed more data"; it is a terminal failure like a mismatch.

    Examples:
        >>> raise IncompleteInputError("missing line terminator", 97, "'\\n'")
    """

    pass


class FieldValueError(ParseError, ValueError):
    """
    Exception for syntactically valid tokens with invalid content.

    Raised when a value has the right shape but cannot be represented:
    - Calendar dates such as 02/31/2012
    - Times such as 24:00:00 or 12:61:00

    Unlike the other parse errors, an ordered choice never backtracks
    over this one: the field was recognized, its value is wrong.

    Examples:
        >>> raise FieldValueError("day is out of range for month", 6)
    """

    pass


class ValidationError(Exception):
    """
    Exception for data validation failures.

    Raised when parsed data fails validation checks:
    - Missing required fields
    - Constraint violations

    Examples:
        >>> raise ValidationError("Missing required field: 'date'")
    """

    pass


class EntryValidationError(ValidationError):
    """
    Exception for entry-specific validation failures.

    Raised when a raw entry cannot be assembled into a MTIFEntry.

    Examples:
        >>> raise EntryValidationError("Entry missing required date field")
    """

    pass


class MissingRequiredFieldError(EntryValidationError):
    """
    Exception for an entry without a mandatory field.

    DATE is the only mandatory field in the export format.

    Attributes:
        field_name: Name of the missing field

    Examples:
        >>> raise MissingRequiredFieldError("date")
    """

    def __init__(self, field_name: str) -> None:
        super().__init__(f"missing required field: {field_name}")
        self.field_name = field_name


class Mtif2YamlError(Exception):
    """
    Exception for export file to YAML conversion errors.

    Raised during mtif2yaml when turning an export file into per-entry
    YAML documents fails:
    - File reading errors
    - Malformed export files
    - YAML serialization issues
    - File writing problems

    Examples:
        >>> raise Mtif2YamlError("Cannot read export file: blog.txt")
        >>> raise Mtif2YamlError("Failed to write YAML file")
    """

    pass

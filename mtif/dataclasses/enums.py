"""
Enumeration Types
------------------

Enum classes for the enumerated metadata values of an export entry.

Enums:
    - Status: Publication status of an entry (STATUS)
    - ConvertBreaks: Text filter applied to the entry body (CONVERT BREAKS)

Each member's value is the canonical literal written in export files.
Literals are matched case-insensitively when parsing.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from enum import Enum
from typing import List


class Status(str, Enum):
    """
    Publication status of an entry.
    - DRAFT: Saved but not published
    - PUBLISH: Published
    - FUTURE: Scheduled for publication
    """

    DRAFT = "Draft"
    PUBLISH = "Publish"
    FUTURE = "Future"

    @classmethod
    def choices(cls) -> List[str]:
        """Get all export literals."""
        return [status.value for status in cls]

    @classmethod
    def from_literal(cls, literal: str) -> Status:
        """
        Map an export literal to its member, ignoring case.

        Raises:
            KeyError: If literal is not a status literal
        """
        return _STATUS_BY_LITERAL[literal.lower()]


class ConvertBreaks(str, Enum):
    """
    Text filter applied to the body of an entry.

    The numeric literals are the historical on/off switch for line
    break conversion; the named ones select a text formatting plugin.
    """

    NONE = "0"
    CONVERT = "1"
    MARKDOWN_WITH_SMARTYPANTS = "markdown_with_smartypants"
    MARKDOWN = "markdown"
    RICHTEXT = "richtext"
    TEXTILE_2 = "textile_2"

    @classmethod
    def choices(cls) -> List[str]:
        """
        Get all export literals in matching order.

        Members are declared so that a literal never follows one of its
        own prefixes ("markdown_with_smartypants" before "markdown").
        """
        return [cb.value for cb in cls]

    @classmethod
    def from_literal(cls, literal: str) -> ConvertBreaks:
        """
        Map an export literal to its member, ignoring case.

        Raises:
            KeyError: If literal is not a convert breaks literal
        """
        return _CONVERT_BREAKS_BY_LITERAL[literal.lower()]

    @property
    def display_name(self) -> str:
        display_map = {
            ConvertBreaks.NONE: "None",
            ConvertBreaks.CONVERT: "Convert line breaks",
            ConvertBreaks.MARKDOWN: "Markdown",
            ConvertBreaks.MARKDOWN_WITH_SMARTYPANTS: "Markdown with SmartyPants",
            ConvertBreaks.RICHTEXT: "Rich text",
            ConvertBreaks.TEXTILE_2: "Textile 2",
        }
        return display_map[self]


# Lowercased literal -> member
_STATUS_BY_LITERAL = {status.value.lower(): status for status in Status}
_CONVERT_BREAKS_BY_LITERAL = {cb.value.lower(): cb for cb in ConvertBreaks}

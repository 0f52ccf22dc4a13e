"""
Tests for multi-line sections.

Tests plain text sections, comment and ping sub-fields, and the
repetition of sections up to the end-of-entry marker.
"""
import pytest
from datetime import datetime

from mtif.core.exceptions import FieldValueError, GrammarMismatchError, IncompleteInputError
from mtif.dataclasses.raw_entry import RawComment, RawPing, RawTextSection, SectionKind
from mtif.grammar.format import format_section
from mtif.grammar.multiline import parse_multiline_section, parse_section


def parse_whole(text):
    section, pos = parse_section(text)
    assert pos == len(text)
    return section


class TestTextSections:
    """Tests for BODY, EXTENDED BODY, EXCERPT and KEYWORDS."""

    @pytest.mark.parametrize(
        "kind",
        [SectionKind.BODY, SectionKind.EXTENDED_BODY, SectionKind.EXCERPT, SectionKind.KEYWORDS],
    )
    def test_section_kinds(self, kind):
        section = parse_whole(f"{kind.value}:\nSome text.\n-----\n")
        assert isinstance(section, RawTextSection)
        assert section.kind is kind
        assert section.text.text == "Some text."

    def test_multiple_lines_and_blank_lines(self):
        section = parse_whole("BODY:\nOne.\n\nTwo.\n-----\n")
        assert section.text.text == "One.\n\nTwo."

    def test_empty_body(self):
        assert parse_whole("BODY:\n\n-----\n").text.text == ""

    def test_dash_line_right_after_header_is_text(self):
        section = parse_whole("BODY:\n-----\nreal\n-----\n")
        assert section.text.text == "-----\nreal"

    def test_lone_dash_line_does_not_close_section(self):
        with pytest.raises(IncompleteInputError):
            parse_section("BODY:\n-----\n")

    def test_dash_line_inside_text_must_be_exactly_five(self):
        section = parse_whole("BODY:\n------\n----\n-----\n")
        assert section.text.text == "------\n----"

    def test_header_must_be_exact(self):
        with pytest.raises(GrammarMismatchError):
            parse_section("Body:\ntext\n-----\n")

    def test_unclosed_section(self):
        with pytest.raises(IncompleteInputError):
            parse_section("BODY:\ntext\n")


class TestComment:
    """Tests for COMMENT sections."""

    def test_comment_with_subfields(self):
        section = parse_whole(
            "COMMENT:\n"
            "AUTHOR: Bar\n"
            "EMAIL: me@bar.com\n"
            "IP: 205.66.1.32\n"
            "DATE: 02/01/2002 04:02:07 AM\n"
            "This is the body of\n"
            "another comment.\n"
            "-----\n"
        )
        assert isinstance(section, RawComment)
        assert section.author.text == "Bar"
        assert section.email.text == "me@bar.com"
        assert section.url is None
        assert section.ip.text == "205.66.1.32"
        assert section.date == datetime(2002, 2, 1, 4, 2, 7)
        assert section.text.text == "This is the body of\nanother comment."

    def test_subfields_in_any_order(self):
        section = parse_whole("COMMENT:\nURL: http://x.org/\nAUTHOR: Quux\nHi.\n-----\n")
        assert section.author.text == "Quux"
        assert section.url.text == "http://x.org/"

    def test_repeated_subfield_keeps_first(self):
        section = parse_whole("COMMENT:\nAUTHOR: First\nAUTHOR: Second\nHi.\n-----\n")
        assert section.author.text == "First"

    def test_no_subfields(self):
        section = parse_whole("COMMENT:\nJust text.\n-----\n")
        assert section.author is None
        assert section.date is None
        assert section.text.text == "Just text."

    def test_unknown_subfield_starts_text(self):
        section = parse_whole("COMMENT:\nAUTHOR: Foo\nMOOD: happy\nHi.\n-----\n")
        assert section.author.text == "Foo"
        assert section.text.text == "MOOD: happy\nHi."

    def test_ping_only_subfield_is_text_in_comment(self):
        section = parse_whole("COMMENT:\nBLOG NAME: Mine\n-----\n")
        assert section.text.text == "BLOG NAME: Mine"

    def test_malformed_date_subfield_starts_text(self):
        section = parse_whole("COMMENT:\nDATE: yesterday\n-----\n")
        assert section.date is None
        assert section.text.text == "DATE: yesterday"

    def test_invalid_date_subfield_aborts(self):
        with pytest.raises(FieldValueError):
            parse_section("COMMENT:\nDATE: 02/31/2002 00:00:00\nHi.\n-----\n")

    def test_empty_text_after_subfields(self):
        section = parse_whole("COMMENT:\nAUTHOR: Foo\n\n-----\n")
        assert section.author.text == "Foo"
        assert section.text.text == ""

    def test_dash_line_after_subfields_is_text(self):
        section = parse_whole("COMMENT:\nAUTHOR: Foo\n-----\nHi.\n-----\n")
        assert section.author.text == "Foo"
        assert section.text.text == "-----\nHi."


class TestPing:
    """Tests for PING sections."""

    def test_ping(self):
        section = parse_whole(
            "PING:\n"
            "TITLE: My Entry\n"
            "URL: http://www.foo.com/old/2002/08/\n"
            "IP: 206.22.1.53\n"
            "BLOG NAME: My Weblog\n"
            "DATE: 08/05/2002 04:09:12 PM\n"
            "This is the start of my\n"
            "entry, and here it...\n"
            "-----\n"
        )
        assert isinstance(section, RawPing)
        assert section.title.text == "My Entry"
        assert section.url.text == "http://www.foo.com/old/2002/08/"
        assert section.ip.text == "206.22.1.53"
        assert section.blog_name.text == "My Weblog"
        assert section.date == datetime(2002, 8, 5, 16, 9, 12)
        assert section.text.text == "This is the start of my\nentry, and here it..."

    def test_author_is_text_in_ping(self):
        section = parse_whole("PING:\nAUTHOR: Foo\n-----\n")
        assert section.text.text == "AUTHOR: Foo"


class TestMultilineSection:
    """Tests for parse_multiline_section."""

    def test_sections_in_source_order(self):
        text = (
            "BODY:\nb\n-----\n"
            "COMMENT:\nc1\n-----\n"
            "EXCERPT:\ne\n-----\n"
            "COMMENT:\nc2\n-----\n"
            "--------"
        )
        sections, pos = parse_multiline_section(text)
        assert [s.kind for s in sections] == [
            SectionKind.BODY,
            SectionKind.COMMENT,
            SectionKind.EXCERPT,
            SectionKind.COMMENT,
        ]
        assert text[pos:] == "--------"

    def test_no_sections(self):
        assert parse_multiline_section("--------") == ([], 0)

    def test_unclosed_section_aborts(self):
        with pytest.raises(IncompleteInputError):
            parse_multiline_section("BODY:\nunclosed\n")

    def test_stray_line_before_end_marker(self):
        text = "BODY:\nb\n-----\nMOOD: happy\n--------"
        with pytest.raises(GrammarMismatchError) as exc:
            parse_multiline_section(text)
        assert exc.value.position == text.index("MOOD")


class TestFormatSection:
    """Tests for writing sections back."""

    def test_body(self):
        assert format_section(SectionKind.BODY, "Hello.") == "BODY:\nHello.\n-----\n"

    def test_comment_reads_back(self):
        written = format_section(
            SectionKind.COMMENT,
            "Line one.\nLine two.",
            [("AUTHOR", "Foo"), ("EMAIL", None), ("DATE", datetime(2002, 1, 31, 15, 47, 6))],
        )
        section = parse_whole(written)
        assert section.author.text == "Foo"
        assert section.email is None
        assert section.date == datetime(2002, 1, 31, 15, 47, 6)
        assert section.text.text == "Line one.\nLine two."

    def test_empty_text_reads_back(self):
        assert parse_whole(format_section(SectionKind.EXCERPT, "")).text.text == ""

    def test_leading_dash_line_reads_back(self):
        written = format_section(SectionKind.BODY, "-----\nreal")
        assert written == "BODY:\n-----\nreal\n-----\n"
        assert parse_whole(written).text.text == "-----\nreal"

    def test_trailing_dash_line_cannot_be_written(self):
        with pytest.raises(ValueError):
            format_section(SectionKind.BODY, "before\n-----")

    def test_text_with_separator_line_cannot_be_written(self):
        with pytest.raises(ValueError):
            format_section(SectionKind.BODY, "before\n-----\nafter")

"""
Tests for date/time values.

Tests the fixed-width format, the literal AM/PM adjustment, and invalid
calendar values reported as FieldValueError.
"""
import pytest
from datetime import datetime

from mtif.core.exceptions import (
    FieldValueError,
    GrammarMismatchError,
    IncompleteInputError,
    ParseError,
)
from mtif.grammar.dates import parse_date_value
from mtif.grammar.format import format_date


class TestParseDateValue:
    """Tests for parse_date_value."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("12/31/2012 12:34:56", datetime(2012, 12, 31, 12, 34, 56)),
            ("12/31/2012 12:34:56 AM", datetime(2012, 12, 31, 12, 34, 56)),
            ("12/31/2012 01:34:56 PM", datetime(2012, 12, 31, 13, 34, 56)),
            ("12/31/2012 13:34:56", datetime(2012, 12, 31, 13, 34, 56)),
        ],
    )
    def test_formats(self, text, expected):
        value, pos = parse_date_value(text)
        assert value == expected
        assert pos == len(text)

    def test_twelve_pm_wraps_within_the_same_day(self):
        value, _ = parse_date_value("01/31/2002 12:30:00 PM")
        assert value == datetime(2002, 1, 31, 0, 30, 0)

    def test_line_end_is_not_consumed(self):
        _, pos = parse_date_value("01/31/2002 03:31:05 PM\n")
        assert pos == 22

    def test_lowercase_suffix_is_not_a_suffix(self):
        value, pos = parse_date_value("01/31/2002 03:31:05 pm")
        assert value.hour == 3
        assert pos == 19

    @pytest.mark.parametrize(
        "text",
        [
            "02/31/2012 00:00:00",
            "13/01/2012 00:00:00",
            "04/31/2012 00:00:00",
            "12/31/2012 24:00:00",
            "12/31/2012 12:61:00",
            "12/31/2012 12:00:60",
        ],
    )
    def test_invalid_values_raise_field_value_error(self, text):
        with pytest.raises(FieldValueError) as exc:
            parse_date_value(text)
        assert exc.value.position == 0

    def test_field_value_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_date_value("02/30/2012 00:00:00")

    def test_leap_day(self):
        value, _ = parse_date_value("02/29/2012 00:00:00")
        assert value == datetime(2012, 2, 29)

    @pytest.mark.parametrize(
        "text",
        ["1/31/2002 03:31:05", "01-31-2002 03:31:05", "01/31/02 03:31:05", "01/31/2002T03:31:05"],
    )
    def test_malformed_values_mismatch(self, text):
        with pytest.raises(GrammarMismatchError):
            parse_date_value(text)

    def test_truncated_value(self):
        with pytest.raises(IncompleteInputError):
            parse_date_value("01/31/2002 03:3")

    def test_all_failures_are_parse_errors(self):
        for text in ("02/31/2012 00:00:00", "xx", "01/3"):
            with pytest.raises(ParseError):
                parse_date_value(text)


class TestFormatDate:
    """Tests for format_date."""

    def test_twenty_four_hour(self):
        assert format_date(datetime(2002, 1, 31, 15, 31, 5)) == "01/31/2002 15:31:05"

    def test_twelve_hour(self):
        assert format_date(datetime(2002, 1, 31, 15, 31, 5), twelve_hour=True) == "01/31/2002 03:31:05 PM"
        assert format_date(datetime(2002, 1, 31, 3, 31, 5), twelve_hour=True) == "01/31/2002 03:31:05 AM"

    @pytest.mark.parametrize("hour", [0, 11, 12, 13, 23])
    def test_twelve_hour_form_reads_back(self, hour):
        value = datetime(2002, 1, 31, hour, 15, 0)
        assert parse_date_value(format_date(value, twelve_hour=True))[0] == value

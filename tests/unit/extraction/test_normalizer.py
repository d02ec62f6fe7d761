"""
Unit tests for the normalizer module.

Tests for month lookup, year expansion, calendar validation and the
12-hour to 24-hour conversion.
"""

import pytest

from flyer_extraction.extraction.normalizer import (
    expand_year,
    month_name_to_number,
    normalize_meridiem,
    shift_time,
    to_24_hour,
    to_iso_date,
)


class TestMonthNameToNumber:
    """Tests for month_name_to_number."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("January", "01"),
            ("feb", "02"),
            ("SEP", "09"),
            ("march.", "03"),
            ("Dec", "12"),
        ],
    )
    def test_known_names(self, name, expected):
        """Full names and 3-letter abbreviations map to two-digit months."""
        assert month_name_to_number(name) == expected

    def test_unknown_name(self):
        """Spellings outside the table are not guessed."""
        assert month_name_to_number("Sept") is None
        assert month_name_to_number("") is None
        assert month_name_to_number(None) is None


class TestExpandYear:
    """Tests for expand_year."""

    def test_four_digit_year_is_kept(self):
        """A full year is returned unchanged."""
        assert expand_year("2024", 2025) == "2024"

    def test_two_digit_year_uses_reference_century(self):
        """Two digits are prefixed with the reference century."""
        assert expand_year("25", 2026) == "2025"

    def test_no_pivot(self):
        """There is no century pivot: 99 in 2025 is 2099."""
        assert expand_year("99", 2025) == "2099"

    @pytest.mark.parametrize("year", ["202", "1", "", None, "20x5"])
    def test_other_lengths_rejected(self, year):
        """Anything but 2 or 4 digits gives None."""
        assert expand_year(year, 2025) is None


class TestToIsoDate:
    """Tests for to_iso_date."""

    def test_zero_pads(self):
        """Month and day are zero-padded."""
        assert to_iso_date("2025", "3", "5") == "2025-03-05"

    @pytest.mark.parametrize(
        "year,month,day",
        [("2025", "2", "30"), ("2025", "13", "1"), ("2025", "0", "10"), ("2023", "2", "29")],
    )
    def test_impossible_dates_rejected(self, year, month, day):
        """Dates that are not real calendar days give None."""
        assert to_iso_date(year, month, day) is None

    def test_leap_day(self):
        """Feb 29 is valid in a leap year."""
        assert to_iso_date("2024", "2", "29") == "2024-02-29"


class TestNormalizeMeridiem:
    """Tests for normalize_meridiem."""

    @pytest.mark.parametrize("token", ["PM", "pm", "p.m.", "P.M."])
    def test_pm_spellings(self, token):
        """Case and dots are ignored."""
        assert normalize_meridiem(token, "am") == "pm"

    def test_missing_token_uses_default(self):
        """No marker falls back to the given default."""
        assert normalize_meridiem(None, "pm") == "pm"
        assert normalize_meridiem("", "am") == "am"


class TestTo24Hour:
    """Tests for to_24_hour."""

    @pytest.mark.parametrize(
        "time,meridiem,expected",
        [
            ("12:00", "am", "00:00"),
            ("12:30", "am", "00:30"),
            ("12:00", "pm", "12:00"),
            ("1:30", "pm", "13:30"),
            ("9:05", "am", "09:05"),
            ("11:59", "pm", "23:59"),
            ("7:15", None, "07:15"),
            ("19:15", None, "19:15"),
        ],
    )
    def test_conversion(self, time, meridiem, expected):
        """pm adds 12 below noon, am turns 12 into 0, no marker keeps the hour."""
        assert to_24_hour(time, meridiem) == expected

    def test_hour_already_past_noon_with_pm(self):
        """A 24-hour clock value with pm is left alone."""
        assert to_24_hour("13:00", "pm") == "13:00"

    @pytest.mark.parametrize("time", ["25:00", "10:75", "9:5", "noon", ""])
    def test_out_of_range_or_malformed(self, time):
        """Values outside 00:00-23:59 or not H:MM are rejected."""
        assert to_24_hour(time, "am") is None


class TestShiftTime:
    """Tests for shift_time."""

    def test_adds_hours(self):
        """Minutes are kept, hours are added."""
        assert shift_time("10:30", 2) == "12:30"

    def test_wraps_past_midnight(self):
        """The result stays on a 24-hour clock."""
        assert shift_time("23:30", 2) == "01:30"

    def test_malformed(self):
        """Non-canonical input gives None."""
        assert shift_time("later", 2) is None

"""
Unit tests for the date, time and registration-deadline extractors.
"""

import datetime

import pytest

from flyer_extraction.extraction.datetime_fields import (
    build_time_chain,
    extract_date,
    extract_registration_deadline,
    extract_time,
)

REF = datetime.date(2025, 1, 1)


class TestExtractDate:
    """Tests for extract_date."""

    def test_weekday_lead_in_with_year(self):
        """A weekday followed by a textual date with a year."""
        assert extract_date("Saturday, March 15, 2025", REF) == "2025-03-15"

    def test_missing_year_uses_reference_year(self):
        """The reference date supplies the year when the flyer omits it."""
        ref = datetime.date(2026, 10, 19)
        assert extract_date("Join us on March 5", ref) == "2026-03-05"

    def test_abbreviated_month_with_period(self):
        """OCR'd abbreviations keep their trailing period."""
        assert extract_date("Date: Dec. 31, 2025", REF) == "2025-12-31"

    def test_ordinal_suffix(self):
        """Ordinal suffixes on the day are ignored."""
        assert extract_date("Sat June 7th", REF) == "2025-06-07"

    def test_numeric_date_is_month_first(self):
        """Numeric triples are read as month/day/year."""
        assert extract_date("Event date 3/15/25", REF) == "2025-03-15"

    def test_numeric_date_with_dashes(self):
        """Dashes work as separators too."""
        assert extract_date("Tickets 04-20-2025 only", REF) == "2025-04-20"

    def test_iso_date(self):
        """An ISO date is taken as is."""
        assert extract_date("Schedule: 2025-06-07", REF) == "2025-06-07"

    def test_impossible_numeric_date_is_dropped(self):
        """A numeric triple that is not a calendar day yields nothing."""
        assert extract_date("Sunday 13/45/2025", REF) is None

    def test_impossible_textual_date_is_dropped(self):
        """February 30 is not a date."""
        assert extract_date("on Feb 30, 2025", REF) is None

    def test_month_without_lead_in_is_ignored(self):
        """A bare month name is not enough for the textual tier."""
        assert extract_date("March 15", REF) is None

    def test_no_date(self):
        """Text without dates yields None."""
        assert extract_date("Bring your friends", REF) is None


class TestExtractRegistrationDeadline:
    """Tests for extract_registration_deadline."""

    def test_textual_deadline(self):
        """A deadline lead-in followed by a textual date."""
        text = "Registration Deadline: March 1, 2025"
        assert extract_registration_deadline(text, REF) == "2025-03-01"

    def test_deadline_with_connector_word(self):
        """Connector words like "is" are skipped."""
        text = "Deadline is March 3"
        assert extract_registration_deadline(text, REF) == "2025-03-03"

    def test_numeric_deadline(self):
        """Numeric deadlines are supported after the lead-in."""
        assert extract_registration_deadline("Register by 2/28/25", REF) == "2025-02-28"

    def test_invalid_deadline_is_dropped(self):
        """A deadline that is not a calendar day yields nothing."""
        assert extract_registration_deadline("Last date: Feb 30, 2025", REF) is None

    def test_event_date_is_not_a_deadline(self):
        """A date without a deadline lead-in is not picked up."""
        assert extract_registration_deadline("Saturday, March 15, 2025", REF) is None


class TestExtractTime:
    """Tests for extract_time."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("10:00am - 2:00pm", ("10:00", "14:00")),
            ("7:30 PM to 9:00 PM", ("19:30", "21:00")),
            ("Doors open 6:00 p.m. – 11:00 p.m.", ("18:00", "23:00")),
            ("12:00am - 12:00pm", ("00:00", "12:00")),
            ("9:00 AM—5:30 PM", ("09:00", "17:30")),
        ],
    )
    def test_ranges(self, text, expected):
        """Explicit markers, dash variants and "to" are understood."""
        assert extract_time(text, REF) == expected

    def test_range_without_markers(self):
        """Unmarked start defaults to am, unmarked end to pm."""
        assert extract_time("10:00 - 2:00", REF) == ("10:00", "14:00")

    def test_start_only_adds_default_duration(self):
        """A lone start time ends two hours later."""
        assert extract_time("Starts at 9:30am", REF) == ("09:30", "11:30")

    def test_start_only_pm(self):
        """The start marker is honoured."""
        assert extract_time("Games begin 8:00 PM", REF) == ("20:00", "22:00")

    def test_start_only_wraps_midnight(self):
        """The default end time wraps past midnight."""
        assert extract_time("from 11:00pm", REF) == ("23:00", "01:00")

    def test_configured_duration(self):
        """The duration comes from the chain the caller passes in."""
        chain = build_time_chain(default_duration_hours=3)
        assert extract_time("Starts 6:00pm", REF, chain) == ("18:00", "21:00")

    def test_out_of_range_time_is_dropped(self):
        """Impossible clock values yield no time at all."""
        assert extract_time("25:00 - 26:00", REF) is None

    def test_no_time(self):
        """Text without times yields None."""
        assert extract_time("All day event", REF) is None

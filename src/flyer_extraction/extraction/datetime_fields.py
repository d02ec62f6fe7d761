"""
Date, time and registration-deadline extractors.

Dates are read either as "<lead-in> <Month> <day>[, <year>]" or as a numeric
month/day/year triple (US ordering). Times are read as a "start - end" range
or as a single start time with a default duration.
"""

import datetime
import re
from typing import Optional, Tuple

from flyer_extraction.extraction.chain import FallbackChain, Rule
from flyer_extraction.extraction.normalizer import (
    DEFAULT_END_MERIDIEM,
    DEFAULT_START_MERIDIEM,
    MONTH_NAME_PATTERN,
    expand_year,
    month_name_to_number,
    normalize_meridiem,
    shift_time,
    to_24_hour,
    to_iso_date,
)

TimeRange = Tuple[str, str]

# =============================================================================
# PATTERNS
# =============================================================================

_WEEKDAYS = (
    r"monday|tuesday|wednesday|thursday|friday|saturday|sunday"
    r"|mon|tues?|wed|thu(?:rs?)?|fri|sat|sun"
)
_DATE_LEAD_IN = rf"\b(?:on|date|{_WEEKDAYS})\b"
_DEADLINE_LEAD_IN = r"\b(?:deadline|last date|register by)\b"
_LEAD_IN_GAP = r"[:,.\s-]*(?:(?:is|on|by)\s+)?"

_TEXTUAL_DATE = (
    rf"(?P<month>{MONTH_NAME_PATTERN})[.\s]+"
    r"(?P<day>\d{1,2})(?:st|nd|rd|th)?\b"
    r"(?:[,.\s]+(?P<year>\d{4})\b)?"
)
_NUMERIC_DATE = (
    r"(?<!\d)(?P<month>\d{1,2})[/-](?P<day>\d{1,2})[/-](?P<year>\d{2,4})(?!\d)"
)
_ISO_DATE = r"(?<!\d)(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})(?!\d)"

_MERIDIEM = r"[ap]\.?m\.?(?![a-z])"
_CLOCK = r"\d{1,2}:\d{2}"


# =============================================================================
# BUILDERS
# =============================================================================


def _textual_date(match: re.Match, reference_date: datetime.date) -> Optional[str]:
    """Month name + day (+ optional year, defaulting to the reference year)."""
    month = month_name_to_number(match.group("month"))
    if month is None:
        return None
    year = match.group("year") or str(reference_date.year)
    return to_iso_date(year, month, match.group("day"))


def _numeric_date(match: re.Match, reference_date: datetime.date) -> Optional[str]:
    """part1/part2/part3 read as month/day/year."""
    year = expand_year(match.group("year"), reference_date.year)
    if year is None:
        return None
    return to_iso_date(year, match.group("month"), match.group("day"))


def _iso_date(match: re.Match, reference_date: datetime.date) -> Optional[str]:
    return to_iso_date(match.group("year"), match.group("month"), match.group("day"))


def _time_range(match: re.Match, reference_date: datetime.date) -> Optional[TimeRange]:
    start = to_24_hour(
        match.group("start"),
        normalize_meridiem(match.group("start_meridiem"), DEFAULT_START_MERIDIEM),
    )
    end = to_24_hour(
        match.group("end"),
        normalize_meridiem(match.group("end_meridiem"), DEFAULT_END_MERIDIEM),
    )
    if start is None or end is None:
        return None
    return start, end


def _start_time_with_duration(hours: int):
    def build(match: re.Match, reference_date: datetime.date) -> Optional[TimeRange]:
        start = to_24_hour(
            match.group("start"),
            normalize_meridiem(match.group("meridiem"), DEFAULT_START_MERIDIEM),
        )
        if start is None:
            return None
        return start, shift_time(start, hours)

    return build


# =============================================================================
# CHAINS
# =============================================================================

DATE_CHAIN: FallbackChain[str] = FallbackChain(
    "date",
    (
        Rule(
            "textual",
            re.compile(_DATE_LEAD_IN + r"[:,.\s]*" + _TEXTUAL_DATE, re.IGNORECASE),
            _textual_date,
        ),
        Rule("numeric", re.compile(_NUMERIC_DATE), _numeric_date),
        Rule("iso", re.compile(_ISO_DATE), _iso_date),
    ),
)

DEADLINE_CHAIN: FallbackChain[str] = FallbackChain(
    "registration_deadline",
    (
        Rule(
            "textual",
            re.compile(_DEADLINE_LEAD_IN + _LEAD_IN_GAP + _TEXTUAL_DATE, re.IGNORECASE),
            _textual_date,
        ),
        Rule(
            "numeric",
            re.compile(_DEADLINE_LEAD_IN + _LEAD_IN_GAP + _NUMERIC_DATE, re.IGNORECASE),
            _numeric_date,
        ),
    ),
)

TIME_RANGE_RULE: Rule[TimeRange] = Rule(
    "range",
    re.compile(
        rf"(?<![\d:])(?P<start>{_CLOCK})\s*(?P<start_meridiem>{_MERIDIEM})?"
        r"(?:\s*[-–—]\s*|\s+to\s+)"
        rf"(?P<end>{_CLOCK})\s*(?P<end_meridiem>{_MERIDIEM})?",
        re.IGNORECASE,
    ),
    _time_range,
)


def build_time_chain(default_duration_hours: int = 2) -> FallbackChain[TimeRange]:
    """Time range first, then a lone start time plus the default duration."""
    return FallbackChain("time", (TIME_RANGE_RULE,)).then(
        Rule(
            "start_only",
            re.compile(
                r"\b(?:start|begin|from)\w*[:\s]*(?:at\s+)?"
                rf"(?P<start>{_CLOCK})\s*(?P<meridiem>{_MERIDIEM})?",
                re.IGNORECASE,
            ),
            _start_time_with_duration(default_duration_hours),
        )
    )


TIME_CHAIN = build_time_chain()


# =============================================================================
# PUBLIC EXTRACTORS
# =============================================================================


def extract_date(text: str, reference_date: datetime.date) -> Optional[str]:
    """Event date as ``YYYY-MM-DD``."""
    return DATE_CHAIN.extract(text, reference_date)


def extract_registration_deadline(
    text: str, reference_date: datetime.date
) -> Optional[str]:
    """Registration deadline as ``YYYY-MM-DD``."""
    return DEADLINE_CHAIN.extract(text, reference_date)


def extract_time(
    text: str,
    reference_date: datetime.date,
    chain: FallbackChain[TimeRange] = TIME_CHAIN,
) -> Optional[TimeRange]:
    """(start, end) as 24-hour ``HH:MM`` strings."""
    return chain.extract(text, reference_date)

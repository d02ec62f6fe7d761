"""
Canonical forms for date and time fragments found in flyer text.

Dates become ``YYYY-MM-DD`` and times become 24-hour ``HH:MM``. Helpers
return ``None`` for fragments that cannot be normalized so callers can drop
the whole field instead of emitting a malformed value.
"""

import datetime
import re
from types import MappingProxyType
from typing import Mapping, Optional

MONTHS: Mapping[str, str] = MappingProxyType(
    {
        "jan": "01",
        "january": "01",
        "feb": "02",
        "february": "02",
        "mar": "03",
        "march": "03",
        "apr": "04",
        "april": "04",
        "may": "05",
        "jun": "06",
        "june": "06",
        "jul": "07",
        "july": "07",
        "aug": "08",
        "august": "08",
        "sep": "09",
        "september": "09",
        "oct": "10",
        "october": "10",
        "nov": "11",
        "november": "11",
        "dec": "12",
        "december": "12",
    }
)

# Regex alternation for the month names above, longest spelling first.
MONTH_NAME_PATTERN = (
    r"jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|jun(?:e)?|jul(?:y)?"
    r"|aug(?:ust)?|sep(?:tember)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?"
)

# Missing am/pm markers: "10:00 - 2:00" on a flyer means 10am to 2pm.
DEFAULT_START_MERIDIEM = "am"
DEFAULT_END_MERIDIEM = "pm"

_TIME_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


def month_name_to_number(name: Optional[str]) -> Optional[str]:
    """Map an English month name or abbreviation to ``"01"``..``"12"``."""
    if not name:
        return None
    return MONTHS.get(name.strip().rstrip(".").lower())


def expand_year(year: Optional[str], reference_year: int) -> Optional[str]:
    """
    Expand a 2-digit year with the reference century.

    No pivoting: ``"99"`` in 2025 becomes ``"2099"``.
    """
    if not year or not year.isdigit():
        return None
    if len(year) == 4:
        return year
    if len(year) == 2:
        return f"{str(reference_year)[:2]}{year}"
    return None


def to_iso_date(year: str, month: str, day: str) -> Optional[str]:
    """Build a canonical date, or ``None`` if it is not a real calendar day."""
    try:
        return datetime.date(int(year), int(month), int(day)).isoformat()
    except (TypeError, ValueError):
        return None


def normalize_meridiem(token: Optional[str], default: str) -> str:
    """Reduce ``"PM"``, ``"p.m."`` and friends to ``"am"``/``"pm"``."""
    if not token:
        return default
    cleaned = token.replace(".", "").strip().lower()
    return cleaned if cleaned in ("am", "pm") else default


def to_24_hour(time: str, meridiem: Optional[str]) -> Optional[str]:
    """
    Convert ``H:MM``/``HH:MM`` plus an am/pm marker to 24-hour ``HH:MM``.

    ``pm`` adds 12 to hours below 12, ``am`` turns hour 12 into 0, anything
    else leaves the hour alone. Results outside ``00:00``-``23:59`` are
    rejected.
    """
    match = _TIME_RE.match(time or "")
    if not match:
        return None

    hours, minutes = int(match.group(1)), int(match.group(2))
    marker = (meridiem or "").replace(".", "").strip().lower()

    if marker == "pm" and hours < 12:
        hours += 12
    elif marker == "am" and hours == 12:
        hours = 0

    if hours > 23 or minutes > 59:
        return None
    return f"{hours:02d}:{minutes:02d}"


def shift_time(time: str, hours: int) -> Optional[str]:
    """Add whole hours to a canonical time, wrapping past midnight."""
    match = _TIME_RE.match(time or "")
    if not match:
        return None
    shifted = (int(match.group(1)) + hours) % 24
    return f"{shifted:02d}:{match.group(2)}"

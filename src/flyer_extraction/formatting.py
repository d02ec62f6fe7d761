"""
Display helpers for extracted records.

Canonical values (``2025-03-15``, ``14:00``) are turned back into the
human-readable forms shown on the event pages. Malformed input is returned
unchanged rather than raising.
"""

import datetime
import logging
from typing import List

from flyer_extraction.schemas.event import PartialEventRecord

logger = logging.getLogger(__name__)

_SUMMARY_FIELDS = (
    ("Venue", "venue"),
    ("Address", "address"),
    ("Fee", "fee"),
    ("Registration link", "registration_link"),
    ("Contact", "contact_name1"),
    ("Phone", "contact_phone1"),
    ("Organization", "organization"),
    ("Notes", "notes"),
)


def format_date(date_str: str) -> str:
    """``2025-03-15`` -> ``Saturday, March 15, 2025``."""
    if not date_str:
        return ""
    try:
        value = datetime.date.fromisoformat(date_str)
    except ValueError as e:
        logger.debug(f"Error formatting date {date_str!r}: {e}")
        return date_str
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def format_time(time_str: str) -> str:
    """``14:00`` -> ``2:00 PM``."""
    if not time_str:
        return ""
    try:
        hours, minutes = (int(part) for part in time_str.split(":"))
    except ValueError as e:
        logger.debug(f"Error formatting time {time_str!r}: {e}")
        return time_str
    period = "PM" if hours >= 12 else "AM"
    return f"{hours % 12 or 12}:{minutes:02d} {period}"


def truncate_text(text: str, max_length: int) -> str:
    if not text:
        return ""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def format_record_summary(record: PartialEventRecord, max_length: int = 80) -> str:
    """Multi-line, human-readable summary of a record."""
    lines: List[str] = []

    if record.title:
        lines.append(f"Title: {truncate_text(record.title, max_length)}")
    if record.date:
        lines.append(f"Date: {format_date(record.date)}")
    if record.start_time:
        window = format_time(record.start_time)
        if record.end_time:
            window += f" - {format_time(record.end_time)}"
        lines.append(f"Time: {window}")
    if record.registration_deadline:
        lines.append(f"Register by: {format_date(record.registration_deadline)}")

    for label, field in _SUMMARY_FIELDS:
        value = getattr(record, field)
        if value:
            lines.append(f"{label}: {truncate_text(value, max_length)}")

    lines.append(f"Category: {record.category.value}")
    if record.categories:
        lines.append(f"Divisions: {', '.join(record.categories)}")

    return "\n".join(lines)

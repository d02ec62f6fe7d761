"""
Flyer event extraction.

Turns the raw OCR text of an event flyer into a best-effort structured event
record (title, date, time window, venue, fee, contacts, categories, ...).

    >>> from flyer_extraction import extract_fields
    >>> record = extract_fields("Fee: $25 per Team")
    >>> record.fee
    '$25 per Team'
"""

from .extraction.parser import EventTextParser, extract_fields
from .schemas.event import EventCategory, PartialEventRecord

__version__ = "0.1.0"

__all__ = [
    "EventTextParser",
    "extract_fields",
    "EventCategory",
    "PartialEventRecord",
    "__version__",
]

"""
Venue and street-address extractors.

The two extractors are independent: the venue comes from a lead-in keyword,
the address from anything ending in a ``City, ST 12345`` suffix.
"""

import datetime
import re
from typing import Optional

from flyer_extraction.extraction.chain import FallbackChain, Rule

# "Springfield, IL 62701" / "Springfield, IL 62701-1234"; state is upper case.
_CITY_STATE_ZIP = r"\b[A-Za-z]{1,40},[ \t]*[A-Z]{2}[ \t]*\d{5}(?:-\d{4})?(?!\d)"
_ADDRESS_BODY = rf"\b[A-Za-z0-9][A-Za-z0-9 \t,.#'/-]{{0,80}}?{_CITY_STATE_ZIP}"


def _clean(value: str) -> Optional[str]:
    value = " ".join(value.split()).strip(" ,")
    return value or None


def _venue(match: re.Match, reference_date: datetime.date) -> Optional[str]:
    return _clean(match.group("venue"))


def _address(match: re.Match, reference_date: datetime.date) -> Optional[str]:
    return _clean(match.group("address"))


VENUE_CHAIN: FallbackChain[str] = FallbackChain(
    "venue",
    (
        Rule(
            "lead_in",
            re.compile(
                r"\b(?:venue|location|place)\b[: \t]*(?P<venue>[^\n,]+)",
                re.IGNORECASE,
            ),
            _venue,
        ),
    ),
)

ADDRESS_CHAIN: FallbackChain[str] = FallbackChain(
    "address",
    (
        Rule(
            "address_lead_in",
            re.compile(rf"(?i:\baddress\b)[: \t]*(?P<address>{_ADDRESS_BODY})"),
            _address,
        ),
        # "Location: Community Center, 123 Main St, ..." - skip the venue name
        Rule(
            "venue_lead_in",
            re.compile(
                r"(?i:\b(?:venue|location|place)\b)[: \t]*[^,\n]{1,80},[ \t]*"
                rf"(?P<address>{_ADDRESS_BODY})"
            ),
            _address,
        ),
        Rule("city_state_zip", re.compile(rf"(?P<address>{_ADDRESS_BODY})"), _address),
    ),
)


def extract_venue(text: str, reference_date: datetime.date) -> Optional[str]:
    """Venue name following a venue/location/place lead-in."""
    return VENUE_CHAIN.extract(text, reference_date)


def extract_address(text: str, reference_date: datetime.date) -> Optional[str]:
    """Street address ending in a City, ST ZIP suffix."""
    return ADDRESS_CHAIN.extract(text, reference_date)

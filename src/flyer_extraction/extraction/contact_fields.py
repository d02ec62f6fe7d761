"""
Primary contact extractor.

Only the first contact (name + phone) is recovered automatically; the second
contact slots on the event form are left for manual entry.
"""

import datetime
import re
from typing import NamedTuple, Optional

from flyer_extraction.extraction.chain import FallbackChain, Rule


class Contact(NamedTuple):
    name: Optional[str]
    phone: str


_PHONE = r"(?<!\d)(?P<phone>\d{3}[ .-]?\d{3}[ .-]?\d{4})(?!\d)"

# "(555) 123-4567", "+1 555.123.4567", "123-4567"; stops after the last group
# so digits that follow on the same line are not swallowed.
_LABELLED_PHONE = (
    r"(?P<phone>(?:\+?1[ .-]?)?\(?\d{3}\)?[ .-]?\d{3}[ .-]?\d{4}"
    r"|\d{3}[ .-]?\d{4})(?!\d)"
)

# Up to four capitalised words running up to the end of the preceding text.
_NAME_BEFORE_PHONE = re.compile(
    r"\b(?P<name>(?:[A-Z][A-Za-z'.-]*[ \t]+){0,3}[A-Z][A-Za-z'.-]*)[ \t,:-]*$"
)


def _clean_name(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    value = " ".join(value.split()).strip(" ,.-")
    return value if len(value) >= 2 else None


def _labelled_contact(match: re.Match, reference_date: datetime.date) -> Optional[Contact]:
    phone = " ".join(match.group("phone").split())
    return Contact(_clean_name(match.group("name")), phone)


def _bare_phone(match: re.Match, reference_date: datetime.date) -> Optional[Contact]:
    before = match.string[: match.start("phone")].rsplit("\n", 1)[-1]
    name_match = _NAME_BEFORE_PHONE.search(before)
    name = None
    if name_match and len(name_match.group("name")) >= 3:
        name = _clean_name(name_match.group("name"))
    return Contact(name, match.group("phone"))


CONTACT_CHAIN: FallbackChain[Contact] = FallbackChain(
    "contact",
    (
        Rule(
            "lead_in",
            re.compile(
                r"(?i:\b(?:contact|info(?:rmation)?|details)\b)[^:\n]{0,30}?:?[ \t]*"
                r"(?P<name>[A-Z][A-Za-z .'-]{0,40}?)[ \t]*[,:]?[ \t]*"
                + _LABELLED_PHONE
            ),
            _labelled_contact,
        ),
        Rule("bare_phone", re.compile(_PHONE), _bare_phone),
    ),
)


def extract_contact(text: str, reference_date: datetime.date) -> Optional[Contact]:
    """First contact name and phone number."""
    return CONTACT_CHAIN.extract(text, reference_date)

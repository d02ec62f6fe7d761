"""
Entry fee and registration link extractors.
"""

import datetime
import re
from typing import Optional

from flyer_extraction.extraction.chain import FallbackChain, Rule

_URL_TRAILING_PUNCTUATION = ".,;:!?)]}>\"'"


def _fee_with_default_unit(default_unit: str):
    def build(match: re.Match, reference_date: datetime.date) -> Optional[str]:
        amount = match.group("amount").replace(",", "")
        unit = match.group("unit") or default_unit
        return f"${amount} per {unit}"

    return build


def _url(match: re.Match, reference_date: datetime.date) -> Optional[str]:
    url = match.group("url").rstrip(_URL_TRAILING_PUNCTUATION)
    return url if re.match(r"https?://\S", url, re.IGNORECASE) else None


def build_fee_chain(default_unit: str = "person") -> FallbackChain[str]:
    """
    Fee lead-in, optional currency symbol, amount, optional "per <unit>".

    The result is always rendered as ``$<amount> per <unit>``.
    """
    return FallbackChain(
        "fee",
        (
            Rule(
                "lead_in",
                re.compile(
                    r"\b(?:fee|cost|price|entry)\w*[:\s]*(?:is\s+)?(?:US)?[$€£]?\s*"
                    r"(?P<amount>\d[\d,]*(?:\.\d{1,2})?)"
                    r"(?:\s*(?:per|/)\s*(?P<unit>[a-z]+))?",
                    re.IGNORECASE,
                ),
                _fee_with_default_unit(default_unit),
            ),
        ),
    )


FEE_CHAIN = build_fee_chain()

LINK_CHAIN: FallbackChain[str] = FallbackChain(
    "registration_link",
    (
        Rule(
            "lead_in",
            re.compile(
                r"\bregist(?:er|ration)[^:\n]{0,60}:?\s*(?P<url>https?://\S+)",
                re.IGNORECASE,
            ),
            _url,
        ),
        Rule("any_url", re.compile(r"(?P<url>https?://\S+)", re.IGNORECASE), _url),
    ),
)


def extract_fee(
    text: str,
    reference_date: datetime.date,
    chain: FallbackChain[str] = FEE_CHAIN,
) -> Optional[str]:
    """Entry fee as ``$<amount> per <unit>``."""
    return chain.extract(text, reference_date)


def extract_registration_link(
    text: str, reference_date: datetime.date
) -> Optional[str]:
    """Registration URL, or the first URL in the text."""
    return LINK_CHAIN.extract(text, reference_date)

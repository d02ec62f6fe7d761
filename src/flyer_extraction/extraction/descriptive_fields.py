"""
Title, organization and sponsor-note extractors.

Title and organization patterns are built from the configured suffix lists
(``Tournament``, ``Festival``, ... / ``Association``, ``Club``, ...), so the
chains are constructed once per parser rather than at import time.
"""

import datetime
import re
from typing import Optional, Sequence

from flyer_extraction.extraction.chain import FallbackChain, Rule

_CONNECTORS = ("of", "the", "and", "for", "&")
_CAPITALISED_WORD = r"[A-Z][\w&'-]*"
_CONNECTOR = r"(?:of|the|and|for|&)"
_HEADING_WORD = r"[A-Z][A-Za-z'&!-]*"
# Longest run scanned before a suffix word; keeps a newline-free page linear.
_MAX_RUN = 80


def _collapse(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    value = " ".join(value.split()).strip(" ,.:;-")
    return value or None


def _strip_trailing_connectors(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    words = value.split()
    while words and words[-1].lower() in _CONNECTORS:
        words.pop()
    return " ".join(words) or None


def _suffix_alternation(suffixes: Sequence[str], with_upper: bool = False) -> str:
    variants = set(suffixes)
    if with_upper:
        variants |= {s.upper() for s in suffixes}
    ordered = sorted(variants, key=lambda v: (-len(v), v))
    return "|".join(re.escape(v) for v in ordered)


def _title(match: re.Match, reference_date: datetime.date) -> Optional[str]:
    return _collapse(match.group("title"))


def _organization(match: re.Match, reference_date: datetime.date) -> Optional[str]:
    return _strip_trailing_connectors(_collapse(match.group("org")))


def _heading(match: re.Match, reference_date: datetime.date) -> Optional[str]:
    return _strip_trailing_connectors(_collapse(match.group("title")))


def _sponsor(match: re.Match, reference_date: datetime.date) -> Optional[str]:
    sponsor = _collapse(match.group("sponsor"))
    return f"Sponsor: {sponsor}" if sponsor else None


# A line of 2-10 capitalised words; only connectors may be lower case.
HEADING_RULE: Rule[str] = Rule(
    "heading_line",
    re.compile(
        rf"^[ \t]*(?P<title>{_HEADING_WORD}"
        rf"(?:[ \t]+(?:{_HEADING_WORD}|{_CONNECTOR})){{1,9}})[ \t]*$",
        re.MULTILINE,
    ),
    _heading,
)


def build_title_chain(suffixes: Sequence[str]) -> FallbackChain[str]:
    """
    Title tiers:

    1. a line starting with a capitalised run that ends in a title suffix
       (``Spring Pickleball Tournament``);
    2. the same run anywhere in the text, case-insensitive;
    3. the first short line written like a heading (``Community Potluck
       Dinner``); an ordinary sentence does not qualify.
    """
    chain: FallbackChain[str] = FallbackChain("title")
    if suffixes:
        strict = _suffix_alternation(suffixes, with_upper=True)
        loose = _suffix_alternation(suffixes)
        chain = chain.then(
            Rule(
                "line_start_suffix",
                re.compile(
                    rf"^[ \t]*(?P<title>[A-Z][A-Za-z \t]{{1,{_MAX_RUN}}}"
                    rf"(?:{strict})[sS]?)\b",
                    re.MULTILINE,
                ),
                _title,
            )
        ).then(
            Rule(
                "any_suffix",
                re.compile(
                    rf"\b(?P<title>[A-Z][A-Za-z \t]{{2,{_MAX_RUN}}}(?:{loose})s?)\b",
                    re.IGNORECASE,
                ),
                _title,
            )
        )
    return chain.then(HEADING_RULE)


def build_organization_chain(suffixes: Sequence[str]) -> FallbackChain[str]:
    """
    Organization tiers: an "organized/presented/hosted by" lead-in, then (only
    when one of the suffix words literally occurs) a capitalised phrase ending
    in ``Association``, ``Club``, ...
    """
    chain: FallbackChain[str] = FallbackChain(
        "organization",
        (
            Rule(
                "lead_in",
                re.compile(
                    r"(?i:\b(?:organi[sz]ed|presented|host(?:ed)?)[ \t]+by)[: \t]*"
                    r"(?i:the[ \t]+)?"
                    rf"(?P<org>{_CAPITALISED_WORD}"
                    rf"(?:[ \t]+(?:{_CAPITALISED_WORD}|{_CONNECTOR})){{0,10}})"
                ),
                _organization,
            ),
        ),
    )
    if suffixes:
        chain = chain.then(
            Rule(
                "suffix",
                re.compile(
                    rf"\b(?P<org>(?:{_CAPITALISED_WORD}[ \t]+"
                    rf"(?:{_CONNECTOR}[ \t]+){{0,2}}){{1,8}}"
                    rf"(?:{_suffix_alternation(suffixes)}))\b"
                ),
                _organization,
                requires=tuple(suffixes),
            )
        )
    return chain


NOTES_CHAIN: FallbackChain[str] = FallbackChain(
    "notes",
    (
        Rule(
            "sponsor",
            re.compile(
                r"(?i:\bsponsor(?:s|ed)?\b(?:[ \t]+by)?|\bpresented[ \t]+by)[: \t]*"
                r"(?P<sponsor>(?!by\b)[A-Za-z][A-Za-z &'.-]*)"
            ),
            _sponsor,
        ),
    ),
)


def extract_notes(text: str, reference_date: datetime.date) -> Optional[str]:
    """Sponsor attribution sentence."""
    return NOTES_CHAIN.extract(text, reference_date)

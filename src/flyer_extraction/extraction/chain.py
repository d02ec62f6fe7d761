"""
Ordered "try strict, then try loose" pattern chains.

A field extractor is a ``FallbackChain``: a tuple of ``Rule`` tiers evaluated
in order until one produces a value. New tiers are appended with ``then()``
without touching the existing ones.
"""

import datetime
import logging
from dataclasses import dataclass
from re import Match, Pattern
from typing import Callable, Generic, Optional, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Builder = Callable[[Match[str], datetime.date], Optional[T]]


@dataclass(frozen=True)
class Rule(Generic[T]):
    """One tier of a fallback chain: a compiled pattern and a value builder."""

    name: str
    pattern: Pattern[str]
    build: Builder
    requires: Tuple[str, ...] = ()

    def applies_to(self, text: str) -> bool:
        """Literal gate: at least one of ``requires`` must occur in the text."""
        return not self.requires or any(word in text for word in self.requires)


class FallbackChain(Generic[T]):
    """
    Evaluate rules in order and return the first value a rule builds.

    A rule whose pattern does not match, or whose builder returns ``None``,
    hands over to the next tier.
    """

    def __init__(self, field: str, rules: Tuple[Rule[T], ...] = ()):
        self.field = field
        self.rules = tuple(rules)

    def then(self, rule: Rule[T]) -> "FallbackChain[T]":
        """Return a new chain with ``rule`` appended as the last tier."""
        return FallbackChain(self.field, self.rules + (rule,))

    def extract(self, text: str, reference_date: datetime.date) -> Optional[T]:
        for rule in self.rules:
            if not rule.applies_to(text):
                continue
            match = rule.pattern.search(text)
            if match is None:
                continue
            value = rule.build(match, reference_date)
            if value is not None:
                logger.debug("%s extracted by %s rule", self.field, rule.name)
                return value
        logger.debug("%s not found", self.field)
        return None

    def __len__(self) -> int:
        return len(self.rules)

    def __repr__(self) -> str:
        names = ", ".join(rule.name for rule in self.rules)
        return f"FallbackChain({self.field!r}: {names})"

"""
Sub-category keyword extraction and coarse category classification.

Sub-categories are free-text division labels found on the flyer
("Men's Doubles Level 4 & 5", "Junior", ...). The coarse category is one of
the fixed EventCategory labels, chosen by the first keyword group (in
configured priority order) that matches the text.
"""

import logging
import re
from typing import Dict, Optional, Sequence, Tuple

from flyer_extraction.extraction.tables import ExtractionTables, load_extraction_tables
from flyer_extraction.schemas.event import EventCategory

logger = logging.getLogger(__name__)

# Optional trailing level token: "Level 4", ": 3", "4 & 5", "4 5".
_LEVEL_SUFFIX = (
    r"(?:[ \t,]*(?:level)?[ \t:]*\d+(?:[ \t]*&[ \t]*\d+|[ \t]+\d+)?(?!\d))?"
)


def _keyword_pattern(keyword: str) -> re.Pattern:
    # OCR often returns a typographic apostrophe.
    body = re.escape(keyword).replace("'", "['’]")
    return re.compile(rf"\b{body}\b{_LEVEL_SUFFIX}", re.IGNORECASE)


def _label(raw: str) -> Optional[str]:
    label = " ".join(raw.split()).rstrip(" ,")
    if not label:
        return None
    return label[0].upper() + label[1:]


class CategoryClassifier:
    """
    Keyword-driven sub-category extractor and coarse classifier.

    Example:
        >>> classifier = CategoryClassifier()
        >>> subcategories = classifier.extract_subcategories("Mixed Doubles Level 3")
        >>> classifier.classify("Mixed Doubles Level 3", subcategories)
        <EventCategory.SPORTS: 'Sports'>
    """

    def __init__(self, tables: Optional[ExtractionTables] = None):
        self.tables = tables or load_extraction_tables()
        self._patterns: Tuple[re.Pattern, ...] = tuple(
            _keyword_pattern(keyword) for keyword in self.tables.subcategory_keywords
        )

    def extract_subcategories(self, text: str) -> Tuple[str, ...]:
        """
        Collect every keyword match as a label.

        Labels come out in keyword order, then text order within a keyword;
        repeats (after first-letter capitalisation) are dropped.
        """
        found: Dict[str, None] = {}
        for pattern in self._patterns:
            for match in pattern.finditer(text):
                label = _label(match.group(0))
                if label:
                    found.setdefault(label, None)
        return tuple(found)

    def classify(self, text: str, subcategories: Sequence[str] = ()) -> EventCategory:
        """
        Pick the coarse category.

        Groups are tested in order against the lower-cased text; a group with
        sub-category markers also fires when a found label contains a marker.
        """
        lowered = text.lower()
        lowered_labels = [label.lower() for label in subcategories]

        for rule in self.tables.category_rules:
            if any(keyword in lowered for keyword in rule.keywords):
                return rule.category
            if any(
                marker in label
                for marker in rule.subcategory_markers
                for label in lowered_labels
            ):
                logger.debug("%s assigned from sub-category labels", rule.category.value)
                return rule.category

        return self.tables.default_category

"""
Heuristic field extraction for event flyers.

This package provides:
- EventTextParser / extract_fields: Raw text -> PartialEventRecord pipeline
- FallbackChain / Rule: Ordered pattern tiers used by every extractor
- CategoryClassifier: Sub-category keywords and coarse category
- Normalizer helpers: Canonical dates and 24-hour times
- ExtractionTables: Read-only keyword tables loaded from YAML
"""

from .chain import FallbackChain, Rule
from .categories import CategoryClassifier
from .normalizer import (
    month_name_to_number,
    expand_year,
    to_iso_date,
    normalize_meridiem,
    to_24_hour,
    shift_time,
)
from .tables import CategoryRule, ExtractionTables, load_extraction_tables
from .parser import (
    EventTextParser,
    extract_fields,
    get_default_parser,
    create_event_parser_from_config,
)

__all__ = [
    # Chains
    "FallbackChain",
    "Rule",
    # Categories
    "CategoryClassifier",
    # Normalizer
    "month_name_to_number",
    "expand_year",
    "to_iso_date",
    "normalize_meridiem",
    "to_24_hour",
    "shift_time",
    # Tables
    "CategoryRule",
    "ExtractionTables",
    "load_extraction_tables",
    # Parser
    "EventTextParser",
    "extract_fields",
    "get_default_parser",
    "create_event_parser_from_config",
]

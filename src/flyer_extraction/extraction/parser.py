"""
Event text parser: raw OCR text in, PartialEventRecord out.

Runs every field extractor against the same text, then the sub-category
extractor and the coarse classifier, and assembles an immutable record.
Extraction never raises: a field that cannot be recovered is simply absent.
"""

import datetime
import logging
import threading
from typing import Any, Callable, Dict, List, Optional, Tuple

from pydantic import ValidationError

from flyer_extraction.extraction.categories import CategoryClassifier
from flyer_extraction.extraction.contact_fields import extract_contact
from flyer_extraction.extraction.datetime_fields import (
    build_time_chain,
    extract_date,
    extract_registration_deadline,
)
from flyer_extraction.extraction.descriptive_fields import (
    build_organization_chain,
    build_title_chain,
    extract_notes,
)
from flyer_extraction.extraction.location_fields import extract_address, extract_venue
from flyer_extraction.extraction.registration_fields import (
    build_fee_chain,
    extract_registration_link,
)
from flyer_extraction.extraction.tables import ExtractionTables, load_extraction_tables
from flyer_extraction.schemas.event import EventCategory, PartialEventRecord

logger = logging.getLogger(__name__)

FieldExtractor = Callable[[str, datetime.date], Dict[str, Any]]


def _single(field: str, extractor: Callable[[str, datetime.date], Optional[str]]):
    def run(text: str, reference_date: datetime.date) -> Dict[str, Any]:
        value = extractor(text, reference_date)
        return {field: value} if value is not None else {}

    return run


class EventTextParser:
    """
    Deterministic rule pipeline over the raw text of one flyer.

    The parser holds only read-only tables and compiled patterns, so one
    instance can be shared across threads and calls.

    Example:
        >>> parser = EventTextParser()
        >>> record = parser.parse("Fee: $25 per Team", datetime.date(2025, 1, 1))
        >>> record.fee
        '$25 per Team'
    """

    def __init__(self, tables: Optional[ExtractionTables] = None):
        """
        Initialize the parser.

        Args:
            tables: Keyword tables (defaults to the packaged configuration)
        """
        self.tables = tables or load_extraction_tables()
        self.classifier = CategoryClassifier(self.tables)

        self._title_chain = build_title_chain(self.tables.title_suffixes)
        self._time_chain = build_time_chain(self.tables.default_duration_hours)
        self._fee_chain = build_fee_chain(self.tables.default_fee_unit)
        self._organization_chain = build_organization_chain(
            self.tables.organization_suffixes
        )

        self._extractors: Tuple[Tuple[str, FieldExtractor], ...] = (
            ("title", _single("title", self._title_chain.extract)),
            ("date", _single("date", extract_date)),
            ("time", self._extract_time),
            ("venue", _single("venue", extract_venue)),
            ("address", _single("address", extract_address)),
            ("fee", _single("fee", self._fee_chain.extract)),
            (
                "registration_deadline",
                _single("registration_deadline", extract_registration_deadline),
            ),
            (
                "registration_link",
                _single("registration_link", extract_registration_link),
            ),
            ("contact", self._extract_contact),
            ("organization", _single("organization", self._organization_chain.extract)),
            ("notes", _single("notes", extract_notes)),
        )

    # =========================================================================
    # MAIN ENTRY POINT
    # =========================================================================

    def parse(
        self,
        raw_text: Optional[str],
        reference_date: Optional[datetime.date] = None,
    ) -> PartialEventRecord:
        """
        Extract a partial event record from raw flyer text.

        Args:
            raw_text: OCR output; ``None`` and empty text are accepted
            reference_date: Date used to fill in omitted years
                (defaults to today)

        Returns:
            PartialEventRecord with every recognised field populated
        """
        text = raw_text if isinstance(raw_text, str) else ""
        if reference_date is None:
            reference_date = datetime.date.today()

        fields: Dict[str, Any] = {}
        if text.strip():
            for name, extractor in self._extractors:
                fields.update(self._run_extractor(name, extractor, text, reference_date))

        categories, category = self._categorize(text)
        record = self._assemble(fields, categories, category)

        logger.info(
            "Extracted %d field(s) from %d characters of text",
            len(record.populated_fields()),
            len(text),
        )
        return record

    # =========================================================================
    # EXTRACTORS WITH MORE THAN ONE OUTPUT FIELD
    # =========================================================================

    def _extract_time(self, text: str, reference_date: datetime.date) -> Dict[str, Any]:
        times = self._time_chain.extract(text, reference_date)
        if times is None:
            return {}
        start, end = times
        return {"start_time": start, "end_time": end}

    def _extract_contact(self, text: str, reference_date: datetime.date) -> Dict[str, Any]:
        contact = extract_contact(text, reference_date)
        if contact is None:
            return {}
        return {"contact_name1": contact.name, "contact_phone1": contact.phone}

    # =========================================================================
    # HELPERS
    # =========================================================================

    @staticmethod
    def _run_extractor(
        name: str,
        extractor: FieldExtractor,
        text: str,
        reference_date: datetime.date,
    ) -> Dict[str, Any]:
        try:
            return extractor(text, reference_date)
        except Exception as e:
            logger.warning(f"{name} extraction failed: {e}", exc_info=True)
            return {}

    def _categorize(self, text: str) -> Tuple[Tuple[str, ...], EventCategory]:
        categories: Tuple[str, ...] = ()
        try:
            categories = self.classifier.extract_subcategories(text)
        except Exception as e:
            logger.warning(f"Sub-category extraction failed: {e}", exc_info=True)

        try:
            category = self.classifier.classify(text, categories)
        except Exception as e:
            logger.warning(f"Category classification failed: {e}", exc_info=True)
            category = self.tables.default_category
        return categories, category

    @staticmethod
    def _assemble(
        fields: Dict[str, Any],
        categories: Tuple[str, ...],
        category: EventCategory,
    ) -> PartialEventRecord:
        """
        Build the record, dropping any field that fails validation instead of
        failing the whole record.
        """
        aliases = {
            name: info.alias or name
            for name, info in PartialEventRecord.model_fields.items()
        }
        remaining = dict(fields)
        while True:
            try:
                return PartialEventRecord(
                    **remaining, categories=categories, category=category
                )
            except ValidationError as e:
                rejected = _rejected_fields(e)
                dropped: List[str] = [
                    name
                    for name in remaining
                    if name in rejected or aliases.get(name) in rejected
                ]
                if not dropped:
                    logger.warning(f"Record assembly failed, returning defaults: {e}")
                    return PartialEventRecord(category=category)
                logger.warning(f"Dropping invalid field(s) {dropped}: {e}")
                for name in dropped:
                    remaining.pop(name)


def _rejected_fields(error: ValidationError) -> set:
    return {str(err["loc"][0]) for err in error.errors() if err.get("loc")}


# =============================================================================
# MODULE-LEVEL ENTRY POINT
# =============================================================================

_default_parser: Optional[EventTextParser] = None
_DEFAULT_PARSER_LOCK = threading.Lock()


def get_default_parser() -> EventTextParser:
    """Return the shared parser built from the packaged tables."""
    global _default_parser
    with _DEFAULT_PARSER_LOCK:
        if _default_parser is None:
            _default_parser = EventTextParser()
        return _default_parser


def extract_fields(
    raw_text: Optional[str],
    reference_date: Optional[datetime.date] = None,
) -> PartialEventRecord:
    """
    Turn raw flyer text into a PartialEventRecord.

    Args:
        raw_text: OCR output, possibly empty
        reference_date: Date used to fill in omitted years (defaults to today)

    Returns:
        PartialEventRecord; ``category`` is always set
    """
    return get_default_parser().parse(raw_text, reference_date)


def create_event_parser_from_config(config: Dict[str, Any]) -> EventTextParser:
    """
    Factory function to create EventTextParser from a config mapping.

    Args:
        config: Dict shaped like ``configs/extraction.yaml``

    Returns:
        Configured EventTextParser instance

    Example config:
        default_fee_unit: "team"
        default_duration_hours: 3
    """
    defaults = load_extraction_tables().model_dump()
    defaults.update(config)
    return EventTextParser(ExtractionTables.model_validate(defaults))

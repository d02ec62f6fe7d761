"""
Partial event record produced by the flyer extraction engine.

Every field except ``category`` and ``categories`` is optional: the record is
a best-effort pre-fill for the event form, never an authoritative event.
Attribute names are snake_case; the camelCase aliases match the field names
the form layer expects (``startTime``, ``contactName1``, ...).
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_24H_PATTERN = r"^(?:[01]\d|2[0-3]):[0-5]\d$"


# ============================================================================
# ENUMS
# ============================================================================


class EventCategory(str, Enum):
    """
    Coarse event categories offered by the event form.
    """

    SPORTS = "Sports"
    CULTURAL = "Cultural"
    EDUCATION = "Education"
    FUNDRAISING = "Fundraising"
    OTHER = "Other"


# ============================================================================
# RECORD
# ============================================================================


class PartialEventRecord(BaseModel):
    """
    Structured fields recovered from the raw text of one flyer.

    Instances are immutable and built in a single pass by the parser.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    title: Optional[str] = None
    date: Optional[str] = Field(default=None, pattern=ISO_DATE_PATTERN)
    start_time: Optional[str] = Field(default=None, pattern=TIME_24H_PATTERN)
    end_time: Optional[str] = Field(default=None, pattern=TIME_24H_PATTERN)
    venue: Optional[str] = None
    address: Optional[str] = None
    fee: Optional[str] = None
    registration_deadline: Optional[str] = Field(
        default=None, pattern=ISO_DATE_PATTERN
    )
    registration_link: Optional[str] = None
    contact_name1: Optional[str] = None
    contact_phone1: Optional[str] = None
    contact_name2: Optional[str] = None
    contact_title2: Optional[str] = None
    organization: Optional[str] = None
    notes: Optional[str] = None

    categories: Tuple[str, ...] = Field(
        default=(), description="Sub-category labels in discovery order"
    )
    category: EventCategory = Field(
        default=EventCategory.SPORTS, description="Coarse category label"
    )

    @field_validator(
        "title",
        "date",
        "start_time",
        "end_time",
        "venue",
        "address",
        "fee",
        "registration_deadline",
        "registration_link",
        "contact_name1",
        "contact_phone1",
        "contact_name2",
        "contact_title2",
        "organization",
        "notes",
        mode="before",
    )
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """Strip surrounding whitespace; blank strings mean the field is absent."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("categories", mode="before")
    @classmethod
    def dedupe_categories(cls, v: Any) -> Any:
        """Drop blank and repeated labels, keeping first-seen order."""
        if v is None:
            return ()
        if isinstance(v, str):
            v = [v]
        seen: Dict[str, None] = {}
        for label in v:
            if not isinstance(label, str):
                continue
            label = label.strip()
            if label:
                seen.setdefault(label, None)
        return tuple(seen)

    def populated_fields(self) -> List[str]:
        """Names (aliases) of the extracted fields that carry a value."""
        return [
            key
            for key, value in self.model_dump(by_alias=True).items()
            if key not in ("categories", "category") and value is not None
        ]

    def to_form_data(self) -> Dict[str, Any]:
        """
        Return the form pre-fill payload.

        Absent fields are omitted; ``categories`` and ``category`` are always
        present.
        """
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")

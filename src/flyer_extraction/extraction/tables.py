"""
Read-only keyword tables for the extractors.

The YAML shipped in ``configs/extraction.yaml`` is validated into frozen
pydantic models once per process. All sequences are tuples so the tables
cannot be mutated after loading.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from flyer_extraction.configs.config import Config
from flyer_extraction.schemas.event import EventCategory


class CategoryRule(BaseModel):
    """One classifier group: keywords that map text to a coarse category."""

    model_config = ConfigDict(frozen=True)

    category: EventCategory
    keywords: Tuple[str, ...] = ()
    subcategory_markers: Tuple[str, ...] = Field(
        default=(),
        description="Fire the rule when a found sub-category contains one of these",
    )

    @field_validator("keywords", "subcategory_markers")
    @classmethod
    def lowercase(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        """Keywords are compared against lower-cased text."""
        return tuple(k.lower() for k in v if k)


class ExtractionTables(BaseModel):
    """Keyword lists and defaults consumed by the field extractors."""

    model_config = ConfigDict(frozen=True)

    subcategory_keywords: Tuple[str, ...] = ()
    category_rules: Tuple[CategoryRule, ...] = ()
    default_category: EventCategory = EventCategory.SPORTS
    title_suffixes: Tuple[str, ...] = ()
    organization_suffixes: Tuple[str, ...] = ()
    default_fee_unit: str = Field(default="person", min_length=1)
    default_duration_hours: int = Field(default=2, ge=0, le=23)


@lru_cache
def load_extraction_tables(path: Optional[Path] = None) -> ExtractionTables:
    """
    Load and cache the extraction tables.

    Args:
        path: Alternative YAML file (defaults to the packaged tables)

    Returns:
        Validated, immutable ExtractionTables
    """
    return ExtractionTables.model_validate(Config.load_extraction_config(path))

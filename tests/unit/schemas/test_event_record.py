"""
Unit tests for the PartialEventRecord schema.
"""

import pytest
from pydantic import ValidationError

from flyer_extraction.schemas.event import EventCategory, PartialEventRecord


class TestDefaults:
    """Tests for the empty record."""

    def test_everything_absent_except_category(self):
        """A bare record has no fields and the Sports category."""
        record = PartialEventRecord()
        assert record.populated_fields() == []
        assert record.categories == ()
        assert record.category == EventCategory.SPORTS


class TestValidation:
    """Tests for field validation."""

    def test_blank_strings_become_none(self):
        """Whitespace-only values mean the field is absent."""
        record = PartialEventRecord(title="   ", venue="\n")
        assert record.title is None
        assert record.venue is None

    def test_values_are_stripped(self):
        """Surrounding whitespace is removed."""
        assert PartialEventRecord(title="  Gala Night ").title == "Gala Night"

    @pytest.mark.parametrize("value", ["2025-3-5", "15/03/2025", "March 15"])
    def test_date_must_be_canonical(self, value):
        """Dates must be YYYY-MM-DD."""
        with pytest.raises(ValidationError):
            PartialEventRecord(date=value)

    @pytest.mark.parametrize("value", ["24:00", "9:30", "12:60", "2pm"])
    def test_time_must_be_canonical(self, value):
        """Times must be 24-hour HH:MM."""
        with pytest.raises(ValidationError):
            PartialEventRecord(start_time=value)

    def test_unknown_field_rejected(self):
        """Fields outside the form are rejected."""
        with pytest.raises(ValidationError):
            PartialEventRecord(price="$10")

    def test_unknown_category_rejected(self):
        """Only the fixed category labels are accepted."""
        with pytest.raises(ValidationError):
            PartialEventRecord(category="Gaming")

    def test_category_from_label(self):
        """Category labels are accepted as strings."""
        assert PartialEventRecord(category="Cultural").category == EventCategory.CULTURAL

    def test_categories_are_deduplicated(self):
        """Repeated and blank labels are dropped, order is kept."""
        record = PartialEventRecord(categories=["Singles", "Junior", "Singles", " "])
        assert record.categories == ("Singles", "Junior")

    def test_record_is_immutable(self):
        """Assigning to a field fails."""
        record = PartialEventRecord(title="Gala")
        with pytest.raises(ValidationError):
            record.title = "Other"


class TestFormData:
    """Tests for the form pre-fill payload."""

    def test_aliases_and_absent_fields(self):
        """Keys are camelCase and absent fields are omitted."""
        record = PartialEventRecord(
            start_time="10:00",
            contact_name1="Jane Doe",
            registration_deadline="2025-03-01",
            categories=("Singles",),
            category=EventCategory.SPORTS,
        )
        assert record.to_form_data() == {
            "startTime": "10:00",
            "contactName1": "Jane Doe",
            "registrationDeadline": "2025-03-01",
            "categories": ["Singles"],
            "category": "Sports",
        }

    def test_populate_by_alias(self):
        """Records can be built from the form's camelCase keys."""
        record = PartialEventRecord.model_validate(
            {"startTime": "09:00", "contactPhone1": "555-123-4567"}
        )
        assert record.start_time == "09:00"
        assert record.populated_fields() == ["startTime", "contactPhone1"]

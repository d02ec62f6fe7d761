"""
Shared pytest fixtures for the flyer extraction test suite.

Provides a fixed reference date, a parser built from the packaged tables and
a realistic OCR'd flyer.
"""

import datetime

import pytest

from flyer_extraction.extraction.parser import EventTextParser

SAMPLE_FLYER = """SPRING PICKLEBALL TOURNAMENT
Saturday, March 15, 2025
10:00am - 2:00pm
Venue: Community Center, 123 Main St, Springfield, IL 62701
Fee: $25 per Team
Registration Deadline: March 1, 2025
Register online: https://example.com/register.
Contact: Jane Doe, 555-123-4567
Organized by Springfield Pickleball Club
Men's Doubles Level 4 & 5
Women's Doubles
Mixed Doubles
Sponsored by Acme Sports
"""


@pytest.fixture
def reference_date():
    """Return the date used to fill in omitted years."""
    return datetime.date(2025, 1, 1)


@pytest.fixture
def parser():
    """Return a parser built from the packaged extraction tables."""
    return EventTextParser()


@pytest.fixture
def sample_flyer():
    """
    Return the OCR text of a complete flyer.

    Every extractor has something to find in it.
    """
    return SAMPLE_FLYER

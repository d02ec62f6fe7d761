"""
Schemas for extracted flyer data.

This package provides:
- EventCategory: Coarse event category enumeration
- PartialEventRecord: Best-effort structured record for one flyer
"""

from .event import EventCategory, PartialEventRecord

__all__ = [
    "EventCategory",
    "PartialEventRecord",
]

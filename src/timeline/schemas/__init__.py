"""Schemas for sectors, tracks and time ranges."""

from src.timeline.schemas.sector import Sector
from src.timeline.schemas.time_range import TimeRange
from src.timeline.schemas.track import Track, TrackKind

__all__ = [
    "Sector",
    "TimeRange",
    "Track",
    "TrackKind",
]

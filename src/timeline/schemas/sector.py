"""Sector schema."""

from src.common.base_multicam_model import BaseMulticamModel
from src.timeline.schemas.time_range import TimeRange
from src.timeline.schemas.track import Track


class Sector(BaseMulticamModel):
    """Named container holding the tracks of one assignment scope."""

    id: str
    name: str
    tracks: list[Track] = []
    start_time: float = 0.0
    end_time: float = 0.0
    time_ranges: list[TimeRange] = []
    is_visible: bool = True
    is_locked: bool = False

"""Track-related schemas."""

from enum import StrEnum, auto

from src.common.base_multicam_model import BaseMulticamModel
from src.media.schemas import MediaClip
from src.timeline.schemas.time_range import TimeRange


class TrackKind(StrEnum):
    """Type of track in a sector."""

    VIDEO = auto()
    AUDIO = auto()


class Track(BaseMulticamModel):
    """A lane of non-overlapping clips inside a sector.

    Video tracks carry the camera identity shared by all of their clips.
    The bounds and ``combined_duration`` are aggregates over ``clips``;
    ``combined_duration`` is an additive total, not the span between bounds.
    """

    id: str
    name: str
    kind: TrackKind
    index: int = 0
    clips: list[MediaClip] | None = None
    camera_id: str | None = None
    camera_name: str | None = None

    start_time: float = 0.0
    end_time: float = 0.0
    combined_duration: float = 0.0
    time_ranges: list[TimeRange] = []

    # UI state, passed through untouched
    is_active: bool = False
    volume: float = 1.0
    is_muted: bool = False
    is_locked: bool = False
    is_visible: bool = True

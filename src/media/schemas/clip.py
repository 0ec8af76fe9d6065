"""Media clip schema."""

from src.common.base_multicam_model import BaseMulticamModel
from src.media.schemas.media_type import MediaType
from src.media.schemas.probe import ProbeData


class MediaClip(BaseMulticamModel):
    """A discovered media file handed over by the ingestion stage.

    ``start_time`` and ``duration`` are in seconds. Either may be missing;
    a missing value is ``None`` and is read as 0 through the ``effective_*``
    properties, so a legitimate 0 is never confused with "unknown".
    """

    id: str
    name: str
    path: str
    media_type: MediaType
    start_time: float | None = None
    duration: float | None = None
    probe_data: ProbeData | None = None
    size_bytes: int | None = None
    extension: str | None = None

    @property
    def effective_start_seconds(self) -> float:
        """Return the start time, defaulting to 0 when unknown."""
        return self.start_time if self.start_time is not None else 0.0

    @property
    def effective_duration_seconds(self) -> float:
        """Return the duration, defaulting to 0 when unknown."""
        return self.duration if self.duration is not None else 0.0

    @property
    def effective_end_seconds(self) -> float:
        """Return the end time (start + duration) with defaults applied."""
        return self.effective_start_seconds + self.effective_duration_seconds

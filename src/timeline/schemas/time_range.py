"""Time range schema."""

from src.common.base_multicam_model import BaseMulticamModel


class TimeRange(BaseMulticamModel):
    """Half-open time span ``[start_seconds, end_seconds)``."""

    start_seconds: float
    end_seconds: float

    @property
    def duration_seconds(self) -> float:
        """Return the span length (0 for empty or inverted ranges)."""
        return max(0.0, self.end_seconds - self.start_seconds)

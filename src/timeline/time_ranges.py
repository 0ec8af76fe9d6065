"""Time range helpers used to decide whether clips can share a track."""

from collections.abc import Iterable

from src.media.schemas import MediaClip
from src.timeline.schemas import TimeRange

# Overlap absorbed before two ranges count as conflicting
DEFAULT_OVERLAP_TOLERANCE_SECONDS = 1.0


def do_time_ranges_overlap(
    start1: float,
    end1: float,
    start2: float,
    end2: float,
    tolerance_seconds: float = DEFAULT_OVERLAP_TOLERANCE_SECONDS,
) -> bool:
    """Check whether two half-open ranges conflict for track sharing.

    Ranges that are disjoint, touch, or overlap by up to ``tolerance_seconds``
    do not conflict. Zero-length ranges never conflict with anything.

    Args:
        start1: Start of the first range.
        end1: End of the first range.
        start2: Start of the second range.
        end2: End of the second range.
        tolerance_seconds: Overlap allowed before the ranges conflict.

    Returns:
        True if the ranges overlap by more than the tolerance.
    """
    if end1 <= start1 or end2 <= start2:
        return False

    overlap = min(end1, end2) - max(start1, start2)
    return overlap > tolerance_seconds


def clip_time_range(clip: MediaClip) -> TimeRange:
    """Return the time range a clip occupies, with missing values read as 0."""
    return TimeRange(
        start_seconds=clip.effective_start_seconds,
        end_seconds=clip.effective_end_seconds,
    )


def calculate_time_ranges(clips: Iterable[MediaClip]) -> list[TimeRange]:
    """Return one time range per clip, in input order."""
    return [clip_time_range(clip) for clip in clips]


def clips_conflict(
    clip: MediaClip,
    other: MediaClip,
    tolerance_seconds: float = DEFAULT_OVERLAP_TOLERANCE_SECONDS,
) -> bool:
    """Check whether two clips overlap by more than the tolerance."""
    return do_time_ranges_overlap(
        clip.effective_start_seconds,
        clip.effective_end_seconds,
        other.effective_start_seconds,
        other.effective_end_seconds,
        tolerance_seconds,
    )

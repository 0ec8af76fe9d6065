"""Track naming and numbering policy."""

import re
from collections.abc import Iterable

from src.timeline.schemas import Track, TrackKind

CAMERA_NAME_PATTERN = re.compile(r"Camera (\d+)")


def camera_number_from_name(name: str | None) -> int | None:
    """Return N for a track named ``"Camera N"``, otherwise None."""
    if not name:
        return None
    match = CAMERA_NAME_PATTERN.fullmatch(name.strip())
    if match is None:
        return None
    return int(match.group(1))


def next_camera_number(tracks: Iterable[Track]) -> int:
    """Return one past the highest camera number in the track names.

    Gaps are not reused: with "Camera 1" and "Camera 3" present the next
    number is 4.
    """
    numbers = (camera_number_from_name(track.name) for track in tracks)
    return max((n for n in numbers if n is not None), default=0) + 1


def next_track_index(tracks: Iterable[Track], kind: TrackKind | None = None) -> int:
    """Return the next sequential index, optionally among tracks of one kind."""
    indices = [t.index for t in tracks if kind is None or t.kind == kind]
    return max(indices, default=0) + 1


def format_label(template: str, **values: object) -> str:
    """Render a label template such as ``"Camera {number}"``."""
    return template.format(**values)

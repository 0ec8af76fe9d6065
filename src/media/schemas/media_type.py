"""Media type enum."""

from enum import StrEnum, auto


class MediaType(StrEnum):
    """Kind of media a discovered file holds."""

    VIDEO = auto()
    AUDIO = auto()
    IMAGE = auto()

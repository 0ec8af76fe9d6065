"""Schemas for discovered media and its probe data."""

from src.media.schemas.clip import MediaClip
from src.media.schemas.media_type import MediaType
from src.media.schemas.probe import ProbeData, ProbeFormat, StreamInfo

__all__ = [
    "MediaClip",
    "MediaType",
    "ProbeData",
    "ProbeFormat",
    "StreamInfo",
]

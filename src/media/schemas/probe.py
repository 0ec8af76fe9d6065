"""Probe data schemas (shape of the media-probing backend's output)."""

from src.common.base_multicam_model import BaseMulticamModel


class StreamInfo(BaseMulticamModel):
    """A single stream descriptor reported by the probe."""

    codec_type: str
    codec_name: str | None = None
    width: int | None = None
    height: int | None = None
    duration: float | None = None
    bit_rate: str | None = None
    # Rotation in degrees (0, 90, 180, 270) from stream metadata
    rotation: int | None = None


class ProbeFormat(BaseMulticamModel):
    """Container-level information reported by the probe."""

    duration: str | None = None
    size: str | None = None
    bit_rate: str | None = None
    format_name: str | None = None
    # ISO-8601 capture timestamp from container tags
    creation_time: str | None = None


class ProbeData(BaseMulticamModel):
    """Complete probe result for one media file."""

    streams: list[StreamInfo] = []
    format: ProbeFormat | None = None

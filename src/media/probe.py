"""Media probing via ffprobe and helpers over the resulting probe data."""

import json
import logging
import shutil
import subprocess
import uuid
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from src.media.schemas import (
    MediaClip,
    MediaType,
    ProbeData,
    ProbeFormat,
    StreamInfo,
)

logger = logging.getLogger(__name__)

VIDEO_EXTENSIONS = {".mov", ".mp4", ".avi", ".mkv", ".webm", ".m4v", ".mts", ".m2ts", ".3gp", ".wmv", ".flv"}
AUDIO_EXTENSIONS = {".mp3", ".wav", ".m4a", ".aac", ".flac", ".ogg", ".wma", ".aiff", ".alac"}
IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp", ".heic", ".tiff"}


def get_media_type(filename: str) -> MediaType | None:
    """Determine media type from filename extension."""
    suffix = Path(filename).suffix.lower()
    if suffix in VIDEO_EXTENSIONS:
        return MediaType.VIDEO
    if suffix in AUDIO_EXTENSIONS:
        return MediaType.AUDIO
    if suffix in IMAGE_EXTENSIONS:
        return MediaType.IMAGE
    return None


def video_stream(probe_data: ProbeData | None) -> StreamInfo | None:
    """Return the first video stream of the probe data, if any."""
    if probe_data is None:
        return None
    for stream in probe_data.streams:
        if stream.codec_type == "video":
            return stream
    return None


def audio_stream(probe_data: ProbeData | None) -> StreamInfo | None:
    """Return the first audio stream of the probe data, if any."""
    if probe_data is None:
        return None
    for stream in probe_data.streams:
        if stream.codec_type == "audio":
            return stream
    return None


def has_video_stream(clip: MediaClip) -> bool:
    """Check whether the clip's probe data reports a video stream."""
    return video_stream(clip.probe_data) is not None


def has_audio_stream(clip: MediaClip) -> bool:
    """Check whether the clip's probe data reports an audio stream."""
    return audio_stream(clip.probe_data) is not None


def is_horizontal_video(width: int, height: int, rotation: int | None = None) -> bool:
    """Check whether a video displays wider than tall.

    A rotation of 90 or 270 degrees swaps the displayed axes.
    """
    if rotation is not None and abs(rotation) % 180 == 90:
        return height > width
    return width > height


def _parse_rotation(stream: dict[str, Any]) -> int | None:
    """Read rotation from stream tags (older format) or the display matrix."""
    try:
        tags = stream.get("tags", {})
        if "rotate" in tags:
            return int(float(tags["rotate"])) % 360

        for side_data in stream.get("side_data_list", []):
            if side_data.get("side_data_type") == "Display Matrix":
                # displaymatrix rotation is negative of actual rotation
                return (-int(float(side_data.get("rotation", 0)))) % 360
    except (TypeError, ValueError):
        return None

    return None


def _optional_float(value: Any) -> float | None:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def parse_probe_output(data: dict[str, Any]) -> ProbeData:
    """Convert ffprobe JSON output into ProbeData.

    Args:
        data: Parsed output of ``ffprobe -show_streams -show_format -of json``.

    Returns:
        ProbeData with one StreamInfo per reported stream.
    """
    streams = [
        StreamInfo(
            codec_type=stream.get("codec_type", "unknown"),
            codec_name=stream.get("codec_name"),
            width=stream.get("width"),
            height=stream.get("height"),
            duration=_optional_float(stream.get("duration")),
            bit_rate=stream.get("bit_rate"),
            rotation=_parse_rotation(stream),
        )
        for stream in data.get("streams", [])
    ]

    format_data = data.get("format")
    probe_format = None
    if format_data is not None:
        probe_format = ProbeFormat(
            duration=format_data.get("duration"),
            size=format_data.get("size"),
            bit_rate=format_data.get("bit_rate"),
            format_name=format_data.get("format_name"),
            creation_time=format_data.get("tags", {}).get("creation_time"),
        )

    return ProbeData(streams=streams, format=probe_format)


def capture_start_seconds(probe_data: ProbeData | None) -> float | None:
    """Return the container creation time as epoch seconds, if reported."""
    if probe_data is None or probe_data.format is None:
        return None

    creation_time = probe_data.format.creation_time
    if not creation_time:
        return None

    try:
        parsed = datetime.fromisoformat(creation_time.replace("Z", "+00:00"))
    except ValueError:
        logger.warning("Unparseable creation_time %r", creation_time)
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.timestamp()


def probe_media_file(file_path: Path) -> ProbeData | None:
    """Probe a media file with ffprobe if available.

    Returns None when ffprobe is not installed or cannot read the file.
    """
    if shutil.which("ffprobe") is None:
        logger.warning("ffprobe not found, skipping probe of %s", file_path)
        return None

    result = subprocess.run(
        [
            "ffprobe",
            "-v", "quiet",
            "-show_streams",
            "-show_format",
            "-of", "json",
            str(file_path),
        ],
        capture_output=True,
        text=True,
        check=False,
    )

    if result.returncode != 0:
        logger.warning("ffprobe failed for %s (exit %d)", file_path, result.returncode)
        return None

    try:
        data = json.loads(result.stdout)
    except json.JSONDecodeError:
        logger.warning("ffprobe returned invalid JSON for %s", file_path)
        return None

    return parse_probe_output(data)


def media_clip_from_file(file_path: Path, start_time: float | None = None) -> MediaClip:
    """Build a MediaClip for a file on disk, probing it for stream metadata.

    Args:
        file_path: Path to the media file.
        start_time: Capture start in epoch seconds. Read from the
            container creation time when omitted.

    Returns:
        MediaClip with probe data and duration filled in where available.
    """
    probe_data = probe_media_file(file_path)
    if start_time is None:
        start_time = capture_start_seconds(probe_data)

    duration = None
    if probe_data is not None and probe_data.format is not None:
        duration = _optional_float(probe_data.format.duration)

    media_type = get_media_type(file_path.name)
    if media_type is None:
        only_audio = (
            video_stream(probe_data) is None and audio_stream(probe_data) is not None
        )
        media_type = MediaType.AUDIO if only_audio else MediaType.VIDEO

    size_bytes = file_path.stat().st_size if file_path.exists() else None

    return MediaClip(
        id=uuid.uuid4().hex,
        name=file_path.name,
        path=str(file_path),
        media_type=media_type,
        start_time=start_time,
        duration=duration,
        probe_data=probe_data,
        size_bytes=size_bytes,
        extension=file_path.suffix.lstrip(".").lower() or None,
    )

"""Camera identity derivation."""

import uuid
from collections.abc import Callable

from src.media.probe import video_stream
from src.media.schemas import MediaClip

DEFAULT_CAMERA_ID_PREFIX = "camera-"


def generate_token() -> str:
    """Return a collision-free token for clips without resolution data."""
    return uuid.uuid4().hex


def resolution_signature(clip: MediaClip) -> str | None:
    """Return ``"<width>x<height>"`` for the clip's video stream, if known."""
    stream = video_stream(clip.probe_data)
    if stream is None or not stream.width or not stream.height:
        return None
    return f"{stream.width}x{stream.height}"


def derive_camera_id(
    clip: MediaClip,
    id_factory: Callable[[], str] = generate_token,
    prefix: str = DEFAULT_CAMERA_ID_PREFIX,
) -> str:
    """Derive the camera identity used to decide which clips share a track.

    Clips with a known resolution share the resolution signature. Any other
    clip gets a fresh ``camera-`` token on every call, so two such clips
    never resolve to the same identity.
    """
    signature = resolution_signature(clip)
    if signature is not None:
        return signature
    return f"{prefix}{id_factory()}"

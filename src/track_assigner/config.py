"""Track assignment configuration settings."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field

from src.common.base_multicam_model import BaseMulticamModel

# Load .env file from project root
_project_dir = Path(__file__).parent.parent.parent
load_dotenv(_project_dir / ".env")


class TrackAssignerConfig(BaseMulticamModel):
    """Configuration for track assignment and sector building."""

    # Overlap between two clips that still lets them share a track
    overlap_tolerance_seconds: float = Field(default=1.0, ge=0.0)

    camera_id_prefix: str = "camera-"

    # Label templates, formatted with ``number`` or ``date``
    camera_label_template: str = "Camera {number}"
    audio_label_template: str = "Audio {number}"
    sector_label_template: str = "Section {date}"


def get_track_assigner_config() -> TrackAssignerConfig:
    """Get track assignment configuration from environment variables.

    Environment variables:
        MULTICAM_OVERLAP_TOLERANCE_SECONDS: Allowed clip overlap (default: 1.0)
        MULTICAM_CAMERA_LABEL_TEMPLATE: Video track label (default: "Camera {number}")
        MULTICAM_AUDIO_LABEL_TEMPLATE: Audio track label (default: "Audio {number}")
        MULTICAM_SECTOR_LABEL_TEMPLATE: Sector label (default: "Section {date}")
    """
    tolerance_raw = os.environ.get("MULTICAM_OVERLAP_TOLERANCE_SECONDS", "1.0")
    try:
        tolerance = float(tolerance_raw)
    except ValueError:
        msg = f"MULTICAM_OVERLAP_TOLERANCE_SECONDS must be a number, got {tolerance_raw!r}"
        raise ValueError(msg) from None

    if tolerance < 0:
        msg = "MULTICAM_OVERLAP_TOLERANCE_SECONDS must not be negative"
        raise ValueError(msg)

    return TrackAssignerConfig(
        overlap_tolerance_seconds=tolerance,
        camera_label_template=os.environ.get(
            "MULTICAM_CAMERA_LABEL_TEMPLATE", "Camera {number}"
        ),
        audio_label_template=os.environ.get(
            "MULTICAM_AUDIO_LABEL_TEMPLATE", "Audio {number}"
        ),
        sector_label_template=os.environ.get(
            "MULTICAM_SECTOR_LABEL_TEMPLATE", "Section {date}"
        ),
    )

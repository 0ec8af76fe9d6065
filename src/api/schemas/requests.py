"""API request schemas."""

from pydantic import Field

from src.common.base_multicam_model import BaseMulticamModel
from src.media.schemas import MediaClip
from src.timeline.schemas import Sector


class AssignTracksRequest(BaseMulticamModel):
    """Request to place a batch of video clips on a sector's tracks."""

    sector: Sector
    clips: list[MediaClip]


class BuildSectorsRequest(BaseMulticamModel):
    """Request to group discovered files into per-day sectors."""

    clips: list[MediaClip]
    existing_sectors: list[Sector] = []


class ExportSectorRequest(BaseMulticamModel):
    """Request to render a sector as an OTIO timeline."""

    sector: Sector
    frame_rate: float = Field(default=30.0, gt=0)

"""API response schemas."""

from src.common.base_multicam_model import BaseMulticamModel
from src.timeline.schemas import Sector


class BuildSectorsResponse(BaseMulticamModel):
    """Sectors produced from a batch of discovered files."""

    sectors: list[Sector]


class ExportSectorResponse(BaseMulticamModel):
    """Serialized OTIO timeline for a sector."""

    sector_id: str
    track_count: int
    otio_json: str

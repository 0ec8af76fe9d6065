"""Sector building and export routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from src.api.schemas import (
    BuildSectorsRequest,
    BuildSectorsResponse,
    ExportSectorRequest,
    ExportSectorResponse,
)
from src.timeline.otio_exporter import SectorExporterService
from src.track_assigner.providers import (
    sector_builder_service,
    sector_exporter_service,
)
from src.track_assigner.sector_builder import SectorBuilderService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/build", response_model=BuildSectorsResponse)
def build_sectors(
    request: BuildSectorsRequest,
    service: SectorBuilderService = Depends(sector_builder_service),
) -> BuildSectorsResponse:
    """Group discovered files into per-day sectors with assigned tracks."""
    logger.info(
        "Build request with %d clips and %d existing sectors",
        len(request.clips),
        len(request.existing_sectors),
    )
    sectors = service.create_sectors_from_files(
        request.clips,
        request.existing_sectors,
    )
    return BuildSectorsResponse(sectors=sectors)


@router.post("/export", response_model=ExportSectorResponse)
def export_sector(
    request: ExportSectorRequest,
    service: SectorExporterService = Depends(sector_exporter_service),
) -> ExportSectorResponse:
    """Render a sector as an OTIO timeline."""
    logger.info(
        "[sector=%s] Export request at %s fps",
        request.sector.id,
        request.frame_rate,
    )
    if not request.sector.tracks:
        raise HTTPException(status_code=400, detail="Sector has no tracks to export")

    otio_json = service.to_json_string(request.sector, request.frame_rate)
    return ExportSectorResponse(
        sector_id=request.sector.id,
        track_count=len(request.sector.tracks),
        otio_json=otio_json,
    )

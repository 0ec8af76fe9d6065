"""Track assignment routes."""

import logging

from fastapi import APIRouter, Depends

from src.api.schemas import AssignTracksRequest
from src.timeline.schemas import Sector
from src.track_assigner.providers import track_assigner_service
from src.track_assigner.service import TrackAssignerService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/assign", response_model=Sector)
def assign_tracks(
    request: AssignTracksRequest,
    service: TrackAssignerService = Depends(track_assigner_service),
) -> Sector:
    """Place video clips on the sector's camera tracks."""
    logger.info(
        "[sector=%s] Assign request with %d clips",
        request.sector.id,
        len(request.clips),
    )
    return service.process_video_files(request.clips, request.sector)

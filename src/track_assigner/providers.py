"""Providers for track assignment services."""

from functools import cache

from src.timeline.otio_exporter import SectorExporterService
from src.track_assigner.config import get_track_assigner_config
from src.track_assigner.sector_builder import SectorBuilderService
from src.track_assigner.service import TrackAssignerService


@cache
def track_assigner_service() -> TrackAssignerService:
    """Provide a cached instance of the TrackAssignerService."""
    return TrackAssignerService(config=get_track_assigner_config())


@cache
def sector_builder_service() -> SectorBuilderService:
    """Provide a cached instance of the SectorBuilderService."""
    config = get_track_assigner_config()
    return SectorBuilderService(
        config=config,
        track_assigner=track_assigner_service(),
    )


@cache
def sector_exporter_service() -> SectorExporterService:
    """Provide a cached instance of the SectorExporterService."""
    return SectorExporterService()

"""API schemas for requests and responses."""

from src.api.schemas.requests import (
    AssignTracksRequest,
    BuildSectorsRequest,
    ExportSectorRequest,
)
from src.api.schemas.responses import BuildSectorsResponse, ExportSectorResponse

__all__ = [
    "AssignTracksRequest",
    "BuildSectorsRequest",
    "ExportSectorRequest",
    "BuildSectorsResponse",
    "ExportSectorResponse",
]

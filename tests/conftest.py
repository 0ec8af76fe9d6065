"""Shared fixtures for multicam tests."""

import pytest

from src.track_assigner.service import TrackAssignerService
from tests.factories import counter_ids


@pytest.fixture
def service() -> TrackAssignerService:
    return TrackAssignerService(id_factory=counter_ids("tok"))

"""Tests for exporting sectors to OTIO."""

import opentimelineio as otio

from src.timeline.otio_exporter import SectorExporterService
from src.timeline.schemas import Sector, TrackKind
from tests.factories import make_clip, make_track


def _sector() -> Sector:
    camera = make_track(
        "t1",
        "Camera 1",
        1,
        [make_clip("a", 100, 10, 1920, 1080), make_clip("b", 130, 20, 1920, 1080)],
        camera_id="1920x1080",
    )
    second = make_track(
        "t2",
        "Camera 2",
        2,
        [make_clip("c", 105, 10, 1280, 720), make_clip("d", 114.5, 5, 1280, 720)],
        camera_id="1280x720",
    )
    audio = make_track(
        "t3",
        "Audio 1",
        1,
        [make_clip("e", 100, 60)],
        kind=TrackKind.AUDIO,
    )
    return Sector(id="2026-01-05", name="Section January 5, 2026", tracks=[audio, second, camera])


def test_timeline_layout():
    timeline = SectorExporterService().create_timeline(_sector(), frame_rate=10)

    assert timeline.name == "Section January 5, 2026"
    assert [t.name for t in timeline.tracks] == ["Camera 1", "Camera 2", "Audio 1"]
    assert timeline.tracks[2].kind == otio.schema.TrackKind.Audio
    assert timeline.tracks[0].metadata["multicam"]["camera_id"] == "1920x1080"


def test_gaps_between_clips():
    timeline = SectorExporterService().create_timeline(_sector(), frame_rate=10)
    camera = timeline.tracks[0]

    kinds = [type(item) for item in camera]
    assert kinds == [otio.schema.Clip, otio.schema.Gap, otio.schema.Clip]
    assert otio.opentime.to_seconds(camera[1].duration()) == 20
    assert otio.opentime.to_seconds(camera.duration()) == 50


def test_gap_measured_from_sector_start():
    timeline = SectorExporterService().create_timeline(_sector(), frame_rate=10)
    second = timeline.tracks[1]

    assert isinstance(second[0], otio.schema.Gap)
    assert otio.opentime.to_seconds(second[0].duration()) == 5


def test_tolerated_overlap_is_trimmed():
    timeline = SectorExporterService().create_timeline(_sector(), frame_rate=10)
    second = timeline.tracks[1]

    # d starts 0.5s before c ends
    trimmed = second[2]
    assert trimmed.name == "d.mp4"
    assert otio.opentime.to_seconds(trimmed.source_range.start_time) == 0.5
    assert otio.opentime.to_seconds(trimmed.source_range.duration) == 4.5


def test_export_writes_file(tmp_path):
    output = tmp_path / "sector.otio"

    result = SectorExporterService().export(_sector(), output, frame_rate=25)

    assert result == output
    timeline = otio.adapters.read_from_file(str(output))
    assert len(timeline.tracks) == 3


def test_to_json_string():
    text = SectorExporterService().to_json_string(_sector())

    assert '"OTIO_SCHEMA"' in text
    assert "Camera 2" in text

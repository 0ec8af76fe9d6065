"""Tests for the file import script."""

import json
import subprocess
from pathlib import Path

from src.media import probe
from src.track_assigner.assign_files import assign_files


def _ffprobe_json(width: int, height: int, creation_time: str, duration: str) -> str:
    return json.dumps(
        {
            "streams": [{"codec_type": "video", "width": width, "height": height}],
            "format": {"duration": duration, "tags": {"creation_time": creation_time}},
        }
    )


def test_assign_files(monkeypatch, tmp_path):
    outputs = {
        "a.mp4": _ffprobe_json(1920, 1080, "2026-01-05T09:00:00Z", "60"),
        "b.mp4": _ffprobe_json(1920, 1080, "2026-01-05T09:00:30Z", "60"),
        "c.mp4": _ffprobe_json(1920, 1080, "2026-01-05T09:05:00Z", "10"),
    }
    paths = []
    for name in outputs:
        path = tmp_path / name
        path.write_bytes(b"")
        paths.append(path)

    def fake_run(command, **kwargs):
        name = Path(command[-1]).name
        return subprocess.CompletedProcess(command, 0, stdout=outputs[name], stderr="")

    monkeypatch.setattr(probe.shutil, "which", lambda _: "/usr/bin/ffprobe")
    monkeypatch.setattr(probe.subprocess, "run", fake_run)

    otio_dir = tmp_path / "otio"
    sectors = assign_files(paths, otio_dir)

    assert len(sectors) == 1
    assert sectors[0]["id"] == "2026-01-05"
    assert [[c["name"] for c in t["clips"]] for t in sectors[0]["tracks"]] == [
        ["a.mp4", "c.mp4"],
        ["b.mp4"],
    ]
    assert (otio_dir / "2026-01-05.otio").exists()

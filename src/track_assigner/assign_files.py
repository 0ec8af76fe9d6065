"""Script to probe media files and lay them out on per-day sectors."""

import json
import logging
import sys
from pathlib import Path

from src.media.probe import media_clip_from_file
from src.track_assigner.providers import sector_builder_service, sector_exporter_service


def assign_files(paths: list[Path], otio_dir: Path | None = None) -> list[dict]:
    """Probe files, build sectors and optionally write one .otio per sector.

    Args:
        paths: Media files to import.
        otio_dir: Directory for OTIO output, or None to skip export.

    Returns:
        JSON-ready sector dictionaries.
    """
    clips = [media_clip_from_file(path) for path in paths]
    sectors = sector_builder_service().create_sectors_from_files(clips)

    if otio_dir is not None:
        otio_dir.mkdir(parents=True, exist_ok=True)
        exporter = sector_exporter_service()
        for sector in sectors:
            exporter.export(sector, otio_dir / f"{sector.id}.otio")

    return [sector.model_dump(mode="json") for sector in sectors]


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    args = sys.argv[1:]
    otio_dir: Path | None = None
    if args[:1] == ["--otio-dir"]:
        if len(args) < 2:
            print("--otio-dir requires a directory")
            sys.exit(1)
        otio_dir = Path(args[1])
        args = args[2:]

    if not args:
        print("Usage: python -m src.track_assigner.assign_files [--otio-dir DIR] <media files...>")
        sys.exit(1)

    files = [Path(arg) for arg in args]
    missing = [f for f in files if not f.exists()]
    if missing:
        print(f"File not found: {missing[0]}")
        sys.exit(1)

    print(json.dumps(assign_files(files, otio_dir), indent=2))

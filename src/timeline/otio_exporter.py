"""SectorExporter service for converting a Sector to OTIO."""

import logging
from pathlib import Path

import opentimelineio as otio

from src.media.schemas import MediaClip
from src.timeline.schemas import Sector, Track, TrackKind

logger = logging.getLogger(__name__)


class SectorExporterService:
    """Service for exporting sector track layouts as OTIO timelines."""

    def export(
        self,
        sector: Sector,
        output_path: Path,
        frame_rate: float = 30.0,
    ) -> Path:
        """Write a sector to an OTIO file.

        Args:
            sector: The sector with assigned tracks.
            output_path: Where to save the .otio file.
            frame_rate: Timeline frame rate.

        Returns:
            The path to the saved OTIO file.
        """
        timeline = self.create_timeline(sector, frame_rate)
        otio.adapters.write_to_file(timeline, str(output_path))
        logger.info("[sector=%s] OTIO timeline written to %s", sector.id, output_path)
        return output_path

    def to_json_string(self, sector: Sector, frame_rate: float = 30.0) -> str:
        """Serialize a sector's OTIO timeline to a JSON string."""
        timeline = self.create_timeline(sector, frame_rate)
        return otio.adapters.write_to_string(timeline, "otio_json")

    def create_timeline(self, sector: Sector, frame_rate: float) -> otio.schema.Timeline:
        """Create an OTIO timeline with one track per sector track."""
        timeline = otio.schema.Timeline(name=sector.name)
        timeline.global_start_time = otio.opentime.RationalTime(0, frame_rate)

        # Gaps are measured from the earliest clip in the sector
        starts = [c.effective_start_seconds for t in sector.tracks for c in t.clips or []]
        origin_seconds = min(starts, default=0.0)

        # Video lanes first, each kind in index order
        ordered = sorted(
            sector.tracks,
            key=lambda t: (t.kind != TrackKind.VIDEO, t.index),
        )
        for track in ordered:
            timeline.tracks.append(
                self._create_track(track, origin_seconds, frame_rate)
            )

        return timeline

    def _create_track(
        self,
        track: Track,
        origin_seconds: float,
        frame_rate: float,
    ) -> otio.schema.Track:
        """Create an OTIO track with gaps between clips."""
        kind = (
            otio.schema.TrackKind.Video
            if track.kind == TrackKind.VIDEO
            else otio.schema.TrackKind.Audio
        )
        otio_track = otio.schema.Track(name=track.name, kind=kind)
        otio_track.metadata["multicam"] = {
            "camera_id": track.camera_id,
            "index": track.index,
            "combined_duration": track.combined_duration,
        }

        sorted_clips = sorted(track.clips or [], key=lambda c: c.effective_start_seconds)
        current_time = origin_seconds

        for clip in sorted_clips:
            start = clip.effective_start_seconds
            end = clip.effective_end_seconds

            if start > current_time:
                otio_track.append(self._create_gap(start - current_time, frame_rate))
                current_time = start

            # Clips may overlap inside the tolerance window; trim the head
            head_trim = current_time - start
            if end - current_time <= 0:
                logger.debug("Dropping %s from OTIO track %s: fully covered", clip.name, track.name)
                continue

            otio_track.append(self._create_clip(clip, head_trim, frame_rate))
            current_time = end

        return otio_track

    def _create_clip(
        self,
        clip: MediaClip,
        head_trim_seconds: float,
        frame_rate: float,
    ) -> otio.schema.Clip:
        """Create an OTIO clip from a media clip."""
        media_ref = otio.schema.ExternalReference(target_url=clip.path)
        source_duration = clip.effective_duration_seconds - head_trim_seconds

        source_range = otio.opentime.TimeRange(
            start_time=otio.opentime.RationalTime(
                head_trim_seconds * frame_rate,
                frame_rate,
            ),
            duration=otio.opentime.RationalTime(
                source_duration * frame_rate,
                frame_rate,
            ),
        )

        otio_clip = otio.schema.Clip(
            name=clip.name,
            media_reference=media_ref,
            source_range=source_range,
        )
        otio_clip.metadata["multicam"] = {
            "clip_id": clip.id,
            "start_time": clip.effective_start_seconds,
        }
        return otio_clip

    def _create_gap(
        self,
        duration_seconds: float,
        frame_rate: float,
    ) -> otio.schema.Gap:
        """Create a gap of specified duration."""
        return otio.schema.Gap(
            source_range=otio.opentime.TimeRange(
                start_time=otio.opentime.RationalTime(0, frame_rate),
                duration=otio.opentime.RationalTime(
                    duration_seconds * frame_rate,
                    frame_rate,
                ),
            ),
        )

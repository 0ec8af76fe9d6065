"""TrackAssigner service for placing newly discovered clips on camera tracks."""

import logging
from collections.abc import Callable, Sequence

from src.media.schemas import MediaClip, MediaType
from src.timeline.schemas import Sector, Track, TrackKind
from src.timeline.time_ranges import calculate_time_ranges, clips_conflict
from src.track_assigner.camera import derive_camera_id, generate_token, resolution_signature
from src.track_assigner.config import TrackAssignerConfig
from src.track_assigner.naming import format_label, next_camera_number, next_track_index

logger = logging.getLogger(__name__)


def add_clip_to_track(track: Track, clip: MediaClip) -> Track:
    """Return a copy of the track with the clip appended and aggregates refreshed.

    A track without clips takes its bounds from the new clip alone.
    ``combined_duration`` is the sum of clip durations, not the span.
    """
    existing = track.clips or []
    clips = [*existing, clip]

    if existing:
        start_time = min(track.start_time, clip.effective_start_seconds)
        end_time = max(track.end_time, clip.effective_end_seconds)
    else:
        start_time = clip.effective_start_seconds
        end_time = clip.effective_end_seconds

    return track.model_copy(
        update={
            "clips": clips,
            "start_time": start_time,
            "end_time": end_time,
            "combined_duration": sum(c.effective_duration_seconds for c in clips),
            "time_ranges": calculate_time_ranges(clips),
        }
    )


class TrackAssignerService:
    """Service for assigning video clips to camera tracks within a sector."""

    def __init__(
        self,
        config: TrackAssignerConfig | None = None,
        camera_label: Callable[[int], str] | None = None,
        id_factory: Callable[[], str] = generate_token,
    ) -> None:
        """Initialize the service.

        Args:
            config: Assignment settings. Defaults are used when omitted.
            camera_label: Renders the display label for camera number N.
                Defaults to the configured label template.
            id_factory: Generates unique tokens for track ids and for
                clips without resolution data.
        """
        self.config = config or TrackAssignerConfig()
        self.camera_label = camera_label or self._default_camera_label
        self.id_factory = id_factory

    def process_video_files(
        self,
        clips: Sequence[MediaClip],
        sector: Sector,
    ) -> Sector:
        """Place each clip on a matching camera track, creating tracks as needed.

        Clips are processed in the given order and later clips see tracks
        created for earlier ones. The input sector is not modified; the
        returned sector carries the updated track list.

        Args:
            clips: Newly discovered clips, in caller order.
            sector: The sector whose tracks receive the clips.

        Returns:
            A copy of the sector with clips placed.
        """
        tracks = list(sector.tracks)
        created = 0

        for clip in clips:
            if clip.media_type != MediaType.VIDEO:
                logger.warning(
                    "[sector=%s] Skipping non-video clip %s (%s)",
                    sector.id,
                    clip.name,
                    clip.media_type,
                )
                continue

            track_count = len(tracks)
            tracks = self._place_clip(clip, tracks, sector.id)
            created += len(tracks) - track_count

        logger.info(
            "[sector=%s] Assigned %d clips (%d new tracks, %d tracks total)",
            sector.id,
            len(clips),
            created,
            len(tracks),
        )
        return sector.model_copy(update={"tracks": tracks})

    def _place_clip(
        self,
        clip: MediaClip,
        tracks: list[Track],
        sector_id: str,
    ) -> list[Track]:
        """Append the clip to the first compatible track or to a new one."""
        camera_id = derive_camera_id(
            clip,
            id_factory=self.id_factory,
            prefix=self.config.camera_id_prefix,
        )
        if resolution_signature(clip) is None:
            logger.info(
                "[sector=%s] Using generated camera ID for %s: %s",
                sector_id,
                clip.name,
                camera_id,
            )

        for position, track in enumerate(tracks):
            if not self._accepts(track, clip, camera_id):
                continue
            tracks[position] = add_clip_to_track(track, clip)
            logger.debug(
                "[sector=%s] Placed %s on existing track %s",
                sector_id,
                clip.name,
                track.name,
            )
            return tracks

        new_track = self._create_track(clip, camera_id, tracks)
        tracks.append(new_track)
        logger.debug(
            "[sector=%s] Placed %s on new track %s (camera=%s)",
            sector_id,
            clip.name,
            new_track.name,
            camera_id,
        )
        return tracks

    def _accepts(self, track: Track, clip: MediaClip, camera_id: str) -> bool:
        """Check whether the track can take the clip without a time conflict."""
        if track.kind != TrackKind.VIDEO or track.camera_id != camera_id:
            return False

        tolerance = self.config.overlap_tolerance_seconds
        return not any(
            clips_conflict(clip, existing, tolerance) for existing in track.clips or []
        )

    def _create_track(
        self,
        clip: MediaClip,
        camera_id: str,
        tracks: list[Track],
    ) -> Track:
        """Create a new camera track holding only the given clip."""
        name = self.camera_label(next_camera_number(tracks))
        track = Track(
            id=self.id_factory(),
            name=name,
            kind=TrackKind.VIDEO,
            index=next_track_index(tracks),
            camera_id=camera_id,
            camera_name=name,
        )
        return add_clip_to_track(track, clip)

    def _default_camera_label(self, number: int) -> str:
        return format_label(self.config.camera_label_template, number=number)

"""SectorBuilder service for grouping discovered files into per-day sectors."""

import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import UTC, date, datetime

from src.media.probe import has_audio_stream, has_video_stream
from src.media.schemas import MediaClip, MediaType
from src.timeline.schemas import Sector, Track, TrackKind
from src.timeline.time_ranges import calculate_time_ranges, clips_conflict
from src.track_assigner.config import TrackAssignerConfig
from src.track_assigner.naming import format_label, next_track_index
from src.track_assigner.service import TrackAssignerService, add_clip_to_track

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(UTC)


def format_sector_date(day: date) -> str:
    """Format a day the way sector names show it, e.g. "January 5, 2026"."""
    return f"{day:%B} {day.day}, {day.year}"


def is_video_file(clip: MediaClip) -> bool:
    """Classify a clip as video: video-typed, with a video stream once probed.

    Audio files with cover art and images also report a video stream, so
    the media type decides first.
    """
    if clip.media_type != MediaType.VIDEO:
        return False
    return clip.probe_data is None or has_video_stream(clip)


def is_audio_file(clip: MediaClip) -> bool:
    """Classify a clip as audio: audio-typed, or a video container with only audio."""
    if clip.media_type == MediaType.AUDIO:
        return True
    if clip.media_type != MediaType.VIDEO or clip.probe_data is None:
        return False
    return not has_video_stream(clip) and has_audio_stream(clip)


class SectorBuilderService:
    """Service for building sectors (one per capture day) from discovered files."""

    def __init__(
        self,
        config: TrackAssignerConfig | None = None,
        track_assigner: TrackAssignerService | None = None,
        sector_label: Callable[[date], str] | None = None,
        audio_label: Callable[[int], str] | None = None,
        id_factory: Callable[[], str] | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        """Initialize the service.

        Args:
            config: Assignment settings. Defaults are used when omitted.
            track_assigner: Engine used for video files.
            sector_label: Renders a sector name for a day.
            audio_label: Renders the label for audio track number N.
            id_factory: Generates audio track ids. Defaults to the
                track assigner's factory.
            clock: Supplies "now" for clips without a start time.
        """
        self.config = config or TrackAssignerConfig()
        self.track_assigner = track_assigner or TrackAssignerService(config=self.config)
        self.sector_label = sector_label or self._default_sector_label
        self.audio_label = audio_label or self._default_audio_label
        self.id_factory = id_factory or self.track_assigner.id_factory
        self.clock = clock

    def create_sectors_from_files(
        self,
        clips: Sequence[MediaClip],
        existing_sectors: Iterable[Sector] = (),
    ) -> list[Sector]:
        """Group files by capture day and lay them out on tracks.

        Video files go through the track assigner; audio files go onto audio
        lanes. An existing sector whose id matches the day is extended,
        otherwise a new empty sector is created for the day.

        Args:
            clips: Discovered files with probe data where available.
            existing_sectors: Sectors from earlier imports.

        Returns:
            The sectors that received files, in ascending day order.
        """
        existing_by_id = {sector.id: sector for sector in existing_sectors}

        video_files = sorted(
            (c for c in clips if is_video_file(c)),
            key=lambda c: c.effective_start_seconds,
        )
        audio_files = sorted(
            (c for c in clips if not is_video_file(c) and is_audio_file(c)),
            key=lambda c: c.effective_start_seconds,
        )

        skipped = len(clips) - len(video_files) - len(audio_files)
        if skipped:
            logger.info("Skipping %d files with neither video nor audio streams", skipped)

        video_by_day = self._group_by_day(video_files)
        audio_by_day = self._group_by_day(audio_files)

        sectors: list[Sector] = []
        for day in sorted(video_by_day.keys() | audio_by_day.keys()):
            day_videos = video_by_day.get(day, [])
            day_audio = audio_by_day.get(day, [])

            sector_id = day.isoformat()
            sector = existing_by_id.get(sector_id) or Sector(
                id=sector_id,
                name=self.sector_label(day),
            )
            logger.info(
                "[sector=%s] Processing %d video and %d audio files (%d existing tracks)",
                sector.id,
                len(day_videos),
                len(day_audio),
                len(sector.tracks),
            )

            if day_videos:
                sector = self.track_assigner.process_video_files(day_videos, sector)
            if day_audio:
                sector = self.process_audio_files(day_audio, sector)

            if not any(track.clips for track in sector.tracks):
                logger.warning("[sector=%s] No files were placed; sector dropped", sector.id)
                continue

            sectors.append(self._refresh_bounds(sector, [*day_videos, *day_audio]))

        return sectors

    def process_audio_files(
        self,
        clips: Sequence[MediaClip],
        sector: Sector,
    ) -> Sector:
        """Place each audio clip on the first audio track without a conflict."""
        tracks = list(sector.tracks)
        tolerance = self.config.overlap_tolerance_seconds

        for clip in clips:
            audio_positions = sorted(
                (i for i, t in enumerate(tracks) if t.kind == TrackKind.AUDIO),
                key=lambda i: tracks[i].index,
            )
            for position in audio_positions:
                track = tracks[position]
                if not any(clips_conflict(clip, c, tolerance) for c in track.clips or []):
                    tracks[position] = add_clip_to_track(track, clip)
                    break
            else:
                number = next_track_index(tracks, kind=TrackKind.AUDIO)
                name = self.audio_label(number)
                new_track = Track(
                    id=self.id_factory(),
                    name=name,
                    kind=TrackKind.AUDIO,
                    index=number,
                )
                tracks.append(add_clip_to_track(new_track, clip))
                logger.debug("[sector=%s] Created audio track %s for %s", sector.id, name, clip.name)

        return sector.model_copy(update={"tracks": tracks})

    def _group_by_day(self, clips: Iterable[MediaClip]) -> dict[date, list[MediaClip]]:
        """Bucket clips by the UTC calendar day of their start time."""
        groups: dict[date, list[MediaClip]] = {}
        for clip in clips:
            if clip.start_time is None:
                day = self.clock().date()
            else:
                day = datetime.fromtimestamp(clip.start_time, tz=UTC).date()
            groups.setdefault(day, []).append(clip)
        return groups

    def _refresh_bounds(self, sector: Sector, day_files: list[MediaClip]) -> Sector:
        """Recompute sector bounds over all clips on all of its tracks."""
        all_clips = [clip for track in sector.tracks for clip in track.clips or []]
        update: dict[str, object] = {"time_ranges": calculate_time_ranges(day_files)}
        if all_clips:
            update["start_time"] = min(c.effective_start_seconds for c in all_clips)
            update["end_time"] = max(c.effective_end_seconds for c in all_clips)
        return sector.model_copy(update=update)

    def _default_sector_label(self, day: date) -> str:
        return format_label(self.config.sector_label_template, date=format_sector_date(day))

    def _default_audio_label(self, number: int) -> str:
        return format_label(self.config.audio_label_template, number=number)

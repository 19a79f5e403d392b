"""Time alignment of two clips around a shared sync point."""

import logging
from typing import Optional, Tuple

from .exceptions import FormatError, ValidationError
from .models import RawClip, TimedClip
from .utils import format_duration, parse_duration

logger = logging.getLogger(__name__)


class ClipAligner:
    """Derives the start/end points of a partial clip from a complete one."""

    def __init__(self, test_duration: Optional[int] = None):
        """
        Initialize ClipAligner.

        Args:
            test_duration: Length of the test window in seconds, or None to
                use the complete clip's own start and end points
        """
        self.test_duration = test_duration

    def align(self, first: RawClip, second: RawClip) -> Tuple[TimedClip, TimedClip]:
        """
        Align two clips.

        Exactly one of the clips must carry both start and end timestamps.
        That clip (A) is returned first regardless of argument order,
        followed by the partial clip (B) whose start and end are derived so
        that both clips have the same time before and after the sync point.

        Args:
            first: First raw clip
            second: Second raw clip

        Returns:
            Tuple of (complete, partial) timed clips

        Raises:
            FormatError: If a timestamp cannot be parsed
            ValidationError: If the clips are not one complete and one
                partial clip, or the resulting bounds are invalid
        """
        raw_a, raw_b = self._identify(first, second)

        start = self._parse(raw_a, 'start', raw_a.start)
        sync = self._parse(raw_a, 'sync', raw_a.sync)
        end = self._parse(raw_a, 'end', raw_a.end)
        sync_b = self._parse(raw_b, 'sync', raw_b.sync)

        if not start <= sync <= end:
            raise ValidationError(
                f"{raw_a.filename}: sync point {raw_a.sync} must lie between "
                f"start {raw_a.start} and end {raw_a.end}"
            )
        if start == end:
            raise ValidationError(
                f"{raw_a.filename}: start and end are both {raw_a.start}; "
                f"the clip has no length"
            )

        if self.test_duration is not None:
            # Short clip centered on the sync point
            half = self.test_duration * 1000 // 2
            start = sync - half
            end = start + self.test_duration * 1000
            logger.debug(f"Test window of {self.test_duration}s around {raw_a.sync}")

        clip_a = TimedClip(
            filename=raw_a.filename,
            start=start,
            sync=sync,
            end=end,
            volume=raw_a.volume,
        )
        clip_b = TimedClip(
            filename=raw_b.filename,
            start=sync_b - clip_a.start_offset,
            sync=sync_b,
            end=sync_b + clip_a.end_offset,
            volume=raw_b.volume,
            derived=True,
        )
        logger.debug(
            f"Offsets: {clip_a.start_offset} ms before sync, "
            f"{clip_a.end_offset} ms after sync"
        )

        for clip in (clip_a, clip_b):
            if clip.start < 0:
                raise ValidationError(
                    f"{clip.filename}: clip would start "
                    f"{format_duration(-clip.start)} before the beginning of "
                    f"the file; move the sync point or the start time"
                )

        return clip_a, clip_b

    @staticmethod
    def _identify(first: RawClip, second: RawClip) -> Tuple[RawClip, RawClip]:
        """Return (complete, partial) raw clips."""
        if first.is_complete and second.is_complete:
            raise ValidationError(
                "Both clips have start and end times; "
                "give start and end for exactly one clip"
            )
        if first.is_complete:
            return first, second
        if second.is_complete:
            return second, first
        raise ValidationError(
            "Neither clip has both start and end times; "
            "give start and end for exactly one clip"
        )

    @staticmethod
    def _parse(clip: RawClip, field: str, text: str) -> int:
        try:
            return parse_duration(text)
        except FormatError as e:
            raise FormatError(f"{clip.filename} ({field}): {e}") from e

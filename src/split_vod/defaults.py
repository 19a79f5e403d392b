"""Default values, option validation and test mode."""

import logging
import random
import re
from dataclasses import replace
from typing import Optional

from .aligner import ClipAligner
from .exceptions import ValidationError
from .models import (
    DEFAULT_OUTPUT_FILE,
    DEFAULT_OUTPUT_HEIGHT,
    DEFAULT_TEST_DURATION,
    DEFAULT_VOLUME,
    LEFT_A,
    LEFT_B,
    LEFT_CHOICES,
    LEFT_EITHER,
    Alignment,
    DisplayClip,
    Options,
    RawClip,
    TimedClip,
)
from .utils import format_duration, shorten_filename

logger = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(r"\d+", re.ASCII)


def build_options(left_video: Optional[str] = None,
                  output_height: Optional[str] = None,
                  test: bool = False,
                  test_duration: Optional[str] = None,
                  output_file: Optional[str] = None) -> Options:
    """
    Build validated Options from raw option values.

    Args:
        left_video: "a", "b" or "ab" (either, chosen at random)
        output_height: Output height in pixels (default: 1080)
        test: Whether to produce a short test encode
        test_duration: Test window in seconds; implies test mode
        output_file: Output filename (default: out.mp4)

    Returns:
        Options object

    Raises:
        ValidationError: If a value is not valid
    """
    left = (left_video or LEFT_EITHER).strip().lower()
    if left not in LEFT_CHOICES:
        raise ValidationError(
            f"Invalid left video: {left_video!r}. "
            f"Choose one of: {', '.join(LEFT_CHOICES)}"
        )

    height = DEFAULT_OUTPUT_HEIGHT if output_height is None else str(output_height).strip()
    if not NUMBER_PATTERN.fullmatch(height) or int(height) == 0:
        raise ValidationError(
            f"The value of --output-height must be numeric, got {output_height!r}"
        )

    duration = None
    if test_duration is not None:
        duration = _parse_positive_int(test_duration, '--test-duration')
    elif test:
        duration = DEFAULT_TEST_DURATION

    return Options(
        left_video=left,
        output_height=str(int(height)),
        test_duration=duration,
        output_file=output_file or DEFAULT_OUTPUT_FILE,
    )


def _parse_positive_int(value, name: str) -> int:
    text = str(value).strip()
    if not NUMBER_PATTERN.fullmatch(text) or int(text) == 0:
        raise ValidationError(
            f"The value of {name} must be a positive whole number, got {value!r}"
        )
    return int(text)


def resolve_options(options: Options, rng: random.Random) -> Options:
    """
    Resolve the "either" placement to a concrete side.

    The random source is queried once; resolved options pass through as is.
    """
    if options.is_resolved:
        return options
    left = rng.choice((LEFT_A, LEFT_B))
    logger.debug(f"Randomly placed clip {left.upper()} on the left")
    return replace(options, left_video=left)


def to_display(clip: TimedClip) -> DisplayClip:
    """Fill in default volume, formatted times and the display filename."""
    return DisplayClip(
        filename=clip.filename,
        short_name=shorten_filename(clip.filename),
        start=clip.start,
        sync=clip.sync,
        end=clip.end,
        volume=clip.volume if clip.volume is not None else DEFAULT_VOLUME,
        start_text=format_duration(clip.start),
        sync_text=format_duration(clip.sync),
        end_text=format_duration(clip.end),
        length_text=format_duration(clip.duration),
        derived=clip.derived,
    )


def prepare(first: RawClip, second: RawClip, options: Options,
            rng: random.Random) -> Alignment:
    """
    Calculate all data needed to render the split video.

    Args:
        first: First raw clip
        second: Second raw clip
        options: Validated options
        rng: Random source used to resolve the left placement

    Returns:
        Alignment ready for the table formatter and the command builder
    """
    resolved = resolve_options(options, rng)
    clip_a, clip_b = ClipAligner(test_duration=resolved.test_duration).align(first, second)
    return Alignment(
        complete=to_display(clip_a),
        partial=to_display(clip_b),
        options=resolved,
    )

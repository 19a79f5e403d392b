"""Utility functions for split-vod."""

import re
from decimal import Decimal
from pathlib import PurePath
from typing import List

from .exceptions import FormatError

# Durations of a second, a minute, an hour and a day in milliseconds.
UNITS = [1000, 60 * 1000, 60 * 60 * 1000, 24 * 60 * 60 * 1000]

# Maximum display length of filenames in the verification table.
FILENAME_BUDGET = 25

ELLIPSIS = "…"


class DurationCodec:
    """Utility class for parsing and formatting DD:HH:MM:SS.mmm durations."""

    DIGITS = re.compile(r'\d+', re.ASCII)

    @classmethod
    def parse(cls, text: str) -> int:
        """
        Parse a duration string to milliseconds.

        Up to four colon separated fields are accepted (seconds, minutes,
        hours, days; least significant last), followed by a mandatory
        millisecond part. The part after the dot is a whole number of
        milliseconds, so "1.5" and "1.005" are both 1005 ms.

        Args:
            text: Duration string, e.g. "3:53:16.082"

        Returns:
            Duration in milliseconds

        Raises:
            FormatError: If the text does not match the expected format

        Examples:
            >>> DurationCodec.parse("3:53:16.082")
            13996082
            >>> DurationCodec.parse("0.500")
            500
        """
        main, dot, fraction = str(text).strip().partition('.')
        if not dot or not cls.DIGITS.fullmatch(fraction):
            raise FormatError(
                f"Invalid duration: {text!r}. "
                f"Expected format: [[[DD:]HH:]MM:]SS.mmm (e.g. 3:53:16.082)"
            )

        fields = main.split(':')
        if len(fields) > len(UNITS):
            raise FormatError(
                f"Invalid duration: {text!r}. "
                f"At most {len(UNITS)} colon separated fields are allowed"
            )
        for field in fields:
            if not cls.DIGITS.fullmatch(field):
                raise FormatError(
                    f"Invalid duration: {text!r}. "
                    f"Field {field!r} is not a number"
                )

        total = sum(
            int(value) * unit
            for value, unit in zip(reversed(fields), UNITS)
        )
        return total + int(fraction)

    @staticmethod
    def format(ms: int) -> str:
        """
        Format milliseconds as a duration string.

        Leading zero fields are omitted, but seconds are always present.

        Examples:
            >>> DurationCodec.format(892728)
            '14:52.728'
            >>> DurationCodec.format(500)
            '0.500'
        """
        if ms < 0:
            raise ValueError(f"Cannot format negative duration: {ms}")

        remainder = int(ms)
        fields: List[int] = []
        for unit in reversed(UNITS):
            value, remainder = divmod(remainder, unit)
            if not fields and value == 0 and unit != UNITS[0]:
                continue
            fields.append(value)

        main = ':'.join(
            f"{value:02d}" if n else str(value)
            for n, value in enumerate(fields)
        )
        return f"{main}.{remainder:03d}"


def parse_duration(text: str) -> int:
    """Convert a DD:HH:MM:SS.mmm duration to milliseconds."""
    return DurationCodec.parse(text)


def format_duration(ms: int) -> str:
    """Convert milliseconds to DD:HH:MM:SS.mmm format."""
    return DurationCodec.format(ms)


def format_seconds(ms: int) -> str:
    """
    Format milliseconds as plain decimal seconds for ffmpeg filter options.

    Examples:
        >>> format_seconds(14000)
        '14'
        >>> format_seconds(891728)
        '891.728'
    """
    return str(Decimal(int(ms)) / Decimal(1000))


def shorten_filename(filename: str, budget: int = FILENAME_BUDGET) -> str:
    """
    Shorten a filename for display by replacing the middle of its stem.

    Args:
        filename: Path or name of the file
        budget: Maximum length of the result

    Returns:
        The file's name, or a shortened name exactly ``budget`` long

    Examples:
        >>> shorten_filename("stream1.mp4")
        'stream1.mp4'
    """
    path = PurePath(filename)
    name, stem, ext = path.name, path.stem, path.suffix
    remainder = budget - len(ext)
    if len(stem) <= remainder:
        return name
    if remainder < 2:
        return name[:budget - 1] + ELLIPSIS

    # Odd characters go to the prefix
    size_a = (remainder + 1) // 2
    size_b = remainder - size_a - 1
    tail = stem[len(stem) - size_b:] if size_b else ''
    return f"{stem[:size_a]}{ELLIPSIS}{tail}{ext}"

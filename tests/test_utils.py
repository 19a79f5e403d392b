"""Tests for utility functions."""

import pytest
import random

from split_vod.exceptions import FormatError
from split_vod.utils import (
    DurationCodec,
    format_duration,
    format_seconds,
    parse_duration,
    shorten_filename,
)

DAY = 24 * 60 * 60 * 1000


class TestDurationCodec:
    """Test DurationCodec utility class."""

    def test_parse_valid_durations(self):
        """Test parsing valid duration strings."""
        test_cases = [
            ("52.728", 52728),
            ("0.000", 0),
            ("14:52.728", 14 * 60000 + 52728),
            ("3:53:16.082", 13996082),
            ("1:00:00:00.000", DAY),
            ("2:03:04:05.006", 2 * DAY + 3 * 3600000 + 4 * 60000 + 5006),
            ("0.5", 5),
            ("0.500", 500),
            ("90.000", 90000),
        ]

        for text, expected in test_cases:
            assert parse_duration(text) == expected

    def test_parse_invalid_durations(self):
        """Test parsing invalid duration strings."""
        invalid = [
            "1:30:45",  # Missing fraction
            "1:30:45.",  # Empty fraction
            "1\n:00.000",  # Newline inside a field
            "1:00.0\n0",
            ".500",  # Missing seconds
            "a:00.000",
            "1::00.000",
            "1:2:3:4:5.000",  # Too many fields
            "-1.000",
            "not a duration",
            "",
        ]

        for text in invalid:
            with pytest.raises(FormatError) as exc_info:
                parse_duration(text)
            assert "Invalid duration" in str(exc_info.value)

    def test_millisecond_part_is_whole_milliseconds(self):
        """Test that the digits after the dot are added as milliseconds."""
        assert parse_duration("1.5") == 1005
        assert parse_duration("1.05") == 1005
        assert parse_duration("1.005") == 1005
        assert parse_duration("1.0005") == 1005
        assert parse_duration("1.1500") == 2500

    def test_format_error_is_value_error(self):
        """Test that FormatError can be caught as ValueError."""
        with pytest.raises(ValueError):
            DurationCodec.parse("12")

    def test_format_durations(self):
        """Test formatting milliseconds."""
        test_cases = [
            (0, "0.000"),
            (500, "0.500"),
            (52728, "52.728"),
            (60000, "1:00.000"),
            (892728, "14:52.728"),
            (3600001, "1:00:00.001"),
            (8804108, "2:26:44.108"),
            (DAY, "1:00:00:00.000"),
            (DAY + 61000, "1:00:01:01.000"),
        ]

        for ms, expected in test_cases:
            assert format_duration(ms) == expected

    def test_format_negative_duration(self):
        """Test that negative durations are rejected."""
        with pytest.raises(ValueError):
            format_duration(-1)

    def test_roundtrip(self):
        """Test that parse and format are inverse operations."""
        rng = random.Random(1234)
        samples = [0, 1, 999, 1000, 59999, 60000, 3599999, DAY - 1, DAY, 100 * DAY - 1]
        samples.extend(rng.randrange(100 * DAY) for _ in range(2000))

        for ms in samples:
            assert parse_duration(format_duration(ms)) == ms

    def test_format_seconds(self):
        """Test plain seconds for ffmpeg filters."""
        assert format_seconds(14000) == "14"
        assert format_seconds(891728) == "891.728"
        assert format_seconds(1500) == "1.5"
        assert format_seconds(0) == "0"


class TestShortenFilename:
    """Test filename shortening for the table."""

    def test_short_name_untouched(self):
        assert shorten_filename("abcdefghij.mp4") == "abcdefghij.mp4"

    def test_long_name_fits_budget(self):
        stem = "abcdefghijklmnopqrstuvwxyz0123456789ABCD"
        assert len(stem) == 40

        result = shorten_filename(stem + ".mp4")

        assert len(result) == 25
        assert result == stem[:11] + "…" + stem[-9:] + ".mp4"

    def test_even_split(self):
        """Test that the prefix gets the odd character."""
        stem = "x" * 30
        result = shorten_filename(stem + ".mkv1")  # 20 characters for the stem

        assert len(result) == 25
        assert result.index("…") == 10

    def test_exact_budget_untouched(self):
        name = "a" * 21 + ".mp4"
        assert shorten_filename(name) == name

    def test_directory_dropped(self):
        assert shorten_filename("/videos/day1/stream.mp4") == "stream.mp4"

    def test_custom_budget(self):
        result = shorten_filename("recording-from-tuesday.mp4", budget=12)
        assert len(result) == 12
        assert result.endswith(".mp4")

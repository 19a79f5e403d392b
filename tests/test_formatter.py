"""Tests for the verification table."""

import pytest
import random

from rich.text import Text

from split_vod.defaults import prepare
from split_vod.formatter import COMPUTED, FILENAME, TESTING, TableFormatter
from split_vod.models import Options, RawClip

SEPARATOR = "-" * 25 + "-+-" + "-" * 64


def make_alignment(**options):
    return prepare(
        RawClip(filename="s1.mp4", sync="3:53:16.082",
                start="3:50:59.214", end="4:05:51.942", volume="0.2"),
        RawClip(filename="s2.mp4", sync="2:29:00.976"),
        Options(**options),
        random.Random(0),
    )


def styled(text: Text, style: str):
    """Return the pieces of text carrying a style."""
    return [text.plain[span.start:span.end] for span in text.spans if span.style == style]


class TestTableFormatter:
    """Test TableFormatter class."""

    @pytest.fixture
    def marked(self):
        return TableFormatter(marks=True)

    def test_layout(self, marked):
        lines = marked.render(make_alignment(left_video="a")).plain.split("\n")

        assert lines[0] == (
            "Input files:".ljust(25) + " | " + "Start:".ljust(14) + "Sync:".ljust(14)
            + "End:".ljust(14) + "Length:".ljust(14) + "Volume:"
        )
        assert lines[1] == SEPARATOR
        assert lines[4] == SEPARATOR
        assert len(lines) == 6

    def test_rows(self, marked):
        lines = marked.render(make_alignment(left_video="a")).plain.split("\n")

        assert lines[2] == (
            "s1.mp4".ljust(25) + " | " + "3:50:59.214".ljust(14)
            + "3:53:16.082".ljust(14) + "4:05:51.942".ljust(14)
            + "14:52.728*".ljust(14) + "0.2"
        )
        assert lines[3] == (
            "s2.mp4".ljust(25) + " | " + "2:26:44.108*".ljust(14)
            + "2:29:00.976".ljust(14) + "2:41:36.836*".ljust(14)
            + "14:52.728*".ljust(14) + "0.8"
        )

    def test_rows_follow_placement(self, marked):
        lines = marked.render(make_alignment(left_video="b")).plain.split("\n")

        assert lines[2].startswith("s2.mp4")
        assert lines[3].startswith("s1.mp4")

    def test_legend_with_marks(self, marked):
        table = marked.render(make_alignment(left_video="a")).plain
        assert table.endswith("* computed from the sync points")

    def test_no_test_row_by_default(self, marked):
        assert "Testing duration" not in marked.render(make_alignment(left_video="a")).plain

    def test_test_row(self, marked):
        lines = marked.render(
            make_alignment(left_video="a", test_duration=15)).plain.split("\n")

        assert lines[5] == (
            "Testing duration".ljust(25) + " | " + " " * 42 + "15.000*"
        )

    def test_styles(self):
        table = TableFormatter().render(make_alignment(left_video="a"))

        assert styled(table, FILENAME) == ["s1.mp4".ljust(25), "s2.mp4".ljust(25)]
        computed = [piece.strip() for piece in styled(table, COMPUTED)]
        assert computed == ["14:52.728", "2:26:44.108", "2:41:36.836", "14:52.728"]
        # User supplied values are not highlighted
        assert "3:50:59.214" not in "".join(computed)
        assert "2:29:00.976" not in "".join(computed)
        assert "*" not in table.plain

    def test_styles_test_row(self):
        table = TableFormatter().render(make_alignment(left_video="a", test_duration=15))

        assert styled(table, TESTING) == ["Testing duration".ljust(25)]
        assert styled(table, COMPUTED)[-1].strip() == "15.000"

    def test_long_filename_shortened(self, marked):
        alignment = prepare(
            RawClip(filename="a" * 40 + ".mp4", sync="1:00.000",
                    start="0.000", end="2:00.000"),
            RawClip(filename="b.mp4", sync="2:00.000"),
            Options(left_video="a"),
            random.Random(0),
        )

        lines = marked.render(alignment).plain.split("\n")

        assert lines[2][25:28] == " | "
        assert "…" in lines[2]

"""Data models for split-vod."""

from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_VOLUME = "0.8"
DEFAULT_OUTPUT_HEIGHT = "1080"
DEFAULT_TEST_DURATION = 15
DEFAULT_OUTPUT_FILE = "out.mp4"

# Placement values: the complete clip (a), the partial clip (b), or either.
LEFT_A = "a"
LEFT_B = "b"
LEFT_EITHER = "ab"
LEFT_CHOICES = (LEFT_A, LEFT_B, LEFT_EITHER)


@dataclass(frozen=True)
class RawClip:
    """A clip as given on the command line, with timestamps as text."""
    filename: str
    sync: str
    start: Optional[str] = None
    end: Optional[str] = None
    volume: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        """Whether both start and end timestamps were supplied."""
        return self.start is not None and self.end is not None


@dataclass(frozen=True)
class TimedClip:
    """A clip with start, sync and end points in milliseconds."""
    filename: str
    start: int
    sync: int
    end: int
    volume: Optional[str] = None
    derived: bool = False

    @property
    def duration(self) -> int:
        return self.end - self.start

    @property
    def start_offset(self) -> int:
        """Time between the start and the sync point."""
        return self.sync - self.start

    @property
    def end_offset(self) -> int:
        """Time between the sync point and the end."""
        return self.end - self.sync


@dataclass(frozen=True)
class DisplayClip:
    """A fully populated clip, ready for the table and the encode command."""
    filename: str
    short_name: str
    start: int
    sync: int
    end: int
    volume: str
    start_text: str
    sync_text: str
    end_text: str
    length_text: str
    derived: bool = False

    @property
    def duration(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Options:
    """User options controlling layout and test encodes."""
    left_video: str = LEFT_EITHER
    output_height: str = DEFAULT_OUTPUT_HEIGHT
    test_duration: Optional[int] = None
    output_file: str = DEFAULT_OUTPUT_FILE

    @property
    def is_test(self) -> bool:
        return self.test_duration is not None

    @property
    def is_resolved(self) -> bool:
        return self.left_video != LEFT_EITHER


@dataclass(frozen=True)
class Alignment:
    """Both display clips together with the resolved options."""
    complete: DisplayClip
    partial: DisplayClip
    options: Options

    @property
    def complete_on_left(self) -> bool:
        return self.options.left_video == LEFT_A

    @property
    def ordered(self) -> Tuple[DisplayClip, DisplayClip]:
        """The clips in left-to-right order."""
        if self.complete_on_left:
            return self.complete, self.partial
        return self.partial, self.complete

    @property
    def left(self) -> DisplayClip:
        return self.ordered[0]

    @property
    def right(self) -> DisplayClip:
        return self.ordered[1]

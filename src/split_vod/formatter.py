"""Verification table comparing both clips."""

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from rich.text import Text

from .models import Alignment, DisplayClip
from .utils import FILENAME_BUDGET, format_duration

# Styles for computed values, file names and the test window label
COMPUTED = "cyan"
FILENAME = "green"
TESTING = "yellow"

# Marks computed values when colour is disabled
DERIVED_MARK = "*"

# (title, width, is_bar)
COLUMNS: List[Tuple[Optional[str], int, bool]] = [
    ("Input files:", FILENAME_BUDGET, False),
    (None, 3, True),
    ("Start:", 14, False),
    ("Sync:", 14, False),
    ("End:", 14, False),
    ("Length:", 14, False),
    ("Volume:", 8, False),
]


@dataclass
class Cell:
    """A table value with an optional highlight style."""
    text: str
    style: Optional[str] = None
    derived: bool = False


class TableFormatter:
    """Renders the fixed-width verification table."""

    def __init__(self, marks: bool = False):
        """
        Initialize TableFormatter.

        Args:
            marks: Also mark computed values with an asterisk, for output
                that is not coloured
        """
        self.marks = marks

    def render(self, alignment: Alignment) -> Text:
        """
        Return the table for an alignment as styled rich text.

        Values computed from the sync points are highlighted: the length of
        the complete clip and the start, end and length of the partial clip.
        The test window row is only shown in test mode.
        """
        separator = Text(''.join('-+-' if is_bar else '-' * width
                                 for _, width, is_bar in COLUMNS))
        lines = [
            Text(''.join((title or ' | ').ljust(width) for title, width, _ in COLUMNS)),
            separator,
        ]
        for clip in (alignment.left, alignment.right):
            lines.append(self._row(self._clip_cells(clip)))
        lines.append(separator.copy())

        options = alignment.options
        if options.is_test:
            lines.append(self._row([
                Cell("Testing duration", TESTING),
                Cell(''),
                Cell(''),
                Cell(''),
                Cell(format_duration(options.test_duration * 1000), COMPUTED, derived=True),
            ]))
        if self.marks:
            lines.append(Text(f"{DERIVED_MARK} computed from the sync points"))

        for line in lines:
            line.rstrip()
        return Text('\n').join(lines)

    @staticmethod
    def _clip_cells(clip: DisplayClip) -> List[Cell]:
        derived = clip.derived
        return [
            Cell(clip.short_name, FILENAME),
            Cell(clip.start_text, COMPUTED if derived else None, derived),
            Cell(clip.sync_text),
            Cell(clip.end_text, COMPUTED if derived else None, derived),
            Cell(clip.length_text, COMPUTED, derived=True),
            Cell(clip.volume),
        ]

    def _row(self, cells: Sequence[Cell]) -> Text:
        """Lay out cells into the value columns, inserting the bar."""
        values = [col for col in COLUMNS if not col[2]]
        row = Text()
        for n, (cell, (_, width, _)) in enumerate(zip(cells, values)):
            if n == 1:
                row.append(' | ')
            text = cell.text
            if cell.derived and self.marks:
                text += DERIVED_MARK
            row.append(text.ljust(width), style=cell.style)
        return row

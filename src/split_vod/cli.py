"""Command-line interface for split-vod."""

import sys
import logging
import random
from typing import List, Optional
import argparse

from rich.console import Console

from . import __version__, __description__
from .commands import EncodeCommandBuilder
from .defaults import build_options, prepare
from .exceptions import SplitVodError, ValidationError
from .formatter import TableFormatter
from .models import RawClip

logger = logging.getLogger(__name__)


class SplitVod:
    """Main application class for generating split video commands."""

    def __init__(self, args: argparse.Namespace):
        """
        Initialize SplitVod.

        Args:
            args: Parsed command-line arguments
        """
        self.args = args
        self.rng = random.Random(getattr(args, 'seed', None))
        # Colour is off for --no-color, NO_COLOR or when stdout is not a terminal
        self.console = Console(
            highlight=False,
            no_color=True if getattr(args, 'no_color', False) else None,
        )
        self.formatter = TableFormatter(marks=not self.use_color)
        self.builder = EncodeCommandBuilder()

    @property
    def use_color(self) -> bool:
        return self.console.color_system is not None and not self.console.no_color

    def run(self) -> int:
        """
        Execute the main workflow.

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        try:
            first = self._make_clip(self.args.a, '-a')
            second = self._make_clip(self.args.b, '-b')
            options = build_options(
                left_video=self.args.left_video,
                output_height=self.args.output_height,
                test=self.args.test,
                test_duration=self.args.test_duration,
                output_file=self.args.output,
            )

            alignment = prepare(first, second, options, self.rng)
            commands = self.builder.build(alignment)

            if options.is_test:
                logger.info(f"Test encode: {options.test_duration}s around the sync points")

            if not self.args.quiet:
                self.console.print(self.formatter.render(alignment), soft_wrap=True)
                self.console.print()
            for cmd in commands:
                self.console.out(self.builder.render(cmd))

            return 0

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user.")
            return 130
        except SplitVodError as e:
            logger.error(f"Error: {e}")
            if self.args.verbose:
                logger.exception("Detailed error information:")
            return 1

    @staticmethod
    def _make_clip(values: List[str], flag: str) -> RawClip:
        """
        Build a RawClip from the values given to -a or -b.

        Two or three values describe a clip with only a sync point
        (FILE SYNC [VOL]); four or five values also give its start and end
        (FILE SYNC START END [VOL]).
        """
        if len(values) in (2, 3):
            filename, sync, *rest = values
            return RawClip(filename=filename, sync=sync,
                           volume=rest[0] if rest else None)
        if len(values) in (4, 5):
            filename, sync, start, end, *rest = values
            return RawClip(filename=filename, sync=sync, start=start, end=end,
                           volume=rest[0] if rest else None)
        raise ValidationError(
            f"{flag} expects FILE SYNC [VOL] or FILE SYNC START END [VOL], "
            f"got {len(values)} values"
        )


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog='split-vod',
        description=__description__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -a stream1.mp4 3:53:16.082 3:50:59.214 4:05:51.942 0.2 \\
           -b stream2.mp4 2:29:00.976 0.8
  %(prog)s -a stream1.mp4 3:53:16.082 3:50:59.214 4:05:51.942 \\
           -b stream2.mp4 2:29:00.976 --test
  %(prog)s -a stream1.mp4 3:53:16.082 -b stream2.mp4 2:29:00.976 2:26:00.000 2:40:00.000

Timestamp format:
  [[[DD:]HH:]MM:]SS.mmm, e.g. 3:53:16.082 or 52.728

Exactly one clip must have START and END; the other clip's start and end
are calculated from the sync points. Times in cyan (or marked with *) are
calculated.
        """
    )

    # Clips
    parser.add_argument('-a',
                       nargs='+',
                       required=True,
                       metavar='ARG',
                       help='FILE SYNC [START END] [VOL] for video A')
    parser.add_argument('-b',
                       nargs='+',
                       required=True,
                       metavar='ARG',
                       help='FILE SYNC [START END] [VOL] for video B')

    # Layout
    parser.add_argument('--left-video',
                       default='ab',
                       type=str.lower,
                       choices=['a', 'b', 'ab'],
                       help='whether A or B is on the left side (default: ab, random)')
    parser.add_argument('--output-height',
                       metavar='PIXELS',
                       help='height of the output video (default: 1080)')
    parser.add_argument('-o', '--output',
                       help='output filename (default: out.mp4)')
    parser.add_argument('--seed',
                       type=int,
                       help='seed for the random left/right placement')

    # Test encodes
    parser.add_argument('--test',
                       action='store_true',
                       help='only encode a short window around the sync point (default: 15 secs)')
    parser.add_argument('--test-duration',
                       metavar='SECONDS',
                       help='length of the test window; implies --test')

    # Output control
    parser.add_argument('--no-color',
                       action='store_true',
                       help='do not colour the table')
    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument('-q', '--quiet',
                            action='store_true',
                            help='only print the encode command')
    output_group.add_argument('-v', '--verbose',
                            action='store_true',
                            help='show detailed output')

    # Version
    parser.add_argument('--version',
                       action='version',
                       version=f'%(prog)s {__version__}')

    return parser


def setup_logging(quiet: bool, verbose: bool):
    """Configure logging based on verbosity settings."""
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    # Configure root logger
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        if verbose else '%(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True
    )


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Configure logging
    setup_logging(args.quiet, args.verbose)

    # Run application
    app = SplitVod(args)
    sys.exit(app.run())


if __name__ == "__main__":
    main()

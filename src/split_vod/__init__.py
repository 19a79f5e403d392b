"""
split-vod

A command-line tool that aligns two recordings of the same event on a shared
sync point and prints the ffmpeg command that renders them side by side.
"""

# Version information
__version__ = "0.1.0"
__author__ = "Your Name"
__email__ = "your.email@example.com"

# Package metadata
__title__ = "split-vod"
__description__ = "Generate ffmpeg commands for side-by-side videos synchronized on a shared timestamp"
__url__ = "https://github.com/yourusername/split-vod"
__license__ = "MIT"
__copyright__ = "Copyright 2024 Your Name"

# Import main components
from .exceptions import SplitVodError, FormatError, ValidationError
from .models import RawClip, TimedClip, DisplayClip, Options, Alignment
from .utils import DurationCodec, parse_duration, format_duration, shorten_filename
from .aligner import ClipAligner
from .defaults import build_options, resolve_options, to_display, prepare
from .formatter import TableFormatter
from .commands import EncodeCommandBuilder

# Public API
__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__title__",
    "__description__",
    "__url__",
    "__license__",
    "__copyright__",

    # Errors
    "SplitVodError",
    "FormatError",
    "ValidationError",

    # Models
    "RawClip",
    "TimedClip",
    "DisplayClip",
    "Options",
    "Alignment",

    # Core
    "DurationCodec",
    "parse_duration",
    "format_duration",
    "shorten_filename",
    "ClipAligner",
    "build_options",
    "resolve_options",
    "to_display",
    "prepare",
    "TableFormatter",
    "EncodeCommandBuilder",
]

# Convenience imports for CLI
try:
    from .cli import SplitVod, main
    __all__.extend(["SplitVod", "main"])
except ImportError:
    # CLI might not be available in all contexts
    pass

"""Exceptions raised by split-vod."""


class SplitVodError(ValueError):
    """Base class for all errors reported to the user."""


class FormatError(SplitVodError):
    """Timestamp text does not match the DD:HH:MM:SS.mmm grammar."""


class ValidationError(SplitVodError):
    """Clip descriptors or option values are inconsistent."""

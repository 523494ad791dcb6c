"""
Error types for VTTStitch.

Every failure in the merge pipeline is fatal for the whole run; these
exceptions carry the reason up to the caller (or the CLI) unchanged.
"""


class VTTStitchError(Exception):
    """Base error for the VTTStitch merge pipeline."""


class UsageError(VTTStitchError):
    """Raised when the command line is invoked with the wrong arguments."""


class MalformedHeaderError(VTTStitchError, ValueError):
    """Raised when a VTT file does not start with a WEBVTT line."""


class MalformedCueError(VTTStitchError, ValueError):
    """Raised when a cue block has no '-->' timing arrow."""


class MalformedTimestampError(VTTStitchError, ValueError):
    """Raised when a timestamp is not in HH:MM:SS.mmm format."""


class MalformedTimestampMapError(VTTStitchError, ValueError):
    """Raised when an X-TIMESTAMP-MAP value cannot be interpreted."""


class UnsupportedLocalOffsetError(VTTStitchError, ValueError):
    """Raised when an X-TIMESTAMP-MAP has a LOCAL time other than zero."""


class InvalidOffsetError(VTTStitchError, ValueError):
    """Raised when a timestamp would be shifted backwards."""


class TimestampOverflowError(VTTStitchError, OverflowError):
    """Raised when a shifted timestamp would cross 24:00:00.000."""


class SegmentEncodingError(VTTStitchError, ValueError):
    """Raised when a segment file is not valid UTF-8."""

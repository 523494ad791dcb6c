"""
VTTStitch - WebVTT Segment Merger

Merges the WebVTT subtitle segments of an HLS/DASH stream into a single,
continuous VTT track suitable for playback with the stitched media file.

Features:
- Parse and re-encode WebVTT files with header metadata preserved
- Rebase each segment with its X-TIMESTAMP-MAP (90kHz MPEGTS) header
- Merge all segments of a directory into one chronologically sorted file

Example usage:
    >>> from vttstitch import merge_directory
    >>>
    >>> merged = merge_directory("segments", "merged.vtt")
    >>> print(f"Merged {len(merged.cues)} cues")
"""

import logging

__version__ = "0.1.0"
__author__ = "VTTStitch Contributors"
__license__ = "MIT"

# Add NullHandler to prevent "No handler found" warnings
# Users should configure logging in their application if they want to see logs
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Timestamp utilities
from .utils import (
    timestamp_to_milliseconds,
    milliseconds_to_timestamp,
    shift_timestamp,
    compare_timestamps,
    timestamp_sort_key,
)

# Parsing and encoding
from .parser import parse_vtt_document, parse_vtt_file
from .encoder import format_vtt_cue, format_vtt_document, write_vtt_document

# Timestamp correction
from .corrector import parse_timestamp_map, calculate_timestamp_offset, apply_timestamp_map

# Merging
from .merger import (
    VTTMerger,
    list_segment_files,
    read_segments,
    merge_documents,
    merge_directory,
    merge_from_config,
)

# Data models
from .models import VTTCue, VTTDocument, TimestampMap, MergeConfig

# Errors
from .exceptions import (
    VTTStitchError,
    UsageError,
    MalformedHeaderError,
    MalformedCueError,
    MalformedTimestampError,
    MalformedTimestampMapError,
    UnsupportedLocalOffsetError,
    InvalidOffsetError,
    TimestampOverflowError,
    SegmentEncodingError,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",

    # Timestamp utilities
    "timestamp_to_milliseconds",
    "milliseconds_to_timestamp",
    "shift_timestamp",
    "compare_timestamps",
    "timestamp_sort_key",

    # Parsing and encoding
    "parse_vtt_document",
    "parse_vtt_file",
    "format_vtt_cue",
    "format_vtt_document",
    "write_vtt_document",

    # Timestamp correction
    "parse_timestamp_map",
    "calculate_timestamp_offset",
    "apply_timestamp_map",

    # Merging
    "VTTMerger",
    "list_segment_files",
    "read_segments",
    "merge_documents",
    "merge_directory",
    "merge_from_config",

    # Models
    "VTTCue",
    "VTTDocument",
    "TimestampMap",
    "MergeConfig",

    # Errors
    "VTTStitchError",
    "UsageError",
    "MalformedHeaderError",
    "MalformedCueError",
    "MalformedTimestampError",
    "MalformedTimestampMapError",
    "UnsupportedLocalOffsetError",
    "InvalidOffsetError",
    "TimestampOverflowError",
    "SegmentEncodingError",
]

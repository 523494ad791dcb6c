"""
Timestamp correction utilities for VTTStitch.

HLS/DASH subtitle segments restart their clock at zero and record where they
sit on the media timeline in an X-TIMESTAMP-MAP header, e.g.
``X-TIMESTAMP-MAP=LOCAL:00:00:00.000,MPEGTS:900000``. This module reads that
header and moves the segment's cues onto the global timeline.
"""

import logging
from typing import Optional

from .exceptions import MalformedTimestampMapError, UnsupportedLocalOffsetError
from .models import TimestampMap, VTTDocument
from .utils import shift_timestamp

logger = logging.getLogger(__name__)

TIMESTAMP_MAP_KEY = "X-TIMESTAMP-MAP"
ZERO_LOCAL_TIME = "00:00:00.000"
MPEGTS_CLOCK_HZ = 90000


def parse_timestamp_map(value: str) -> TimestampMap:
    """
    Parse an X-TIMESTAMP-MAP value.

    The value is a comma-separated list of NAME:VALUE pairs; only the first
    colon separates name from value, so LOCAL keeps its full HH:MM:SS.mmm.

    Args:
        value: Header value, e.g. "LOCAL:00:00:00.000,MPEGTS:900000"

    Returns:
        TimestampMap with whichever of LOCAL and MPEGTS were present

    Raises:
        MalformedTimestampMapError: If MPEGTS is not an integer

    Example:
        >>> parse_timestamp_map("LOCAL:00:00:00.000,MPEGTS:180000")
        TimestampMap(local='00:00:00.000', mpegts=180000)
    """
    fields = {}
    for item in value.split(","):
        name, _, field_value = item.partition(":")
        fields[name.strip()] = field_value.strip()

    mpegts: Optional[int] = None
    if fields.get("MPEGTS"):
        try:
            mpegts = int(fields["MPEGTS"])
        except ValueError:
            raise MalformedTimestampMapError(f"Invalid MPEGTS value: {fields['MPEGTS']!r}") from None

    return TimestampMap(local=fields.get("LOCAL") or None, mpegts=mpegts)


def calculate_timestamp_offset(timestamp_map: TimestampMap) -> float:
    """
    Convert a timestamp map's 90kHz MPEGTS value to a millisecond offset.

    Args:
        timestamp_map: Parsed X-TIMESTAMP-MAP

    Returns:
        Offset in milliseconds (0 when MPEGTS is missing)

    Example:
        >>> calculate_timestamp_offset(TimestampMap(mpegts=900000))
        10000.0
    """
    if timestamp_map.mpegts is None:
        return 0.0
    return timestamp_map.mpegts / MPEGTS_CLOCK_HZ * 1000


def apply_timestamp_map(document: VTTDocument) -> float:
    """
    Rebase a document's cues onto the global timeline, in place.

    The X-TIMESTAMP-MAP header is always removed from the document's
    metadata once read.

    Args:
        document: Parsed segment; its cues and metadata are modified

    Returns:
        Offset applied in milliseconds (0 if nothing was shifted)

    Raises:
        UnsupportedLocalOffsetError: If LOCAL is present and not 00:00:00.000
        InvalidOffsetError: If MPEGTS is negative
    """
    raw_map = document.metadata.get(TIMESTAMP_MAP_KEY)
    if raw_map is None:
        return 0.0

    timestamp_map = parse_timestamp_map(raw_map) if raw_map else TimestampMap()
    if timestamp_map.local and timestamp_map.local != ZERO_LOCAL_TIME:
        raise UnsupportedLocalOffsetError(f"Unexpected LOCAL: {timestamp_map.local}")

    del document.metadata[TIMESTAMP_MAP_KEY]

    offset_ms = calculate_timestamp_offset(timestamp_map)
    if not offset_ms:
        return 0.0

    logger.debug(f"Shifting {len(document.cues)} cues by {offset_ms:.3f}ms")
    for cue in document.cues:
        cue.start = shift_timestamp(cue.start, offset_ms)
        cue.end = shift_timestamp(cue.end, offset_ms)

    return offset_ms

"""
Data models for VTTStitch.

Defines the core data structures used throughout the package.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class VTTCue:
    """Represents a single VTT cue with its timing line and payload rows."""
    start: str  # HH:MM:SS.mmm
    end: str    # HH:MM:SS.mmm
    styles: str = ""
    rows: List[str] = field(default_factory=list)


@dataclass
class VTTDocument:
    """Represents a complete VTT file: header metadata plus ordered cues."""
    metadata: Dict[str, str] = field(default_factory=dict)
    cues: List[VTTCue] = field(default_factory=list)


@dataclass(frozen=True)
class TimestampMap:
    """Parsed X-TIMESTAMP-MAP header (LOCAL time and 90kHz MPEGTS clock)."""
    local: Optional[str] = None
    mpegts: Optional[int] = None


@dataclass
class MergeConfig:
    """Configuration for merging a directory of VTT segments."""
    input_dir: str
    output_file: str
    max_workers: Optional[int] = None

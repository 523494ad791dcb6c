"""
VTT segment merging for VTTStitch.

Combines a directory of HLS/DASH subtitle segments into a single VTT file:
every segment is read and parsed, moved onto the global timeline using its
X-TIMESTAMP-MAP header, and all cues are sorted by start time. Any bad
segment aborts the whole merge before the output file is touched.
"""

import logging
import os
import re
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from .corrector import apply_timestamp_map
from .encoder import format_vtt_document, write_vtt_document
from .exceptions import SegmentEncodingError
from .models import MergeConfig, VTTCue, VTTDocument
from .parser import parse_vtt_document
from .utils import timestamp_sort_key

logger = logging.getLogger(__name__)

SEGMENT_FILENAME_RE = re.compile(r"^[^.]+\.vtt$")


def _read_text(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise SegmentEncodingError(f"{path} is not valid UTF-8: {e}") from e


def list_segment_files(input_dir: str) -> List[str]:
    """
    List segment files in a directory, sorted by filename.

    Only names made of a single dot-free stem plus ``.vtt`` are picked up,
    so ``seg1.vtt`` matches while ``seg1.en.vtt`` and ``.vtt`` do not.

    Args:
        input_dir: Directory containing VTT segments

    Returns:
        Full paths of matching files in lexicographic filename order
    """
    names = sorted(name for name in os.listdir(input_dir) if SEGMENT_FILENAME_RE.match(name))
    logger.info(f"Found {len(names)} VTT segments in {input_dir}")
    return [os.path.join(input_dir, name) for name in names]


def read_segments(paths: List[str], max_workers: Optional[int] = None) -> List[str]:
    """
    Read segment files in parallel.

    Args:
        paths: Files to read
        max_workers: Thread pool size (default: executor default)

    Returns:
        File contents in the same order as paths
    """
    if not paths:
        return []
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        contents = list(executor.map(_read_text, paths))

    logger.info(f"Read {len(contents)} segments")
    return contents


def merge_documents(documents: Iterable[VTTDocument]) -> VTTDocument:
    """
    Merge parsed segments into one chronologically ordered document.

    Segments without cues are dropped before their timestamp map is read.
    Every other document is corrected in place, then all cues are
    concatenated in input order and sorted by start time. The sort is
    stable, so cues starting together keep their input order.

    Args:
        documents: Parsed segments, in filename order

    Returns:
        New VTTDocument with empty metadata and all cues
    """
    cues: List[VTTCue] = []
    for index, document in enumerate(documents):
        if not document.cues:
            logger.info(f"Skipping empty segment #{index}")
            continue

        offset_ms = apply_timestamp_map(document)
        if offset_ms:
            logger.info(f"Applied {offset_ms / 1000:.3f}s offset to segment #{index}")
        cues.extend(document.cues)

    cues.sort(key=lambda cue: timestamp_sort_key(cue.start))
    return VTTDocument(metadata={}, cues=cues)


def merge_directory(input_dir: str, output_file: str, max_workers: Optional[int] = None) -> VTTDocument:
    """
    Merge every VTT segment in a directory into a single file.

    Args:
        input_dir: Directory containing the segments
        output_file: Path of the merged VTT file (overwritten)
        max_workers: Thread pool size for reading files

    Returns:
        The merged VTTDocument that was written

    Example:
        >>> merged = merge_directory("segments", "merged.vtt")
        >>> print(f"Merged {len(merged.cues)} cues")
    """
    paths = list_segment_files(input_dir)
    contents = read_segments(paths, max_workers=max_workers)

    documents = []
    for path, content in zip(paths, contents):
        try:
            documents.append(parse_vtt_document(content))
        except ValueError as e:
            logger.error(f"Failed to parse {path}: {e}")
            raise

    if not documents:
        logger.warning(f"No VTT segments in {input_dir}, writing an empty file")

    merged = merge_documents(documents)
    write_vtt_document(merged, output_file)
    return merged


def merge_from_config(config: MergeConfig) -> VTTDocument:
    """Merge a directory of segments using a MergeConfig object."""
    return merge_directory(
        input_dir=config.input_dir,
        output_file=config.output_file,
        max_workers=config.max_workers,
    )


class VTTMerger:
    """
    Incremental merger for VTT segments.

    Useful when segments arrive one by one instead of as a directory. Cues
    are corrected as each segment is added and sorted when the merged
    result is requested.
    """

    def __init__(self):
        """Initialize VTT merger."""
        self.cues: List[VTTCue] = []

    def add_document(self, document: VTTDocument) -> int:
        """
        Add cues from a parsed segment. The document is modified in place.

        Args:
            document: Parsed VTT segment

        Returns:
            Number of cues added
        """
        if not document.cues:
            return 0
        apply_timestamp_map(document)
        self.cues.extend(document.cues)
        return len(document.cues)

    def add_from_content(self, vtt_content: str) -> int:
        """
        Add cues from VTT content string.

        Args:
            vtt_content: VTT content as string

        Returns:
            Number of cues added
        """
        count = self.add_document(parse_vtt_document(vtt_content))
        logger.info(f"Added {count} cues from content")
        return count

    def add_from_file(self, vtt_path: str) -> int:
        """
        Add cues from a VTT file.

        Args:
            vtt_path: Path to VTT file

        Returns:
            Number of cues added
        """
        try:
            count = self.add_document(parse_vtt_document(_read_text(vtt_path)))
        except (OSError, ValueError) as e:
            logger.error(f"Failed to add cues from {vtt_path}: {e}")
            raise

        logger.info(f"Added {count} cues from {vtt_path}")
        return count

    def get_merged_document(self) -> VTTDocument:
        """Get the merged cues as a chronologically sorted document."""
        cues = sorted(self.cues, key=lambda cue: timestamp_sort_key(cue.start))
        return VTTDocument(metadata={}, cues=cues)

    def get_merged_content(self) -> str:
        """
        Get the merged VTT content.

        Returns:
            Formatted VTT content with all merged cues
        """
        return format_vtt_document(self.get_merged_document())

    def save(self, output_path: str) -> None:
        """
        Save merged VTT content to file.

        Args:
            output_path: Path to save the merged VTT file
        """
        write_vtt_document(self.get_merged_document(), output_path)

    def clear(self) -> None:
        """Clear all stored cues."""
        self.cues = []

    def get_cue_count(self) -> int:
        """Get the number of cues currently stored."""
        return len(self.cues)

"""
VTT parser for VTTStitch.

Turns raw WebVTT text into a VTTDocument. Blocks are separated by a blank
line; the first block is the header and every later block is one cue.
"""

import logging
from typing import Dict, List

from .exceptions import MalformedCueError, MalformedHeaderError
from .models import VTTCue, VTTDocument

logger = logging.getLogger(__name__)

HEADER_LINE = "WEBVTT"
TIMING_ARROW = "-->"
BLOCK_SEPARATOR = "\n\n"


def _parse_header(block: str) -> Dict[str, str]:
    lines = block.split("\n")
    if lines[0] != HEADER_LINE:
        raise MalformedHeaderError(f"Missing header: expected {HEADER_LINE!r}, got {lines[0]!r}")

    metadata: Dict[str, str] = {}
    for line in lines[1:]:
        if not line:
            continue
        name, _, value = line.partition("=")
        metadata[name] = value
    return metadata


def _parse_cue(lines: List[str]) -> VTTCue:
    tokens = lines[0].split()
    if len(tokens) < 3 or tokens[1] != TIMING_ARROW:
        raise MalformedCueError(f"Missing {TIMING_ARROW!r} in cue timing line: {lines[0]!r}")

    start, _, end, *styles = tokens
    return VTTCue(start=start, end=end, styles=" ".join(styles), rows=lines[1:])


def parse_vtt_document(vtt_content: str) -> VTTDocument:
    """
    Parse VTT content into a VTTDocument.

    A blank line always ends a cue, so a cue whose payload contains an empty
    line is read as two blocks.

    Args:
        vtt_content: VTT file content as string

    Returns:
        VTTDocument with header metadata and cues in file order

    Raises:
        MalformedHeaderError: If the first line is not exactly WEBVTT
        MalformedCueError: If a cue timing line has no '-->' arrow

    Example:
        >>> doc = parse_vtt_document("WEBVTT\\n\\n00:00:01.000 --> 00:00:03.000\\nHello world\\n")
        >>> doc.cues[0].rows
        ['Hello world']
    """
    content = vtt_content.replace("\r\n", "\n")
    if content.startswith("\ufeff"):
        content = content[1:]

    head, *blocks = content.split(BLOCK_SEPARATOR)
    document = VTTDocument(metadata=_parse_header(head))

    for block in blocks:
        lines = block.strip().split("\n")
        if not lines[0]:
            continue
        document.cues.append(_parse_cue(lines))

    return document


def parse_vtt_file(vtt_path: str) -> VTTDocument:
    """
    Read and parse a VTT file.

    Args:
        vtt_path: Path to VTT file

    Returns:
        Parsed VTTDocument
    """
    with open(vtt_path, "r", encoding="utf-8") as f:
        content = f.read()

    try:
        document = parse_vtt_document(content)
    except ValueError as e:
        logger.error(f"Failed to parse {vtt_path}: {e}")
        raise

    logger.debug(f"Parsed {len(document.cues)} cues from {vtt_path}")
    return document

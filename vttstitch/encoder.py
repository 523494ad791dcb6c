"""
VTT encoder for VTTStitch.

Renders a VTTDocument back to WebVTT text. The output parses back to an
equal document.
"""

import logging

from .models import VTTCue, VTTDocument

logger = logging.getLogger(__name__)


def format_vtt_cue(cue: VTTCue) -> str:
    """Render one cue: the timing line (plus styles, if any) followed by its rows."""
    timing = f"{cue.start} --> {cue.end}"
    if cue.styles:
        timing = f"{timing} {cue.styles}"
    return "\n".join([timing, *cue.rows])


def format_vtt_document(document: VTTDocument) -> str:
    """
    Format a VTTDocument into valid VTT content.

    Args:
        document: Document to render

    Returns:
        Formatted VTT content as string, ending with a newline

    Example:
        >>> doc = VTTDocument(cues=[VTTCue("00:00:01.000", "00:00:02.000", rows=["Hello"])])
        >>> format_vtt_document(doc)
        'WEBVTT\\n\\n00:00:01.000 --> 00:00:02.000\\nHello\\n'
    """
    lines = ["WEBVTT"]
    lines.extend(f"{name}={value}" for name, value in document.metadata.items())
    lines.append("")
    lines.append("\n\n".join(format_vtt_cue(cue) for cue in document.cues))
    lines.append("")
    return "\n".join(lines)


def write_vtt_document(document: VTTDocument, output_path: str) -> None:
    """
    Save a VTTDocument to file, overwriting any existing file.

    Args:
        document: Document to write
        output_path: Path to save the VTT file
    """
    content = format_vtt_document(document)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(content)

    logger.info(f"Saved VTT with {len(document.cues)} cues to {output_path}")

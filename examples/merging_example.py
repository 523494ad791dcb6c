"""
VTT merging example.

Demonstrates merging HLS subtitle segments, both from a directory and one
segment at a time.
"""

import logging

from vttstitch import VTTMerger, merge_directory

SEGMENT = """WEBVTT
X-TIMESTAMP-MAP=LOCAL:00:00:00.000,MPEGTS:{mpegts}

00:00:00.500 --> 00:00:02.000
Segment starting at {seconds}s
"""


def main():
    logging.basicConfig(level=logging.INFO)

    # Merge a whole directory of segments
    merged = merge_directory("segments", "merged.vtt")
    print(f"Merged {len(merged.cues)} cues from directory")

    # Or add segments incrementally (later segments first, to show sorting)
    merger = VTTMerger()
    for seconds in (12, 6, 0):
        count = merger.add_from_content(SEGMENT.format(mpegts=seconds * 90000, seconds=seconds))
        print(f"Added {count} cues from segment at {seconds}s")

    print(merger.get_merged_content())
    print(f"Total cues in merged file: {merger.get_cue_count()}")


if __name__ == "__main__":
    main()

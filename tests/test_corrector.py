import pytest

from vttstitch.corrector import apply_timestamp_map, calculate_timestamp_offset, parse_timestamp_map
from vttstitch.exceptions import (
    InvalidOffsetError,
    MalformedTimestampMapError,
    UnsupportedLocalOffsetError,
)
from vttstitch.models import TimestampMap, VTTCue, VTTDocument


def _document(timestamp_map=None, **metadata):
    if timestamp_map is not None:
        metadata["X-TIMESTAMP-MAP"] = timestamp_map
    return VTTDocument(
        metadata=metadata,
        cues=[
            VTTCue("00:00:01.000", "00:00:02.500", "", ["one"]),
            VTTCue("00:00:03.000", "00:00:04.000", "", ["two"]),
        ],
    )


def test_parse_timestamp_map():
    assert parse_timestamp_map("LOCAL:00:00:00.000,MPEGTS:900000") == TimestampMap("00:00:00.000", 900000)
    assert parse_timestamp_map("MPEGTS:180000,LOCAL:00:00:00.000") == TimestampMap("00:00:00.000", 180000)
    assert parse_timestamp_map("LOCAL:00:00:00.000") == TimestampMap("00:00:00.000", None)


def test_parse_timestamp_map_rejects_non_integer_mpegts():
    with pytest.raises(MalformedTimestampMapError):
        parse_timestamp_map("LOCAL:00:00:00.000,MPEGTS:abc")


def test_calculate_timestamp_offset():
    assert calculate_timestamp_offset(TimestampMap(mpegts=900000)) == 10000
    assert calculate_timestamp_offset(TimestampMap(mpegts=0)) == 0
    assert calculate_timestamp_offset(TimestampMap()) == 0


def test_no_timestamp_map_is_noop():
    doc = _document(Kind="captions")
    assert apply_timestamp_map(doc) == 0
    assert doc == _document(Kind="captions")


def test_shifts_cues_and_removes_map():
    doc = _document("LOCAL:00:00:00.000,MPEGTS:900000", Kind="captions")

    assert apply_timestamp_map(doc) == 10000

    assert doc.metadata == {"Kind": "captions"}
    assert [(c.start, c.end) for c in doc.cues] == [
        ("00:00:11.000", "00:00:12.500"),
        ("00:00:13.000", "00:00:14.000"),
    ]


def test_zero_offset_leaves_cues_but_removes_map():
    doc = _document("LOCAL:00:00:00.000,MPEGTS:0")

    assert apply_timestamp_map(doc) == 0

    assert "X-TIMESTAMP-MAP" not in doc.metadata
    assert doc.cues == _document().cues


def test_missing_mpegts_only_removes_map():
    doc = _document("LOCAL:00:00:00.000")
    apply_timestamp_map(doc)
    assert doc.metadata == {}
    assert doc.cues == _document().cues


def test_empty_map_value_is_removed():
    doc = _document("")
    apply_timestamp_map(doc)
    assert doc.metadata == {}


def test_rejects_non_zero_local():
    doc = _document("LOCAL:00:00:01.000,MPEGTS:900000")
    with pytest.raises(UnsupportedLocalOffsetError):
        apply_timestamp_map(doc)


def test_negative_mpegts_is_invalid_offset():
    doc = _document("LOCAL:00:00:00.000,MPEGTS:-90000")
    with pytest.raises(InvalidOffsetError):
        apply_timestamp_map(doc)

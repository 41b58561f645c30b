"""Unit tests for the chunk planner."""

import math

import pytest

from gugotik.chunk_planner import plan
from gugotik.exceptions import InvalidCallError
from gugotik.types import ChunkRange

MIB = 1024 * 1024


@pytest.mark.parametrize('total_size,chunk_size', [
    (1, 1),
    (1, 10),
    (10, 3),
    (9, 3),
    (5 * MIB, 5 * MIB),
    (5 * MIB + 1, 5 * MIB),
    (12 * MIB, 5 * MIB),
    (1_000_003, 4096),
])
def test_plan_covers_payload(total_size, chunk_size):
    """Ranges are contiguous, bounded by chunk_size and cover every byte once."""
    upload_plan = plan(total_size, chunk_size)

    assert len(upload_plan) == math.ceil(total_size / chunk_size)
    assert sum(r.length for r in upload_plan) == total_size
    assert upload_plan[0].start == 0
    assert upload_plan[-1].end == total_size - 1

    for index, chunk in enumerate(upload_plan):
        assert chunk.index == index
        assert chunk.total_size == total_size
        assert 0 < chunk.length <= chunk_size
    for previous, current in zip(upload_plan.ranges, upload_plan.ranges[1:]):
        assert current.start == previous.end + 1


def test_plan_slices_reassemble_payload():
    """Concatenating the addressed slices in order reproduces the payload."""
    payload = bytes(range(256)) * 40 + b'tail'
    upload_plan = plan(len(payload), 1000)

    reassembled = b''.join(payload[r.start:r.end + 1] for r in upload_plan)
    assert reassembled == payload


def test_plan_12mib_with_5mib_chunks():
    """12 MiB in 5 MiB chunks gives the three documented ranges."""
    upload_plan = plan(12 * MIB, 5 * MIB)

    assert [(r.start, r.end) for r in upload_plan] == [
        (0, 5242879),
        (5242880, 10485759),
        (10485760, 12582911),
    ]
    assert [r.header_value for r in upload_plan] == [
        'bytes 0-5242879/12582912',
        'bytes 5242880-10485759/12582912',
        'bytes 10485760-12582911/12582912',
    ]
    assert [r.is_last for r in upload_plan] == [False, False, True]


def test_plan_empty_payload_yields_one_degenerate_range():
    """An empty payload still produces exactly one zero-length range."""
    upload_plan = plan(0, 5 * MIB)

    assert len(upload_plan) == 1
    only = upload_plan[0]
    assert only == ChunkRange(start=0, end=-1, total_size=0, index=0)
    assert only.length == 0
    assert only.is_last
    assert only.header_value == 'bytes */0'


def test_plan_is_deterministic():
    """Identical inputs give identical plans."""
    assert plan(123_456, 1000) == plan(123_456, 1000)


@pytest.mark.parametrize('total_size,chunk_size', [(10, 0), (10, -1), (-1, 10)])
def test_plan_rejects_invalid_sizes(total_size, chunk_size):
    """Non-positive chunk sizes and negative totals are invalid calls."""
    with pytest.raises(InvalidCallError):
        plan(total_size, chunk_size)

"""Tests for the time-range overlap test."""

import pytest

from src.timeline.time_ranges import (
    calculate_time_ranges,
    clip_time_range,
    clips_conflict,
    do_time_ranges_overlap,
)
from tests.factories import make_clip


@pytest.mark.parametrize(
    ("start1", "end1", "start2", "end2"),
    [
        (0, 10, 11, 20),
        (0, 10, 10, 20),
        (0, 10, 9.5, 20),
        (0, 10, 9.2, 20),
        (0, 10, 9, 20),
        (0, 10, 20, 30),
        (-10, -5, -20, -15),
    ],
)
def test_ranges_within_tolerance_do_not_conflict(start1, end1, start2, end2):
    assert not do_time_ranges_overlap(start1, end1, start2, end2)
    assert not do_time_ranges_overlap(start2, end2, start1, end1)


@pytest.mark.parametrize(
    ("start1", "end1", "start2", "end2"),
    [
        (0, 10, 8.5, 20),
        (0, 10, 8, 20),
        (0, 10, 0, 10),
        (0, 10, 5, 15),
        (0, 20, 5, 15),
        (-10, -5, -8, -3),
    ],
)
def test_ranges_overlapping_beyond_tolerance_conflict(start1, end1, start2, end2):
    assert do_time_ranges_overlap(start1, end1, start2, end2)
    assert do_time_ranges_overlap(start2, end2, start1, end1)


def test_zero_length_ranges_never_conflict():
    assert not do_time_ranges_overlap(5, 5, 5, 5)
    assert not do_time_ranges_overlap(5, 5, 4, 6)
    assert not do_time_ranges_overlap(5, 5, 0, 100)
    assert not do_time_ranges_overlap(0, 100, 50, 50)


def test_overlap_is_symmetric():
    cases = [
        (0, 10, 5, 15),
        (0, 10, 10, 20),
        (0, 10, 20, 30),
        (-5, 5, -2, 8),
        (3, 3, 0, 10),
        (0, 1.5, 0.2, 1.4),
    ]
    for s1, e1, s2, e2 in cases:
        assert do_time_ranges_overlap(s1, e1, s2, e2) == do_time_ranges_overlap(s2, e2, s1, e1)


def test_custom_tolerance():
    assert do_time_ranges_overlap(0, 10, 9.5, 20, tolerance_seconds=0.0)
    assert not do_time_ranges_overlap(0, 10, 7, 20, tolerance_seconds=3.0)
    assert do_time_ranges_overlap(0, 10, 6.5, 20, tolerance_seconds=3.0)


def test_clip_time_range_defaults_missing_values():
    clip = make_clip("a", start_time=None, duration=None)

    time_range = clip_time_range(clip)

    assert time_range.start_seconds == 0.0
    assert time_range.end_seconds == 0.0
    assert time_range.duration_seconds == 0.0


def test_calculate_time_ranges_keeps_input_order():
    clips = [make_clip("a", 20, 5), make_clip("b", 0, 10)]

    ranges = calculate_time_ranges(clips)

    assert [(r.start_seconds, r.end_seconds) for r in ranges] == [(20, 25), (0, 10)]


def test_clips_conflict_uses_effective_bounds():
    assert clips_conflict(make_clip("a", 0, 10), make_clip("b", 5, 10))
    assert not clips_conflict(make_clip("a", None, 10), make_clip("b", 9.5, 10))

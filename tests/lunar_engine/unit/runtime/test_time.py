from __future__ import annotations

import pytest

from lunar_engine.runtime.time import FrameClock


def test_frame_clock_produces_elapsed_and_delta() -> None:
    values = iter([10.0, 10.1, 10.6])
    clock = FrameClock(time_source=lambda: next(values), max_delta_seconds=0.25)

    frame0 = clock.next(0)
    frame1 = clock.next(1)
    frame2 = clock.next(2)

    assert frame0.delta_seconds == 0.0
    assert frame0.elapsed_seconds == 0.0
    assert frame1.delta_seconds == pytest.approx(0.1)
    assert frame2.delta_seconds == pytest.approx(0.25)
    assert frame2.elapsed_seconds == pytest.approx(0.35)
    assert frame2.frame_index == 2
    assert not frame1.clamped
    assert frame2.clamped


def test_frame_clock_clamps_negative_delta() -> None:
    values = iter([5.0, 4.5])
    clock = FrameClock(time_source=lambda: next(values))
    _ = clock.next(0)
    frame1 = clock.next(1)
    assert frame1.delta_seconds == 0.0
    assert frame1.elapsed_seconds == 0.0
    assert not frame1.clamped


def test_frame_clock_rejects_non_positive_bound() -> None:
    with pytest.raises(ValueError):
        FrameClock(max_delta_seconds=0.0)


def test_frame_clock_reports_delta_exactly_at_bound_as_unclamped() -> None:
    values = iter([1.0, 1.5])
    clock = FrameClock(time_source=lambda: next(values), max_delta_seconds=0.5)
    _ = clock.next(0)
    frame1 = clock.next(1)
    assert frame1.delta_seconds == 0.5
    assert not frame1.clamped
    assert clock.max_delta_seconds == 0.5

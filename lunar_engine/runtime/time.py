"""Frame clock feeding bounded deltas to the scheduler and mode controller."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from time import monotonic

from lunar_engine.runtime.config import DEFAULT_MAX_FRAME_DELTA_SECONDS


@dataclass(frozen=True, slots=True)
class TimeContext:
    """Timing for one host frame.

    `delta_seconds` is the value handed to `Scheduler.advance` and
    `ModeController.update`: never negative, never above the clock bound.
    `clamped` marks frames whose raw delta exceeded that bound.
    """

    frame_index: int
    delta_seconds: float
    elapsed_seconds: float
    clamped: bool = False


class FrameClock:
    """Samples a monotonic time source once per frame."""

    def __init__(
        self,
        *,
        time_source: Callable[[], float] | None = None,
        max_delta_seconds: float = DEFAULT_MAX_FRAME_DELTA_SECONDS,
    ) -> None:
        if max_delta_seconds <= 0.0:
            raise ValueError("max_delta_seconds must be > 0")
        self._now = time_source or monotonic
        self._max_delta_seconds = float(max_delta_seconds)
        self._previous: float | None = None
        self._elapsed = 0.0

    @property
    def max_delta_seconds(self) -> float:
        return self._max_delta_seconds

    def next(self, frame_index: int) -> TimeContext:
        """Return the bounded delta since the previous call.

        The first call reports zero, as does a source that runs backwards.
        """
        now = self._now()
        previous, self._previous = self._previous, now
        raw = 0.0 if previous is None else max(0.0, now - previous)
        clamped = raw > self._max_delta_seconds
        delta = self._max_delta_seconds if clamped else raw
        self._elapsed += delta
        return TimeContext(
            frame_index=frame_index,
            delta_seconds=delta,
            elapsed_seconds=self._elapsed,
            clamped=clamped,
        )

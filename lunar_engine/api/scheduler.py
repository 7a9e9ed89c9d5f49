"""Public time-driven scheduler API contracts."""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Literal, Protocol

TaskKind = Literal["delay", "interval", "tween"]
TaskCallback = Callable[[], None]
TweenUpdateCallback = Callable[[float], None]
TweenTarget = MutableMapping[str, float] | object


@dataclass(frozen=True, slots=True)
class ChainStep:
    """One sequential delay in a scheduler chain."""

    duration: float
    callback: TaskCallback | None = None
    tag: str | None = None


class Scheduler(Protocol):
    """Public scheduler contract."""

    @property
    def is_paused(self) -> bool:
        """Return global pause state."""

    @property
    def time_scale(self) -> float:
        """Return global time-scale factor."""

    @property
    def active_count(self) -> int:
        """Return count of live tasks of all kinds."""

    def delay(
        self, duration: float, callback: TaskCallback | None = None, tag: str | None = None
    ) -> int:
        """Schedule a one-shot task."""

    def interval(
        self, duration: float, callback: TaskCallback | None = None, tag: str | None = None
    ) -> int:
        """Schedule a repeating task."""

    def tween(
        self,
        duration: float,
        target: TweenTarget,
        properties: Mapping[str, float],
        easing: str = "linear",
        callback: TaskCallback | None = None,
        tag: str | None = None,
        on_update: TweenUpdateCallback | None = None,
    ) -> int:
        """Schedule a property tween."""

    def advance(self, dt: float) -> int:
        """Advance all tasks by one frame delta."""

    def cancel(self, task_id: int) -> bool:
        """Cancel one task."""

    def cancel_tag(self, tag: str) -> int:
        """Cancel all tasks sharing a tag."""

    def cancel_all(self) -> None:
        """Cancel every task."""

    def pause(self) -> None: ...

    def resume(self) -> None: ...

    def set_time_scale(self, factor: float) -> None: ...

    def exists(self, task_id: int) -> bool: ...

    def remaining(self, task_id: int) -> float: ...

    def progress(self, task_id: int) -> float: ...


def create_scheduler(*, max_interval_fires: int | None = None) -> Scheduler:
    """Create default scheduler implementation."""
    from lunar_engine.runtime.scheduler import DEFAULT_MAX_INTERVAL_FIRES, RuntimeScheduler

    if max_interval_fires is None:
        max_interval_fires = DEFAULT_MAX_INTERVAL_FIRES
    return RuntimeScheduler(max_interval_fires=max_interval_fires)

"""Frame-driven delay, interval, and tween scheduler."""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Iterable, Mapping, MutableMapping
from dataclasses import dataclass, field

from lunar_engine.api.scheduler import (
    ChainStep,
    TaskCallback,
    TaskKind,
    TweenTarget,
    TweenUpdateCallback,
)
from lunar_engine.runtime.easing import EasingFn, linear, resolve_easing

_LOG = logging.getLogger("lunar_engine.scheduler")
_EFFECT_TICK_SECONDS = 0.016
DEFAULT_MAX_INTERVAL_FIRES = 64


@dataclass(slots=True)
class _Task:
    task_id: int
    kind: TaskKind
    duration: float
    callback: TaskCallback | None = None
    tag: str | None = None
    elapsed: float = 0.0
    active: bool = True
    target: TweenTarget | None = None
    start_values: dict[str, float] = field(default_factory=dict)
    end_values: dict[str, float] = field(default_factory=dict)
    easing: EasingFn = linear
    on_update: TweenUpdateCallback | None = None

    def progress(self) -> float:
        if self.duration <= 0.0:
            return 1.0
        return min(1.0, self.elapsed / self.duration)


class RuntimeScheduler:
    """Delay, interval, and tween registry advanced once per frame.

    Task ids come from one counter shared by all task kinds. Callbacks may
    schedule or cancel tasks freely: each `advance` walks a snapshot taken
    before any callback runs, so new tasks start on the next `advance` and
    cancelled tasks never fire again.

    An interval fires at most `max_interval_fires` times per `advance`;
    whole periods beyond that are dropped and the remainder carries over.
    """

    def __init__(self, *, max_interval_fires: int = DEFAULT_MAX_INTERVAL_FIRES) -> None:
        if max_interval_fires <= 0:
            raise ValueError("max_interval_fires must be > 0")
        self._max_interval_fires = max_interval_fires
        self._delays: dict[int, _Task] = {}
        self._intervals: dict[int, _Task] = {}
        self._tweens: dict[int, _Task] = {}
        self._next_task_id = 1
        self._paused = False
        self._time_scale = 1.0
        self._now_seconds = 0.0

    @property
    def now_seconds(self) -> float:
        """Return scaled time consumed by `advance` so far."""
        return self._now_seconds

    @property
    def is_paused(self) -> bool:
        return self._paused

    @property
    def time_scale(self) -> float:
        return self._time_scale

    @time_scale.setter
    def time_scale(self, factor: float) -> None:
        self._time_scale = float(factor)

    @property
    def active_count(self) -> int:
        """Return count of live tasks of all kinds."""
        return len(self._delays) + len(self._intervals) + len(self._tweens)

    def delay(
        self, duration: float, callback: TaskCallback | None = None, tag: str | None = None
    ) -> int:
        """Schedule a one-shot callback after `duration` seconds."""
        if duration < 0.0:
            raise ValueError("duration must be >= 0")
        task = self._new_task("delay", duration, callback, tag)
        self._delays[task.task_id] = task
        return task.task_id

    def interval(
        self, duration: float, callback: TaskCallback | None = None, tag: str | None = None
    ) -> int:
        """Schedule a callback every `duration` seconds until cancelled."""
        if duration <= 0.0:
            raise ValueError("duration must be > 0")
        task = self._new_task("interval", duration, callback, tag)
        self._intervals[task.task_id] = task
        return task.task_id

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
        """Animate numeric properties of `target` toward `properties`.

        Start values are captured now; missing properties start at 0. The
        target is referenced, not copied, and is written on every advance.
        """
        if duration < 0.0:
            raise ValueError("duration must be >= 0")
        easing_fn = resolve_easing(easing)
        task = self._new_task("tween", duration, callback, tag)
        task.target = target
        task.end_values = {key: float(value) for key, value in properties.items()}
        task.start_values = {key: _read_property(target, key) for key in task.end_values}
        task.easing = easing_fn
        task.on_update = on_update
        self._tweens[task.task_id] = task
        return task.task_id

    def advance(self, dt: float) -> int:
        """Advance every live task by `dt` scaled seconds. Returns fired callback count."""
        if dt < 0.0:
            raise ValueError("dt must be >= 0")
        if self._paused:
            return 0
        scaled = dt * self._time_scale
        self._now_seconds += scaled
        delays = list(self._delays.values())
        intervals = list(self._intervals.values())
        tweens = list(self._tweens.values())
        fired = 0

        for task in delays:
            if not task.active:
                continue
            task.elapsed += scaled
            if task.elapsed >= task.duration:
                self._retire(task)
                if task.callback is not None:
                    task.callback()
                    fired += 1

        for task in intervals:
            if not task.active:
                continue
            task.elapsed += scaled
            # Overshoot carries into the next period; one fire per whole period.
            fires = 0
            while task.active and task.elapsed >= task.duration:
                if fires >= self._max_interval_fires:
                    self._drop_backlog(task)
                    break
                task.elapsed -= task.duration
                fires += 1
                if task.callback is not None:
                    task.callback()
                    fired += 1

        for task in tweens:
            if not task.active:
                continue
            task.elapsed += scaled
            progress = task.progress()
            eased = task.easing(progress)
            for key, end_value in task.end_values.items():
                start_value = task.start_values[key]
                _write_property(task.target, key, start_value + (end_value - start_value) * eased)
            if task.on_update is not None:
                task.on_update(eased)
            if progress >= 1.0 and task.active:
                self._retire(task)
                if task.callback is not None:
                    task.callback()
                    fired += 1
        return fired

    def cancel(self, task_id: int) -> bool:
        """Cancel one task of any kind. Returns whether it existed."""
        for collection in (self._delays, self._intervals, self._tweens):
            task = collection.pop(task_id, None)
            if task is not None:
                task.active = False
                return True
        return False

    def cancel_tag(self, tag: str) -> int:
        """Cancel every task carrying `tag`. Returns number cancelled."""
        cancelled = 0
        for collection in (self._delays, self._intervals, self._tweens):
            for task_id in [tid for tid, task in collection.items() if task.tag == tag]:
                collection.pop(task_id).active = False
                cancelled += 1
        _LOG.debug("scheduler_cancel_tag", extra={"tag": tag, "cancelled": cancelled})
        return cancelled

    def cancel_all(self) -> None:
        """Cancel every task."""
        count = self.active_count
        for collection in (self._delays, self._intervals, self._tweens):
            for task in collection.values():
                task.active = False
            collection.clear()
        _LOG.debug("scheduler_cancel_all", extra={"cancelled": count})

    def pause(self) -> None:
        self._paused = True

    def resume(self) -> None:
        self._paused = False

    def set_time_scale(self, factor: float) -> None:
        self.time_scale = factor

    def exists(self, task_id: int) -> bool:
        return self._find(task_id) is not None

    def remaining(self, task_id: int) -> float:
        """Return seconds left before the task fires, or 0 when unknown."""
        task = self._find(task_id)
        if task is None:
            return 0.0
        return max(0.0, task.duration - task.elapsed)

    def progress(self, task_id: int) -> float:
        """Return task progress in [0, 1], or 0 when unknown."""
        task = self._find(task_id)
        if task is None:
            return 0.0
        return task.progress()

    def chain(self, steps: Iterable[ChainStep]) -> int | None:
        """Run delays one after another. Returns the first delay id."""
        pending = iter(list(steps))

        def schedule_next() -> int | None:
            step = next(pending, None)
            if step is None:
                return None

            def on_done() -> None:
                if step.callback is not None:
                    step.callback()
                schedule_next()

            return self.delay(step.duration, on_done, step.tag)

        return schedule_next()

    def fade(
        self,
        target: TweenTarget,
        prop: str,
        from_value: float,
        to_value: float,
        duration: float,
        easing: str = "linear",
        callback: TaskCallback | None = None,
        tag: str | None = None,
    ) -> int:
        """Set `prop` to `from_value`, then tween it to `to_value`."""
        _write_property(target, prop, from_value)
        return self.tween(duration, target, {prop: to_value}, easing, callback, tag)

    def shake(
        self,
        target: TweenTarget,
        intensity: float,
        duration: float,
        callback: TaskCallback | None = None,
        tag: str | None = None,
        *,
        rng: random.Random | None = None,
    ) -> int:
        """Jitter `x`/`y` of `target` for `duration`, then restore them.

        Returns the id of the finishing delay; cancelling it through its tag
        also stops the jitter.
        """
        source = rng or random.Random()
        origin_x = _read_property(target, "x")
        origin_y = _read_property(target, "y")

        def jitter() -> None:
            _write_property(target, "x", origin_x + (source.random() - 0.5) * intensity * 2.0)
            _write_property(target, "y", origin_y + (source.random() - 0.5) * intensity * 2.0)

        jitter_id = self.interval(_EFFECT_TICK_SECONDS, jitter, tag)

        def finish() -> None:
            self.cancel(jitter_id)
            _write_property(target, "x", origin_x)
            _write_property(target, "y", origin_y)
            if callback is not None:
                callback()

        return self.delay(duration, finish, tag)

    def pulse(
        self,
        target: TweenTarget,
        prop: str,
        base_value: float,
        amplitude: float,
        frequency: float,
        duration: float,
        callback: TaskCallback | None = None,
        tag: str | None = None,
    ) -> int:
        """Oscillate `prop` around `base_value` for `duration`, then settle on it.

        The phase follows this scheduler's scaled clock, so pausing or
        slowing the scheduler slows the pulse with it.
        """
        started_at = self._now_seconds

        def oscillate() -> None:
            phase = (self._now_seconds - started_at) * frequency * 2.0 * math.pi
            _write_property(target, prop, base_value + math.sin(phase) * amplitude)

        oscillate_id = self.interval(_EFFECT_TICK_SECONDS, oscillate, tag)

        def finish() -> None:
            self.cancel(oscillate_id)
            _write_property(target, prop, base_value)
            if callback is not None:
                callback()

        return self.delay(duration, finish, tag)

    def _new_task(
        self,
        kind: TaskKind,
        duration: float,
        callback: TaskCallback | None,
        tag: str | None,
    ) -> _Task:
        task_id = self._next_task_id
        self._next_task_id += 1
        return _Task(
            task_id=task_id, kind=kind, duration=float(duration), callback=callback, tag=tag
        )

    def _find(self, task_id: int) -> _Task | None:
        return (
            self._delays.get(task_id)
            or self._intervals.get(task_id)
            or self._tweens.get(task_id)
        )

    def _drop_backlog(self, task: _Task) -> None:
        dropped = int(task.elapsed // task.duration)
        task.elapsed %= task.duration
        _LOG.debug(
            "scheduler_interval_backlog_dropped",
            extra={"task_id": task.task_id, "dropped": dropped},
        )

    def _retire(self, task: _Task) -> None:
        task.active = False
        if task.kind == "delay":
            self._delays.pop(task.task_id, None)
        elif task.kind == "interval":
            self._intervals.pop(task.task_id, None)
        else:
            self._tweens.pop(task.task_id, None)


Scheduler = RuntimeScheduler


def _read_property(target: TweenTarget, key: str) -> float:
    if isinstance(target, Mapping):
        value = target.get(key)
    else:
        value = getattr(target, key, None)
    return 0.0 if value is None else float(value)


def _write_property(target: TweenTarget, key: str, value: float) -> None:
    if isinstance(target, MutableMapping):
        target[key] = value
    else:
        setattr(target, key, value)

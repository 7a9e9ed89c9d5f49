from __future__ import annotations

from lunar_engine.api import (
    Mode,
    ModeRecord,
    create_mode_controller,
    create_scheduler,
)
from lunar_engine.runtime.config import DEFAULT_MAX_TRANSITION_SECONDS
from lunar_engine.runtime.mode_controller import RuntimeModeController
from lunar_engine.runtime.scheduler import RuntimeScheduler
from tests.lunar_engine.conftest import FakeRenderer


def test_create_mode_controller_returns_runtime_impl() -> None:
    renderer = FakeRenderer()
    controller = create_mode_controller(max_transition_seconds=0.5, renderer=renderer)
    assert isinstance(controller, RuntimeModeController)
    assert controller.max_transition_seconds == 0.5


def test_create_scheduler_returns_independent_instances() -> None:
    first = create_scheduler()
    second = create_scheduler()
    assert isinstance(first, RuntimeScheduler)
    first.delay(1.0)
    assert first.active_count == 1
    assert second.active_count == 0


def test_base_mode_hooks_are_no_ops() -> None:
    mode = Mode()
    mode.init()
    mode.enter("a", 1)
    mode.update(0.1)
    mode.mousemoved(1.0, 2.0, 0.5, 0.5)
    mode.exit()
    mode.cleanup()


def test_mode_record_captures_entry_arguments() -> None:
    record = ModeRecord(name="match", args=("white", 3))
    assert record.args == ("white", 3)
    assert ModeRecord(name="title").args == ()


def test_create_mode_controller_defaults_to_runtime_transition_time() -> None:
    controller = create_mode_controller()
    assert controller.max_transition_seconds == DEFAULT_MAX_TRANSITION_SECONDS


def test_create_scheduler_forwards_interval_fire_cap() -> None:
    scheduler = create_scheduler(max_interval_fires=2)
    calls: list[int] = []
    scheduler.interval(0.25, lambda: calls.append(1))
    scheduler.advance(1.0)
    assert len(calls) == 2

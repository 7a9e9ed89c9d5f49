from __future__ import annotations

import logging

import pytest

from lunar_engine.api.input_events import KeyEvent, PointerEvent
from lunar_engine.api.modes import Mode
from lunar_engine.runtime.config import RuntimeConfig
from lunar_engine.runtime.host import ModeHost, ModeHostConfig
from tests.lunar_engine.conftest import FakeRenderer, SpyMode


def _ticking(step: float = 0.1):
    now = [0.0]

    def source() -> float:
        value = now[0]
        now[0] += step
        return value

    return source


def test_host_frame_drives_scheduler_and_controller() -> None:
    host = ModeHost(time_source=_ticking(0.125))
    mode = SpyMode()
    host.controller.register("match", mode)
    host.controller.push("match")
    fired: list[int] = []
    host.scheduler.interval(0.125, lambda: fired.append(host.current_frame_index()))

    first = host.frame()
    host.frame()
    host.frame()

    assert first is not None and first.delta_seconds == 0.0
    assert host.current_frame_index() == 3
    assert len(fired) == 2
    assert mode.count("update") == 3
    assert mode.count("draw") == 3


def test_host_logs_clamped_frame_delta(caplog) -> None:
    host = ModeHost(time_source=_ticking(1.0))
    with caplog.at_level(logging.DEBUG, logger="lunar_engine.runtime"):
        host.frame()
        second = host.frame()

    assert second is not None
    assert second.clamped
    assert second.delta_seconds == host.config.max_frame_delta_seconds
    clamped = [record for record in caplog.records if record.msg == "frame_delta_clamped"]
    assert len(clamped) == 1
    assert clamped[0].frame_index == 1


def test_host_routes_input_events() -> None:
    host = ModeHost()
    mode = SpyMode()
    host.controller.register("match", mode)
    host.controller.push("match")

    host.handle_key_event(KeyEvent("key_down", "escape"))
    host.handle_key_event(KeyEvent("key_up", "escape"))
    host.handle_key_event(KeyEvent("char", "q"))
    host.handle_key_event(KeyEvent("repeat", "q"))
    host.handle_pointer_event(PointerEvent("pointer_down", 5.0, 6.0, 1))
    host.handle_pointer_event(PointerEvent("pointer_up", 5.0, 6.0, 1))
    host.handle_pointer_event(PointerEvent("pointer_move", 7.0, 8.0, dx=2.0, dy=2.0))

    assert mode.calls[-6:] == [
        ("keypressed", ("escape",)),
        ("keyreleased", ("escape",)),
        ("textinput", ("q",)),
        ("mousepressed", (5.0, 6.0, 1)),
        ("mousereleased", (5.0, 6.0, 1)),
        ("mousemoved", (7.0, 8.0, 2.0, 2.0)),
    ]


def test_host_passes_renderer_and_config_to_controller() -> None:
    renderer = FakeRenderer()
    config = ModeHostConfig.from_runtime_config(
        RuntimeConfig(
            max_transition_seconds=1.0,
            max_frame_delta_seconds=0.5,
            log_level="INFO",
            log_format="text",
        )
    )
    host = ModeHost(config, renderer=renderer, time_source=_ticking(0.5))
    host.controller.register("title", SpyMode())
    host.controller.replace("title")

    host.frame()
    host.frame()
    assert host.controller.max_transition_seconds == 1.0
    assert host.controller.is_transitioning
    assert renderer.fills
    host.frame()
    assert host.controller.current_mode_name == "title"


def test_host_close_is_idempotent_and_stops_frames() -> None:
    host = ModeHost()
    mode = SpyMode()
    host.controller.register("match", mode)
    host.controller.push("match")
    host.scheduler.interval(0.1)

    host.close()
    host.close()
    assert host.closed
    assert host.frame() is None
    assert mode.hooks()[-2:] == ["exit", "cleanup"]
    assert host.scheduler.active_count == 0


class _BrokenCleanup(Mode):
    def cleanup(self) -> None:
        raise RuntimeError("cleanup failed")


def test_host_close_cancels_tasks_even_when_cleanup_fails() -> None:
    host = ModeHost()
    host.controller.register("broken", _BrokenCleanup())
    host.scheduler.delay(1.0)

    with pytest.raises(RuntimeError):
        host.close()
    assert host.scheduler.active_count == 0


class _ExplodingMode(Mode):
    def update(self, dt: float) -> None:
        raise ValueError("bad frame")


def test_host_frame_errors_propagate_without_advancing_index() -> None:
    host = ModeHost()
    host.controller.register("boom", _ExplodingMode())
    host.controller.push("boom")
    with pytest.raises(ValueError):
        host.frame()
    assert host.current_frame_index() == 0

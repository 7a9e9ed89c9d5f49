from __future__ import annotations

import pytest

from lunar_engine.api.input_events import KeyEvent
from lunar_engine.api.modes import Mode
from lunar_engine.runtime.host import ModeHost, ModeHostConfig
from lunar_engine.runtime.scheduler import Scheduler
from tests.lunar_engine.conftest import FakeRenderer


class _TitleMode(Mode):
    def __init__(self, host: ModeHost) -> None:
        self._host = host
        self.banner = {"alpha": 0.0}
        self.entered = 0

    def enter(self, *args) -> None:
        self.entered += 1
        self._host.scheduler.tween(0.5, self.banner, {"alpha": 1.0}, "sineOut", tag="title")

    def exit(self) -> None:
        self._host.scheduler.cancel_tag("title")

    def keypressed(self, key: str) -> None:
        if key == "return":
            self._host.controller.replace("match", "white")


class _MatchMode(Mode):
    def __init__(self, host: ModeHost) -> None:
        self._host = host
        self.side: str | None = None
        self.clock = Scheduler()
        self.ticks = 0
        self.paused = False

    def enter(self, *args) -> None:
        self.side = args[0]
        self.clock.interval(0.25, self._tick)

    def _tick(self) -> None:
        self.ticks += 1

    def update(self, dt: float) -> None:
        self.clock.advance(dt)

    def pause(self) -> None:
        self.paused = True
        self.clock.pause()

    def resume(self) -> None:
        self.paused = False
        self.clock.resume()

    def keypressed(self, key: str) -> None:
        if key == "escape":
            self._host.controller.push("pause_menu")


class _PauseMenu(Mode):
    def __init__(self, host: ModeHost) -> None:
        self._host = host

    def keypressed(self, key: str) -> None:
        if key == "escape":
            self._host.controller.pop()


def _build_host() -> tuple[ModeHost, FakeRenderer, _TitleMode, _MatchMode]:
    now = [0.0]

    def source() -> float:
        value = now[0]
        now[0] += 0.125
        return value

    renderer = FakeRenderer()
    host = ModeHost(
        ModeHostConfig(max_transition_seconds=0.25), renderer=renderer, time_source=source
    )
    title = _TitleMode(host)
    match = _MatchMode(host)
    host.controller.register("title", title)
    host.controller.register("match", match)
    host.controller.register("pause_menu", _PauseMenu(host))
    return host, renderer, title, match


def test_title_to_match_to_pause_and_back() -> None:
    host, renderer, title, match = _build_host()
    host.controller.replace("title")
    for _ in range(3):
        host.frame()
    assert host.controller.current_mode_name == "title"
    assert title.entered == 1
    assert renderer.fills

    for _ in range(4):
        host.frame()
    assert title.banner["alpha"] == pytest.approx(1.0)

    host.handle_key_event(KeyEvent("key_down", "return"))
    assert host.controller.is_transitioning
    host.handle_key_event(KeyEvent("key_down", "return"))
    for _ in range(2):
        host.frame()
    assert host.controller.current_mode_name == "match"
    assert match.side == "white"

    for _ in range(4):
        host.frame()
    assert match.ticks == 2

    host.handle_key_event(KeyEvent("key_down", "escape"))
    assert host.controller.current_mode_name == "pause_menu"
    assert match.paused
    for _ in range(4):
        host.frame()
    assert match.ticks == 2

    host.handle_key_event(KeyEvent("key_down", "escape"))
    assert host.controller.current_mode_name == "match"
    assert not match.paused

    host.close()
    assert host.controller.registered_names() == ()

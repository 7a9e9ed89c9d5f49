"""Host shell owning the frame clock, scheduler, and mode controller."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from lunar_engine.api.input_events import KeyEvent, PointerEvent
from lunar_engine.api.render import OverlayRenderer
from lunar_engine.runtime.config import (
    DEFAULT_MAX_FRAME_DELTA_SECONDS,
    DEFAULT_MAX_TRANSITION_SECONDS,
    RuntimeConfig,
)
from lunar_engine.runtime.errors import log_recoverable
from lunar_engine.runtime.mode_controller import RuntimeModeController
from lunar_engine.runtime.scheduler import RuntimeScheduler
from lunar_engine.runtime.time import FrameClock, TimeContext

_LOG = logging.getLogger("lunar_engine.runtime")


@dataclass(frozen=True, slots=True)
class ModeHostConfig:
    """Host runtime configuration."""

    max_transition_seconds: float = DEFAULT_MAX_TRANSITION_SECONDS
    max_frame_delta_seconds: float = DEFAULT_MAX_FRAME_DELTA_SECONDS

    @classmethod
    def from_runtime_config(cls, config: RuntimeConfig) -> ModeHostConfig:
        return cls(
            max_transition_seconds=config.max_transition_seconds,
            max_frame_delta_seconds=config.max_frame_delta_seconds,
        )


class ModeHost:
    """Frame driver for one scheduler and one mode controller.

    Modes that need time-driven behavior receive `host.scheduler` explicitly;
    there is no process-wide default instance.
    """

    def __init__(
        self,
        config: ModeHostConfig | None = None,
        *,
        renderer: OverlayRenderer | None = None,
        time_source: Callable[[], float] | None = None,
    ) -> None:
        self._config = config or ModeHostConfig()
        self._clock = FrameClock(
            time_source=time_source,
            max_delta_seconds=self._config.max_frame_delta_seconds,
        )
        self._scheduler = RuntimeScheduler()
        self._controller = RuntimeModeController(
            max_transition_seconds=self._config.max_transition_seconds,
            renderer=renderer,
        )
        self._frame_index = 0
        self._closed = False

    @property
    def config(self) -> ModeHostConfig:
        return self._config

    @property
    def scheduler(self) -> RuntimeScheduler:
        return self._scheduler

    @property
    def controller(self) -> RuntimeModeController:
        return self._controller

    @property
    def closed(self) -> bool:
        return self._closed

    def current_frame_index(self) -> int:
        return self._frame_index

    def frame(self) -> TimeContext | None:
        """Execute one frame: advance scheduler, update controller, draw."""
        if self._closed:
            return None
        time_context = self._clock.next(self._frame_index)
        if time_context.clamped:
            _LOG.debug(
                "frame_delta_clamped",
                extra={
                    "frame_index": self._frame_index,
                    "max_delta_seconds": self._clock.max_delta_seconds,
                },
            )
        try:
            self._scheduler.advance(time_context.delta_seconds)
            self._controller.update(time_context.delta_seconds)
            self._controller.draw()
        except Exception:
            _LOG.exception(
                "frame_failed",
                extra={
                    "frame_index": self._frame_index,
                    "mode": self._controller.current_mode_name,
                },
            )
            raise
        self._frame_index += 1
        return time_context

    def handle_key_event(self, event: KeyEvent) -> None:
        if event.event_type == "key_down":
            self._controller.keypressed(event.value)
        elif event.event_type == "key_up":
            self._controller.keyreleased(event.value)
        elif event.event_type == "char":
            self._controller.textinput(event.value)
        else:
            _LOG.debug("key_event_ignored", extra={"event_type": event.event_type})

    def handle_pointer_event(self, event: PointerEvent) -> None:
        if event.event_type == "pointer_down":
            self._controller.mousepressed(event.x, event.y, event.button)
        elif event.event_type == "pointer_up":
            self._controller.mousereleased(event.x, event.y, event.button)
        elif event.event_type == "pointer_move":
            self._controller.mousemoved(event.x, event.y, event.dx, event.dy)
        else:
            _LOG.debug("pointer_event_ignored", extra={"event_type": event.event_type})

    def close(self) -> None:
        """Tear down modes and cancel every scheduled task. Idempotent.

        Scheduler shutdown still happens when a mode hook fails during
        teardown; the hook's exception is re-raised afterwards.
        """
        if self._closed:
            return
        self._closed = True
        try:
            self._controller.teardown()
        except Exception:
            log_recoverable(_LOG, "mode_teardown_failed", level=logging.ERROR)
            raise
        finally:
            self._scheduler.cancel_all()
        _LOG.info("host_closed", extra={"frames": self._frame_index})

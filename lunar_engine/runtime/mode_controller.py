"""Named-mode registry with stacked and transitioned activation."""

from __future__ import annotations

import logging
import math

from lunar_engine.api.modes import Mode, ModeArg, ModeRecord
from lunar_engine.api.render import OverlayRenderer
from lunar_engine.runtime.config import DEFAULT_MAX_TRANSITION_SECONDS
from lunar_engine.runtime.errors import DuplicateOrMissingArgumentError, UnknownModeError

_LOG = logging.getLogger("lunar_engine.modes")
_FADE_KEY = "mode:transition_fade"
_FADE_Z = 1000.0


class RuntimeModeController:
    """Owns registered modes and decides which one receives the frame.

    `replace` switches modes through a timed transition that suppresses
    update and input forwarding until it completes; `push`/`pop` switch
    synchronously and keep suspended modes on a stack.
    """

    def __init__(
        self,
        *,
        max_transition_seconds: float = DEFAULT_MAX_TRANSITION_SECONDS,
        renderer: OverlayRenderer | None = None,
    ) -> None:
        if max_transition_seconds <= 0.0:
            raise ValueError("max_transition_seconds must be > 0")
        self._max_transition_seconds = float(max_transition_seconds)
        self._renderer = renderer
        self._modes: dict[str, Mode] = {}
        self._stack: list[ModeRecord] = []
        self._current: ModeRecord | None = None
        self._pending: ModeRecord | None = None
        self._transition_seconds = 0.0

    @property
    def max_transition_seconds(self) -> float:
        return self._max_transition_seconds

    @property
    def current_record(self) -> ModeRecord | None:
        return self._current

    @property
    def current_mode_name(self) -> str | None:
        return self._current.name if self._current is not None else None

    @property
    def current_mode(self) -> Mode | None:
        if self._current is None:
            return None
        return self._modes.get(self._current.name)

    @property
    def pending_mode_name(self) -> str | None:
        return self._pending.name if self._pending is not None else None

    @property
    def is_transitioning(self) -> bool:
        return self._pending is not None

    @property
    def transition_progress(self) -> float:
        """Return replace-transition progress in [0, 1]; 1 when idle."""
        if self._pending is None:
            return 1.0
        return min(self._transition_seconds / self._max_transition_seconds, 1.0)

    @property
    def transition_alpha(self) -> float:
        """Return fade-overlay opacity, peaking at the transition midpoint."""
        if self._pending is None:
            return 0.0
        return math.sin(self.transition_progress * math.pi) * 0.5

    def register(self, name: str, mode: Mode) -> None:
        """Register `mode` under `name` and run its `init` hook."""
        if not name or mode is None:
            raise DuplicateOrMissingArgumentError("mode name and mode instance are required")
        if name in self._modes:
            raise DuplicateOrMissingArgumentError(f"mode already registered: {name}")
        self._modes[name] = mode
        mode.init()
        _LOG.debug("mode_registered", extra={"mode": name})

    def unregister(self, name: str) -> None:
        """Clean up and remove a mode. No-op when not registered.

        Records referring to the removed mode are dropped: an active mode is
        exited first, a suspended one is discarded from the stack, and a
        pending transition toward it is abandoned.
        """
        mode = self._modes.get(name)
        if mode is None:
            return
        if self._current is not None and self._current.name == name:
            mode.exit()
            self._current = None
        self._stack = [record for record in self._stack if record.name != name]
        if self._pending is not None and self._pending.name == name:
            self._pending = None
            self._transition_seconds = 0.0
        mode.cleanup()
        del self._modes[name]
        _LOG.debug("mode_unregistered", extra={"mode": name})

    def registered_names(self) -> tuple[str, ...]:
        return tuple(self._modes)

    def stack_names(self) -> tuple[str, ...]:
        """Return suspended mode names, bottom first."""
        return tuple(record.name for record in self._stack)

    def is_active(self, name: str) -> bool:
        return self._current is not None and self._current.name == name

    def replace(self, name: str, *args: ModeArg) -> None:
        """Start a timed transition to `name`.

        The outgoing mode is exited only when the transition completes. A
        replace issued mid-transition discards the previous target, which
        was never entered, and restarts the timer.
        """
        self._require(name)
        if self._pending is not None:
            _LOG.debug(
                "mode_transition_superseded",
                extra={"mode": name, "discarded_mode": self._pending.name},
            )
        self._pending = ModeRecord(name=name, args=tuple(args))
        self._transition_seconds = 0.0
        _LOG.info(
            "mode_transition_started",
            extra={"mode": name, "from_mode": self.current_mode_name},
        )

    def push(self, name: str, *args: ModeArg) -> None:
        """Suspend the active mode and enter `name` immediately."""
        mode = self._require(name)
        if self._current is not None:
            self._stack.append(self._current)
            suspended = self._modes.get(self._current.name)
            if suspended is not None:
                suspended.pause()
        self._current = ModeRecord(name=name, args=tuple(args))
        mode.enter(*self._current.args)
        _LOG.info("mode_pushed", extra={"mode": name, "depth": len(self._stack)})

    def pop(self) -> bool:
        """Exit the active mode and resume the suspended one.

        Returns False, leaving everything untouched, when nothing is suspended.
        """
        if not self._stack:
            _LOG.debug("mode_pop_empty", extra={"mode": self.current_mode_name})
            return False
        leaving = self.current_mode
        if leaving is not None:
            leaving.exit()
        self._current = self._stack.pop()
        resumed = self._modes.get(self._current.name)
        if resumed is not None:
            resumed.resume()
        _LOG.info("mode_popped", extra={"mode": self._current.name, "depth": len(self._stack)})
        return True

    def update(self, dt: float) -> None:
        """Advance the pending transition, or forward `dt` to the active mode."""
        if self._pending is not None:
            self._transition_seconds += dt
            if self._transition_seconds >= self._max_transition_seconds:
                self._complete_transition()
            return
        mode = self.current_mode
        if mode is not None:
            mode.update(dt)

    def draw(self) -> None:
        mode = self.current_mode
        if mode is not None:
            mode.draw()
        if self._pending is not None and self._renderer is not None:
            self._renderer.fill_window(_FADE_KEY, _fade_color(self.transition_alpha), z=_FADE_Z)

    def keypressed(self, key: str) -> None:
        mode = self._input_target()
        if mode is not None:
            mode.keypressed(key)

    def keyreleased(self, key: str) -> None:
        mode = self._input_target()
        if mode is not None:
            mode.keyreleased(key)

    def mousepressed(self, x: float, y: float, button: int) -> None:
        mode = self._input_target()
        if mode is not None:
            mode.mousepressed(x, y, button)

    def mousereleased(self, x: float, y: float, button: int) -> None:
        mode = self._input_target()
        if mode is not None:
            mode.mousereleased(x, y, button)

    def mousemoved(self, x: float, y: float, dx: float, dy: float) -> None:
        mode = self._input_target()
        if mode is not None:
            mode.mousemoved(x, y, dx, dy)

    def textinput(self, text: str) -> None:
        mode = self._input_target()
        if mode is not None:
            mode.textinput(text)

    def reset(self) -> None:
        """Forget active, pending, and suspended records without running hooks."""
        self._stack.clear()
        self._current = None
        self._pending = None
        self._transition_seconds = 0.0

    def teardown(self) -> None:
        """Exit the active mode, clean up every mode, and clear all state."""
        mode = self.current_mode
        if mode is not None:
            mode.exit()
        modes = list(self._modes.values())
        self._modes.clear()
        self.reset()
        for registered in modes:
            registered.cleanup()
        _LOG.info("mode_controller_teardown", extra={"modes": len(modes)})

    def _complete_transition(self) -> None:
        """Switch to the pending mode, then run exit and enter hooks.

        State is settled before any hook runs, so a `replace` or `push`
        issued from `exit` or `enter` applies on top of the new mode.
        """
        target = self._pending
        if target is None:
            return
        leaving = self.current_mode
        entering = self._modes[target.name]
        self._stack.clear()
        self._current = target
        self._pending = None
        self._transition_seconds = 0.0
        if leaving is not None:
            leaving.exit()
        entering.enter(*target.args)
        _LOG.info("mode_transition_completed", extra={"mode": target.name})

    def _require(self, name: str) -> Mode:
        mode = self._modes.get(name)
        if mode is None:
            raise UnknownModeError(name)
        return mode

    def _input_target(self) -> Mode | None:
        if self._pending is not None:
            return None
        return self.current_mode


ModeController = RuntimeModeController


def _fade_color(alpha: float) -> str:
    channel = round(min(1.0, max(0.0, alpha)) * 255)
    return f"#000000{channel:02x}"

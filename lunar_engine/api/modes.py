"""Public mode and mode-controller API contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from lunar_engine.api.render import OverlayRenderer


class ModeArg(Protocol):
    """Opaque mode entry argument boundary contract."""


class Mode:
    """Base mode with no-op lifecycle, frame, and input hooks.

    Subclasses override only the hooks they care about; the controller calls
    every hook unconditionally.
    """

    def init(self) -> None:
        """Run once when the mode is registered."""

    def enter(self, *args: ModeArg) -> None:
        """Run on activation with the entry arguments."""

    def exit(self) -> None:
        """Run when the mode stops being active."""

    def pause(self) -> None:
        """Run when another mode is pushed above this one."""

    def resume(self) -> None:
        """Run when the mode above this one is popped."""

    def update(self, dt: float) -> None:
        """Advance mode-local state."""

    def draw(self) -> None:
        """Draw the mode."""

    def keypressed(self, key: str) -> None:
        pass

    def keyreleased(self, key: str) -> None:
        pass

    def mousepressed(self, x: float, y: float, button: int) -> None:
        pass

    def mousereleased(self, x: float, y: float, button: int) -> None:
        pass

    def mousemoved(self, x: float, y: float, dx: float, dy: float) -> None:
        pass

    def textinput(self, text: str) -> None:
        pass

    def cleanup(self) -> None:
        """Run once when the mode is unregistered or the controller is torn down."""


@dataclass(frozen=True, slots=True)
class ModeRecord:
    """Active-mode record: registered name plus captured entry arguments."""

    name: str
    args: tuple[ModeArg, ...] = field(default_factory=tuple)


class ModeController(Protocol):
    """Public mode-controller contract."""

    @property
    def current_mode_name(self) -> str | None:
        """Return active mode name."""

    @property
    def current_mode(self) -> Mode | None:
        """Return active mode instance."""

    @property
    def is_transitioning(self) -> bool:
        """Return whether a replace transition is in flight."""

    @property
    def transition_progress(self) -> float:
        """Return transition progress in [0, 1]."""

    def register(self, name: str, mode: Mode) -> None:
        """Register one mode."""

    def unregister(self, name: str) -> None:
        """Remove one mode."""

    def replace(self, name: str, *args: ModeArg) -> None:
        """Start a timed transition to a mode."""

    def push(self, name: str, *args: ModeArg) -> None:
        """Suspend active mode and enter another synchronously."""

    def pop(self) -> bool:
        """Exit active mode and resume the suspended one."""

    def is_active(self, name: str) -> bool:
        """Return whether `name` is the active mode."""

    def update(self, dt: float) -> None:
        """Advance transition or active mode."""

    def draw(self) -> None:
        """Draw active mode and transition overlay."""

    def keypressed(self, key: str) -> None: ...

    def keyreleased(self, key: str) -> None: ...

    def mousepressed(self, x: float, y: float, button: int) -> None: ...

    def mousereleased(self, x: float, y: float, button: int) -> None: ...

    def mousemoved(self, x: float, y: float, dx: float, dy: float) -> None: ...

    def textinput(self, text: str) -> None: ...

    def teardown(self) -> None:
        """Exit active mode and clean up every registered mode."""


def create_mode_controller(
    *,
    max_transition_seconds: float | None = None,
    renderer: OverlayRenderer | None = None,
) -> ModeController:
    """Create default mode-controller implementation.

    `max_transition_seconds` falls back to the runtime default when omitted.
    """
    from lunar_engine.runtime.config import DEFAULT_MAX_TRANSITION_SECONDS
    from lunar_engine.runtime.mode_controller import RuntimeModeController

    if max_transition_seconds is None:
        max_transition_seconds = DEFAULT_MAX_TRANSITION_SECONDS
    return RuntimeModeController(
        max_transition_seconds=max_transition_seconds,
        renderer=renderer,
    )

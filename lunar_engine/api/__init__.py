"""Public engine API contracts."""

from lunar_engine.api.input_events import KeyEvent, PointerEvent
from lunar_engine.api.logging import EngineLoggingConfig, JsonFormatter
from lunar_engine.api.modes import (
    Mode,
    ModeArg,
    ModeController,
    ModeRecord,
    create_mode_controller,
)
from lunar_engine.api.render import OverlayRenderer
from lunar_engine.api.scheduler import (
    ChainStep,
    Scheduler,
    TaskCallback,
    TaskKind,
    TweenTarget,
    TweenUpdateCallback,
    create_scheduler,
)

__all__ = [
    "ChainStep",
    "EngineLoggingConfig",
    "JsonFormatter",
    "KeyEvent",
    "Mode",
    "ModeArg",
    "ModeController",
    "ModeRecord",
    "OverlayRenderer",
    "PointerEvent",
    "Scheduler",
    "TaskCallback",
    "TaskKind",
    "TweenTarget",
    "TweenUpdateCallback",
    "create_mode_controller",
    "create_scheduler",
]

"""Engine runtime modules."""

from lunar_engine.api.modes import Mode, ModeRecord
from lunar_engine.runtime.config import RuntimeConfig, load_runtime_config
from lunar_engine.runtime.easing import EASINGS, resolve_easing
from lunar_engine.runtime.errors import (
    DuplicateOrMissingArgumentError,
    ModeControllerError,
    UnknownModeError,
)
from lunar_engine.runtime.host import ModeHost, ModeHostConfig
from lunar_engine.runtime.logging import setup_engine_logging
from lunar_engine.runtime.mode_controller import ModeController
from lunar_engine.runtime.scheduler import Scheduler
from lunar_engine.runtime.time import FrameClock, TimeContext

__all__ = [
    "DuplicateOrMissingArgumentError",
    "EASINGS",
    "FrameClock",
    "Mode",
    "ModeController",
    "ModeControllerError",
    "ModeHost",
    "ModeHostConfig",
    "ModeRecord",
    "RuntimeConfig",
    "Scheduler",
    "TimeContext",
    "UnknownModeError",
    "load_runtime_config",
    "resolve_easing",
    "setup_engine_logging",
]

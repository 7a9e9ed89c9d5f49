"""Runtime error taxonomy and exception policy helpers."""

from __future__ import annotations

import logging


class ModeControllerError(RuntimeError):
    """Base class for mode-controller wiring errors."""


class DuplicateOrMissingArgumentError(ModeControllerError, ValueError):
    """Raised when a mode is registered without a name/instance or twice."""


class UnknownModeError(ModeControllerError, KeyError):
    """Raised when an unregistered mode name is activated."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown mode: {name}")
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])


def log_recoverable(
    logger: logging.Logger,
    message: str,
    *,
    level: int = logging.DEBUG,
) -> None:
    """Emit structured observability for tolerated recoverable exceptions."""
    logger.log(level, message, exc_info=True)

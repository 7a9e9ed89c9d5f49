"""Runtime configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_MAX_TRANSITION_SECONDS = 0.3
DEFAULT_MAX_FRAME_DELTA_SECONDS = 0.25


def _positive_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if value <= 0.0:
        return default
    return value


def _choice(name: str, choices: frozenset[str], default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    return value if value in choices else default


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """Immutable runtime configuration."""

    max_transition_seconds: float
    max_frame_delta_seconds: float
    log_level: str
    log_format: str
    log_file: str | None = None


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve runtime log level with engine-prefixed override."""
    value = os.getenv("LUNAR_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def load_runtime_config() -> RuntimeConfig:
    """Load immutable runtime configuration from env vars."""
    log_file = os.getenv("LUNAR_LOG_FILE", "").strip()
    return RuntimeConfig(
        max_transition_seconds=_positive_float(
            "LUNAR_MAX_TRANSITION_SECONDS", DEFAULT_MAX_TRANSITION_SECONDS
        ),
        max_frame_delta_seconds=_positive_float(
            "LUNAR_MAX_FRAME_DELTA", DEFAULT_MAX_FRAME_DELTA_SECONDS
        ),
        log_level=resolve_log_level_name(),
        log_format=_choice("LUNAR_LOG_FORMAT", frozenset({"text", "json"}), "text"),
        log_file=log_file or None,
    )

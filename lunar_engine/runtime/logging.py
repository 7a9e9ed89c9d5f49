"""Root logging pipeline for the mode host.

Console output is synchronous unless a file sink is configured; then every
handler runs behind a queue listener.
"""

from __future__ import annotations

import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from lunar_engine.api.logging import EngineLoggingConfig, JsonFormatter
from lunar_engine.runtime.config import RuntimeConfig, load_runtime_config

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_listener: QueueListener | None = None


def engine_logging_config(config: RuntimeConfig) -> EngineLoggingConfig:
    """Map env-sourced runtime settings onto the logging pipeline."""
    return EngineLoggingConfig(
        level_name=config.log_level,
        console_format=config.log_format,
        file_path=config.log_file,
        file_format="json",
    )


def configure_engine_logging(config: EngineLoggingConfig) -> None:
    """Replace root handlers with the configured console and file sinks."""
    global _listener

    _stop_listener()
    handlers = _build_handlers(config)
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(_resolve_level(config.level_name))

    if not config.file_path:
        for handler in handlers:
            root.addHandler(handler)
        return

    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(records))
    _listener = QueueListener(records, *handlers, respect_handler_level=True)
    _listener.start()


def setup_engine_logging() -> None:
    """Configure logging from `LUNAR_*` env vars unless the root logger is already set up."""
    if logging.getLogger().handlers:
        return
    configure_engine_logging(engine_logging_config(load_runtime_config()))


def shutdown_engine_logging() -> None:
    """Drain queued records and close the file sink. No-op without one."""
    _stop_listener()


def get_engine_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _build_handlers(config: EngineLoggingConfig) -> list[logging.Handler]:
    console = logging.StreamHandler()
    console.setFormatter(_resolve_formatter(config.console_format))
    handlers: list[logging.Handler] = [console]
    if config.file_path:
        path = Path(config.file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
        sink.setFormatter(_resolve_formatter(config.file_format))
        handlers.append(sink)
    return handlers


def _stop_listener() -> None:
    global _listener

    if _listener is None:
        return
    _listener.stop()
    for handler in _listener.handlers:
        handler.close()
    _listener = None


def _resolve_level(name: str) -> int:
    return logging.getLevelNamesMapping().get(name.strip().upper(), logging.INFO)


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(_TEXT_FORMAT)

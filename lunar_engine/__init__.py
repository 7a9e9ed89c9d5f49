"""Runtime control core: mode controller, scheduler, and host shell."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lunar_engine.api.render import OverlayRenderer
    from lunar_engine.runtime.host import ModeHost


def create_host(*, renderer: "OverlayRenderer | None" = None) -> "ModeHost":
    """Create an environment-configured host with engine logging installed."""
    from lunar_engine.runtime.config import load_runtime_config
    from lunar_engine.runtime.host import ModeHost, ModeHostConfig
    from lunar_engine.runtime.logging import setup_engine_logging

    setup_engine_logging()
    config = ModeHostConfig.from_runtime_config(load_runtime_config())
    return ModeHost(config, renderer=renderer)


__all__ = ["create_host"]

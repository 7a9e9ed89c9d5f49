"""Rendering surface consumed by the runtime core."""

from __future__ import annotations

from typing import Protocol


class OverlayRenderer(Protocol):
    """Minimal presentation-layer capability used for transition overlays."""

    def fill_window(self, key: str, color: str, z: float = -100.0) -> None:
        """Fill the full window area with a `#rrggbbaa` color."""

"""Public input event types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PointerEvent:
    """Raw pointer event in window pixel coordinates.

    `event_type` is one of `pointer_down`, `pointer_up`, `pointer_move`;
    `dx`/`dy` are only meaningful for moves.
    """

    event_type: str
    x: float
    y: float
    button: int = 0
    dx: float = 0.0
    dy: float = 0.0


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Raw key/char event: `key_down`, `key_up`, or `char`."""

    event_type: str
    value: str


__all__ = ["KeyEvent", "PointerEvent"]

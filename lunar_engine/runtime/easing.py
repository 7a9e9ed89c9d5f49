"""Easing functions for tween interpolation.

Every function maps linear progress ``t`` in [0, 1] to eased progress.
Overshooting curves (back, elastic) leave [0, 1] mid-flight but always
return exactly 0 at ``t == 0`` and 1 at ``t == 1``.
"""

from __future__ import annotations

import math
from collections.abc import Callable

EasingFn = Callable[[float], float]

_BACK_C1 = 1.70158
_BACK_C2 = _BACK_C1 * 1.525
_BACK_C3 = _BACK_C1 + 1.0
_ELASTIC_C4 = (2.0 * math.pi) / 3.0
_ELASTIC_C5 = (2.0 * math.pi) / 4.5
_BOUNCE_N1 = 7.5625
_BOUNCE_D1 = 2.75


def linear(t: float) -> float:
    return t


def quad_in(t: float) -> float:
    return t * t


def quad_out(t: float) -> float:
    return 1.0 - (1.0 - t) * (1.0 - t)


def quad_in_out(t: float) -> float:
    if t < 0.5:
        return 2.0 * t * t
    return 1.0 - (-2.0 * t + 2.0) ** 2 / 2.0


def cubic_in(t: float) -> float:
    return t**3


def cubic_out(t: float) -> float:
    return 1.0 - (1.0 - t) ** 3


def cubic_in_out(t: float) -> float:
    if t < 0.5:
        return 4.0 * t**3
    return 1.0 - (-2.0 * t + 2.0) ** 3 / 2.0


def quart_in(t: float) -> float:
    return t**4


def quart_out(t: float) -> float:
    return 1.0 - (1.0 - t) ** 4


def quart_in_out(t: float) -> float:
    if t < 0.5:
        return 8.0 * t**4
    return 1.0 - (-2.0 * t + 2.0) ** 4 / 2.0


def quint_in(t: float) -> float:
    return t**5


def quint_out(t: float) -> float:
    return 1.0 - (1.0 - t) ** 5


def quint_in_out(t: float) -> float:
    if t < 0.5:
        return 16.0 * t**5
    return 1.0 - (-2.0 * t + 2.0) ** 5 / 2.0


def sine_in(t: float) -> float:
    return 1.0 - math.cos((t * math.pi) / 2.0)


def sine_out(t: float) -> float:
    return math.sin((t * math.pi) / 2.0)


def sine_in_out(t: float) -> float:
    return -(math.cos(math.pi * t) - 1.0) / 2.0


def expo_in(t: float) -> float:
    if t == 0.0:
        return 0.0
    return 2.0 ** (10.0 * t - 10.0)


def expo_out(t: float) -> float:
    if t == 1.0:
        return 1.0
    return 1.0 - 2.0 ** (-10.0 * t)


def expo_in_out(t: float) -> float:
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    if t < 0.5:
        return 2.0 ** (20.0 * t - 10.0) / 2.0
    return (2.0 - 2.0 ** (-20.0 * t + 10.0)) / 2.0


def circ_in(t: float) -> float:
    return 1.0 - math.sqrt(max(0.0, 1.0 - t * t))


def circ_out(t: float) -> float:
    return math.sqrt(max(0.0, 1.0 - (t - 1.0) ** 2))


def circ_in_out(t: float) -> float:
    if t < 0.5:
        return (1.0 - math.sqrt(max(0.0, 1.0 - (2.0 * t) ** 2))) / 2.0
    return (math.sqrt(max(0.0, 1.0 - (-2.0 * t + 2.0) ** 2)) + 1.0) / 2.0


def back_in(t: float) -> float:
    return _BACK_C3 * t**3 - _BACK_C1 * t * t


def back_out(t: float) -> float:
    return 1.0 + _BACK_C3 * (t - 1.0) ** 3 + _BACK_C1 * (t - 1.0) ** 2


def back_in_out(t: float) -> float:
    if t < 0.5:
        return ((2.0 * t) ** 2 * ((_BACK_C2 + 1.0) * 2.0 * t - _BACK_C2)) / 2.0
    return ((2.0 * t - 2.0) ** 2 * ((_BACK_C2 + 1.0) * (t * 2.0 - 2.0) + _BACK_C2) + 2.0) / 2.0


def elastic_in(t: float) -> float:
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    return -(2.0 ** (10.0 * t - 10.0)) * math.sin((t * 10.0 - 10.75) * _ELASTIC_C4)


def elastic_out(t: float) -> float:
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    return 2.0 ** (-10.0 * t) * math.sin((t * 10.0 - 0.75) * _ELASTIC_C4) + 1.0


def elastic_in_out(t: float) -> float:
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    if t < 0.5:
        return -(2.0 ** (20.0 * t - 10.0) * math.sin((20.0 * t - 11.125) * _ELASTIC_C5)) / 2.0
    return (2.0 ** (-20.0 * t + 10.0) * math.sin((20.0 * t - 11.125) * _ELASTIC_C5)) / 2.0 + 1.0


def bounce_out(t: float) -> float:
    if t < 1.0 / _BOUNCE_D1:
        return _BOUNCE_N1 * t * t
    if t < 2.0 / _BOUNCE_D1:
        t -= 1.5 / _BOUNCE_D1
        return _BOUNCE_N1 * t * t + 0.75
    if t < 2.5 / _BOUNCE_D1:
        t -= 2.25 / _BOUNCE_D1
        return _BOUNCE_N1 * t * t + 0.9375
    t -= 2.625 / _BOUNCE_D1
    return _BOUNCE_N1 * t * t + 0.984375


def bounce_in(t: float) -> float:
    return 1.0 - bounce_out(1.0 - t)


def bounce_in_out(t: float) -> float:
    if t < 0.5:
        return (1.0 - bounce_out(1.0 - 2.0 * t)) / 2.0
    return (1.0 + bounce_out(2.0 * t - 1.0)) / 2.0


EASINGS: dict[str, EasingFn] = {
    "linear": linear,
    "quadIn": quad_in,
    "quadOut": quad_out,
    "quadInOut": quad_in_out,
    "cubicIn": cubic_in,
    "cubicOut": cubic_out,
    "cubicInOut": cubic_in_out,
    "quartIn": quart_in,
    "quartOut": quart_out,
    "quartInOut": quart_in_out,
    "quintIn": quint_in,
    "quintOut": quint_out,
    "quintInOut": quint_in_out,
    "sineIn": sine_in,
    "sineOut": sine_out,
    "sineInOut": sine_in_out,
    "expoIn": expo_in,
    "expoOut": expo_out,
    "expoInOut": expo_in_out,
    "circIn": circ_in,
    "circOut": circ_out,
    "circInOut": circ_in_out,
    "backIn": back_in,
    "backOut": back_out,
    "backInOut": back_in_out,
    "elasticIn": elastic_in,
    "elasticOut": elastic_out,
    "elasticInOut": elastic_in_out,
    "bounceIn": bounce_in,
    "bounceOut": bounce_out,
    "bounceInOut": bounce_in_out,
}


def resolve_easing(name: str) -> EasingFn:
    """Return easing function by name."""
    easing = EASINGS.get(name)
    if easing is None:
        raise ValueError(f"unknown easing: {name}")
    return easing

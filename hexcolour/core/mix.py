"""Weighted colour mean, linear ramps and the double quadratic Bezier curve.

Independent of the hex encoder. Colour scales build on these helpers.
"""

from __future__ import annotations

import math

import numpy as np

from hexcolour.core.colour import Colour, Gray
from hexcolour.core.types import DomainError


def lerp(x: float, a: float, b: float) -> float:
    """Linear interpolation in [a, b]; x is clamped into [0, 1]."""
    return a + (b - a) * max(min(x, 1.0), 0.0)


def weighted_color_mean(w1: float, c1: Colour, c2: Colour) -> Colour:
    """The colour w1*c1 + (1-w1)*c2, where c1 has weight 0 <= w1 <= 1."""
    if isinstance(c1, Gray) and isinstance(c2, Gray) and c1.is_bit and c2.is_bit:
        # Mixing two single-bit greys would need a wider channel type
        raise DomainError('weighted mean of two single-bit Gray colours is undefined')
    if type(c1) is not type(c2):
        raise TypeError(f'cannot mix {type(c1).__name__} with {type(c2).__name__}')
    weight1 = float(w1)
    if not 0.0 <= weight1 <= 1.0:
        raise DomainError(f'weight {w1!r} outside [0, 1]')
    weight2 = 1.0 - weight1

    def mix(x: float, y: float) -> float:
        if x == y:
            return x
        # Stay within [x, y] despite rounding
        return min(max(weight1 * x + weight2 * y, min(x, y)), max(x, y))

    return c1.from_channels(mix(x, y) for x, y in zip(c1.channels(), c2.channels()))


def colour_range(start: Colour, stop: Colour, length: int = 100) -> list[Colour]:
    """`length` colours linearly interpolated from start to stop, inclusive."""
    if length < 2:
        raise DomainError(f'a colour ramp needs at least 2 colours, got {length}')
    return [weighted_color_mean(float(w), start, stop) for w in np.linspace(1.0, 0.0, length)]


def _quad(t: float, a: float, b: float, c: float) -> float:
    return a * (1.0 - t) ** 2 + 2.0 * b * (1.0 - t) * t + c * t**2


def _inv_quad(t: float, a: float, b: float, c: float) -> float:
    return (a - b + math.sqrt(b**2 - a * c + (a - 2.0 * b + c) * t)) / (a - 2.0 * b + c)


def bezier(t: float, p0: float, p2: float, q0: float, q1: float, q2: float) -> float:
    """Double quadratic Bezier curve, split at t = 0.5.

    The first half runs p0 -> q1 with control q0, the second q1 -> p2 with
    control q2.
    """
    if t <= 0.5:
        return _quad(2.0 * t, p0, q0, q1)
    return _quad(2.0 * (t - 0.5), q1, q2, p2)


def inv_bezier(t: float, p0: float, p2: float, q0: float, q1: float, q2: float) -> float:
    """Parameter of value t on the double quadratic Bezier curve.

    Control points must be monotonic; nothing guards the square root or a
    zero denominator.
    """
    if t < q1:
        return 0.5 * _inv_quad(t, p0, q0, q1)
    return 0.5 * _inv_quad(t, q1, q2, p2) + 0.5

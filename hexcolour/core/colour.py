"""Colour value types: RGB, ARGB, RGBA, Gray.

Channels are floats in [0, 1]. Each type knows its shape (where alpha sits,
if anywhere) and how to pack itself into a 32-bit 0xAARRGGBB integer.
Opaque colours pack with alpha = 0xFF.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields
from enum import Enum


class ColourShape(Enum):
    """Where the alpha channel sits, if the colour has one."""

    OPAQUE = 'opaque'
    ALPHA_LEADING = 'alpha-leading'
    ALPHA_TRAILING = 'alpha-trailing'


def _to_u8(x: float) -> int:
    """Quantise a [0, 1] channel to 0..255 (round half to even)."""
    if not 0.0 <= x <= 1.0:
        raise ValueError(f'channel value {x!r} outside [0, 1]')
    return round(float(x) * 255)


def pack_argb32(r: float, g: float, b: float, alpha: float = 1.0) -> int:
    """Pack four [0, 1] channels into 0xAARRGGBB."""
    return (_to_u8(alpha) << 24) | (_to_u8(r) << 16) | (_to_u8(g) << 8) | _to_u8(b)


class _Colour(ABC):
    shape: ColourShape = ColourShape.OPAQUE

    def channels(self) -> tuple:
        return tuple(getattr(self, f.name) for f in fields(self))  # type: ignore[arg-type]

    @classmethod
    def from_channels(cls, values):
        return cls(*values)

    @abstractmethod
    def argb32(self) -> int:
        """Pack into 0xAARRGGBB."""


@dataclass(frozen=True)
class RGB(_Colour):
    """Opaque colour."""

    r: float
    g: float
    b: float

    def argb32(self) -> int:
        return pack_argb32(self.r, self.g, self.b)


@dataclass(frozen=True)
class ARGB(_Colour):
    """Colour with alpha leading the colour channels."""

    r: float
    g: float
    b: float
    alpha: float = 1.0

    shape = ColourShape.ALPHA_LEADING

    def argb32(self) -> int:
        return pack_argb32(self.r, self.g, self.b, self.alpha)


@dataclass(frozen=True)
class RGBA(_Colour):
    """Colour with alpha trailing the colour channels."""

    r: float
    g: float
    b: float
    alpha: float = 1.0

    shape = ColourShape.ALPHA_TRAILING

    def argb32(self) -> int:
        return pack_argb32(self.r, self.g, self.b, self.alpha)


@dataclass(frozen=True)
class Gray(_Colour):
    """Opaque grey. A bool value is a single-bit channel."""

    val: float | bool

    @property
    def is_bit(self) -> bool:
        return isinstance(self.val, bool)

    def argb32(self) -> int:
        v = float(self.val)
        return pack_argb32(v, v, v)


Colour = RGB | ARGB | RGBA | Gray

"""Public encoding API: to_hex and the legacy alpha-position variant.

Example:
    to_hex(RGB(1, 0.5, 0))                          -> 'FF8000'
    to_hex(ARGB(1, 0.5, 0, 0.25), 'AARRGGBB')       -> '40FF8000'
    to_hex(RGBA(1, 0.533, 0, 0.267), 'rrggbbaa')    -> 'ff880044'
    to_hex(RGBA(1, 0.533, 0, 0.267), 'rgba')        -> 'f804'
    to_hex(ARGB(1, 0.533, 0, 0.267), 'S')           -> '4F80'
"""

from __future__ import annotations

import warnings

from hexcolour.core.colour import Colour, ColourShape
from hexcolour.core.notation import Case, ChannelOrder, NotationDescriptor, resolve_style
from hexcolour.core.packing import encode, refine
from hexcolour.core.render import render

_LEGACY_ARGB8 = NotationDescriptor(ChannelOrder.ARGB, Case.UPPER, 8)


def encode_packed(descriptor: NotationDescriptor, shape: ColourShape, u: int) -> str:
    """Render a packed 0xAARRGGBB value under a descriptor."""
    concrete = refine(descriptor, shape, u)
    return render(encode(concrete, u), concrete.case)


def to_hex(colour: Colour, style: str | None = None) -> str:
    """Hex string of a colour, without '#'.

    style is a token from STYLES. None, 'AUTO' and unknown tokens pick the
    notation from the colour's own shape.
    """
    return encode_packed(resolve_style(style), colour.shape, colour.argb32())


def to_hex_legacy(colour: Colour) -> str:
    """Old no-style behaviour: alpha-trailing colours render alpha first.

    Deprecated. Use to_hex(c, 'AARRGGBB') for the alpha-first string.
    """
    warnings.warn(
        f'to_hex_legacy() puts alpha first for {type(colour).__name__}; '
        "use to_hex(c, 'AARRGGBB') or to_hex(c) instead",
        DeprecationWarning,
        stacklevel=2,
    )
    if colour.shape is ColourShape.ALPHA_TRAILING:
        return encode_packed(_LEGACY_ARGB8, colour.shape, colour.argb32())
    return to_hex(colour)

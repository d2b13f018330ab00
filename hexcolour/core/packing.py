"""Bit-packing encoder: packed 0xAARRGGBB colour -> nibbles in render order.

Long forms (6/8 digits) read two nibbles per channel straight out of the
32-bit value. Short forms (3/4 digits) first halve every byte with a single
multiply-add on a widened 64-bit value, then read one nibble per channel.

Offsets in the tables below are left shifts that bring the wanted nibble to
the top of the word, so nibble = (u << offset) >> (width - 4).

Halving
-------
Doubling a nibble n gives the byte n * 0x11. The inverse, round(x / 17), is
computed for all four bytes at once:

    0xAARRGGBB -> 0x00AA00GG00RR00BB        (one byte per 16-bit lane)
    q = lanes * 0xF + 0x0087_0087_0087_0087

Each lane then holds x * 15 + 135, whose bits 8..11 equal round(x / 17) for
every x in 0..255. No lane exceeds 0xF78, so lanes never carry into each other.
For doubled bytes (0x00, 0x11, ... 0xFF) the result is exactly x >> 4.
"""

from __future__ import annotations

import numpy as np

from hexcolour.core.colour import ColourShape
from hexcolour.core.notation import ChannelOrder, NotationDescriptor

SHORT_MASK = 0x0F0F0F0F
HALVING_BIAS = 0x0087_0087_0087_0087

LONG_OFFSETS: dict[ChannelOrder, tuple[int, ...]] = {
    ChannelOrder.RGB: (0x08, 0x0C, 0x10, 0x14, 0x18, 0x1C),
    ChannelOrder.ARGB: (0x00, 0x04, 0x08, 0x0C, 0x10, 0x14, 0x18, 0x1C),
    ChannelOrder.RGBA: (0x08, 0x0C, 0x10, 0x14, 0x18, 0x1C, 0x00, 0x04),
}

# Lanes of the halved value, top to bottom: A, G, R, B
SHORT_OFFSETS: dict[ChannelOrder, tuple[int, ...]] = {
    ChannelOrder.RGB: (0x24, 0x14, 0x34),
    ChannelOrder.ARGB: (0x04, 0x24, 0x14, 0x34),
    ChannelOrder.RGBA: (0x24, 0x14, 0x34, 0x04),
}

_AUTO_ORDER = {
    ColourShape.OPAQUE: ChannelOrder.RGB,
    ColourShape.ALPHA_LEADING: ChannelOrder.ARGB,
    ColourShape.ALPHA_TRAILING: ChannelOrder.RGBA,
}


def is_short_eligible(u: int) -> bool:
    """True if every byte of u has equal high and low nibbles."""
    return (u & SHORT_MASK) * 0x11 == u


def halve(u: int) -> int:
    """Widen 0xAARRGGBB into 16-bit lanes and divide each byte by 17, rounded.

    Returns the 64-bit value whose lane bits 8..11 hold the halved bytes.
    """
    u64 = np.uint64(u)
    unpacked = ((u64 & np.uint64(0xFF00FF00)) << np.uint64(24)) | (u64 & np.uint64(0x00FF00FF))
    q = unpacked * np.uint64(0xF) + np.uint64(HALVING_BIAS)
    return int(q)


def _nibbles(u: int, width: int, offsets: tuple[int, ...]) -> tuple[int, ...]:
    top = width - 4
    return tuple((u >> (top - i)) & 0xF for i in offsets)


def refine(descriptor: NotationDescriptor, shape: ColourShape, u: int) -> NotationDescriptor:
    """Turn auto/short descriptors into a concrete one for this colour.

    Short forms requested for a colour that is not short-eligible fall back
    to the long form with the same order and case.
    """
    if descriptor.is_concrete:
        if descriptor.is_short_form and not is_short_eligible(u):
            return NotationDescriptor(descriptor.order, descriptor.case, 2 * descriptor.digits)
        return descriptor

    order = _AUTO_ORDER[shape]
    n = order.channel_count
    if descriptor.short and is_short_eligible(u):
        return NotationDescriptor(order, descriptor.case, n)
    return NotationDescriptor(order, descriptor.case, 2 * n)


def encode(descriptor: NotationDescriptor, u: int) -> tuple[int, ...]:
    """Nibbles of packed colour u in the order the descriptor renders them."""
    if not descriptor.is_concrete:
        raise ValueError('encode() needs a concrete descriptor; call refine() first')
    order = descriptor.order
    if descriptor.is_short_form:
        return _nibbles(halve(u), 64, SHORT_OFFSETS[order])
    return _nibbles(u, 32, LONG_OFFSETS[order])

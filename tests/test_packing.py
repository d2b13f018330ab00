"""Tests for hexcolour.core.packing — eligibility, halving and nibble order."""

import numpy as np
import pytest
from hexcolour.core.colour import ColourShape
from hexcolour.core.notation import AUTO, SHORT_LOWER, SHORT_UPPER, Case, ChannelOrder, NotationDescriptor
from hexcolour.core.packing import encode, halve, is_short_eligible, refine

DOUBLED = [n * 0x11 for n in range(16)]


def _bytes_doubled(u: int) -> bool:
    """Reference check: every byte has equal high and low nibble."""
    return all(((u >> s) & 0xF) == ((u >> (s + 4)) & 0xF) for s in (0, 8, 16, 24))


def _lane(q: int, lane: int) -> int:
    """Halved nibble of lane 0..3 (B, R, G, A from the bottom)."""
    return (q >> (16 * lane + 8)) & 0xF


def _spread(x: int) -> int:
    """Same byte in all four positions."""
    return x * 0x01010101


class TestHalving:
    def test_matches_rounded_division_for_every_byte(self):
        for x in range(256):
            q = halve(_spread(x))
            expected = int(np.floor(x / 17 + 0.5))
            for lane in range(4):
                assert _lane(q, lane) == expected, (x, lane)

    def test_doubled_bytes_give_high_nibble(self):
        for x in DOUBLED:
            q = halve(_spread(x))
            assert [_lane(q, lane) for lane in range(4)] == [x >> 4] * 4

    def test_lanes_are_independent(self):
        # 0xAARRGGBB = 0xFF 0x00 0x11 0xEE -> lanes B, R, G, A
        q = halve(0xFF0011EE)
        assert [_lane(q, lane) for lane in range(4)] == [0xE, 0x0, 0x1, 0xF]

    def test_result_fits_in_64_bits(self):
        assert halve(0xFFFFFFFF) < 1 << 64


class TestShortEligibility:
    @pytest.mark.parametrize('u', [0x00000000, 0xFFFFFFFF, 0xFF112233, 0x44FF8800, 0xEEDDCCBB])
    def test_doubled_values_eligible(self, u):
        assert is_short_eligible(u)

    @pytest.mark.parametrize('u', [0xFFFF8000, 0x40FF8000, 0xFF112234, 0x01000000, 0xFF10FFFF])
    def test_other_values_not_eligible(self, u):
        assert not is_short_eligible(u)

    def test_agrees_with_bytewise_check_on_samples(self):
        rng = np.random.default_rng(42)
        samples = rng.integers(0, 1 << 32, size=20000, dtype=np.uint64)
        for u in samples:
            u = int(u)
            assert is_short_eligible(u) == _bytes_doubled(u), hex(u)

    def test_agrees_on_all_doubled_and_near_doubled(self):
        rng = np.random.default_rng(42)
        nibbles = rng.integers(0, 16, size=(2000, 4))
        for row in nibbles:
            u = sum(int(n) * 0x11 << (8 * i) for i, n in enumerate(row))
            assert is_short_eligible(u)
            # Flip one low bit in a random byte: never eligible
            flipped = u ^ (1 << (8 * int(row[0] % 4)))
            assert is_short_eligible(flipped) == _bytes_doubled(flipped)
            assert not is_short_eligible(flipped)


class TestLongEncode:
    def test_rgb6_byte_order(self):
        d = NotationDescriptor(ChannelOrder.RGB, Case.UPPER, 6)
        assert encode(d, 0x40FF8000) == (0xF, 0xF, 0x8, 0x0, 0x0, 0x0)

    def test_argb8_byte_order(self):
        d = NotationDescriptor(ChannelOrder.ARGB, Case.UPPER, 8)
        assert encode(d, 0x40FF8000) == (0x4, 0x0, 0xF, 0xF, 0x8, 0x0, 0x0, 0x0)

    def test_rgba8_moves_alpha_last(self):
        d = NotationDescriptor(ChannelOrder.RGBA, Case.UPPER, 8)
        assert encode(d, 0x40FF8000) == (0xF, 0xF, 0x8, 0x0, 0x0, 0x0, 0x4, 0x0)

    def test_matches_format_on_samples(self):
        rng = np.random.default_rng(42)
        argb8 = NotationDescriptor(ChannelOrder.ARGB, Case.LOWER, 8)
        rgba8 = NotationDescriptor(ChannelOrder.RGBA, Case.LOWER, 8)
        rgb6 = NotationDescriptor(ChannelOrder.RGB, Case.LOWER, 6)
        for u in rng.integers(0, 1 << 32, size=2000, dtype=np.uint64):
            u = int(u)
            digits = tuple(int(c, 16) for c in f'{u:08x}')
            assert encode(argb8, u) == digits
            assert encode(rgba8, u) == digits[2:] + digits[:2]
            assert encode(rgb6, u) == digits[2:]


class TestShortEncode:
    # alpha 0x44, red 0xFF, green 0x88, blue 0x00
    U = 0x44FF8800

    def test_rgb3(self):
        assert encode(NotationDescriptor(ChannelOrder.RGB, Case.UPPER, 3), self.U) == (0xF, 0x8, 0x0)

    def test_argb4_alpha_first(self):
        assert encode(NotationDescriptor(ChannelOrder.ARGB, Case.UPPER, 4), self.U) == (0x4, 0xF, 0x8, 0x0)

    def test_rgba4_alpha_last(self):
        assert encode(NotationDescriptor(ChannelOrder.RGBA, Case.UPPER, 4), self.U) == (0xF, 0x8, 0x0, 0x4)

    def test_rejects_unresolved_descriptor(self):
        with pytest.raises(ValueError):
            encode(AUTO, self.U)


class TestRefine:
    @pytest.mark.parametrize(
        'shape, order, digits',
        [
            (ColourShape.OPAQUE, ChannelOrder.RGB, 6),
            (ColourShape.ALPHA_LEADING, ChannelOrder.ARGB, 8),
            (ColourShape.ALPHA_TRAILING, ChannelOrder.RGBA, 8),
        ],
    )
    def test_auto_follows_shape(self, shape, order, digits):
        assert refine(AUTO, shape, 0xFF112233) == NotationDescriptor(order, Case.UPPER, digits)

    def test_short_auto_eligible(self):
        assert refine(SHORT_LOWER, ColourShape.ALPHA_LEADING, 0x44FF8800) == NotationDescriptor(
            ChannelOrder.ARGB, Case.LOWER, 4
        )
        assert refine(SHORT_UPPER, ColourShape.OPAQUE, 0xFFFF8800) == NotationDescriptor(
            ChannelOrder.RGB, Case.UPPER, 3
        )

    def test_short_auto_not_eligible_goes_long(self):
        assert refine(SHORT_UPPER, ColourShape.OPAQUE, 0xFFFF8000) == NotationDescriptor(
            ChannelOrder.RGB, Case.UPPER, 6
        )

    def test_explicit_short_falls_back_to_long(self):
        rgba4 = NotationDescriptor(ChannelOrder.RGBA, Case.LOWER, 4)
        assert refine(rgba4, ColourShape.OPAQUE, 0xFFFF8001) == NotationDescriptor(
            ChannelOrder.RGBA, Case.LOWER, 8
        )

    def test_explicit_long_untouched(self):
        rgb6 = NotationDescriptor(ChannelOrder.RGB, Case.LOWER, 6)
        assert refine(rgb6, ColourShape.ALPHA_TRAILING, 0xFF112233) is rgb6

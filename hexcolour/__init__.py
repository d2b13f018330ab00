"""hexcolour — hexadecimal colour encoding with auto/short/long notation styles."""

from hexcolour.core.colour import ARGB, RGB, RGBA, ColourShape, Gray
from hexcolour.core.hexstr import to_hex, to_hex_legacy
from hexcolour.core.mix import bezier, colour_range, inv_bezier, lerp, weighted_color_mean
from hexcolour.core.notation import STYLES, resolve_style
from hexcolour.core.types import DomainError

__version__ = '0.1.0'

__all__ = [
    'ARGB',
    'RGB',
    'RGBA',
    'Gray',
    'ColourShape',
    'DomainError',
    'STYLES',
    'resolve_style',
    'to_hex',
    'to_hex_legacy',
    'weighted_color_mean',
    'colour_range',
    'lerp',
    'bezier',
    'inv_bezier',
]

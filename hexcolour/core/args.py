"""Parse colour values given on the command line.

Accepts 'r,g,b' or 'r,g,b,a'. Components are integers 0..255, or fractions
in [0, 1] as soon as any component contains a '.'.
"""

from hexcolour.core.colour import ARGB, RGB, RGBA, Colour


def parse_channels(text: str) -> tuple[float, ...]:
    """Split and scale 'r,g,b[,a]' into [0, 1] floats."""
    parts = [p.strip() for p in text.split(',') if p.strip()]
    if len(parts) not in (3, 4):
        raise ValueError(f'expected 3 or 4 comma-separated channels, got {len(parts)}: {text!r}')
    fractional = any('.' in p for p in parts)
    values = []
    for p in parts:
        try:
            v = float(p) if fractional else int(p)
        except ValueError:
            raise ValueError(f'not a number: {p!r}') from None
        if fractional:
            if not 0.0 <= v <= 1.0:
                raise ValueError(f'fraction {p} outside [0, 1]')
            values.append(v)
        else:
            if not 0 <= v <= 255:
                raise ValueError(f'channel {p} outside 0..255')
            values.append(v / 255)
    return tuple(values)


def parse_colour(text: str, alpha_first: bool = False) -> Colour:
    """Build RGB from three channels, RGBA (or ARGB) from four."""
    channels = parse_channels(text)
    if len(channels) == 3:
        return RGB(*channels)
    if alpha_first:
        return ARGB(*channels)
    return RGBA(*channels)

"""Encode one colour as a hex string.

VALUES is 'r,g,b' or 'r,g,b,a': integers 0..255, or fractions in [0, 1]
when any component contains a '.'. Three values make an opaque RGB colour.
Four values make an alpha-trailing RGBA colour, or an alpha-leading ARGB
colour with --alpha-first.

--style picks the notation (see `hexcolour styles`). Without it the style
comes from HEXCOLOUR_STYLE, else AUTO: RRGGBB for opaque colours, AARRGGBB
for alpha-leading, RRGGBBAA for alpha-trailing. Unknown styles fall back to
AUTO. Short styles on colours that cannot be shortened give the long form.

--legacy uses the deprecated no-style behaviour, which renders alpha-trailing
colours alpha first. It cannot be combined with --style.

Example:
    hexcolour hex 255,128,0                     -> FF8000
    hexcolour hex 255,128,0,64 --alpha-first    -> 40FF8000
    hexcolour hex 1,0.533,0,0.267 --style rgba  -> f804
"""

import warnings

from hexcolour.core.args import parse_colour
from hexcolour.core.env import default_style
from hexcolour.core.hexstr import to_hex, to_hex_legacy
from hexcolour.core.types import Command, Report

command = Command(
    name='hex',
    help='Encode one colour as a hex string in any notation style.',
)


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('values', help="Channels as 'r,g,b[,a]'")
    parser.add_argument('-a', '--alpha-first', action='store_true', help='Four values build ARGB instead of RGBA')
    notation = parser.add_mutually_exclusive_group()
    notation.add_argument('-s', '--style', default=None, help='Style token (default: HEXCOLOUR_STYLE or AUTO)')
    notation.add_argument('--legacy', action='store_true', help='Deprecated alpha-first rendering for RGBA')


@command.run
def run(report: Report, args) -> None:
    colour = parse_colour(args.values, alpha_first=args.alpha_first)
    if args.legacy:
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter('always', DeprecationWarning)
            hex_str = to_hex_legacy(colour)
        for w in caught:
            report.note('warning', str(w.message))
        report.add(args.values, hex_str, style='legacy')
        return

    style = args.style or default_style()
    report.add(args.values, to_hex(colour, style), style=style or 'AUTO')

"""Print a linear colour ramp from START to STOP as hex strings.

Evaluates the weighted colour mean at N evenly spaced weights from 1.0
down to 0.0, so the first colour is START and the last is STOP. N defaults
to HEXCOLOUR_RAMP_LENGTH, else 10, and must be at least 2.

START and STOP take 'r,g,b[,a]' like `hex`; both must have the same
number of channels.

Example:
    hexcolour ramp 0,0,0 255,255,255 -n 5
    hexcolour ramp 255,0,0,255 0,0,255,0 -n 3 --style rrggbbaa --json
"""

from hexcolour.core.args import parse_colour
from hexcolour.core.env import default_ramp_length, default_style
from hexcolour.core.hexstr import to_hex
from hexcolour.core.mix import colour_range
from hexcolour.core.types import Command, Report

command = Command(
    name='ramp',
    help='Print a linear colour ramp between two colours as hex strings.',
)


def add_ramp_arguments(parser) -> None:
    parser.add_argument('start', help="First colour 'r,g,b[,a]'")
    parser.add_argument('stop', help="Last colour 'r,g,b[,a]'")
    parser.add_argument('-n', '--length', type=int, default=None, help='Number of colours (default: env or 10)')
    parser.add_argument('-a', '--alpha-first', action='store_true', help='Four values build ARGB instead of RGBA')


def build_ramp(args) -> list:
    """Parse START/STOP from args and return the materialised ramp."""
    start = parse_colour(args.start, alpha_first=args.alpha_first)
    stop = parse_colour(args.stop, alpha_first=args.alpha_first)
    length = args.length if args.length is not None else default_ramp_length()
    return colour_range(start, stop, length)


@command.arguments
def arguments(parser) -> None:
    add_ramp_arguments(parser)
    parser.add_argument('-s', '--style', default=None, help='Style token (default: HEXCOLOUR_STYLE or AUTO)')


@command.run
def run(report: Report, args) -> None:
    colours = build_ramp(args)
    style = args.style or default_style()
    report.note('style', style or 'AUTO')
    for i, colour in enumerate(colours):
        report.add(str(i), to_hex(colour, style))

"""List every style token with its notation and a sample rendering.

The sample colour defaults to 255,136,0,68 (alpha-trailing), which is
short-eligible, so the 3/4-digit styles show their short form. Pass
VALUES to try another colour; non-eligible colours show the long-form
fallback for short styles.

Example:
    hexcolour styles
    hexcolour styles 255,128,0 --json
"""

from hexcolour.core.args import parse_colour
from hexcolour.core.hexstr import to_hex
from hexcolour.core.notation import STYLES, NotationDescriptor
from hexcolour.core.types import Command, Report

command = Command(
    name='styles',
    help='List style tokens with their notation and a sample rendering.',
)

SAMPLE = '255,136,0,68'


def describe(descriptor: NotationDescriptor) -> str:
    """Short human description of a descriptor."""
    if descriptor.short:
        return f'short if possible, {descriptor.case.value}'
    if not descriptor.is_concrete:
        return 'auto'
    return f'{descriptor.order.name} {descriptor.case.value} {descriptor.digits} digits'


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('values', nargs='?', default=SAMPLE, help=f"Sample colour 'r,g,b[,a]' (default {SAMPLE})")
    parser.add_argument('-a', '--alpha-first', action='store_true', help='Four values build ARGB instead of RGBA')


@command.run
def run(report: Report, args) -> None:
    colour = parse_colour(args.values, alpha_first=args.alpha_first)
    report.note('sample', f'{type(colour).__name__} {args.values}')
    for token, descriptor in STYLES.items():
        report.add(token, to_hex(colour, token), notation=describe(descriptor))

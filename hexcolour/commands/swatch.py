"""Render a colour ramp as a PNG strip of square swatches.

Builds the same ramp as `ramp` and paints one --cell sized square per
colour, left to right, into OUT. Colours with alpha are written as RGBA
pixels; opaque ramps as RGB. The report lists each swatch's hex string.

Example:
    hexcolour swatch ./tmp/ramp.png 0,0,0 255,128,0 -n 8 --cell 32
"""

import os

from PIL import Image

from hexcolour.commands.ramp import add_ramp_arguments, build_ramp
from hexcolour.core.colour import ColourShape
from hexcolour.core.hexstr import to_hex
from hexcolour.core.types import Command, Report

command = Command(
    name='swatch',
    help='Render a colour ramp as a PNG strip of swatches.',
)


def _pixel(argb: int, with_alpha: bool) -> tuple[int, ...]:
    a, r, g, b = (argb >> 24) & 0xFF, (argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF
    return (r, g, b, a) if with_alpha else (r, g, b)


def paint(colours: list, cell: int) -> Image.Image:
    """One cell x cell square per colour, in ramp order."""
    with_alpha = any(c.shape is not ColourShape.OPAQUE for c in colours)
    mode = 'RGBA' if with_alpha else 'RGB'
    image = Image.new(mode, (cell * len(colours), cell))
    for i, colour in enumerate(colours):
        image.paste(_pixel(colour.argb32(), with_alpha), (i * cell, 0, (i + 1) * cell, cell))
    return image


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('out', help='Output PNG path')
    add_ramp_arguments(parser)
    parser.add_argument('-c', '--cell', type=int, default=24, help='Swatch size in pixels (default 24)')


@command.run
def run(report: Report, args) -> None:
    if args.cell < 1:
        raise ValueError(f'--cell must be positive, got {args.cell}')
    colours = build_ramp(args)
    image = paint(colours, args.cell)

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    image.save(args.out, format='PNG')

    report.note('file', args.out)
    report.note('size', f'{image.width}x{image.height}')
    for i, colour in enumerate(colours):
        report.add(str(i), to_hex(colour))

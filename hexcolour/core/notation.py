"""Hex notation descriptors and the style table.

A NotationDescriptor says which channels appear and in what order, which
letter case to use, and how many digits to emit. A digit count of 0 means
"derive from the colour": plain auto, or short-if-possible when `short` is set.

STYLES maps every accepted style token to its descriptor. It is built once at
import time and exposed read-only, so concurrent readers need no locking.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class ChannelOrder(Enum):
    RGB = 'rgb'
    ARGB = 'argb'
    RGBA = 'rgba'

    @property
    def channel_count(self) -> int:
        return 3 if self is ChannelOrder.RGB else 4


class Case(Enum):
    UPPER = 'upper'
    LOWER = 'lower'


@dataclass(frozen=True)
class NotationDescriptor:
    """Channel order, letter case and digit count of a hex notation."""

    order: ChannelOrder | None
    case: Case
    digits: int = 0  # 0 = derive from the colour
    short: bool = False  # prefer one digit per channel when lossless

    def __post_init__(self) -> None:
        if self.digits == 0:
            return
        if self.order is None:
            raise ValueError('a fixed digit count needs a channel order')
        n = self.order.channel_count
        if self.digits not in (n, 2 * n):
            raise ValueError(f'{self.digits} digits do not fit {self.order.name} ({n} channels)')

    @property
    def is_concrete(self) -> bool:
        return self.digits != 0

    @property
    def is_short_form(self) -> bool:
        return self.order is not None and self.digits == self.order.channel_count


AUTO = NotationDescriptor(None, Case.UPPER)
SHORT_UPPER = NotationDescriptor(None, Case.UPPER, short=True)
SHORT_LOWER = NotationDescriptor(None, Case.LOWER, short=True)


def _fixed(order: ChannelOrder, digits: int) -> dict[str, NotationDescriptor]:
    """Upper- and lower-case tokens for one (order, digits) pair."""
    if digits == order.channel_count:
        token = order.name
    else:
        token = ''.join(ch * 2 for ch in order.name)
    return {
        token: NotationDescriptor(order, Case.UPPER, digits),
        token.lower(): NotationDescriptor(order, Case.LOWER, digits),
    }


def _build_styles() -> MappingProxyType:
    table: dict[str, NotationDescriptor] = {'AUTO': AUTO, 'S': SHORT_UPPER, 's': SHORT_LOWER}
    for order in ChannelOrder:
        table.update(_fixed(order, order.channel_count))
    table.update(_fixed(ChannelOrder.RGB, 6))
    table.update(_fixed(ChannelOrder.ARGB, 8))
    table.update(_fixed(ChannelOrder.RGBA, 8))
    return MappingProxyType(table)


STYLES = _build_styles()


def resolve_style(token: str | None) -> NotationDescriptor:
    """Look up a style token. Unknown or missing tokens fall back to AUTO."""
    if token is None:
        return AUTO
    return STYLES.get(token, AUTO)

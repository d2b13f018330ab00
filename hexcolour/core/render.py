"""Hex digit renderer: nibbles -> string."""

from hexcolour.core.notation import Case

DIGITS = {
    Case.UPPER: '0123456789ABCDEF',
    Case.LOWER: '0123456789abcdef',
}


def render(nibbles: tuple[int, ...], case: Case) -> str:
    """Map each 4-bit value to one hex digit, keeping order."""
    alphabet = DIGITS[case]
    return ''.join(alphabet[n] for n in nibbles)

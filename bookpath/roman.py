"""Convert page counters to Roman numerals.

Only plain ASCII notation is produced, so values above 4999 (which would need
an overbar) are refused. Zero is rendered as ``N`` (*nulla*).

Examples
--------
>>> from bookpath.roman import to_roman
>>> to_roman(1994)
'MCMXCIV'
>>> to_roman(0)
'N'
"""

from __future__ import annotations

from ._constants import ROMAN_MAX, ROMAN_ZERO

_THOUSANDS = ("", "M", "MM", "MMM", "MMMM")
_HUNDREDS = ("", "C", "CC", "CCC", "CD", "D", "DC", "DCC", "DCCC", "CM")
_TENS = ("", "X", "XX", "XXX", "XL", "L", "LX", "LXX", "LXXX", "XC")
_ONES = ("", "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX")


class RomanNumeralError(ValueError):
    """Raised when a value cannot be expressed as an ASCII Roman numeral."""


def to_roman(value: int) -> str:
    """Return the subtractive Roman numeral for ``value``.

    Parameters
    ----------
    value : int
        Integer in the closed range ``[0, 4999]``.

    Returns
    -------
    str
        Roman numeral, or ``"N"`` for zero.

    Raises
    ------
    RomanNumeralError
        If ``value`` is not an integer or lies outside ``[0, 4999]``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"Roman numerals require an integer, got {value!r}."
        raise RomanNumeralError(msg)
    if value > ROMAN_MAX:
        msg = f"Cannot represent numbers larger than {ROMAN_MAX} in plain ASCII."
        raise RomanNumeralError(msg)
    if value < 0:
        msg = f"Cannot represent negative number {value} as a Roman numeral."
        raise RomanNumeralError(msg)
    if value == 0:
        return ROMAN_ZERO

    thousands, rest = divmod(value, 1000)
    hundreds, rest = divmod(rest, 100)
    tens, ones = divmod(rest, 10)
    return _THOUSANDS[thousands] + _HUNDREDS[hundreds] + _TENS[tens] + _ONES[ones]


__all__ = ["RomanNumeralError", "to_roman"]

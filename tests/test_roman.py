"""Unit tests for Roman numeral conversion.

The reference table is built with a greedy value/symbol walk, independent of
the digit-lookup composition used by :func:`bookpath.roman.to_roman`.
"""

from __future__ import annotations

import pytest

from bookpath.roman import RomanNumeralError, to_roman

_SYMBOLS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def _reference(value: int) -> str:
    parts: list[str] = []
    for amount, symbol in _SYMBOLS:
        count, value = divmod(value, amount)
        parts.append(symbol * count)
    return "".join(parts)


def test_matches_reference_table_for_full_range() -> None:
    """Every value from 1 to 4999 should match the reference notation."""
    mismatches = [n for n in range(1, 5000) if to_roman(n) != _reference(n)]
    assert not mismatches, f"Roman conversion differs for {mismatches[:5]}"


@pytest.mark.parametrize(
    ("value", "expected"),
    [(1, "I"), (4, "IV"), (14, "XIV"), (1994, "MCMXCIV"), (4999, "MMMMCMXCIX")],
)
def test_known_values(value: int, expected: str) -> None:
    assert to_roman(value) == expected


def test_zero_is_nulla() -> None:
    assert to_roman(0) == "N", "Zero should be rendered as 'N'"


@pytest.mark.parametrize("value", [5000, 10_000, -1])
def test_out_of_range_values_are_rejected(value: int) -> None:
    with pytest.raises(RomanNumeralError):
        to_roman(value)


def test_non_integers_are_rejected() -> None:
    with pytest.raises(RomanNumeralError):
        to_roman(True)  # type: ignore[arg-type]


def test_error_is_a_value_error() -> None:
    assert issubclass(RomanNumeralError, ValueError)

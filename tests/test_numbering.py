"""Unit tests for :class:`bookpath.numbering.NumberingEngine`."""

from __future__ import annotations

import pytest

from bookpath.models import (
    NumberFormat,
    OrderedSequence,
    SequenceMode,
    SequenceSource,
    Unit,
)
from bookpath.numbering import NumberingEngine
from bookpath.roman import RomanNumeralError


def _sequence(*units: Unit) -> OrderedSequence:
    return OrderedSequence.from_nodes(
        units, mode=SequenceMode.READABLE, source=SequenceSource.TREE
    )


def _own_format(node: Unit) -> NumberFormat:
    return node.number_format or NumberFormat.ARABIC


ROMAN = NumberFormat.ROMAN


def test_plain_arabic_sequence_counts_from_one() -> None:
    seq = _sequence(Unit(id="a"), Unit(id="b"), Unit(id="c"))
    assert NumberingEngine(_own_format).number(seq) == {"a": 1, "b": 2, "c": 3}


def test_arabic_resets_after_roman_front_matter() -> None:
    """The first arabic unit after a Roman run restarts the count."""
    seq = _sequence(
        Unit(id="i", number_format=ROMAN),
        Unit(id="ii", number_format=ROMAN),
        Unit(id="iii", number_format=ROMAN),
        Unit(id="one"),
        Unit(id="two"),
    )
    numbers = NumberingEngine(_own_format).number(seq)
    assert numbers == {"i": "I", "ii": "II", "iii": "III", "one": 1, "two": 2}


def test_reset_happens_only_once() -> None:
    """A later Roman run continues the counter and arabic does not reset again."""
    seq = _sequence(
        Unit(id="a", number_format=ROMAN),
        Unit(id="b"),
        Unit(id="c", number_format=ROMAN),
        Unit(id="d"),
    )
    numbers = NumberingEngine(_own_format).number(seq)
    assert numbers == {"a": "I", "b": 1, "c": "II", "d": 3}


def test_start_number_offsets_both_formats() -> None:
    seq = _sequence(Unit(id="a", number_format=ROMAN), Unit(id="b"), Unit(id="c"))
    numbers = NumberingEngine(_own_format, start_number=5).number(seq)
    assert numbers == {"a": "V", "b": 5, "c": 6}


def test_zero_start_number_renders_nulla() -> None:
    seq = _sequence(Unit(id="a", number_format=ROMAN))
    assert NumberingEngine(_own_format, start_number=0).number(seq) == {"a": "N"}


def test_empty_sequence_yields_empty_map() -> None:
    assert NumberingEngine(_own_format).number(_sequence()) == {}


def test_roman_overflow_is_rejected() -> None:
    seq = _sequence(Unit(id="a", number_format=ROMAN))
    with pytest.raises(RomanNumeralError):
        NumberingEngine(_own_format, start_number=5000).number(seq)


def test_negative_start_number_is_rejected() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        NumberingEngine(_own_format, start_number=-1)


def test_formats_come_from_resolver() -> None:
    """The engine defers entirely to the injected format resolver."""
    seq = _sequence(Unit(id="a"), Unit(id="b"))
    numbers = NumberingEngine(lambda node: ROMAN).number(seq)
    assert numbers == {"a": "I", "b": "II"}

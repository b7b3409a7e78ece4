"""Assign display numbers to the units of an ordered sequence.

Publications number their front matter in Roman numerals and restart arabic
numbering where the body begins. The engine scans a sequence once, keeping a
running counter that Roman-formatted units share with arabic ones; the
counter resets to ``start_number`` exactly once, at the first arabic unit.

Example
-------
>>> from bookpath.models import NumberFormat, OrderedSequence, SequenceMode
>>> from bookpath.models import SequenceSource, Unit
>>> from bookpath.numbering import NumberingEngine
>>> units = [Unit(id="a", number_format=NumberFormat.ROMAN), Unit(id="b")]
>>> seq = OrderedSequence.from_nodes(
...     units, mode=SequenceMode.READABLE, source=SequenceSource.TREE
... )
>>> NumberingEngine(lambda node: node.number_format or NumberFormat.ARABIC).number(seq)
{'a': 'I', 'b': 1}
"""

from __future__ import annotations

import typing as typ

from .models import NumberFormat, OrderedSequence, PageNumber, PageNumberMap
from .roman import to_roman

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .models import Node

FormatResolver = typ.Callable[["Node"], NumberFormat]


class NumberingEngine:
    """Map unit ids to arabic or Roman display numbers."""

    def __init__(self, resolve_format: FormatResolver, *, start_number: int = 1) -> None:
        """Store the per-node format lookup and the counter origin.

        Parameters
        ----------
        resolve_format : Callable[[Node], NumberFormat]
            Returns the effective format of a node, including any override
            inherited from its topmost ancestor.
        start_number : int, optional
            First value of the counter, and the value it resets to when the
            first arabic unit is reached. Defaults to 1.
        """
        if start_number < 0:
            msg = f"start_number must be non-negative, got {start_number}."
            raise ValueError(msg)
        self.resolve_format = resolve_format
        self.start_number = start_number

    def number(self, sequence: OrderedSequence) -> PageNumberMap:
        """Return display numbers keyed by unit id.

        Raises
        ------
        RomanNumeralError
            If a Roman-formatted unit is reached once the counter exceeds 4999.
        """
        numbers: PageNumberMap = {}
        counter = self.start_number
        seen_arabic = False
        for entry in sequence:
            value: PageNumber
            if self.resolve_format(entry.node) is NumberFormat.ROMAN:
                value = to_roman(counter)
            else:
                if not seen_arabic:
                    counter = self.start_number
                    seen_arabic = True
                value = counter
            numbers[entry.unit_id] = value
            counter += 1
        return numbers


__all__ = ["FormatResolver", "NumberingEngine"]

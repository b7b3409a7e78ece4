"""Answer next/previous questions about a unit's place in a sequence.

Missing neighbours are the normal state of a linear reading flow (the first
page has no previous page), so every query returns ``None`` or ``False``
instead of raising. An id absent from the sequence, such as a chapter viewed
while navigating the ``readable`` view, behaves as if it had no neighbours.

Two fallbacks apply when the book's title page is also the site's front page:

* on the front page itself, "next" with nothing after it leads to the first
  page of the book;
* anywhere else, "previous" from the first readable unit leads back to the
  title page.

Example
-------
>>> from bookpath.models import OrderedSequence, SequenceMode, SequenceSource, Unit
>>> from bookpath.position import PositionResolver
>>> seq = OrderedSequence.from_nodes(
...     [Unit(id="a"), Unit(id="b", comment_count=2)],
...     mode=SequenceMode.READABLE,
...     source=SequenceSource.TREE,
... )
>>> PositionResolver().next_of(seq, "a", require_comments=True).id
'b'
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .models import Node, OrderedSequence


class PositionResolver:
    """Next/previous resolution with the title-page-as-homepage rules."""

    def __init__(
        self,
        *,
        title_unit: Node | None = None,
        on_front_page: bool = False,
        first_page: typ.Callable[[], Node | None] | None = None,
    ) -> None:
        """Bind the homepage context for one request.

        Parameters
        ----------
        title_unit : Node, optional
            The title page, supplied only when it is bound as the site's front
            page; ``None`` disables both homepage fallbacks.
        on_front_page : bool, optional
            Whether the current request renders the front page.
        first_page : Callable[[], Node | None], optional
            Returns the first readable unit of the book; called lazily and at
            most once.
        """
        self.title_unit = title_unit
        self.on_front_page = on_front_page
        self._first_page = first_page
        self._first_page_cache: tuple[Node | None] | None = None

    def first_page(self) -> Node | None:
        """Return the book's first readable unit, computing it on first use."""
        if self._first_page_cache is None:
            node = self._first_page() if self._first_page is not None else None
            self._first_page_cache = (node,)
        return self._first_page_cache[0]

    def remainder_after(self, sequence: OrderedSequence, current_id: str) -> list[Node]:
        """Return the nodes following ``current_id`` in order."""
        position = sequence.index_of(current_id)
        if position is None:
            return []
        return [entry.node for entry in sequence.entries[position + 1 :]]

    def remainder_before(self, sequence: OrderedSequence, current_id: str) -> list[Node]:
        """Return the nodes preceding ``current_id``, nearest first."""
        position = sequence.index_of(current_id)
        if position is None:
            return []
        return [entry.node for entry in reversed(sequence.entries[:position])]

    def next_of(
        self,
        sequence: OrderedSequence,
        current_id: str,
        *,
        require_comments: bool = False,
    ) -> Node | None:
        """Return the following unit, or the first following one with comments."""
        remainder = self.remainder_after(sequence, current_id)
        if remainder:
            return _pick(remainder, require_comments=require_comments)
        if self.title_unit is not None and self.on_front_page:
            return self.first_page()
        return None

    def previous_of(
        self,
        sequence: OrderedSequence,
        current_id: str,
        *,
        require_comments: bool = False,
    ) -> Node | None:
        """Return the preceding unit, or the nearest preceding one with comments."""
        remainder = self.remainder_before(sequence, current_id)
        if remainder:
            return _pick(remainder, require_comments=require_comments)
        if (
            self.title_unit is not None
            and not self.on_front_page
            and self.is_first(sequence, current_id)
        ):
            return self.title_unit
        return None

    def is_first(self, sequence: OrderedSequence, current_id: str) -> bool:
        return sequence.index_of(current_id) == 0

    def is_last(self, sequence: OrderedSequence, current_id: str) -> bool:
        position = sequence.index_of(current_id)
        return position is not None and position == len(sequence) - 1

    @staticmethod
    def first_readable(sequence: OrderedSequence) -> Node | None:
        first = sequence.first()
        return None if first is None else first.node


def _pick(nodes: list[Node], *, require_comments: bool) -> Node | None:
    if not require_comments:
        return nodes[0]
    return next((node for node in nodes if node.comment_count > 0), None)


__all__ = ["PositionResolver"]

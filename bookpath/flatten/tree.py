"""Flatten a parent/child page hierarchy into ordered sequences.

Units are stored in an arena (a list) and referenced by index, with a
per-index list of published child indices sorted by ``(order, title)``.
Every walk is iterative, so arbitrarily deep chains never hit the
interpreter's recursion limit, and upward walks are bounded by the arena
size so a malformed ``parent_id`` cycle cannot loop forever.

Example
-------
>>> from bookpath.flatten import TreeFlattener
>>> from bookpath.models import SequenceMode, Unit
>>> units = [
...     Unit(id="1", title="Chapter"),
...     Unit(id="2", title="Page", parent_id="1"),
... ]
>>> flattener = TreeFlattener(units)
>>> flattener.flatten(SequenceMode.READABLE).unit_ids
['2']
"""

from __future__ import annotations

import logging
import typing as typ

from bookpath.models import OrderedSequence, SequenceMode, SequenceSource, Unit

logger = logging.getLogger(__name__)


class TreeFlattener:
    """Pre-order flattening of a content tree."""

    def __init__(
        self,
        units: typ.Iterable[Unit],
        *,
        excluded_ids: typ.Collection[str] = (),
        chapters_are_pages: bool = False,
    ) -> None:
        """Index ``units`` for traversal.

        Parameters
        ----------
        units : Iterable[Unit]
            Every known unit; unpublished ones are kept for ancestor lookups
            but never appear in a sequence.
        excluded_ids : Collection[str], optional
            Units whose whole subtree is skipped during traversal.
        chapters_are_pages : bool, optional
            When true, grouping units are readable and the ``readable`` view
            coincides with the ``structural`` one.
        """
        self.excluded_ids = frozenset(excluded_ids)
        self.chapters_are_pages = chapters_are_pages
        self._nodes: list[Unit] = []
        self._index: dict[str, int] = {}
        for unit in units:
            if unit.id in self._index:
                logger.warning("Ignoring duplicate unit id %s", unit.id)
                continue
            self._index[unit.id] = len(self._nodes)
            self._nodes.append(unit)
        self._roots: list[int] = []
        self._children: list[list[int]] = [[] for _ in self._nodes]
        for idx, unit in enumerate(self._nodes):
            if not unit.is_published:
                continue
            if unit.parent_id is None:
                self._roots.append(idx)
                continue
            parent_idx = self._index.get(unit.parent_id)
            if parent_idx is not None:
                self._children[parent_idx].append(idx)
        self._roots.sort(key=self._sort_key)
        for kids in self._children:
            kids.sort(key=self._sort_key)

    def _sort_key(self, idx: int) -> tuple[int, str, str]:
        unit = self._nodes[idx]
        return (*unit.order_key, unit.id)

    def get(self, unit_id: str) -> Unit | None:
        """Return the indexed unit for ``unit_id``, if any."""
        idx = self._index.get(unit_id)
        return None if idx is None else self._nodes[idx]

    def has_published_children(self, unit_id: str) -> bool:
        idx = self._index.get(unit_id)
        return idx is not None and bool(self._children[idx])

    def flatten(self, mode: SequenceMode) -> OrderedSequence:
        """Return the structural or readable pre-order sequence.

        Parameters
        ----------
        mode : SequenceMode
            ``STRUCTURAL`` keeps every reachable published unit; ``READABLE``
            keeps only units with no published children unless chapters are
            treated as pages.

        Returns
        -------
        OrderedSequence
            Possibly empty sequence sourced from the ``tree`` topology.
        """
        ordered = self._preorder()
        if mode is SequenceMode.READABLE and not self.chapters_are_pages:
            ordered = [idx for idx in ordered if not self._children[idx]]
        logger.debug("Flattened content tree (%s): %d units", mode.value, len(ordered))
        return OrderedSequence.from_nodes(
            (self._nodes[idx] for idx in ordered),
            mode=mode,
            source=SequenceSource.TREE,
        )

    def _preorder(self) -> list[int]:
        ordered: list[int] = []
        seen: set[int] = set()
        stack = list(reversed(self._roots))
        while stack:
            idx = stack.pop()
            if idx in seen or self._nodes[idx].id in self.excluded_ids:
                continue
            seen.add(idx)
            ordered.append(idx)
            stack.extend(reversed(self._children[idx]))
        return ordered

    def first_published_leaf(self, unit_id: str) -> str | None:
        """Descend through first children until a childless unit is reached.

        Returns ``unit_id`` itself when it has no published children and
        ``None`` when the id is unknown.
        """
        idx = self._index.get(unit_id)
        if idx is None:
            return None
        for _ in range(len(self._nodes)):
            kids = self._children[idx]
            if not kids:
                break
            idx = kids[0]
        return self._nodes[idx].id

    def topmost_ancestor(self, unit_id: str) -> str | None:
        """Walk ``parent_id`` links to the root.

        Returns ``None`` when the id is unknown, a parent is missing, or the
        chain is cyclic.
        """
        idx = self._index.get(unit_id)
        if idx is None:
            return None
        for _ in range(len(self._nodes)):
            parent_id = self._nodes[idx].parent_id
            if parent_id is None:
                return self._nodes[idx].id
            parent_idx = self._index.get(parent_id)
            if parent_idx is None:
                logger.warning(
                    "Unit %s references missing parent %s", self._nodes[idx].id, parent_id
                )
                return None
            idx = parent_idx
        logger.warning("Parent chain of unit %s does not terminate", unit_id)
        return None


__all__ = ["TreeFlattener"]

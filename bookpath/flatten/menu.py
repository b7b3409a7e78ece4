"""Flatten a curated menu into ordered sequences.

Menu parentage (``menu_parent_id``) defines the hierarchy here; content
parentage is ignored. Each proxy is an independent position even when two
proxies reference the same unit, and every upward or downward walk is bounded
by the proxy count so cyclic menu configurations terminate.
"""

from __future__ import annotations

import logging
import typing as typ

from bookpath.models import MenuItemProxy, OrderedSequence, SequenceMode, SequenceSource

logger = logging.getLogger(__name__)


class MenuFlattener:
    """Structural/readable views over a flat, pre-ordered menu."""

    def __init__(
        self,
        proxies: typ.Iterable[MenuItemProxy],
        *,
        chapters_are_pages: bool = False,
    ) -> None:
        self.chapters_are_pages = chapters_are_pages
        self._items: list[MenuItemProxy] = list(proxies)
        self._index: dict[str, int] = {}
        for idx, proxy in enumerate(self._items):
            self._index.setdefault(proxy.menu_item_id, idx)
        self._children: list[list[int]] = [[] for _ in self._items]
        for idx, proxy in enumerate(self._items):
            parent_idx = (
                None
                if proxy.menu_parent_id is None
                else self._index.get(proxy.menu_parent_id)
            )
            if parent_idx is not None:
                self._children[parent_idx].append(idx)

    def __len__(self) -> int:
        return len(self._items)

    def get(self, menu_item_id: str) -> MenuItemProxy | None:
        idx = self._index.get(menu_item_id)
        return None if idx is None else self._items[idx]

    def is_lowest_level(self, menu_item_id: str) -> bool:
        """Return True when no proxy names ``menu_item_id`` as its menu parent."""
        idx = self._index.get(menu_item_id)
        return idx is None or not self._children[idx]

    def flatten(self, mode: SequenceMode) -> OrderedSequence:
        """Return the menu in its curated order, optionally leaf-only."""
        items = self._items
        if mode is SequenceMode.READABLE and not self.chapters_are_pages:
            items = [
                proxy for proxy in items if self.is_lowest_level(proxy.menu_item_id)
            ]
        logger.debug("Flattened menu (%s): %d items", mode.value, len(items))
        return OrderedSequence.from_nodes(items, mode=mode, source=SequenceSource.MENU)

    def topmost_menu_ancestor(self, menu_item_id: str) -> MenuItemProxy | None:
        """Return the top-level proxy above ``menu_item_id``.

        The walk is bounded by the number of proxies; exceeding the bound, or
        reaching a parent id that names no proxy, yields ``None``.
        """
        idx = self._index.get(menu_item_id)
        if idx is None:
            return None
        for _ in range(len(self._items)):
            proxy = self._items[idx]
            if proxy.menu_parent_id is None:
                return proxy
            parent_idx = self._index.get(proxy.menu_parent_id)
            if parent_idx is None:
                logger.warning(
                    "Menu item %s references missing parent %s",
                    proxy.menu_item_id,
                    proxy.menu_parent_id,
                )
                return None
            idx = parent_idx
        logger.warning("Menu parents of item %s form a cycle", menu_item_id)
        return None

    def first_leaf(self, menu_item_id: str) -> MenuItemProxy | None:
        """Descend through first menu children to the lowest-level proxy."""
        idx = self._index.get(menu_item_id)
        if idx is None:
            return None
        for _ in range(len(self._items)):
            kids = self._children[idx]
            if not kids:
                break
            idx = kids[0]
        return self._items[idx]


__all__ = ["MenuFlattener"]

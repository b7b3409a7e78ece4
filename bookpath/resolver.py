"""Resolve a book source into ordered, filtered sequences.

:class:`SourceResolver` is the single entry point the rendering layer uses to
obtain a sequence. It picks the curated menu when one is configured and the
content tree otherwise, applies the exclusion filter, and exposes the
numbering engine and first-page lookup built over the same topology.

Example
-------
>>> from bookpath.config import build_book
>>> from bookpath.models import SequenceMode
>>> from bookpath.resolver import SourceResolver
>>> book = build_book({"units": [{"id": 1, "title": "Only page"}]})
>>> SourceResolver(book).resolve(SequenceMode.READABLE).unit_ids
['1']
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import functools
import logging
import typing as typ

from .config.helpers import _build_navigation_settings
from .exclusion import ExclusionFilter
from .flatten import MenuFlattener, TreeFlattener
from .models import (
    MenuItemProxy,
    Node,
    NumberFormat,
    OrderedSequence,
    PageNumberMap,
    SequenceMode,
    SequenceSource,
    Unit,
)
from .numbering import NumberingEngine
from .position import PositionResolver

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .config import NavigationSettings

logger = logging.getLogger(__name__)

_EPOCH = dt.datetime.min.replace(tzinfo=dt.UTC)


class BookSource(typ.Protocol):
    """Read operations the navigation core needs from a content backend."""

    def list_published_units(self) -> list[Unit]: ...

    def list_menu_proxies(self) -> list[MenuItemProxy]: ...

    def list_published_posts(self) -> list[Unit]: ...

    def get_setting(self, name: str) -> typ.Any: ...  # noqa: ANN401

    def get_comment_count(self, unit_id: str) -> int: ...


class SourceResolver:
    """Choose a flattener for a book and produce filtered sequences."""

    def __init__(
        self, source: BookSource, *, settings: NavigationSettings | None = None
    ) -> None:
        """Read units, menu items and settings from ``source`` once.

        Parameters
        ----------
        source : BookSource
            Content backend providing units, menu proxies and settings.
        settings : NavigationSettings, optional
            Pre-resolved settings; built from ``source.get_setting`` when
            omitted.
        """
        self.source = source
        proxies = source.list_menu_proxies()
        self.settings = settings or _build_navigation_settings(
            source.get_setting, has_menu=bool(proxies)
        )
        self.units = source.list_published_units()
        self.units_by_id: dict[str, Unit] = {}
        for unit in self.units:
            self.units_by_id.setdefault(unit.id, unit)
        self.excluded_ids = self._excluded_ids()
        self.tree = TreeFlattener(
            self.units,
            excluded_ids=self.excluded_ids,
            chapters_are_pages=self.settings.chapters_are_pages,
        )
        self.menu: MenuFlattener | None = None
        if self.settings.toc_menu and proxies:
            self.menu = MenuFlattener(
                [self._with_comment_count(proxy) for proxy in proxies],
                chapters_are_pages=self.settings.chapters_are_pages,
            )
        self.exclusion = ExclusionFilter(
            self.excluded_ids,
            units=self.units_by_id,
            detect_login_page=self.settings.detect_login_page,
        )

    @functools.cached_property
    def homepage_title_id(self) -> str | None:
        """Return the title page id when it is the site's front page."""
        if self.settings.title_is_homepage:
            return self.settings.title_page
        return None

    @property
    def uses_menu(self) -> bool:
        return self.menu is not None

    def _excluded_ids(self) -> frozenset[str]:
        excluded = set(self.settings.special_pages)
        if self.homepage_title_id is not None:
            excluded.add(self.homepage_title_id)
        return frozenset(excluded)

    def _with_comment_count(self, proxy: MenuItemProxy) -> MenuItemProxy:
        count = self.source.get_comment_count(proxy.referenced_unit_id)
        if count == proxy.comment_count:
            return proxy
        return dc.replace(proxy, comment_count=count)

    def resolve(self, mode: SequenceMode | str = SequenceMode.READABLE) -> OrderedSequence:
        """Return the filtered sequence for ``mode``; empty is a valid result."""
        mode = SequenceMode(mode)
        if self.menu is not None:
            sequence = self.menu.flatten(mode)
        else:
            sequence = self.tree.flatten(mode)
        filtered = self.exclusion.apply(sequence)
        logger.debug(
            "Resolved %s %s sequence with %d entries",
            filtered.source.value,
            mode.value,
            len(filtered),
        )
        return filtered

    def resolve_posts(self) -> OrderedSequence:
        """Return published blog posts, newest first."""
        posts = sorted(
            self.source.list_published_posts(),
            key=lambda post: (post.published_at or _EPOCH, _id_sort_key(post.id)),
            reverse=True,
        )
        return OrderedSequence.from_nodes(
            posts, mode=SequenceMode.STRUCTURAL, source=SequenceSource.POSTS
        )

    def effective_format(self, node: Node) -> NumberFormat:
        """Resolve a node's own override, else its top-level branch override."""
        unit = self.units_by_id.get(node.unit_id)
        if unit is not None and unit.number_format is not None:
            return unit.number_format
        top_unit: Unit | None = None
        match node:
            case MenuItemProxy() if self.menu is not None:
                top_proxy = self.menu.topmost_menu_ancestor(node.menu_item_id)
                if top_proxy is not None:
                    top_unit = self.units_by_id.get(top_proxy.referenced_unit_id)
            case Unit():
                top_id = self.tree.topmost_ancestor(node.id)
                if top_id is not None:
                    top_unit = self.units_by_id.get(top_id)
            case _:
                pass
        if top_unit is not None and top_unit.number_format is not None:
            return top_unit.number_format
        return NumberFormat.ARABIC

    def numbering_engine(self) -> NumberingEngine:
        return NumberingEngine(
            self.effective_format, start_number=self.settings.start_number
        )

    def number(self, sequence: OrderedSequence) -> PageNumberMap:
        """Return display numbers for ``sequence`` using the book's settings."""
        return self.numbering_engine().number(sequence)

    def first_published_leaf(self, unit_id: str) -> str | None:
        return self.tree.first_published_leaf(unit_id)

    def first_page(self) -> Node | None:
        """Return the first readable unit of the whole book, if any."""
        return PositionResolver.first_readable(self.resolve(SequenceMode.READABLE))


def _id_sort_key(unit_id: str) -> tuple[int, int, str]:
    """Compare numeric ids by value; they rank above non-numeric ids."""
    if unit_id.isdecimal():
        return (1, int(unit_id), "")
    return (0, 0, unit_id)


__all__ = ["BookSource", "SourceResolver"]

"""Request-scoped navigation for the unit a reader is currently viewing.

:class:`BookNavigator` wires a :class:`~bookpath.resolver.SourceResolver`, a
:class:`~bookpath.numbering.NumberingEngine` and a
:class:`~bookpath.position.PositionResolver` around one current unit. The
readable sequence and its page numbers are computed lazily, at most once per
navigator, and nothing outlives the instance.

Example
-------
>>> from pathlib import Path
>>> from bookpath.config import load_book
>>> from bookpath.navigator import BookNavigator
>>> book = load_book(Path("book.yaml"))  # doctest: +SKIP
>>> nav = BookNavigator(book, current_id="12")  # doctest: +SKIP
>>> nav.next_page(with_comments=True)  # doctest: +SKIP
Unit(id='15', ...)
"""

from __future__ import annotations

import functools
import typing as typ

from .models import SequenceMode
from .position import PositionResolver
from .resolver import SourceResolver

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .config import NavigationSettings
    from .models import Node, OrderedSequence, PageNumber, PageNumberMap
    from .resolver import BookSource


class BookNavigator:
    """Next/previous pages and posts, page numbers and redirects for one unit."""

    def __init__(
        self,
        source: BookSource,
        *,
        current_id: str | None,
        on_front_page: bool = False,
        settings: NavigationSettings | None = None,
    ) -> None:
        """Bind the navigator to the unit being viewed.

        Parameters
        ----------
        source : BookSource
            Content backend for the book.
        current_id : str | None
            Id of the page or post being viewed; ``None`` when no unit is
            being viewed (for example, an archive page).
        on_front_page : bool, optional
            Whether the request renders the site's front page.
        settings : NavigationSettings, optional
            Pre-resolved settings forwarded to the resolver.
        """
        self.resolver = SourceResolver(source, settings=settings)
        self.current_id = current_id
        self.on_front_page = on_front_page
        title_id = self.resolver.homepage_title_id
        self.position = PositionResolver(
            title_unit=self.resolver.units_by_id.get(title_id) if title_id else None,
            on_front_page=on_front_page,
            first_page=self.resolver.first_page,
        )

    @property
    def settings(self) -> NavigationSettings:
        return self.resolver.settings

    @property
    def navigation_enabled(self) -> bool:
        return self.settings.page_nav_enabled

    @functools.cached_property
    def pages(self) -> OrderedSequence:
        """Readable sequence the page arrows walk through."""
        return self.resolver.resolve(SequenceMode.READABLE)

    @functools.cached_property
    def posts(self) -> OrderedSequence:
        return self.resolver.resolve_posts()

    @functools.cached_property
    def page_numbers(self) -> PageNumberMap:
        return self.resolver.number(self.pages)

    def next_page(self, *, with_comments: bool = False) -> Node | None:
        return self.position.next_of(
            self.pages, self.current_id or "", require_comments=with_comments
        )

    def previous_page(self, *, with_comments: bool = False) -> Node | None:
        if self.current_id is None:
            return None
        return self.position.previous_of(
            self.pages, self.current_id, require_comments=with_comments
        )

    def next_post(self, *, with_comments: bool = False) -> Node | None:
        """Return the next (older) post; posts have no homepage fallback."""
        if self.current_id is None:
            return None
        return PositionResolver().next_of(
            self.posts, self.current_id, require_comments=with_comments
        )

    def previous_post(self, *, with_comments: bool = False) -> Node | None:
        if self.current_id is None:
            return None
        return PositionResolver().previous_of(
            self.posts, self.current_id, require_comments=with_comments
        )

    def is_first_page(self) -> bool:
        return self.current_id is not None and self.position.is_first(
            self.pages, self.current_id
        )

    def is_last_page(self) -> bool:
        return self.current_id is not None and self.position.is_last(
            self.pages, self.current_id
        )

    def first_page(self) -> Node | None:
        return self.position.first_page()

    def page_number(self, unit_id: str | None = None) -> PageNumber | None:
        """Return the display number of ``unit_id`` (default: the current unit).

        Chapters get no number unless chapters are treated as pages, and no
        unit is numbered when page navigation is disabled.
        """
        if not self.navigation_enabled:
            return None
        unit_id = unit_id if unit_id is not None else self.current_id
        if unit_id is None:
            return None
        tree = self.resolver.tree
        if not self.settings.chapters_are_pages and tree.has_published_children(unit_id):
            return None
        return self.page_numbers.get(unit_id)

    def redirect_target(self) -> str | None:
        """Return the unit a reader landing on a chapter should be sent to."""
        if self.current_id is None or self.resolver.uses_menu:
            return None
        if self.settings.chapters_are_pages:
            return None
        if not self.resolver.tree.has_published_children(self.current_id):
            return None
        return self.resolver.first_published_leaf(self.current_id)


__all__ = ["BookNavigator"]

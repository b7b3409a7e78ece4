"""Typed dataclasses describing book navigation settings."""

from __future__ import annotations

import dataclasses as dc


class BookConfigError(ValueError):
    """Raised when a book description is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class NavigationSettings:
    """Navigation-relevant settings resolved from a book source.

    Attributes
    ----------
    toc_menu : bool
        Whether a curated table-of-contents menu drives the ordering.
    chapters_are_pages : bool
        Whether grouping units count as readable pages.
    special_pages : frozenset[str]
        Unit ids excluded from every view.
    title_page : str | None
        The designated opening unit of the book.
    page_on_front : str | None
        The unit bound as the site's front page.
    start_number : int
        First page number and the value arabic numbering resets to.
    page_nav_enabled : bool
        Whether page navigation (and page numbers) are shown at all.
    detect_login_page : bool
        Whether an auto-generated login page is filtered from views.
    """

    toc_menu: bool = False
    chapters_are_pages: bool = False
    special_pages: frozenset[str] = frozenset()
    title_page: str | None = None
    page_on_front: str | None = None
    start_number: int = 1
    page_nav_enabled: bool = True
    detect_login_page: bool = True

    @property
    def title_is_homepage(self) -> bool:
        """Return True when the title page is bound as the front page."""
        return self.title_page is not None and self.title_page == self.page_on_front


__all__ = ["BookConfigError", "NavigationSettings"]

"""In-memory book content store backed by a parsed YAML description.

:class:`Book` satisfies the :class:`~bookpath.resolver.BookSource` protocol
so the resolver and navigator can run against a file on disk as well as any
other content backend that offers the same read operations.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .models import MenuItemProxy, Unit


@dc.dataclass(slots=True)
class Book:
    """Units, menu items, posts and settings of a single book.

    Id lookups are indexed once at construction; replace the instance rather
    than mutating ``units`` or ``posts`` in place.
    """

    units: list[Unit]
    menu: list[MenuItemProxy] = dc.field(default_factory=list)
    posts: list[Unit] = dc.field(default_factory=list)
    settings: dict[str, typ.Any] = dc.field(default_factory=dict)
    _units_by_id: dict[str, Unit] = dc.field(init=False, repr=False, compare=False)
    _comment_counts: dict[str, int] = dc.field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self._units_by_id = {}
        for unit in self.units:
            self._units_by_id.setdefault(unit.id, unit)
        self._comment_counts = {}
        for unit in (*self.units, *self.posts):
            self._comment_counts.setdefault(unit.id, unit.comment_count)

    def list_published_units(self) -> list[Unit]:
        return [unit for unit in self.units if unit.is_published]

    def list_menu_proxies(self) -> list[MenuItemProxy]:
        return list(self.menu)

    def list_published_posts(self) -> list[Unit]:
        return [post for post in self.posts if post.is_published]

    def get_setting(self, name: str) -> typ.Any:  # noqa: ANN401 - settings are untyped
        return self.settings.get(name)

    def get_comment_count(self, unit_id: str) -> int:
        return self._comment_counts.get(unit_id, 0)

    def get_unit(self, unit_id: str) -> Unit | None:
        return self._units_by_id.get(unit_id)


__all__ = ["Book"]

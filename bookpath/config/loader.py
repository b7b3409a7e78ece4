"""Load a book description YAML into a :class:`~bookpath.store.Book`."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from bookpath._constants import PUBLISHED_STATUS
from bookpath.models import MenuItemProxy, Unit
from bookpath.store import Book

from .helpers import _coerce_int, _number_format, _optional_id, _parse_timestamp
from .models import BookConfigError

logger = logging.getLogger(__name__)


def load_book(path: Path) -> Book:
    """Load the YAML file describing a book's units, menu, posts and settings.

    Parameters
    ----------
    path : Path
        Filesystem path to the book description (for example, ``book.yaml``).

    Returns
    -------
    Book
        Parsed book whose menu proxies carry the titles of the units they
        reference.

    Raises
    ------
    FileNotFoundError
        If the file does not exist at ``path``.
    BookConfigError
        If the top-level structure is not a mapping, a unit lacks an ``id``,
        ids are duplicated, or a field holds an invalid value.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from bookpath.config import load_book
    >>> book = load_book(Path("book.yaml"))  # doctest: +SKIP
    >>> [unit.title for unit in book.list_published_units()][:1]  # doctest: +SKIP
    ['Preface']
    """
    if not path.exists():
        msg = f"Book file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise BookConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    return build_book(raw)


def build_book(raw: typ.Mapping[str, typ.Any]) -> Book:
    """Build a :class:`Book` from an already-parsed mapping."""
    settings = raw.get("settings") or {}
    if not isinstance(settings, dict):
        msg = "'settings' must be a mapping."
        raise BookConfigError(msg)

    units = _build_units(raw.get("units"), kind="unit")
    posts = _build_units(raw.get("posts"), kind="post")
    menu = _build_menu(raw.get("menu"), {unit.id: unit for unit in units})
    logger.debug(
        "Loaded book: %d units, %d menu items, %d posts",
        len(units),
        len(menu),
        len(posts),
    )
    return Book(units=units, menu=menu, posts=posts, settings=dict(settings))


def _entries(value: object | None, section: str) -> list[typ.Mapping[str, typ.Any]]:
    match value:
        case None:
            return []
        case list() as items:
            pass
        case _:
            msg = f"'{section}' must be a list of mappings."
            raise BookConfigError(msg)
    for item in items:
        if not isinstance(item, dict):
            msg = f"Every entry in '{section}' must be a mapping, got {item!r}."
            raise BookConfigError(msg)
    return items


def _build_units(value: object | None, *, kind: str) -> list[Unit]:
    """Build units (or posts) from their YAML entries."""
    section = f"{kind}s"
    units: list[Unit] = []
    seen: set[str] = set()
    for payload in _entries(value, section):
        unit_id = _optional_id(payload.get("id"))
        if unit_id is None:
            msg = f"Every {kind} requires a non-empty 'id'."
            raise BookConfigError(msg)
        if unit_id in seen:
            msg = f"Duplicate {kind} id '{unit_id}'."
            raise BookConfigError(msg)
        seen.add(unit_id)
        comments = _coerce_int(payload.get("comments"), default=0, field="comments")
        if comments < 0:
            msg = f"{kind.title()} '{unit_id}' has a negative comment count."
            raise BookConfigError(msg)
        units.append(
            Unit(
                id=unit_id,
                title=str(payload.get("title") or ""),
                parent_id=_optional_id(payload.get("parent")),
                order=_coerce_int(payload.get("order"), default=0, field="order"),
                status=str(payload.get("status") or PUBLISHED_STATUS),
                comment_count=comments,
                number_format=_number_format(payload.get("number_format")),
                slug=str(payload.get("slug") or ""),
                content=str(payload.get("content") or ""),
                published_at=_parse_timestamp(payload.get("date")),
            )
        )
    return units


def _build_menu(
    value: object | None, units: typ.Mapping[str, Unit]
) -> list[MenuItemProxy]:
    """Build menu proxies, dropping those whose unit is missing or unpublished."""
    proxies: list[MenuItemProxy] = []
    seen: set[str] = set()
    for payload in _entries(value, "menu"):
        menu_item_id = _optional_id(payload.get("id"))
        unit_id = _optional_id(payload.get("unit"))
        if menu_item_id is None or unit_id is None:
            msg = "Every menu item requires non-empty 'id' and 'unit' values."
            raise BookConfigError(msg)
        if menu_item_id in seen:
            msg = f"Duplicate menu item id '{menu_item_id}'."
            raise BookConfigError(msg)
        seen.add(menu_item_id)
        unit = units.get(unit_id)
        if unit is None or not unit.is_published:
            logger.warning(
                "Dropping menu item %s: unit %s is missing or unpublished",
                menu_item_id,
                unit_id,
            )
            continue
        proxies.append(
            MenuItemProxy(
                menu_item_id=menu_item_id,
                referenced_unit_id=unit_id,
                menu_parent_id=_optional_id(payload.get("parent")),
                title=str(payload.get("title") or unit.title),
            )
        )
    return proxies


__all__ = ["build_book", "load_book"]

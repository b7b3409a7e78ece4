"""Utility helpers shared by the book loader and settings resolution."""

from __future__ import annotations

import datetime as dt
import typing as typ

from bookpath._constants import (
    SETTING_CHAPTER_IS_PAGE,
    SETTING_DETECT_LOGIN_PAGE,
    SETTING_PAGE_NAV_ENABLED,
    SETTING_PAGE_ON_FRONT,
    SETTING_SPECIAL_PAGES,
    SETTING_START_NUMBER,
    SETTING_TITLE_PAGE,
    SETTING_TOC_MENU,
)
from bookpath.models import NumberFormat

from .models import BookConfigError, NavigationSettings

_TRUE_STRINGS = {"1", "y", "yes", "true", "on"}
_FALSE_STRINGS = {"0", "n", "no", "false", "off", ""}


def _optional_id(value: object | None) -> str | None:
    """Return an opaque string id, treating ``None``, ``""`` and ``0`` as absent."""
    if value is None or isinstance(value, bool):
        return None
    text = str(value).strip()
    if not text or text == "0":
        return None
    return text


def _id_list(value: object | None) -> list[str]:
    """Normalize a scalar or list of ids into a list of non-empty ids."""
    match value:
        case None:
            return []
        case list() | tuple() | set() | frozenset():
            items = list(value)
        case str() as text:
            items = [segment for segment in text.replace(",", " ").split() if segment]
        case _:
            items = [value]
    ids: list[str] = []
    for item in items:
        normalized = _optional_id(item)
        if normalized is not None:
            ids.append(normalized)
    return ids


def _coerce_bool(value: object | None, *, default: bool) -> bool:
    """Interpret YAML/CMS-style flags (``'1'``, ``'y'``, ``true``) as booleans."""
    match value:
        case None:
            return default
        case bool():
            return value
        case int():
            return value != 0
        case str() as text:
            lowered = text.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
    msg = f"Cannot interpret {value!r} as a boolean flag."
    raise BookConfigError(msg)


def _coerce_int(value: object | None, *, default: int, field: str) -> int:
    """Return ``value`` as an int, falling back to ``default`` when unset."""
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        msg = f"'{field}' must be an integer, got {value!r}."
        raise BookConfigError(msg)
    try:
        return int(str(value).strip())
    except ValueError as exc:
        msg = f"'{field}' must be an integer, got {value!r}."
        raise BookConfigError(msg) from exc


def _number_format(value: object | None) -> NumberFormat | None:
    """Parse an optional ``arabic``/``roman`` override."""
    if value is None:
        return None
    text = str(value).strip().lower()
    if not text:
        return None
    try:
        return NumberFormat(text)
    except ValueError as exc:
        msg = f"Unknown number format {value!r}; expected 'arabic' or 'roman'."
        raise BookConfigError(msg) from exc


def _parse_timestamp(value: dt.datetime | dt.date | str | None) -> dt.datetime | None:
    """Return a timezone-aware UTC datetime parsed from ``value``, or None."""
    match value:
        case dt.datetime():
            parsed = value
        case dt.date():
            parsed = dt.datetime(value.year, value.month, value.day)
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return None
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                parsed = dt.datetime.fromisoformat(sanitized)
            except ValueError:
                return None
        case _:
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


def _build_navigation_settings(
    get_setting: typ.Callable[[str], typ.Any], *, has_menu: bool
) -> NavigationSettings:
    """Fold individual settings into a :class:`NavigationSettings`.

    ``toc_menu`` defaults to whether the source holds any menu items, so a
    menu is used exactly when one is configured unless explicitly disabled.
    """
    start_number = _coerce_int(
        get_setting(SETTING_START_NUMBER), default=1, field=SETTING_START_NUMBER
    )
    if start_number < 0:
        msg = f"'{SETTING_START_NUMBER}' must be non-negative, got {start_number}."
        raise BookConfigError(msg)
    return NavigationSettings(
        toc_menu=has_menu
        and _coerce_bool(get_setting(SETTING_TOC_MENU), default=True),
        chapters_are_pages=_coerce_bool(
            get_setting(SETTING_CHAPTER_IS_PAGE), default=False
        ),
        special_pages=frozenset(_id_list(get_setting(SETTING_SPECIAL_PAGES))),
        title_page=_optional_id(get_setting(SETTING_TITLE_PAGE)),
        page_on_front=_optional_id(get_setting(SETTING_PAGE_ON_FRONT)),
        start_number=start_number,
        page_nav_enabled=_coerce_bool(
            get_setting(SETTING_PAGE_NAV_ENABLED), default=True
        ),
        detect_login_page=_coerce_bool(
            get_setting(SETTING_DETECT_LOGIN_PAGE), default=True
        ),
    )


__all__ = [
    "_build_navigation_settings",
    "_coerce_bool",
    "_coerce_int",
    "_id_list",
    "_number_format",
    "_optional_id",
    "_parse_timestamp",
]

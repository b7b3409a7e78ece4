"""Load and validate book description YAML for navigation.

This subpackage parses a ``book.yaml`` file into a :class:`~bookpath.store.Book`
(units, curated menu items, blog posts and raw settings) and folds the raw
settings into a typed :class:`NavigationSettings`. The primary entry point is
:func:`load_book`, which checks ids and field values and raises
:class:`BookConfigError` when the description is malformed.

Examples
--------
>>> from pathlib import Path
>>> from bookpath.config import load_book
>>> book = load_book(Path("book.yaml"))  # doctest: +SKIP
>>> book.get_setting("title_page")  # doctest: +SKIP
'1'
"""

from .loader import build_book, load_book
from .models import BookConfigError, NavigationSettings

__all__ = ["BookConfigError", "NavigationSettings", "build_book", "load_book"]

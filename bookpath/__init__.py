"""Linear reading order, page numbering and navigation for hierarchical books.

This package flattens a book (a content tree of chapters and pages, or a
curated menu) into deterministic ``structural`` and ``readable`` sequences,
numbers them in arabic or Roman numerals, and resolves next/previous units
for a reader, optionally skipping to units that have comments.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from bookpath import main
>>> main()  # doctest: +SKIP
>>> from bookpath import app
>>> isinstance(app.help, str)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]

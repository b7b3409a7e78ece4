"""Cyclopts CLI entrypoint for inspecting a book's reading order.

The ``bookpath`` console script loads a ``book.yaml`` description and prints
the resolved sequence with page numbers, answers next/previous questions for
a given unit, or renders a plain-text outline. Every option can also be set
through ``BOOKPATH_``-prefixed environment variables.

Examples
--------
Print the readable sequence of a book:

>>> from bookpath.cli import app
>>> app(["sequence", "--book", "book.yaml"])  # doctest: +SKIP

Show the neighbours of unit ``12`` that have comments:

>>> app(["navigate", "--book", "book.yaml", "--current", "12", "--with-comments"])  # doctest: +SKIP
"""

from __future__ import annotations

import json
import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_book
from .models import SequenceMode
from .navigator import BookNavigator
from .outline import OutlineBuilder
from .resolver import SourceResolver

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .models import Node

DEFAULT_BOOK = Path("book.yaml")

ModeName = typ.Literal["readable", "structural"]

app = App(name="bookpath", config=cyclopts.config.Env("BOOKPATH_", command=False))  # type: ignore[unknown-argument]


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _describe(node: Node | None) -> str:
    """Return ``id title`` for a node, or ``-`` when there is none."""
    if node is None:
        return "-"
    title = node.title or "(untitled)"
    return f"{node.unit_id} {title}"


@app.command(help="Print the resolved reading order with page numbers.")
def sequence(
    *,
    book: typ.Annotated[Path, Parameter(help="Path to the book description")] = (
        DEFAULT_BOOK
    ),
    mode: typ.Annotated[ModeName, Parameter(help="Traversal view")] = "readable",
    as_json: typ.Annotated[
        bool, Parameter(name="--json", help="Emit a JSON array instead of text")
    ] = False,
    verbose: bool = False,
) -> None:
    """Print one line per sequence entry.

    Parameters
    ----------
    book : Path, optional
        Path to the ``book.yaml`` description.
    mode : {"readable", "structural"}, optional
        Which view to print; defaults to ``readable``.
    as_json : bool, optional
        Emit a JSON array of ``position``/``unit_id``/``number``/``title``/
        ``comment_count`` objects.
    verbose : bool, optional
        Enable debug logging.

    Raises
    ------
    RomanNumeralError
        If a Roman-formatted unit would need a numeral above 4999.
    """
    _configure_logging(verbose=verbose)
    resolver = SourceResolver(load_book(book))
    resolved = resolver.resolve(SequenceMode(mode))
    numbers = resolver.number(resolved)
    rows = [
        {
            "position": entry.position,
            "unit_id": entry.unit_id,
            "number": numbers.get(entry.unit_id),
            "title": entry.title,
            "comment_count": entry.comment_count,
        }
        for entry in resolved
    ]
    if as_json:
        print(json.dumps(rows, ensure_ascii=False))
        return
    for row in rows:
        print(f"{row['position']:>4}  {row['number']!s:>6}  {row['unit_id']}  {row['title']}")


@app.command(help="Show next/previous units for the unit being viewed.")
def navigate(
    *,
    current: typ.Annotated[str, Parameter(help="Id of the unit being viewed")],
    book: typ.Annotated[Path, Parameter(help="Path to the book description")] = (
        DEFAULT_BOOK
    ),
    front_page: typ.Annotated[
        bool, Parameter(help="Treat the request as rendering the front page")
    ] = False,
    with_comments: typ.Annotated[
        bool, Parameter(help="Skip to the nearest units that have comments")
    ] = False,
    verbose: bool = False,
) -> None:
    """Print the neighbours, number, first page and redirect for ``current``."""
    _configure_logging(verbose=verbose)
    navigator = BookNavigator(
        load_book(book), current_id=current, on_front_page=front_page
    )
    number = navigator.page_number()
    print(f"previous: {_describe(navigator.previous_page(with_comments=with_comments))}")
    print(f"next: {_describe(navigator.next_page(with_comments=with_comments))}")
    print(f"page number: {'-' if number is None else number}")
    print(f"first page: {_describe(navigator.first_page())}")
    print(f"redirect: {navigator.redirect_target() or '-'}")


@app.command(help="Render a plain-text outline of the book.")
def outline(
    *,
    book: typ.Annotated[Path, Parameter(help="Path to the book description")] = (
        DEFAULT_BOOK
    ),
    mode: typ.Annotated[ModeName, Parameter(help="Traversal view")] = "structural",
    title: typ.Annotated[str, Parameter(help="Outline heading")] = "Contents",
    output: typ.Annotated[
        Path | None, Parameter(help="Write the outline here instead of stdout")
    ] = None,
    verbose: bool = False,
) -> None:
    """Render the outline to stdout or ``output``."""
    _configure_logging(verbose=verbose)
    builder = OutlineBuilder(SourceResolver(load_book(book)), title=title)
    if output is None:
        print(builder.render(SequenceMode(mode)), end="")
        return
    path = builder.write(output, SequenceMode(mode))
    print(f"wrote {path}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `bookpath` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()

"""Render a plain-text outline of a book's reading order.

The outline lists every entry of a resolved sequence with its display number,
which makes it handy for checking a book's ordering and numbering from the
command line. Templates are read from ``bookpath/templates`` by default.

>>> from pathlib import Path
>>> from bookpath.config import load_book
>>> from bookpath.outline import OutlineBuilder
>>> from bookpath.resolver import SourceResolver
>>> resolver = SourceResolver(load_book(Path("book.yaml")))  # doctest: +SKIP
>>> print(OutlineBuilder(resolver).render())  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .models import SequenceMode

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .resolver import SourceResolver


class OutlineBuilder:
    """Render numbered outlines of resolved sequences."""

    def __init__(
        self,
        resolver: SourceResolver,
        *,
        title: str = "Contents",
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the outline builder.

        Parameters
        ----------
        resolver : SourceResolver
            Resolver for the book whose order is rendered.
        title : str, optional
            Heading printed above the outline.
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to the
            ``bookpath/templates`` directory when ``None``.
        """
        self.resolver = resolver
        self.title = title
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,  # noqa: S701 - plain-text output
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.template = self.env.get_template("outline.jinja")

    def render(self, mode: SequenceMode | str = SequenceMode.READABLE) -> str:
        """Return the outline text for ``mode``."""
        sequence = self.resolver.resolve(mode)
        numbers = self.resolver.number(sequence)
        entries = [
            {
                "number": numbers.get(entry.unit_id, ""),
                "title": entry.title,
                "unit_id": entry.unit_id,
                "comment_count": entry.comment_count,
            }
            for entry in sequence
        ]
        return self.template.render(
            title=self.title,
            source=sequence.source.value,
            mode=sequence.mode.value,
            entries=entries,
        )

    def write(
        self, output_path: Path, mode: SequenceMode | str = SequenceMode.READABLE
    ) -> Path:
        """Render the outline to ``output_path`` and return the path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(mode), encoding="utf-8")
        return output_path


__all__ = ["OutlineBuilder"]

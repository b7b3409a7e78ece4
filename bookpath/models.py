"""Typed dataclasses describing units, menu proxies and ordered sequences.

Every structure here is rebuilt per navigation request; nothing is persisted.
Units and proxies are frozen so flatteners and filters cannot mutate the
inputs handed to them by a :class:`~bookpath.resolver.BookSource`.

Examples
--------
>>> from bookpath.models import Unit
>>> unit = Unit(id="7", title="Preface", order=1)
>>> unit.order_key
(1, 'Preface')
>>> unit.is_published
True
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata
import enum
import typing as typ

from ._constants import PUBLISHED_STATUS


class NumberFormat(str, enum.Enum):
    """Display format for page numbers."""

    ARABIC = "arabic"
    ROMAN = "roman"


class SequenceMode(str, enum.Enum):
    """Which traversal view a sequence represents."""

    STRUCTURAL = "structural"
    READABLE = "readable"


class SequenceSource(str, enum.Enum):
    """Topology a sequence was flattened from."""

    TREE = "tree"
    MENU = "menu"
    POSTS = "posts"


@dc.dataclass(frozen=True, slots=True)
class Unit:
    """A content node: chapter, page, leaf content item or blog post.

    Attributes
    ----------
    id : str
        Opaque stable identifier.
    title : str
        Human-facing title, also the secondary sibling sort key.
    parent_id : str | None
        Content-hierarchy parent, ``None`` for top-level units.
    order : int
        Explicit order rank among siblings.
    status : str
        Publication status; only ``"publish"`` participates in navigation.
    comment_count : int
        Number of approved comments on the unit.
    number_format : NumberFormat | None
        Optional numbering override inherited by the unit's top-level branch.
    slug : str
        URL slug, used to spot auto-generated pages such as a login page.
    content : str
        Raw body text.
    published_at : datetime | None
        Publication timestamp; orders blog posts.
    """

    id: str
    title: str = ""
    parent_id: str | None = None
    order: int = 0
    status: str = PUBLISHED_STATUS
    comment_count: int = 0
    number_format: NumberFormat | None = None
    slug: str = ""
    content: str = ""
    published_at: dt.datetime | None = None

    @property
    def order_key(self) -> tuple[int, str]:
        """Return the deterministic sibling sort key."""
        return (self.order, self.title)

    @property
    def is_published(self) -> bool:
        return self.status == PUBLISHED_STATUS

    @property
    def unit_id(self) -> str:
        return self.id


@dc.dataclass(frozen=True, slots=True)
class MenuItemProxy:
    """A curated-menu stand-in for a unit.

    Attributes
    ----------
    menu_item_id : str
        Identifier of the menu item itself.
    referenced_unit_id : str
        The unit this menu position points at.
    menu_parent_id : str | None
        Another menu item id (never a unit id), ``None`` at the top level.
    comment_count : int
        Denormalized from the referenced unit.
    title : str
        Denormalized title of the referenced unit.
    """

    menu_item_id: str
    referenced_unit_id: str
    menu_parent_id: str | None = None
    comment_count: int = 0
    title: str = ""

    @property
    def unit_id(self) -> str:
        return self.referenced_unit_id


Node: typ.TypeAlias = Unit | MenuItemProxy
PageNumber: typ.TypeAlias = int | str
PageNumberMap: typ.TypeAlias = dict[str, PageNumber]


@dc.dataclass(frozen=True, slots=True)
class SequenceEntry:
    """One position within an :class:`OrderedSequence`."""

    position: int
    node: Node

    @property
    def unit_id(self) -> str:
        return self.node.unit_id

    @property
    def comment_count(self) -> int:
        return self.node.comment_count

    @property
    def title(self) -> str:
        return self.node.title


@dc.dataclass(frozen=True, slots=True)
class OrderedSequence:
    """Deterministic, position-indexed list produced by flattening.

    Positions are contiguous from zero. A unit may appear more than once only
    in a menu-sourced sequence, where every proxy is an independent position.
    """

    mode: SequenceMode
    source: SequenceSource
    entries: tuple[SequenceEntry, ...] = ()

    @classmethod
    def from_nodes(
        cls,
        nodes: typ.Iterable[Node],
        *,
        mode: SequenceMode,
        source: SequenceSource,
    ) -> OrderedSequence:
        """Build a sequence, numbering positions in iteration order."""
        entries = tuple(
            SequenceEntry(position=idx, node=node) for idx, node in enumerate(nodes)
        )
        return cls(mode=mode, source=source, entries=entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> typ.Iterator[SequenceEntry]:
        return iter(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)

    @property
    def nodes(self) -> list[Node]:
        return [entry.node for entry in self.entries]

    @property
    def unit_ids(self) -> list[str]:
        return [entry.unit_id for entry in self.entries]

    def index_of(self, unit_id: str) -> int | None:
        """Return the first position holding ``unit_id``, or ``None``."""
        for entry in self.entries:
            if entry.unit_id == unit_id:
                return entry.position
        return None

    def first(self) -> SequenceEntry | None:
        return self.entries[0] if self.entries else None

    def with_nodes(self, nodes: typ.Iterable[Node]) -> OrderedSequence:
        """Return a fresh sequence of the same mode/source over ``nodes``."""
        return OrderedSequence.from_nodes(nodes, mode=self.mode, source=self.source)


__all__ = [
    "MenuItemProxy",
    "Node",
    "NumberFormat",
    "OrderedSequence",
    "PageNumber",
    "PageNumberMap",
    "SequenceEntry",
    "SequenceMode",
    "SequenceSource",
    "Unit",
]

"""Unit tests for :class:`bookpath.position.PositionResolver`."""

from __future__ import annotations

import pytest

from bookpath.models import OrderedSequence, SequenceMode, SequenceSource, Unit
from bookpath.position import PositionResolver


def _sequence(*units: Unit) -> OrderedSequence:
    return OrderedSequence.from_nodes(
        units, mode=SequenceMode.READABLE, source=SequenceSource.TREE
    )


@pytest.fixture
def commented() -> OrderedSequence:
    return _sequence(
        Unit(id="P1", title="P1"),
        Unit(id="P2", title="P2"),
        Unit(id="P3", title="P3", comment_count=2),
        Unit(id="P4", title="P4"),
    )


def test_next_and_previous(commented: OrderedSequence) -> None:
    resolver = PositionResolver()
    assert resolver.next_of(commented, "P2").id == "P3"  # type: ignore[union-attr]
    assert resolver.previous_of(commented, "P2").id == "P1"  # type: ignore[union-attr]
    assert resolver.next_of(commented, "P4") is None
    assert resolver.previous_of(commented, "P1") is None


def test_next_with_comments_skips_to_first_commented(commented: OrderedSequence) -> None:
    resolver = PositionResolver()
    found = resolver.next_of(commented, "P1", require_comments=True)
    assert found is not None
    assert found.id == "P3", f"Expected P3, got {found.id!r}"
    assert resolver.next_of(commented, "P3", require_comments=True) is None


def test_previous_with_comments_scans_backwards(commented: OrderedSequence) -> None:
    resolver = PositionResolver()
    assert resolver.previous_of(commented, "P4", require_comments=True).id == "P3"  # type: ignore[union-attr]
    assert resolver.previous_of(commented, "P3", require_comments=True) is None


def test_next_and_previous_are_inverses(commented: OrderedSequence) -> None:
    resolver = PositionResolver()
    for entry in commented:
        following = resolver.next_of(commented, entry.unit_id)
        if following is None:
            continue
        back = resolver.previous_of(commented, following.unit_id)
        assert back is not None
        assert back.unit_id == entry.unit_id


def test_remainders(commented: OrderedSequence) -> None:
    resolver = PositionResolver()
    assert [n.unit_id for n in resolver.remainder_after(commented, "P2")] == ["P3", "P4"]
    assert [n.unit_id for n in resolver.remainder_before(commented, "P3")] == ["P2", "P1"]


def test_unknown_id_yields_nothing(commented: OrderedSequence) -> None:
    """A chapter outside the readable view behaves like an endpoint."""
    resolver = PositionResolver()
    assert resolver.next_of(commented, "chapter") is None
    assert resolver.previous_of(commented, "chapter") is None
    assert resolver.remainder_after(commented, "chapter") == []
    assert not resolver.is_first(commented, "chapter")
    assert not resolver.is_last(commented, "chapter")


def test_first_and_last(commented: OrderedSequence) -> None:
    resolver = PositionResolver()
    assert resolver.is_first(commented, "P1")
    assert not resolver.is_first(commented, "P2")
    assert resolver.is_last(commented, "P4")
    assert resolver.first_readable(commented).id == "P1"  # type: ignore[union-attr]
    assert resolver.first_readable(_sequence()) is None


def test_empty_sequence() -> None:
    resolver = PositionResolver()
    empty = _sequence()
    assert resolver.next_of(empty, "x") is None
    assert resolver.previous_of(empty, "x") is None


def test_previous_from_first_page_falls_back_to_title() -> None:
    title = Unit(id="T", title="Title")
    seq = _sequence(Unit(id="P1"), Unit(id="P2"))
    assert PositionResolver().previous_of(seq, "P1") is None
    resolver = PositionResolver(title_unit=title, on_front_page=False)
    assert resolver.previous_of(seq, "P1") is title
    assert resolver.previous_of(seq, "P2").id == "P1"  # type: ignore[union-attr]


def test_title_fallback_is_not_used_on_front_page() -> None:
    title = Unit(id="T", title="Title")
    seq = _sequence(Unit(id="P1"), Unit(id="P2"))
    resolver = PositionResolver(title_unit=title, on_front_page=True)
    assert resolver.previous_of(seq, "P1") is None


def test_next_on_front_page_falls_back_to_first_page() -> None:
    first = Unit(id="P1")
    seq = _sequence(first, Unit(id="P2"))
    calls: list[int] = []

    def _first_page() -> Unit:
        calls.append(1)
        return first

    resolver = PositionResolver(
        title_unit=Unit(id="T"), on_front_page=True, first_page=_first_page
    )
    assert resolver.next_of(seq, "T") is first
    assert resolver.next_of(seq, "T") is first
    assert calls == [1], "first page should be computed at most once"


def test_next_off_front_page_has_no_fallback() -> None:
    seq = _sequence(Unit(id="P1"))
    resolver = PositionResolver(
        title_unit=Unit(id="T"), on_front_page=False, first_page=lambda: seq.nodes[0]
    )
    assert resolver.next_of(seq, "P1") is None

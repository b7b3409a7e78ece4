"""Behaviour tests for navigation around a title page used as the front page.

Bound to ``features/homepage_navigation.feature``. Each scenario builds a
navigator for one request, mirroring how the rendering layer asks for the
arrows of the page being viewed.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from bookpath.config import load_book
from bookpath.navigator import BookNavigator

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "homepage_navigation.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Share mutable scenario data across pytest-bdd steps."""
    return {}


@given("a book whose title page is the front page")
def given_title_is_front(book_path: Path, scenario_state: ScenarioState) -> None:
    scenario_state["book"] = load_book(book_path)


@given("a book whose title page is not the front page")
def given_title_is_not_front(book_path: Path, scenario_state: ScenarioState) -> None:
    book = load_book(book_path)
    book.settings["page_on_front"] = None
    scenario_state["book"] = book


@when("I view the front page")
def when_view_front(scenario_state: ScenarioState) -> None:
    book = scenario_state["book"]
    scenario_state["navigator"] = BookNavigator(
        book, current_id=str(book.get_setting("title_page")), on_front_page=True
    )


@when(parsers.parse('I view page "{unit_id}"'))
def when_view_page(scenario_state: ScenarioState, unit_id: str) -> None:
    scenario_state["navigator"] = BookNavigator(
        scenario_state["book"], current_id=unit_id
    )


@then(parsers.parse('the next page is "{unit_id}"'))
def then_next(scenario_state: ScenarioState, unit_id: str) -> None:
    found = scenario_state["navigator"].next_page()
    assert found is not None, "expected a next page"
    assert found.unit_id == unit_id


@then(parsers.parse('the previous page is "{unit_id}"'))
def then_previous(scenario_state: ScenarioState, unit_id: str) -> None:
    found = scenario_state["navigator"].previous_page()
    assert found is not None, "expected a previous page"
    assert found.unit_id == unit_id


@then("there is no previous page")
def then_no_previous(scenario_state: ScenarioState) -> None:
    assert scenario_state["navigator"].previous_page() is None

"""Behaviour tests for the catalog home page.

These scenarios write a small ``site.yaml``, render the home page with
``HomePageBuilder`` and inspect the HTML with BeautifulSoup. They check that
sections and cards keep their declared order and that each card's link
behaviour follows its destination: internal routes go through the
client-side router, external URLs open in a new tab.

Usage:
    pytest tests/bdd/test_home_page_catalog.py -v
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup, Tag
from pytest_bdd import given, parsers, scenarios, then, when

from devguide_pages.config import load_site_config
from devguide_pages.homepage import HomePageBuilder

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "home_page_catalog.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _soup(scenario_state: ScenarioState) -> BeautifulSoup:
    return BeautifulSoup(scenario_state["html"], "html.parser")


def _card(scenario_state: ScenarioState, title: str) -> Tag:
    for anchor in _soup(scenario_state).select("a.card"):
        heading = anchor.select_one(".card__title")
        if heading is not None and heading.get_text().startswith(title):
            return anchor
    msg = f"no card titled {title!r} on the page"
    raise AssertionError(msg)


@given("a site config with a Cheatsheets section of two internal cards")
def given_cheatsheets_config(
    site_config_factory: typ.Callable[..., Path], scenario_state: ScenarioState
) -> None:
    """Use the default fixture catalog: one Cheatsheets section, two cards."""
    scenario_state["config_path"] = site_config_factory()


@given("a site config mixing react.dev with the interview study guide")
def given_mixed_config(
    site_config_factory: typ.Callable[..., Path], scenario_state: ScenarioState
) -> None:
    """Write a catalog holding one external and one internal card.

    Parameters
    ----------
    site_config_factory : Callable[..., Path]
        Fixture that writes ``site.yaml`` into the test's temporary folder.
    scenario_state : ScenarioState
        Receives the ``config_path`` for later steps.
    """
    scenario_state["config_path"] = site_config_factory(
        """
        - icon: "🛠️"
          heading: Tools & Frameworks (External)
          cards:
            - title: React
              description: Official React documentation and guides.
              to: https://react.dev
        - icon: "🎯"
          heading: .NET Interview Prep
          cards:
            - title: Overview & Study Guide
              description: Consolidated study guide for .NET interviews.
              to: /docs/dotnet-interview/
        """
    )


@when("I build the home page")
def when_build_home_page(scenario_state: ScenarioState) -> None:
    """Render the home page and keep the HTML in ``scenario_state``."""
    site = load_site_config(scenario_state["config_path"])
    scenario_state["html"] = HomePageBuilder(site).render()


@then(parsers.parse('the page shows one section headed "{heading}"'))
def then_single_section(scenario_state: ScenarioState, heading: str) -> None:
    sections = _soup(scenario_state).select("section.catalog-section")
    assert len(sections) == 1, f"expected one section, found {len(sections)}"
    title = sections[0].select_one(".catalog-section__heading")
    assert title is not None, "expected a section heading element"
    assert heading in title.get_text(), (
        f"expected heading {heading!r}, got {title.get_text(strip=True)!r}"
    )


@then(parsers.parse('the section lists "{first}" then "{second}"'))
def then_cards_in_order(
    scenario_state: ScenarioState, first: str, second: str
) -> None:
    """Verify the section renders exactly two cards in declaration order."""
    titles = [
        node.get_text(strip=True)
        for node in _soup(scenario_state).select(".card .card__title")
    ]
    assert titles == [first, second], f"unexpected card order {titles!r}"


@then("no card on the page is marked external")
def then_no_external_cards(scenario_state: ScenarioState) -> None:
    soup = _soup(scenario_state)
    assert soup.select("a.card--external") == []
    assert soup.select("a.card[target]") == []


@then(parsers.parse('the "{title}" card opens in a new tab without leaking the opener'))
def then_card_is_external(scenario_state: ScenarioState, title: str) -> None:
    """Verify the external card carries the new-tab and rel attributes."""
    anchor = _card(scenario_state, title)
    assert "card--external" in anchor["class"]
    assert anchor["target"] == "_blank"
    assert anchor["rel"] == ["noopener", "noreferrer"]
    assert anchor.select_one(".card__external-badge") is not None


@then(parsers.parse('the "{title}" card uses client-side navigation'))
def then_card_is_internal(scenario_state: ScenarioState, title: str) -> None:
    """Verify the internal card is handed to the router and stays in-tab."""
    anchor = _card(scenario_state, title)
    assert anchor["href"] == "/docs/dotnet-interview/"
    assert anchor.has_attr("data-router-link")
    assert not anchor.has_attr("target")
    assert "card--external" not in anchor["class"]

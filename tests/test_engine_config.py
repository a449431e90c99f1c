"""Tests for mapping the site configuration onto the docs engine schema."""

from __future__ import annotations

import datetime as dt
import json
from pathlib import Path

import pytest

from devguide_pages._constants import PRISM_THEMES
from devguide_pages.config import load_site_config
from devguide_pages.engine_config import SiteConfigMapper

REPO_ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture(scope="module")
def engine_config() -> dict[str, object]:
    """Build the engine config for the shipped site file with a pinned year."""
    site = load_site_config(REPO_ROOT / "config" / "site.yaml")
    return SiteConfigMapper(site, year=2025).build()


def test_site_metadata_keys(engine_config: dict[str, object]) -> None:
    """Top-level metadata uses the engine's camelCase keys."""
    assert engine_config["title"] == "Dev Guide"
    assert engine_config["baseUrl"] == "/"
    assert engine_config["organizationName"] == "abrmeval"
    assert engine_config["projectName"] == "abrmeval.github.io"
    assert engine_config["onBrokenLinks"] == "throw"
    assert engine_config["markdown"] == {
        "format": "detect",
        "hooks": {"onBrokenMarkdownLinks": "warn"},
    }
    assert engine_config["i18n"] == {"defaultLocale": "en", "locales": ["en"]}
    assert engine_config["future"] == {"v4": True}


def test_search_plugin_entry(engine_config: dict[str, object]) -> None:
    """The local search plugin receives exactly its four options."""
    assert engine_config["plugins"] == [
        [
            "@easyops-cn/docusaurus-search-local",
            {
                "hashed": True,
                "language": ["en"],
                "indexBlog": False,
                "docsRouteBasePath": "/docs",
            },
        ]
    ]


def test_classic_preset(engine_config: dict[str, object]) -> None:
    """Docs preset keeps the sidebar path and route base of the site file."""
    assert engine_config["presets"] == [
        [
            "classic",
            {
                "docs": {"sidebarPath": "./sidebars.ts", "routeBasePath": "docs"},
                "blog": False,
                "theme": {"customCss": "./src/css/custom.css"},
            },
        ]
    ]


def test_navbar_items_use_to_or_href(engine_config: dict[str, object]) -> None:
    """Internal navbar entries emit ``to``; external ones emit ``href``."""
    navbar = engine_config["themeConfig"]["navbar"]  # type: ignore[index]
    assert navbar["title"] == "Dev Guide"
    assert navbar["logo"] == {"alt": "Dev Guide Logo", "src": "img/logo.svg"}
    items = navbar["items"]
    assert items[0] == {
        "label": "ASP.NET Core",
        "to": "/docs/aspnet-core/aspnetcore-testing-guide",
        "position": "left",
    }
    assert items[-1] == {
        "label": "GitHub",
        "href": "https://github.com/abrmeval/abrmeval.github.io",
        "position": "right",
    }
    assert [item["label"] for item in items] == [
        "ASP.NET Core",
        "Azure Functions",
        "Azure Platform",
        ".NET Interview",
        "Cheatsheets",
        "GitHub",
    ]


def test_footer_columns_and_copyright(engine_config: dict[str, object]) -> None:
    """Footer columns keep their order and the copyright uses the pinned year."""
    footer = engine_config["themeConfig"]["footer"]  # type: ignore[index]
    assert footer["style"] == "dark"
    assert [column["title"] for column in footer["links"]] == [
        "ASP.NET Core",
        "Azure",
        "More",
    ]
    more = footer["links"][-1]["items"]
    assert more == [
        {"label": ".NET Interview Prep", "to": "/docs/dotnet-interview/"},
        {"label": "GitHub", "href": "https://github.com/abrmeval/abrmeval.github.io"},
    ]
    assert footer["copyright"] == (
        "Copyright © 2025 abrmeval. Built with Docusaurus."
    )


def test_prism_themes_are_names(engine_config: dict[str, object]) -> None:
    """Prism themes are emitted as theme names for the consuming config to resolve."""
    prism = engine_config["themeConfig"]["prism"]  # type: ignore[index]
    assert prism["theme"] == "github"
    assert prism["darkTheme"] == "dracula"
    assert {prism["theme"], prism["darkTheme"]} <= set(PRISM_THEMES)
    assert "csharp" in prism["additionalLanguages"]


def test_run_writes_json(tmp_path: Path) -> None:
    """``run`` writes UTF-8 JSON that round-trips to the built mapping."""
    site = load_site_config(REPO_ROOT / "config" / "site.yaml")
    mapper = SiteConfigMapper(site, year=2025, output=tmp_path / "out" / "site.json")
    written = mapper.run()
    assert written == tmp_path / "out" / "site.json"
    payload = json.loads(written.read_text(encoding="utf-8"))
    assert payload == mapper.build()
    assert "©" in written.read_text(encoding="utf-8")


def test_year_defaults_to_current_year() -> None:
    """Without a pinned year the mapper uses the current UTC year."""
    site = load_site_config(REPO_ROOT / "config" / "site.yaml")
    mapper = SiteConfigMapper(site)
    assert mapper.year == dt.datetime.now(dt.UTC).year

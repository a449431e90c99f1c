"""Shared fixtures for devguide_pages tests.

``site_config_factory`` writes a minimal but complete ``site.yaml`` into the
test's temporary directory. Tests pass YAML snippets for the home page
``sections`` list, the ``navbar``/``footer`` blocks, or extra top-level blocks
so each module only spells out the parts of the site file it exercises.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path
from textwrap import dedent, indent

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]

BASE_SITE = """
site:
  title: Dev Guide
  tagline: Personal reference for .NET, ASP.NET Core, Azure, and more
  url: https://example.invalid
  organization_name: abrmeval
docs:
  dir: {docs_dir}
{navigation}
engine:
  output: {engine_output}
homepage:
  output: {homepage_output}
  hero:
    title: Dev Guide
    tagline: Personal reference for .NET, ASP.NET Core, Azure, and interview prep
  sections:
{sections}
{extra}
"""

DEFAULT_NAVIGATION = """
navbar:
  items:
    - label: Cheatsheets
      to: /docs/cheatsheets/linux-dev-cheatsheet
    - label: GitHub
      href: https://github.com/abrmeval/abrmeval.github.io
      position: right
footer:
  columns:
    - title: More
      items:
        - label: Linux Commands
          to: /docs/cheatsheets/linux-dev-cheatsheet
        - label: GitHub
          href: https://github.com/abrmeval/abrmeval.github.io
"""

DEFAULT_SECTIONS = """
- icon: "📄"
  heading: Cheatsheets
  cards:
    - title: Linux Commands
      description: Essential Linux commands for day-to-day software development.
      to: /docs/cheatsheets/linux-dev-cheatsheet
    - title: Pro Git Cheatsheet
      description: Git commands, workflows, and tips for professional use. (Coming soon)
      to: /docs/cheatsheets/linux-dev-cheatsheet
"""


class SiteConfigFactory(typ.Protocol):
    """Signature of the callable returned by ``site_config_factory``."""

    def __call__(
        self,
        sections: str = ...,
        *,
        navigation: str = ...,
        extra: str = ...,
    ) -> Path: ...


def _block(text: str) -> str:
    return dedent(text).strip("\n")


@pytest.fixture
def site_config_factory(tmp_path: Path) -> SiteConfigFactory:
    """Return a callable that writes ``site.yaml`` and returns its path."""

    def _write(
        sections: str = DEFAULT_SECTIONS,
        *,
        navigation: str = DEFAULT_NAVIGATION,
        extra: str = "",
    ) -> Path:
        text = BASE_SITE.format(
            docs_dir=tmp_path / "docs",
            navigation=_block(navigation),
            engine_output=tmp_path / "build" / "site-config.json",
            homepage_output=tmp_path / "build" / "index.html",
            sections=indent(_block(sections), "    "),
            extra=_block(extra),
        )
        config_path = tmp_path / "site.yaml"
        config_path.write_text(text.strip() + "\n", encoding="utf-8")
        return config_path

    return _write


@pytest.fixture
def docs_tree(tmp_path: Path) -> Path:
    """Create a docs folder holding the document the default sections link to."""
    docs_dir = tmp_path / "docs"
    cheatsheets = docs_dir / "cheatsheets"
    cheatsheets.mkdir(parents=True)
    (cheatsheets / "linux-dev-cheatsheet.md").write_text(
        "# Linux Commands\n", encoding="utf-8"
    )
    return docs_dir

"""Home page catalog configuration builders."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from devguide_pages._constants import DOCS_ROUTE_BASE_PATH

from .helpers import _entries, _flag, _mapping, _optional_str, _required_str
from .models import (
    CardItem,
    Catalog,
    HeroConfig,
    HomepageConfig,
    Section,
    SiteConfigError,
    classify_destination,
)


def _build_homepage_config(
    payload: typ.Mapping[str, typ.Any] | None,
    *,
    site_title: str,
    site_tagline: str,
    base_path: str = DOCS_ROUTE_BASE_PATH,
) -> HomepageConfig:
    """Build the home page configuration, falling back to site metadata."""
    data = _mapping(payload, "Homepage")
    output = Path(data.get("output", "build/index.html"))
    title = _optional_str(data.get("title")) or site_title
    description = _optional_str(data.get("description")) or site_tagline
    hero = _build_hero_config(data.get("hero"), title=title, tagline=site_tagline)
    catalog = _build_catalog(data.get("sections"), base_path=base_path)
    if not catalog.sections:
        msg = "Homepage requires at least one section with cards."
        raise SiteConfigError(msg)
    return HomepageConfig(
        output=output,
        title=title,
        description=description,
        hero=hero,
        catalog=catalog,
    )


def _build_hero_config(
    payload: typ.Mapping[str, object] | None, *, title: str, tagline: str
) -> HeroConfig:
    """Build the hero banner; missing copy falls back to the site metadata."""
    data = _mapping(payload, "Homepage hero")
    return HeroConfig(
        title=_optional_str(data.get("title")) or title,
        tagline=_optional_str(data.get("tagline")) or tagline,
    )


def _build_catalog(
    entries: list[typ.Mapping[str, object]] | None, *, base_path: str
) -> Catalog:
    """Build the ordered catalog, dropping sections that declare no cards."""
    sections: list[Section] = []
    for entry in _entries(entries, "Homepage sections"):
        if not isinstance(entry, dict):
            msg = "Catalog sections must be mappings with a 'heading'."
            raise SiteConfigError(msg)
        heading = _required_str(entry, "heading", "Catalog section")
        cards = _build_cards(entry.get("cards"), base_path=base_path)
        if not cards:
            continue
        sections.append(
            Section(
                icon=_optional_str(entry.get("icon")) or "",
                heading=heading,
                cards=tuple(cards),
            )
        )
    return Catalog(sections=tuple(sections))


def _build_cards(
    entries: list[typ.Mapping[str, object]] | None, *, base_path: str
) -> list[CardItem]:
    """Build card items for one catalog section, preserving declared order."""
    cards: list[CardItem] = []
    for entry in _entries(entries, "Section cards"):
        if not isinstance(entry, dict):
            msg = "Catalog cards must be mappings."
            raise SiteConfigError(msg)
        title = _required_str(entry, "title", "Catalog card")
        context = f"Catalog card '{title}'"
        description = _required_str(entry, "description", context)
        raw_destination = entry.get("to") or entry.get("href")
        destination_text = _optional_str(raw_destination)
        if destination_text is None:
            msg = f"{context} requires a 'to' destination."
            raise SiteConfigError(msg)
        destination = classify_destination(destination_text, base_path=base_path)
        declared = _flag(
            entry.get("external"),
            default=destination.is_external,
            context=f"{context} 'external'",
        )
        if declared != destination.is_external:
            msg = (
                f"{context} declares external={declared} but "
                f"'{destination_text}' is "
                f"{'external' if destination.is_external else 'internal'}."
            )
            raise SiteConfigError(msg)
        cards.append(
            CardItem(title=title, description=description, destination=destination)
        )
    return cards


__all__ = [
    "_build_cards",
    "_build_catalog",
    "_build_hero_config",
    "_build_homepage_config",
]

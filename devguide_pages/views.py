"""Presentation models for catalog cards and sections.

The home page template never inspects destinations itself; it receives
:class:`CardView` and :class:`SectionView` values whose link attributes were
derived here from the already-classified :class:`Destination`. External cards
open in a new browsing context with ``rel="noopener noreferrer"``; internal
cards carry the ``data-router-link`` marker that the site's client-side router
intercepts.

Examples
--------
>>> from devguide_pages.config import CardItem, ExternalUrl
>>> view = card_view(
...     CardItem("React", "Official React docs.", ExternalUrl("https://react.dev"))
... )
>>> (view.target, view.rel, view.badge)
('_blank', 'noopener noreferrer', '↗')
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import EXTERNAL_BADGE, EXTERNAL_LINK_REL, EXTERNAL_LINK_TARGET

if typ.TYPE_CHECKING:
    from .config import CardItem, Catalog, Section


@dc.dataclass(frozen=True, slots=True)
class CardView:
    """Link attributes and copy for one rendered card."""

    title: str
    description: str
    href: str
    external: bool
    target: str | None
    rel: str | None
    badge: str | None
    coming_soon: bool

    @property
    def router_link(self) -> bool:
        """Whether the host application's router should handle the click."""
        return not self.external


@dc.dataclass(frozen=True, slots=True)
class SectionView:
    """Heading, icon and ordered cards for one rendered section."""

    icon: str
    heading: str
    cards: tuple[CardView, ...]


def card_view(card: CardItem) -> CardView:
    """Return the presentation model for ``card``."""
    external = card.is_external
    return CardView(
        title=card.title,
        description=card.description,
        href=card.href,
        external=external,
        target=EXTERNAL_LINK_TARGET if external else None,
        rel=EXTERNAL_LINK_REL if external else None,
        badge=EXTERNAL_BADGE if external else None,
        coming_soon=card.coming_soon,
    )


def section_view(section: Section) -> SectionView:
    """Return the presentation model for ``section`` with cards in declared order."""
    return SectionView(
        icon=section.icon,
        heading=section.heading,
        cards=tuple(card_view(card) for card in section.cards),
    )


def compose_sections(catalog: Catalog) -> tuple[SectionView, ...]:
    """Walk ``catalog`` once, top to bottom, producing one view per section."""
    return tuple(section_view(section) for section in catalog)


__all__ = ["CardView", "SectionView", "card_view", "compose_sections", "section_view"]

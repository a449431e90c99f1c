"""Typed dataclasses describing the Dev Guide catalog and site configuration."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from devguide_pages._constants import (
    COMING_SOON_MARKER,
    DOCS_ROUTE_BASE_PATH,
    SEARCH_PLUGIN_NAME,
)


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class InternalRoute:
    """A path served by the site's own documentation tree."""

    path: str

    @property
    def href(self) -> str:
        return self.path

    @property
    def is_external(self) -> bool:
        return False


@dc.dataclass(frozen=True, slots=True)
class ExternalUrl:
    """A destination outside the site, opened in a new browsing context."""

    url: str

    @property
    def href(self) -> str:
        return self.url

    @property
    def is_external(self) -> bool:
        return True


Destination = InternalRoute | ExternalUrl


def classify_destination(
    raw: str, *, base_path: str = DOCS_ROUTE_BASE_PATH
) -> Destination:
    """Return the destination variant for ``raw`` relative to ``base_path``.

    Parameters
    ----------
    raw : str
        Route or URL as written in the site file.
    base_path : str, optional
        Docs route prefix. Anything starting with it is internal; everything
        else is treated as an external URL.

    Returns
    -------
    Destination
        ``InternalRoute`` or ``ExternalUrl``.

    Examples
    --------
    >>> classify_destination("/docs/dotnet-interview/")
    InternalRoute(path='/docs/dotnet-interview/')
    >>> classify_destination("https://react.dev")
    ExternalUrl(url='https://react.dev')
    """
    prefix = "/" + base_path.strip("/")
    if raw == prefix or raw.startswith(prefix + "/"):
        return InternalRoute(raw)
    return ExternalUrl(raw)


@dc.dataclass(frozen=True, slots=True)
class CardItem:
    """A single link tile on the home page."""

    title: str
    description: str
    destination: Destination

    def __post_init__(self) -> None:
        if not self.title.strip():
            msg = "Card items require a non-empty 'title'."
            raise SiteConfigError(msg)
        if not self.description.strip():
            msg = f"Card '{self.title}' requires a non-empty 'description'."
            raise SiteConfigError(msg)

    @property
    def is_external(self) -> bool:
        return self.destination.is_external

    @property
    def href(self) -> str:
        return self.destination.href

    @property
    def coming_soon(self) -> bool:
        """Whether the description flags the card as a placeholder."""
        return COMING_SOON_MARKER in self.description


@dc.dataclass(frozen=True, slots=True)
class Section:
    """A named group of cards shown under one heading."""

    icon: str
    heading: str
    cards: tuple[CardItem, ...]

    def __post_init__(self) -> None:
        if not self.heading.strip():
            msg = "Catalog sections require a non-empty 'heading'."
            raise SiteConfigError(msg)
        if not self.cards:
            msg = f"Section '{self.heading}' requires at least one card."
            raise SiteConfigError(msg)


@dc.dataclass(frozen=True, slots=True)
class Catalog:
    """Ordered, immutable collection of home page sections."""

    sections: tuple[Section, ...]

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for section in self.sections:
            if section.heading in seen:
                msg = f"Duplicate catalog heading '{section.heading}'."
                raise SiteConfigError(msg)
            seen.add(section.heading)

    def __iter__(self) -> typ.Iterator[Section]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)

    def internal_routes(self) -> list[tuple[str, CardItem]]:
        """Return ``(path, card)`` for each distinct internal destination.

        The first card declaring a path wins; order follows the catalog.
        """
        routes: dict[str, CardItem] = {}
        for section in self.sections:
            for card in section.cards:
                match card.destination:
                    case InternalRoute(path=path) if path not in routes:
                        routes[path] = card
                    case _:
                        continue
        return list(routes.items())


@dc.dataclass(frozen=True, slots=True)
class HeroConfig:
    """Hero banner copy shown above the catalog."""

    title: str
    tagline: str


@dc.dataclass(frozen=True, slots=True)
class HomepageConfig:
    """Home page output location, page metadata, hero and catalog."""

    output: Path
    title: str
    description: str
    hero: HeroConfig
    catalog: Catalog


@dc.dataclass(frozen=True, slots=True)
class LogoConfig:
    """Navbar logo image."""

    alt: str
    src: str


@dc.dataclass(frozen=True, slots=True)
class NavbarItem:
    """One navbar entry; ``position`` is ``left`` or ``right``."""

    label: str
    destination: Destination
    position: str = "left"


@dc.dataclass(frozen=True, slots=True)
class NavbarConfig:
    """Navbar title, logo and ordered entries."""

    title: str
    logo: LogoConfig | None
    items: tuple[NavbarItem, ...]


@dc.dataclass(frozen=True, slots=True)
class FooterLink:
    """Footer hyperlink metadata."""

    label: str
    destination: Destination


@dc.dataclass(frozen=True, slots=True)
class FooterColumn:
    """Titled group of footer links."""

    title: str
    links: tuple[FooterLink, ...]


@dc.dataclass(frozen=True, slots=True)
class FooterConfig:
    """Footer columns, style and copyright owner."""

    style: str
    columns: tuple[FooterColumn, ...]
    copyright_owner: str

    def copyright(self, year: int) -> str:
        """Return the copyright line for ``year``."""
        return f"Copyright © {year} {self.copyright_owner}. Built with Docusaurus."


@dc.dataclass(frozen=True, slots=True)
class SearchPluginConfig:
    """Options handed to the local search plugin."""

    hashed: bool = True
    language: tuple[str, ...] = ("en",)
    index_blog: bool = False
    docs_route_base_path: str = DOCS_ROUTE_BASE_PATH
    plugin: str = SEARCH_PLUGIN_NAME


@dc.dataclass(frozen=True, slots=True)
class DocsPresetConfig:
    """Docs plugin settings of the classic preset."""

    sidebar_path: str = "./sidebars.ts"
    route_base_path: str = "docs"
    custom_css: str = "./src/css/custom.css"
    blog: bool = False

    @property
    def route_prefix(self) -> str:
        return "/" + self.route_base_path.strip("/")


@dc.dataclass(frozen=True, slots=True)
class PrismConfig:
    """Code highlighting theme names and extra languages.

    ``theme`` and ``dark_theme`` name exports of ``prism-react-renderer``'s
    ``themes`` object; the engine config resolves them by name.
    """

    theme: str = "github"
    dark_theme: str = "dracula"
    additional_languages: tuple[str, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class SiteMetadata:
    """Top-level site identity and build behaviour."""

    title: str
    tagline: str
    url: str
    base_url: str = "/"
    favicon: str = "img/favicon.ico"
    organization_name: str | None = None
    project_name: str | None = None
    on_broken_links: str = "throw"
    on_broken_markdown_links: str = "warn"
    markdown_format: str = "detect"
    default_locale: str = "en"
    locales: tuple[str, ...] = ("en",)
    image: str | None = None
    respect_prefers_color_scheme: bool = True
    future_v4: bool = True


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Everything loaded from the YAML site file."""

    metadata: SiteMetadata
    docs: DocsPresetConfig
    navbar: NavbarConfig
    footer: FooterConfig
    search: SearchPluginConfig
    prism: PrismConfig
    homepage: HomepageConfig
    docs_dir: Path = Path("docs")
    engine_output: Path = Path("build/site-config.json")

    @property
    def catalog(self) -> Catalog:
        return self.homepage.catalog


__all__ = [
    "CardItem",
    "Catalog",
    "Destination",
    "DocsPresetConfig",
    "ExternalUrl",
    "FooterColumn",
    "FooterConfig",
    "FooterLink",
    "HeroConfig",
    "HomepageConfig",
    "InternalRoute",
    "LogoConfig",
    "NavbarConfig",
    "NavbarItem",
    "PrismConfig",
    "SearchPluginConfig",
    "Section",
    "SiteConfig",
    "SiteConfigError",
    "SiteMetadata",
    "classify_destination",
]

"""Load and validate the Dev Guide site YAML.

This subpackage parses the project's ``site.yaml`` file into immutable
dataclasses: the home page :class:`Catalog` of :class:`Section` and
:class:`CardItem` records, plus the navbar, footer, search plugin and site
metadata consumed by the external docs engine. Destinations are classified
once, at load time, into :class:`InternalRoute` or :class:`ExternalUrl`. The
primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from devguide_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> site.catalog.sections[0].cards[0].is_external  # doctest: +SKIP
False
"""

from .loader import load_site_config
from .models import (
    CardItem,
    Catalog,
    Destination,
    DocsPresetConfig,
    ExternalUrl,
    FooterColumn,
    FooterConfig,
    FooterLink,
    HeroConfig,
    HomepageConfig,
    InternalRoute,
    LogoConfig,
    NavbarConfig,
    NavbarItem,
    PrismConfig,
    SearchPluginConfig,
    Section,
    SiteConfig,
    SiteConfigError,
    SiteMetadata,
    classify_destination,
)

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
    "load_site_config",
]

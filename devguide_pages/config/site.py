"""Site-wide configuration builders: metadata, navbar, footer, search, prism."""

from __future__ import annotations

import typing as typ

from devguide_pages._constants import BROKEN_LINK_SEVERITIES, PRISM_THEMES

from .helpers import (
    _choice,
    _entries,
    _flag,
    _mapping,
    _optional_str,
    _required_str,
    _str_tuple,
)
from .models import (
    DocsPresetConfig,
    FooterColumn,
    FooterConfig,
    FooterLink,
    LogoConfig,
    NavbarConfig,
    NavbarItem,
    PrismConfig,
    SearchPluginConfig,
    SiteConfigError,
    SiteMetadata,
    classify_destination,
)

NAVBAR_POSITIONS = ("left", "right")
FOOTER_STYLES = ("dark", "light")
SEARCH_OPTION_KEYS = frozenset(
    {"hashed", "language", "index_blog", "docs_route_base_path"}
)


def _build_site_metadata(payload: typ.Mapping[str, typ.Any] | None) -> SiteMetadata:
    """Build the site identity block; ``title``, ``tagline``, ``url`` are required."""
    data = _mapping(payload, "Site")
    if not data:
        msg = "Site configuration requires a 'site' block."
        raise SiteConfigError(msg)
    i18n = _mapping(data.get("i18n"), "Site i18n")
    future = _mapping(data.get("future"), "Site future")
    default_locale = _optional_str(i18n.get("default_locale")) or "en"
    return SiteMetadata(
        title=_required_str(data, "title", "Site configuration"),
        tagline=_required_str(data, "tagline", "Site configuration"),
        url=_required_str(data, "url", "Site configuration"),
        base_url=_optional_str(data.get("base_url")) or "/",
        favicon=_optional_str(data.get("favicon")) or "img/favicon.ico",
        organization_name=_optional_str(data.get("organization_name")),
        project_name=_optional_str(data.get("project_name")),
        on_broken_links=_choice(
            data.get("on_broken_links"),
            choices=BROKEN_LINK_SEVERITIES,
            default="throw",
            context="Site 'on_broken_links'",
        ),
        on_broken_markdown_links=_choice(
            data.get("on_broken_markdown_links"),
            choices=BROKEN_LINK_SEVERITIES,
            default="warn",
            context="Site 'on_broken_markdown_links'",
        ),
        markdown_format=_choice(
            data.get("markdown_format"),
            choices=("detect", "md", "mdx"),
            default="detect",
            context="Site 'markdown_format'",
        ),
        default_locale=default_locale,
        locales=_str_tuple(i18n.get("locales"), default=(default_locale,)),
        image=_optional_str(data.get("image")),
        respect_prefers_color_scheme=_flag(
            data.get("respect_prefers_color_scheme"),
            default=True,
            context="Site 'respect_prefers_color_scheme'",
        ),
        future_v4=_flag(
            future.get("v4"), default=True, context="Site future 'v4'"
        ),
    )


def _build_docs_preset(payload: typ.Mapping[str, typ.Any] | None) -> DocsPresetConfig:
    """Build docs preset options, defaulting to the classic preset layout."""
    data = _mapping(payload, "Docs")
    base = DocsPresetConfig()
    return DocsPresetConfig(
        sidebar_path=_optional_str(data.get("sidebar_path")) or base.sidebar_path,
        route_base_path=(
            _optional_str(data.get("route_base_path")) or base.route_base_path
        ).strip("/"),
        custom_css=_optional_str(data.get("custom_css")) or base.custom_css,
        blog=_flag(data.get("blog"), default=base.blog, context="Docs 'blog'"),
    )


def _build_navbar_config(
    payload: typ.Mapping[str, typ.Any] | None, *, title: str, base_path: str
) -> NavbarConfig:
    """Build the navbar block; at least one entry is required."""
    data = _mapping(payload, "Navbar")
    items = _build_navbar_items(data.get("items"), base_path=base_path)
    if not items:
        msg = "Navbar requires at least one item."
        raise SiteConfigError(msg)
    return NavbarConfig(
        title=_optional_str(data.get("title")) or title,
        logo=_build_logo(data.get("logo")),
        items=tuple(items),
    )


def _build_logo(payload: typ.Mapping[str, object] | None) -> LogoConfig | None:
    match payload:
        case {"alt": alt, "src": src}:
            return LogoConfig(alt=str(alt), src=str(src))
        case None:
            return None
        case _:
            msg = "Navbar logo requires 'alt' and 'src'."
            raise SiteConfigError(msg)


def _build_navbar_items(
    entries: list[typ.Mapping[str, object]] | None, *, base_path: str
) -> list[NavbarItem]:
    """Build navbar entries in declared order."""
    items: list[NavbarItem] = []
    for entry in _entries(entries, "Navbar items"):
        match entry:
            case {"label": label, **rest}:
                pass
            case _:
                msg = "Navbar items require a 'label'."
                raise SiteConfigError(msg)
        target = _optional_str(rest.get("to")) or _optional_str(rest.get("href"))
        if not label or not target:
            msg = "Navbar items require 'label' and 'to' or 'href'."
            raise SiteConfigError(msg)
        items.append(
            NavbarItem(
                label=str(label),
                destination=classify_destination(target, base_path=base_path),
                position=_choice(
                    rest.get("position"),
                    choices=NAVBAR_POSITIONS,
                    default="left",
                    context=f"Navbar item '{label}' position",
                ),
            )
        )
    return items


def _build_footer_config(
    payload: typ.Mapping[str, typ.Any] | None, *, owner: str, base_path: str
) -> FooterConfig:
    """Build the footer columns; empty columns are rejected."""
    data = _mapping(payload, "Footer")
    columns: list[FooterColumn] = []
    for entry in _entries(data.get("columns"), "Footer columns"):
        if not isinstance(entry, dict):
            msg = "Footer columns must be mappings with a 'title'."
            raise SiteConfigError(msg)
        title = _required_str(entry, "title", "Footer column")
        links = _build_footer_links(entry.get("items"), base_path=base_path)
        if not links:
            msg = f"Footer column '{title}' requires at least one link."
            raise SiteConfigError(msg)
        columns.append(FooterColumn(title=title, links=tuple(links)))
    return FooterConfig(
        style=_choice(
            data.get("style"),
            choices=FOOTER_STYLES,
            default="dark",
            context="Footer 'style'",
        ),
        columns=tuple(columns),
        copyright_owner=_optional_str(data.get("copyright_owner")) or owner,
    )


def _build_footer_links(
    entries: list[typ.Mapping[str, object]] | None, *, base_path: str
) -> list[FooterLink]:
    links: list[FooterLink] = []
    for entry in _entries(entries, "Footer links"):
        match entry:
            case {"label": label, **rest}:
                pass
            case _:
                msg = "Footer links require a 'label'."
                raise SiteConfigError(msg)
        target = _optional_str(rest.get("to")) or _optional_str(rest.get("href"))
        if not label or not target:
            msg = "Footer links require 'label' and 'to' or 'href'."
            raise SiteConfigError(msg)
        links.append(
            FooterLink(
                label=str(label),
                destination=classify_destination(target, base_path=base_path),
            )
        )
    return links


def _build_search_config(
    payload: typ.Mapping[str, typ.Any] | None, *, docs: DocsPresetConfig
) -> SearchPluginConfig:
    """Build search plugin options, rejecting keys the plugin does not know."""
    data = _mapping(payload, "Search")
    unknown = sorted(set(data) - SEARCH_OPTION_KEYS)
    if unknown:
        msg = f"Unknown search option(s): {', '.join(unknown)}."
        raise SiteConfigError(msg)
    base = SearchPluginConfig()
    route = _optional_str(data.get("docs_route_base_path")) or docs.route_prefix
    route = "/" + route.strip("/")
    if route != docs.route_prefix:
        msg = (
            f"Search 'docs_route_base_path' ({route}) must match the docs "
            f"route base path ({docs.route_prefix})."
        )
        raise SiteConfigError(msg)
    return SearchPluginConfig(
        hashed=_flag(
            data.get("hashed"), default=base.hashed, context="Search 'hashed'"
        ),
        language=_str_tuple(data.get("language"), default=base.language),
        index_blog=_flag(
            data.get("index_blog"),
            default=base.index_blog,
            context="Search 'index_blog'",
        ),
        docs_route_base_path=route,
    )


def _build_prism_config(payload: typ.Mapping[str, typ.Any] | None) -> PrismConfig:
    data = _mapping(payload, "Prism")
    base = PrismConfig()
    return PrismConfig(
        theme=_choice(
            data.get("theme"),
            choices=PRISM_THEMES,
            default=base.theme,
            context="Prism 'theme'",
        ),
        dark_theme=_choice(
            data.get("dark_theme"),
            choices=PRISM_THEMES,
            default=base.dark_theme,
            context="Prism 'dark_theme'",
        ),
        additional_languages=_str_tuple(
            data.get("additional_languages"), default=base.additional_languages
        ),
    )


__all__ = [
    "FOOTER_STYLES",
    "NAVBAR_POSITIONS",
    "SEARCH_OPTION_KEYS",
    "_build_docs_preset",
    "_build_footer_config",
    "_build_footer_links",
    "_build_logo",
    "_build_navbar_config",
    "_build_navbar_items",
    "_build_prism_config",
    "_build_search_config",
    "_build_site_metadata",
]

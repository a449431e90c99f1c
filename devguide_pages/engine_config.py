"""Map the site configuration onto the docs engine's config schema.

The external static-site engine reads a single configuration object with
camelCase keys. :class:`SiteConfigMapper` produces that object from a
:class:`~devguide_pages.config.SiteConfig` and writes it as JSON so the
engine's ``docusaurus.config`` can load it. Internal destinations are emitted
as ``to`` links (client-side routing) and external ones as ``href`` links.

Prism themes are the one non-literal entry: ``themeConfig.prism.theme`` and
``darkTheme`` hold ``prism-react-renderer`` theme names (``"github"``), and the
consuming config swaps each for ``prismThemes[name]`` before handing the
object to the engine.

Example
-------
>>> from pathlib import Path
>>> from devguide_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> mapper = SiteConfigMapper(site, year=2025)  # doctest: +SKIP
>>> mapper.build()["themeConfig"]["footer"]["style"]  # doctest: +SKIP
'dark'
"""

from __future__ import annotations

import datetime as dt
import json
import typing as typ

from .config import InternalRoute

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import Destination, SiteConfig


def _link(label: str, destination: Destination) -> dict[str, str]:
    """Return an engine link entry keyed by ``to`` or ``href``."""
    match destination:
        case InternalRoute(path=path):
            return {"label": label, "to": path}
        case _:
            return {"label": label, "href": destination.href}


class SiteConfigMapper:
    """Build and persist the engine configuration object."""

    def __init__(
        self,
        site: SiteConfig,
        *,
        year: int | None = None,
        output: Path | None = None,
    ) -> None:
        self.site = site
        self.year = year or dt.datetime.now(dt.UTC).year
        self.output = output or site.engine_output

    def build(self) -> dict[str, typ.Any]:
        """Return the engine configuration as plain JSON-compatible data."""
        meta = self.site.metadata
        config: dict[str, typ.Any] = {
            "title": meta.title,
            "tagline": meta.tagline,
            "favicon": meta.favicon,
            "future": {"v4": meta.future_v4},
            "url": meta.url,
            "baseUrl": meta.base_url,
        }
        if meta.organization_name:
            config["organizationName"] = meta.organization_name
        if meta.project_name:
            config["projectName"] = meta.project_name
        config.update(
            {
                "onBrokenLinks": meta.on_broken_links,
                "markdown": {
                    "format": meta.markdown_format,
                    "hooks": {
                        "onBrokenMarkdownLinks": meta.on_broken_markdown_links,
                    },
                },
                "plugins": [self._search_plugin()],
                "i18n": {
                    "defaultLocale": meta.default_locale,
                    "locales": list(meta.locales),
                },
                "presets": [["classic", self._preset()]],
                "themeConfig": self._theme_config(),
            }
        )
        return config

    def run(self) -> Path:
        """Write the engine configuration JSON and return its path."""
        self.output.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps(self.build(), indent=2, ensure_ascii=False)
        self.output.write_text(payload + "\n", encoding="utf-8")
        return self.output

    def _search_plugin(self) -> list[typ.Any]:
        search = self.site.search
        return [
            search.plugin,
            {
                "hashed": search.hashed,
                "language": list(search.language),
                "indexBlog": search.index_blog,
                "docsRouteBasePath": search.docs_route_base_path,
            },
        ]

    def _preset(self) -> dict[str, typ.Any]:
        docs = self.site.docs
        return {
            "docs": {
                "sidebarPath": docs.sidebar_path,
                "routeBasePath": docs.route_base_path,
            },
            "blog": docs.blog,
            "theme": {"customCss": docs.custom_css},
        }

    def _theme_config(self) -> dict[str, typ.Any]:
        meta = self.site.metadata
        theme: dict[str, typ.Any] = {}
        if meta.image:
            theme["image"] = meta.image
        theme["colorMode"] = {
            "respectPrefersColorScheme": meta.respect_prefers_color_scheme
        }
        theme["navbar"] = self._navbar()
        theme["footer"] = self._footer()
        prism = self.site.prism
        theme["prism"] = {
            "theme": prism.theme,
            "darkTheme": prism.dark_theme,
            "additionalLanguages": list(prism.additional_languages),
        }
        return theme

    def _navbar(self) -> dict[str, typ.Any]:
        navbar = self.site.navbar
        block: dict[str, typ.Any] = {"title": navbar.title}
        if navbar.logo:
            block["logo"] = {"alt": navbar.logo.alt, "src": navbar.logo.src}
        block["items"] = [
            {**_link(item.label, item.destination), "position": item.position}
            for item in navbar.items
        ]
        return block

    def _footer(self) -> dict[str, typ.Any]:
        footer = self.site.footer
        return {
            "style": footer.style,
            "links": [
                {
                    "title": column.title,
                    "items": [
                        _link(link.label, link.destination) for link in column.links
                    ],
                }
                for column in footer.columns
            ],
            "copyright": footer.copyright(self.year),
        }


__all__ = ["SiteConfigMapper"]

"""Dev Guide home page rendering pipeline.

This module turns the catalog loaded from ``config/site.yaml`` into the static
home page artefact. ``HomePageBuilder`` walks the catalog once, top to bottom,
converts each section and card into presentation models (see
:mod:`devguide_pages.views`), and renders them through the shared Jinja macros:
a hero banner followed by one section block per catalog section, in catalog
order.

Typical usage mirrors the build pipeline:

>>> from pathlib import Path
>>> from devguide_pages.config import load_site_config
>>> site = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
>>> output_path = HomePageBuilder(site).run()  # doctest: +SKIP
>>> print(output_path)  # doctest: +SKIP
build/index.html

Rendering is deterministic: the template context holds no timestamps or
environment data, so two renders of the same catalog are byte-identical. The
only side effects are reading template files and writing the rendered HTML.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .views import compose_sections

if typ.TYPE_CHECKING:
    from .config import SiteConfig


class HomePageBuilder:
    """Render the catalog home page from structured config data."""

    def __init__(
        self,
        site: SiteConfig,
        *,
        templates_dir: Path | None = None,
        output: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        site : SiteConfig
            Parsed site file; provides the hero copy, the catalog and the
            site metadata used in the document head.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``devguide_pages/templates`` when not supplied.
        output : Path, optional
            Override for the HTML output path; defaults to
            ``site.homepage.output``.
        """
        self.site = site
        self.output = output or site.homepage.output
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("home_page.jinja")

    def render(self) -> str:
        """Return the home page HTML, ending with a newline."""
        context = {
            "site": self.site.metadata,
            "homepage": self.site.homepage,
            "sections": compose_sections(self.site.catalog),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self) -> Path:
        """Render and write the home page HTML, returning the output path.

        Parent directories are created as needed and filesystem errors
        propagate to the caller.
        """
        self.output.parent.mkdir(parents=True, exist_ok=True)
        self.output.write_text(self.render(), encoding="utf-8")
        return self.output


__all__ = ["HomePageBuilder"]

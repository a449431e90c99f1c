"""Cyclopts CLI entrypoint for building the Dev Guide home page and site config.

The ``pages`` console script defined here renders the catalog home page,
writes the docs engine configuration JSON, and checks every internal link in
the catalog, navbar and footer against the routes served by the docs tree.
Typical usage involves running ``pages check`` followed by ``pages generate``
locally or in CI before handing over to the docs engine build.

Examples
--------
Render the home page and engine config with the default site file:

>>> from devguide_pages.cli import main
>>> main()  # doctest: +SKIP

Check links against a custom docs tree, failing on drift as well:

>>> from devguide_pages.cli import app
>>> app(["check", "--docs-dir", "site/docs", "--strict"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .engine_config import SiteConfigMapper
from .homepage import HomePageBuilder
from .routes import RouteRegistry, find_drift

DEFAULT_CONFIG = Path("config/site.yaml")

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render the catalog home page and the docs engine config.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    year: typ.Annotated[
        int | None,
        Parameter(help="Copyright year (defaults to the current year)"),
    ] = None,
) -> None:
    """Render the home page HTML and the engine configuration JSON.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Write both artefacts into this folder, keeping their configured file
        names.
    year : int or None, optional
        Year used in the footer copyright line.

    Returns
    -------
    None
        Writes rendered artefacts and prints the generated paths.
    """
    site = load_site_config(config)
    homepage_output = None
    engine_output = None
    if output_dir:
        homepage_output = output_dir / site.homepage.output.name
        engine_output = output_dir / site.engine_output.name

    homepage_path = HomePageBuilder(site, output=homepage_output).run()
    print(f"wrote {_format_path(homepage_path)}")
    engine_path = SiteConfigMapper(site, year=year, output=engine_output).run()
    print(f"wrote {_format_path(engine_path)}")


@app.command(help="Check internal links against the docs tree.")
def check(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    docs_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the docs folder", env_var="INPUT_DOCS_DIR"),
    ] = None,
    strict: typ.Annotated[
        bool,
        Parameter(help="Fail when navbar/footer routes are missing from the catalog"),
    ] = False,
) -> None:
    """Report broken internal links and catalog/navigation drift.

    Parameters
    ----------
    config : Path, optional
        Path to the ``site.yaml`` configuration file.
    docs_dir : Path or None, optional
        Docs tree to scan; defaults to the ``docs.dir`` entry of the site file.
    strict : bool, optional
        Treat drift between the catalog and the navbar/footer as an error.

    Raises
    ------
    SystemExit
        With status 1 when broken links are found and the site's
        ``on_broken_links`` is ``throw``, or when drift is found in strict
        mode.
    """
    site = load_site_config(config)
    severity = site.metadata.on_broken_links
    registry = RouteRegistry.from_docs_dir(
        docs_dir or site.docs_dir, base_path=site.docs.route_prefix
    )
    print(f"found {len(registry)} documentation routes")

    failed = False
    if severity != "ignore":
        broken = registry.check_catalog(site.catalog) + registry.check_site(site)
        for link in broken:
            print(f"broken link: {link}")
        failed = bool(broken) and severity == "throw"

    drift = find_drift(site.catalog, site)
    for entry in drift:
        print(f"drift: {entry}")
    failed = failed or (strict and bool(drift))

    if failed:
        raise SystemExit(1)
    print("check passed")


def main() -> None:
    """Invoke the Cyclopts application that powers the `pages` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()

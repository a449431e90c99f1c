"""Load the Dev Guide site YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .catalog import _build_homepage_config
from .helpers import _mapping, _optional_str
from .models import SiteConfig
from .site import (
    _build_docs_preset,
    _build_footer_config,
    _build_navbar_config,
    _build_prism_config,
    _build_search_config,
    _build_site_metadata,
)


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML file describing the catalog and site configuration.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML site file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Immutable site configuration, including the home page catalog, navbar,
        footer, search plugin options and site metadata.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If required sections or fields are missing or invalid (for example, a
        catalog card without a description, or duplicate section headings).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from devguide_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> [section.heading for section in config.catalog][:1]  # doctest: +SKIP
    ['ASP.NET Core']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    metadata = _build_site_metadata(raw.get("site"))
    docs_raw = _mapping(raw.get("docs"), "Docs")
    docs = _build_docs_preset(docs_raw)
    base_path = docs.route_prefix
    owner = metadata.organization_name or metadata.title

    navbar = _build_navbar_config(
        raw.get("navbar"), title=metadata.title, base_path=base_path
    )
    footer = _build_footer_config(raw.get("footer"), owner=owner, base_path=base_path)
    search = _build_search_config(raw.get("search"), docs=docs)
    prism = _build_prism_config(raw.get("prism"))
    homepage = _build_homepage_config(
        raw.get("homepage"),
        site_title=metadata.title,
        site_tagline=metadata.tagline,
        base_path=base_path,
    )
    engine = _mapping(raw.get("engine"), "Engine")

    return SiteConfig(
        metadata=metadata,
        docs=docs,
        navbar=navbar,
        footer=footer,
        search=search,
        prism=prism,
        homepage=homepage,
        docs_dir=Path(_optional_str(docs_raw.get("dir")) or "docs"),
        engine_output=Path(
            _optional_str(engine.get("output")) or "build/site-config.json"
        ),
    )


__all__ = ["load_site_config"]

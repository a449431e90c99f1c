r"""Discover documentation routes and check site links against them.

The docs engine serves one route per markdown document under the docs route
base path. :class:`RouteRegistry` rebuilds that route set from the docs tree
so the home page catalog, the navbar and the footer can be checked at build
time instead of surfacing as 404s after deployment.

Route derivation follows the engine's conventions:

- ``*.md`` and ``*.mdx`` files are documents; any path segment starting with
  ``_`` is a partial and is skipped.
- Numeric ordering prefixes (``01-intro.md``, ``02_setup/``) are dropped.
- ``index``, ``README`` and a file named after its folder are category
  indexes and map to the folder route (``/docs/dotnet-interview/``).
- Front matter ``id`` replaces the file name; ``slug`` overrides the route,
  absolute when it starts with ``/`` and relative to the folder otherwise.

Example
-------
>>> registry = RouteRegistry(["/docs/intro", "/docs/guides/"])
>>> "/docs/guides" in registry
True
>>> "/docs/intro/#setup" in registry
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import re
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from ._constants import DOCS_ROUTE_BASE_PATH
from .config import InternalRoute

if typ.TYPE_CHECKING:
    from .config import Catalog, Destination, SiteConfig

DOC_SUFFIXES = frozenset({".md", ".mdx"})
INDEX_STEMS = frozenset({"index", "readme"})
NUMBER_PREFIX_PATTERN = re.compile(r"^\d+\s*[-_.]+\s*(?P<name>[^-_.\s].*)$")
FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL
)


@dc.dataclass(frozen=True, slots=True)
class BrokenLink:
    """An internal destination that no document serves."""

    source: str
    label: str
    path: str

    def __str__(self) -> str:
        return f"{self.source}: '{self.label}' -> {self.path}"


@dc.dataclass(frozen=True, slots=True)
class RouteDrift:
    """A navbar or footer route that no home page card links to."""

    source: str
    label: str
    path: str

    def __str__(self) -> str:
        return f"{self.source}: '{self.label}' -> {self.path} is not in the catalog"


def normalize_route(path: str) -> str:
    """Drop query, fragment and trailing slash so route variants compare equal."""
    trimmed = re.split(r"[?#]", path, maxsplit=1)[0]
    trimmed = re.sub(r"/{2,}", "/", trimmed)
    if len(trimmed) > 1:
        trimmed = trimmed.rstrip("/")
    return trimmed or "/"


def _strip_number_prefix(name: str) -> str:
    match = NUMBER_PREFIX_PATTERN.match(name)
    return match.group("name") if match else name


def _read_front_matter(path: Path) -> dict[str, typ.Any]:
    """Return the YAML front matter of ``path`` or an empty mapping."""
    text = path.read_text(encoding="utf-8")
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}
    loader = YAML(typ="safe")
    loaded = loader.load(match.group(1))
    return dict(loaded) if isinstance(loaded, dict) else {}


def document_route(
    relative: Path, front_matter: cabc.Mapping[str, typ.Any], *, base_path: str
) -> str:
    """Return the route the engine serves for the document at ``relative``.

    Parameters
    ----------
    relative : Path
        Document path relative to the docs directory.
    front_matter : Mapping
        Parsed front matter; only ``id`` and ``slug`` are consulted.
    base_path : str
        Docs route base path such as ``/docs``.

    Returns
    -------
    str
        Absolute route; category indexes end with ``/``.

    Examples
    --------
    >>> document_route(Path("01-guides/02-setup.md"), {}, base_path="/docs")
    '/docs/guides/setup'
    >>> document_route(Path("dotnet-interview/README.md"), {}, base_path="/docs")
    '/docs/dotnet-interview/'
    """
    prefix = "/" + base_path.strip("/")
    folders = [_strip_number_prefix(part) for part in relative.parts[:-1]]
    folder = "/".join(folders)
    stem = relative.stem
    slug = front_matter.get("slug")
    if isinstance(slug, str) and slug.strip():
        slug = slug.strip()
        if slug.startswith("/"):
            return re.sub(r"/{2,}", "/", f"{prefix}{slug}")
        return f"{prefix}/{folder}/{slug}" if folder else f"{prefix}/{slug}"

    parent = folders[-1].lower() if folders else None
    if stem.lower() in INDEX_STEMS or _strip_number_prefix(stem).lower() == parent:
        return f"{prefix}/{folder}/" if folder else f"{prefix}/"
    doc_id = front_matter.get("id")
    name = str(doc_id).strip() if doc_id else _strip_number_prefix(stem)
    return f"{prefix}/{folder}/{name}" if folder else f"{prefix}/{name}"


def _is_partial(relative: Path) -> bool:
    return any(part.startswith("_") for part in relative.parts)


class RouteRegistry:
    """Set of documentation routes that internal links must resolve to."""

    def __init__(
        self, routes: cabc.Iterable[str], *, base_path: str = DOCS_ROUTE_BASE_PATH
    ) -> None:
        self.base_path = "/" + base_path.strip("/")
        self._routes = frozenset(normalize_route(route) for route in routes)

    @classmethod
    def from_docs_dir(
        cls, docs_dir: Path, *, base_path: str = DOCS_ROUTE_BASE_PATH
    ) -> RouteRegistry:
        """Discover every document route under ``docs_dir``.

        Raises
        ------
        FileNotFoundError
            If ``docs_dir`` does not exist.
        YAMLError
            If a document carries front matter that is not valid YAML.
        """
        if not docs_dir.is_dir():
            msg = f"Docs directory '{docs_dir}' not found."
            raise FileNotFoundError(msg)
        routes: list[str] = []
        for path in sorted(docs_dir.rglob("*")):
            if path.suffix.lower() not in DOC_SUFFIXES or not path.is_file():
                continue
            relative = path.relative_to(docs_dir)
            if _is_partial(relative):
                continue
            routes.append(
                document_route(
                    relative, _read_front_matter(path), base_path=base_path
                )
            )
        return cls(routes, base_path=base_path)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and normalize_route(path) in self._routes

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> typ.Iterator[str]:
        return iter(sorted(self._routes))

    def check_catalog(self, catalog: Catalog) -> list[BrokenLink]:
        """Return catalog cards whose internal destination has no document."""
        return self._check(_catalog_links(catalog))

    def check_site(self, site: SiteConfig) -> list[BrokenLink]:
        """Return navbar and footer entries whose internal route has no document."""
        return self._check(_navigation_links(site))

    def _check(
        self, links: cabc.Iterable[tuple[str, str, Destination]]
    ) -> list[BrokenLink]:
        broken: list[BrokenLink] = []
        for source, label, destination in links:
            match destination:
                case InternalRoute(path=path) if path not in self:
                    broken.append(BrokenLink(source=source, label=label, path=path))
                case _:
                    continue
        return broken


def _catalog_links(
    catalog: Catalog,
) -> cabc.Iterator[tuple[str, str, Destination]]:
    for section in catalog:
        for card in section.cards:
            yield f"homepage/{section.heading}", card.title, card.destination


def _navigation_links(
    site: SiteConfig,
) -> cabc.Iterator[tuple[str, str, Destination]]:
    for item in site.navbar.items:
        yield "navbar", item.label, item.destination
    for column in site.footer.columns:
        for link in column.links:
            yield f"footer/{column.title}", link.label, link.destination


def find_drift(catalog: Catalog, site: SiteConfig) -> list[RouteDrift]:
    """Return navbar/footer routes that the home page catalog never links to."""
    catalog_routes = {
        normalize_route(path) for path, _card in catalog.internal_routes()
    }
    drift: list[RouteDrift] = []
    for source, label, destination in _navigation_links(site):
        match destination:
            case InternalRoute(path=path) if (
                normalize_route(path) not in catalog_routes
            ):
                drift.append(RouteDrift(source=source, label=label, path=path))
            case _:
                continue
    return drift


__all__ = [
    "BrokenLink",
    "RouteDrift",
    "RouteRegistry",
    "document_route",
    "find_drift",
    "normalize_route",
]

"""Build tooling for the Dev Guide documentation site.

This package exposes the CLI entry points used by ``uv run pages`` to render
the catalog home page, write the docs engine configuration, and check site
links against the docs tree.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from devguide_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]

"""Build validated navigation snapshots for documentation websites.

This package turns a declarative ``site.yaml`` (identity, header links,
sidebar tree, social links, search selector) into an immutable snapshot that a
static-site renderer consumes, and exposes the ``sitenav`` CLI used to check
and export it.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from sitenav import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]

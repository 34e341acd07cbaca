"""Migrate Docusaurus documentation sites to Mintlify.

This package exposes the CLI entry points used by the ``mint-migrate``
console script, which converts a Docusaurus ``docs`` tree into Mintlify MDX
pages plus a ``docs.json`` navigation manifest.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from mint_migrate import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]

"""Static site generator for the frontend concepts documentation.

This package indexes the ``basics`` and ``advanced`` Markdown folders, rewrites
hint callouts, renders each document with prev/next navigation, and exposes
the CLI entry points used by ``concept-docs``.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that configures logging and runs the app.

Examples
--------
>>> from concept_docs import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]

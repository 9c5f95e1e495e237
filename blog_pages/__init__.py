"""Static site generator for the "Rust for Pythonistas" blog.

This package exposes the CLI entry points used by ``uv run blog`` and the
hosting provider's build hook to render Markdown articles, section indexes,
and tag pages into the publish directory.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from blog_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]

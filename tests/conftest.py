"""Shared fixtures that lay out temporary blog sites for the test suite.

Most tests need a ``site.yaml`` plus a small content tree. The ``make_site``
fixture writes both under pytest's ``tmp_path`` and returns the config path,
so each test declares only the content files it cares about.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest

if typ.TYPE_CHECKING:
    import collections.abc as cabc

LEARNING_PATH_FILES: dict[str, str] = {
    "_index.md": '+++\ntitle = "Rust for Pythonistas"\n+++\nWelcome.\n',
    "learning-path/_index.md": '+++\ntitle = "Learning path"\n+++\n',
    "learning-path/cargo.md": (
        '+++\ntitle = "Cargo basics"\ndate = 2024-09-25\ntags = ["tooling"]\n+++\n'
        "Cargo body.\n"
    ),
    "learning-path/ownership.md": (
        '+++\ntitle = "Ownership"\ndate = 2024-09-26\n'
        'tags = ["ownership", "tooling"]\n+++\nOwnership body.\n'
    ),
    "learning-path/traits.md": (
        '+++\ntitle = "Traits"\ndate = 2024-09-27\n+++\nTraits body.\n'
    ),
}


class SiteFactory(typ.Protocol):
    def __call__(
        self,
        files: cabc.Mapping[str, str],
        *,
        config_extra: str = "",
        defaults_extra: str = "",
    ) -> Path: ...


@pytest.fixture
def make_site(tmp_path: Path) -> SiteFactory:
    """Return a factory writing content files and a matching ``site.yaml``."""

    def _make_site(
        files: cabc.Mapping[str, str],
        *,
        config_extra: str = "",
        defaults_extra: str = "",
    ) -> Path:
        content_dir = tmp_path / "content"
        for rel_path, text in files.items():
            target = content_dir / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(text, encoding="utf-8")
        content_dir.mkdir(exist_ok=True)
        config_path = tmp_path / "site.yaml"
        config_path.write_text(
            f"""
title: Test Blog
base_url: https://blog.example.com
description: Fixture blog
defaults:
  content_dir: content
  output_dir: public
  static_dir: static
  default_section: _index.md
{defaults_extra}
navigation:
  links:
    - label: Learning path
      href: https://blog.example.com/learning-path/
subscribe:
  action: https://forms.example.com/subscribe
{config_extra}
            """.strip()
            + "\n",
            encoding="utf-8",
        )
        return config_path

    return _make_site


@pytest.fixture
def learning_path_site(make_site: SiteFactory) -> Path:
    """Write the three-article ``learning-path`` fixture site."""
    return make_site(LEARNING_PATH_FILES)

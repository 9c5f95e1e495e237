"""Filesystem writes shared by the page builders."""

from __future__ import annotations

import shutil
import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path


def write_html(output_dir: Path, relative_dir: str, html: str) -> Path:
    """Write ``html`` to ``<output_dir>/<relative_dir>/index.html``.

    The document always ends with a newline. Parent directories are created as
    needed and filesystem errors propagate to the caller.
    """
    target_dir = output_dir / relative_dir if relative_dir else output_dir
    target_dir.mkdir(parents=True, exist_ok=True)
    output_path = target_dir / "index.html"
    if not html.endswith("\n"):
        html += "\n"
    output_path.write_text(html, encoding="utf-8")
    return output_path


def write_text_asset(output_dir: Path, relative_path: str, text: str) -> Path:
    """Write a text asset such as a stylesheet below ``output_dir``."""
    output_path = output_dir / relative_path
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    return output_path


def copy_static(static_dir: Path, output_dir: Path) -> list[Path]:
    """Copy every file under ``static_dir`` into ``output_dir``, keeping layout."""
    if not static_dir.is_dir():
        return []
    written: list[Path] = []
    for source in sorted(static_dir.rglob("*")):
        if not source.is_file():
            continue
        destination = output_dir / source.relative_to(static_dir)
        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(source, destination)
        written.append(destination)
    return written


__all__ = ["copy_static", "write_html", "write_text_asset"]

"""Locate the project root and the optional files that live beside it."""

from __future__ import annotations

from pathlib import Path

SETTINGS_FILENAME = "discord_notify.yaml"
ROOT_MARKERS = ("pyproject.toml", ".git", ".env", SETTINGS_FILENAME)


def find_repo_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` to the first directory holding a root marker.

    Falls back to the current working directory when the package runs from an
    install location with no marker above it.
    """
    current = (start or Path(__file__).resolve()).resolve()
    if current.is_file():
        current = current.parent

    for candidate in [current, *current.parents]:
        if any((candidate / marker).exists() for marker in ROOT_MARKERS):
            return candidate
    return Path.cwd()


def repo_root() -> Path:
    return find_repo_root(Path(__file__).resolve())


def repo_file(*parts: str) -> Path:
    return repo_root().joinpath(*parts)


def settings_file() -> Path:
    return repo_file(SETTINGS_FILENAME)

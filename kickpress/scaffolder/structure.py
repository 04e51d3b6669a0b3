"""Directory plan of a generated project."""

from __future__ import annotations

from pathlib import Path

# Identical for every configuration; ``src/types`` stays empty in JavaScript mode.
PROJECT_DIRECTORIES: tuple[str, ...] = (
    "src",
    "src/controllers",
    "src/models",
    "src/routes",
    "src/middlewares",
    "src/config",
    "src/utils",
    "src/lib",
    "src/types",
    "public",
    "prisma",
    "requests",
)


def plan_structure(destination_root: str | Path) -> None:
    """Create every directory of ``PROJECT_DIRECTORIES`` under *destination_root*.

    Safe to call repeatedly; existing directories are left untouched.
    ``OSError`` (e.g. permission denied) propagates unchanged.
    """
    root = Path(destination_root)
    for directory in PROJECT_DIRECTORIES:
        (root / directory).mkdir(parents=True, exist_ok=True)

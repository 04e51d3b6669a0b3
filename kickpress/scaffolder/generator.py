"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and a package manager name and writes a complete
Express.js + Prisma project: the fixed directory structure first, then every
entry of ``ARTIFACTS`` in table order.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from kickpress.config import ProjectConfig

from .renderers import (
    dump_json,
    render_entry_point,
    render_env_file,
    render_error_middleware,
    render_gitignore,
    render_manifest,
    render_prisma_client,
    render_prisma_config,
    render_prisma_schema,
    render_readme,
    render_tsconfig,
)
from .structure import plan_structure
from .variants import (
    LanguageVariant,
    PackageManagerProfile,
    resolve_language,
    resolve_package_manager,
)


# ---------------------------------------------------------------------------
# Render context
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScaffoldContext:
    """Everything the artifact renderers read, resolved once per run."""

    config: ProjectConfig
    language: LanguageVariant
    package_manager: PackageManagerProfile

    @classmethod
    def resolve(cls, config: ProjectConfig, package_manager: str) -> "ScaffoldContext":
        return cls(
            config=config,
            language=resolve_language(config.typescript),
            package_manager=resolve_package_manager(package_manager),
        )


# ---------------------------------------------------------------------------
# Artifact table
# ---------------------------------------------------------------------------


def _always(ctx: ScaffoldContext) -> bool:
    return True


@dataclass(frozen=True)
class Artifact:
    """One generated file.

    ``path`` is relative to the project root and may contain ``{ext}``,
    substituted with the language variant's source extension.
    """

    path: str
    render: Callable[[ScaffoldContext], str]
    when: Callable[[ScaffoldContext], bool] = _always

    def relative_path(self, ctx: ScaffoldContext) -> str:
        return self.path.format(ext=ctx.language.extension)


ARTIFACTS: tuple[Artifact, ...] = (
    Artifact(
        "package.json",
        lambda ctx: dump_json(render_manifest(ctx.config.project_name, ctx.language)),
    ),
    Artifact("src/index.{ext}", lambda ctx: render_entry_point(ctx.language)),
    Artifact("src/lib/prisma.{ext}", lambda ctx: render_prisma_client(ctx.language)),
    Artifact(
        "src/middlewares/error.middleware.{ext}",
        lambda ctx: render_error_middleware(ctx.language),
    ),
    Artifact("prisma/schema.prisma", lambda ctx: render_prisma_schema()),
    # Written in both language modes.
    Artifact("prisma.config.ts", lambda ctx: render_prisma_config()),
    Artifact(
        "tsconfig.json",
        lambda ctx: render_tsconfig(),
        when=lambda ctx: ctx.language.emits_tsconfig,
    ),
    Artifact(".env", lambda ctx: render_env_file(ctx.config.database)),
    Artifact(".gitignore", lambda ctx: render_gitignore()),
    Artifact(
        "README.md",
        lambda ctx: render_readme(
            ctx.config.project_name, ctx.language, ctx.package_manager
        ),
    ),
)


# ---------------------------------------------------------------------------
# Rendering and materialization
# ---------------------------------------------------------------------------


def render_project(config: ProjectConfig, package_manager: str) -> dict[str, str]:
    """Render every applicable artifact without touching the filesystem.

    Returns:
        Ordered mapping of POSIX relative path to file content.
    """
    ctx = ScaffoldContext.resolve(config, package_manager)
    return {
        artifact.relative_path(ctx): artifact.render(ctx)
        for artifact in ARTIFACTS
        if artifact.when(ctx)
    }


class ProjectGenerator:
    """Writes a scaffolded project to ``config.project_path``.

    The run is synchronous: the directory plan is created before any file is
    written, files are written one at a time in ``ARTIFACTS`` order, and the
    first ``OSError`` aborts the run without removing files already written.
    """

    def __init__(self, config: ProjectConfig, package_manager: str = "npm") -> None:
        self.config = config
        self.package_manager = package_manager

    @property
    def project_root(self) -> Path:
        return Path(self.config.project_path)

    def generate(self) -> list[Path]:
        """Generate the project.

        Returns:
            Paths of the written files, in write order.
        """
        root = self.project_root
        plan_structure(root)

        files = render_project(self.config, self.package_manager)

        written: list[Path] = []
        for rel_path, content in files.items():
            out = root / rel_path
            _write_file(out, content)
            written.append(out)
        return written


def materialize(config: ProjectConfig, package_manager: str) -> list[Path]:
    """Functional shortcut for ``ProjectGenerator(config, package_manager).generate()``."""
    return ProjectGenerator(config, package_manager).generate()


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str) -> None:
    # newline="" keeps "\n" line endings on every platform
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(content)

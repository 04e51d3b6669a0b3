"""Kickpress scaffolder -- generates Express.js + Prisma project skeletons.

Takes a ``ProjectConfig`` plus a package manager name and writes a project
whose ``package.json`` scripts, source extensions, ``tsconfig.json`` and
README all agree with the selected language mode.

Quick usage::

    from kickpress.config import ProjectConfig
    from kickpress.scaffolder import ProjectGenerator

    config = ProjectConfig(
        project_name="demo-api",
        project_path="/tmp/demo-api",
        typescript=True,
    )
    written = ProjectGenerator(config, "pnpm").generate()
"""

from kickpress.scaffolder.generator import (
    ARTIFACTS,
    ProjectGenerator,
    materialize,
    render_project,
)
from kickpress.scaffolder.structure import PROJECT_DIRECTORIES, plan_structure
from kickpress.scaffolder.templates import TemplateRenderer

__all__ = [
    "ARTIFACTS",
    "PROJECT_DIRECTORIES",
    "ProjectGenerator",
    "TemplateRenderer",
    "materialize",
    "plan_structure",
    "render_project",
]

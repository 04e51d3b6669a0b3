"""Kickpress -- scaffolds Express.js + Prisma backend projects.

Quick usage::

    from kickpress.config import ProjectConfig
    from kickpress.scaffolder import materialize

    config = ProjectConfig(project_name="demo-api", project_path="/tmp/demo-api")
    materialize(config, "pnpm")
"""

__version__ = "1.0.0"

"""Content renderers for every generated file.

Each renderer is a pure function of the configuration subset it needs and
returns a complete file body (or, for ``package.json``, a JSON-serializable
dict).  Language-dependent renderers take a resolved ``LanguageVariant``
rather than the raw ``typescript`` flag.
"""

from __future__ import annotations

import json
from typing import Any

from .templates import default_renderer
from .variants import (
    BASE_DEPENDENCIES,
    BASE_DEV_DEPENDENCIES,
    DATABASE_SCRIPT_DESCRIPTIONS,
    DATABASE_SCRIPTS,
    DATABASE_URL,
    DEFAULT_PORT,
    LanguageVariant,
    PackageManagerProfile,
)

WELCOME_MESSAGE = "Welcome to Kickpress!"
GENERATED_CLIENT_DIR = "src/lib/generated"

# Relative to prisma/schema.prisma
_GENERATED_CLIENT_SCHEMA_PATH = f"../{GENERATED_CLIENT_DIR}/prisma"

_TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "target": "ES2022",
        "module": "ESNext",
        "moduleResolution": "bundler",
        "outDir": "./dist",
        "rootDir": "./src",
        "strict": True,
        "esModuleInterop": True,
        "skipLibCheck": True,
        "forceConsistentCasingInFileNames": True,
        "resolveJsonModule": True,
        "allowSyntheticDefaultImports": True,
        "paths": {
            "@/*": ["./src/*"],
        },
    },
    "include": ["src/**/*"],
    "exclude": ["node_modules", "dist"],
}


# ---------------------------------------------------------------------------
# Machine-readable files
# ---------------------------------------------------------------------------


def render_manifest(project_name: str, language: LanguageVariant) -> dict[str, Any]:
    """Build the ``package.json`` document for *language*."""
    return {
        "name": project_name,
        "version": "1.0.0",
        "type": "module",
        "main": language.main,
        "scripts": {**language.scripts, **DATABASE_SCRIPTS},
        "dependencies": {**BASE_DEPENDENCIES, **language.extra_dependencies},
        "devDependencies": {**BASE_DEV_DEPENDENCIES, **language.extra_dev_dependencies},
        "license": "MIT",
    }


def render_tsconfig() -> str:
    """Return ``tsconfig.json`` as two-space indented JSON."""
    return dump_json(_TSCONFIG)


def dump_json(document: dict[str, Any]) -> str:
    """Serialize *document* the way the generated JSON files are written."""
    return json.dumps(document, indent=2, ensure_ascii=False) + "\n"


# ---------------------------------------------------------------------------
# Source files
# ---------------------------------------------------------------------------


def render_entry_point(language: LanguageVariant) -> str:
    return default_renderer().render(
        language.template("index"),
        {"port": DEFAULT_PORT, "welcome_message": WELCOME_MESSAGE},
    )


def render_error_middleware(language: LanguageVariant) -> str:
    """Express error handler mapping Prisma P2002/P2025 to 409/404."""
    return default_renderer().render(language.template("error.middleware"))


def render_prisma_client(language: LanguageVariant) -> str:
    return default_renderer().render(language.template("prisma"))


def render_prisma_schema() -> str:
    return default_renderer().render(
        "prisma/schema.prisma.j2",
        {"generated_client_schema_path": _GENERATED_CLIENT_SCHEMA_PATH},
    )


def render_prisma_config() -> str:
    return default_renderer().render("prisma.config.ts.j2")


# ---------------------------------------------------------------------------
# Project files
# ---------------------------------------------------------------------------


def render_env_file(database: str) -> str:
    """Return the ``.env`` body.

    Every *database* identifier currently resolves to the local SQLite file.
    """
    return default_renderer().render(
        "env.j2",
        {"port": DEFAULT_PORT, "database": database, "database_url": DATABASE_URL},
    )


def render_gitignore() -> str:
    return default_renderer().render(
        "gitignore.j2", {"generated_client_dir": GENERATED_CLIENT_DIR}
    )


def render_readme(
    project_name: str,
    language: LanguageVariant,
    package_manager: PackageManagerProfile,
) -> str:
    """Assemble ``README.md``.

    Sections that depend on the language mode (commands, project tree,
    technology stack) read from *language*; every command example goes
    through ``package_manager.run`` so invocations match the chosen manager.
    The native-build approval sections only appear for managers that need
    them.
    """
    context = {
        "project_name": project_name,
        "language": language,
        "pm": package_manager,
        "port": DEFAULT_PORT,
        "database_url": DATABASE_URL,
        "database_scripts": DATABASE_SCRIPT_DESCRIPTIONS,
    }
    return default_renderer().render("README.md.j2", context)

"""Content variant tables.

Every value that differs between language modes or package managers lives in
one of the tables below.  The scaffolder resolves a ``LanguageVariant`` and a
``PackageManagerProfile`` once per run and every renderer reads from them, so
file extensions, import paths, scripts and documentation cannot drift apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ---------------------------------------------------------------------------
# Shared constants
# ---------------------------------------------------------------------------

DEFAULT_PORT = 3000
DATABASE_URL = "file:./dev.db"

DATABASE_SCRIPTS: dict[str, str] = {
    "db:generate": "prisma generate",
    "db:push": "prisma db push",
    "db:migrate": "prisma migrate dev",
    "db:studio": "prisma studio",
}

DATABASE_SCRIPT_DESCRIPTIONS: dict[str, str] = {
    "db:generate": "Generate Prisma Client",
    "db:push": "Push schema changes to database",
    "db:migrate": "Create a new migration",
    "db:studio": "Open Prisma Studio (database GUI)",
}

BASE_DEPENDENCIES: dict[str, str] = {
    "express": "^4.18.2",
    "express-async-handler": "^1.2.0",
    "@prisma/client": "^7.1.0",
    "@prisma/adapter-better-sqlite3": "^7.1.0",
    "better-sqlite3": "^12.5.0",
    "dotenv": "^17.2.3",
}

BASE_DEV_DEPENDENCIES: dict[str, str] = {
    "@types/node": "^20.10.6",
    "@types/express": "^4.17.21",
    "@types/better-sqlite3": "^7.6.13",
    "prisma": "^7.1.0",
}


# ---------------------------------------------------------------------------
# Language mode
# ---------------------------------------------------------------------------


class LanguageMode(str, Enum):
    """Language axis of the generated project."""

    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"

    @classmethod
    def from_flag(cls, typescript: bool) -> "LanguageMode":
        return cls.TYPESCRIPT if typescript else cls.JAVASCRIPT


@dataclass(frozen=True)
class LanguageVariant:
    """Resolved content choices for one language mode.

    No field has a default: a new mode must state every divergent value.
    """

    mode: LanguageMode
    label: str
    extension: str
    main: str
    scripts: dict[str, str]
    script_descriptions: dict[str, str]
    commands_heading: str
    extra_dependencies: dict[str, str]
    extra_dev_dependencies: dict[str, str]
    template_dir: str
    emits_tsconfig: bool
    uses_types_folder: bool
    stack_entries: tuple[str, ...]
    doc_links: tuple[str, ...]

    @property
    def entry_file(self) -> str:
        return f"src/index.{self.extension}"

    def template(self, name: str) -> str:
        """Return the template path of *name* inside this variant's directory."""
        return f"{self.template_dir}/{name}.{self.extension}.j2"


LANGUAGE_VARIANTS: dict[LanguageMode, LanguageVariant] = {
    LanguageMode.TYPESCRIPT: LanguageVariant(
        mode=LanguageMode.TYPESCRIPT,
        label="TypeScript",
        extension="ts",
        main="dist/index.js",
        scripts={
            "dev": "tsx watch --env-file=.env src/index.ts",
            "build": "tsc",
            "start": "node --env-file=.env dist/index.js",
        },
        script_descriptions={
            "dev": "Start development server with hot reload",
            "build": "Compile TypeScript to JavaScript",
            "start": "Start production server",
        },
        commands_heading="Build",
        extra_dependencies={},
        extra_dev_dependencies={
            "typescript": "^5.3.3",
            "tsx": "^4.7.0",
        },
        template_dir="typescript",
        emits_tsconfig=True,
        uses_types_folder=True,
        stack_entries=(
            "**TypeScript** - Type-safe JavaScript",
            "**tsx** - TypeScript execution engine",
        ),
        doc_links=("[TypeScript Docs](https://www.typescriptlang.org/)",),
    ),
    LanguageMode.JAVASCRIPT: LanguageVariant(
        mode=LanguageMode.JAVASCRIPT,
        label="JavaScript",
        extension="js",
        main="src/index.js",
        scripts={
            "dev": "node --watch --env-file=.env src/index.js",
            "start": "node --env-file=.env src/index.js",
        },
        script_descriptions={
            "dev": "Start development server with hot reload",
            "start": "Start production server",
        },
        commands_heading="Production",
        extra_dependencies={
            "@prisma/client-runtime-utils": "^7.1.0",
        },
        extra_dev_dependencies={},
        template_dir="javascript",
        emits_tsconfig=False,
        uses_types_folder=False,
        stack_entries=(),
        doc_links=(),
    ),
}


def resolve_language(typescript: bool) -> LanguageVariant:
    """Resolve the language-mode flag into its ``LanguageVariant``."""
    return LANGUAGE_VARIANTS[LanguageMode.from_flag(typescript)]


# ---------------------------------------------------------------------------
# Package managers
# ---------------------------------------------------------------------------

_DEFAULT_INSTALL_HINT = "Install all project dependencies:"


@dataclass(frozen=True)
class PackageManagerProfile:
    """How the README invokes a given package manager."""

    name: str
    run_prefix: str
    requires_build_approval: bool = False
    install_hint: str = _DEFAULT_INSTALL_HINT

    def run(self, script: str) -> str:
        """Return the command line that runs *script* (e.g. ``npm run dev``)."""
        return f"{self.run_prefix} {script}"


PACKAGE_MANAGERS: dict[str, PackageManagerProfile] = {
    "npm": PackageManagerProfile(name="npm", run_prefix="npm run"),
    "pnpm": PackageManagerProfile(
        name="pnpm",
        run_prefix="pnpm",
        requires_build_approval=True,
        install_hint="Dependencies should already be installed. If not, run:",
    ),
    "yarn": PackageManagerProfile(name="yarn", run_prefix="yarn"),
}


def resolve_package_manager(name: str) -> PackageManagerProfile:
    """Return the profile for *name*.

    Unknown managers are invoked directly (``<name> dev``) with no extra
    sections.
    """
    profile = PACKAGE_MANAGERS.get(name)
    if profile is not None:
        return profile
    return PackageManagerProfile(name=name, run_prefix=name)

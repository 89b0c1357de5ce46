# mycontext/scaffold/nextjs.py
"""
Next.js project generator.

Writes a complete App Router project (TypeScript, Tailwind, shadcn/ui) from
the templates shipped in mycontext/templates/nextjs. Every step appends to
the list of GeneratedFile entries that generate_project() returns.
"""
import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from mycontext.core.exceptions import ScaffoldError
from mycontext.core.logging import log, log_section, logger
from mycontext.lib.file_system import (
    GeneratedFile,
    is_empty_dir,
    slugify_package_name,
    write_generated_file,
)
from mycontext.scaffold.templates import load_template


VALID_PROJECT_NAME = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._ -]*$")

BASE_DIRECTORIES = ["app", "components", "lib", "hooks", "types", "public", ".mycontext"]

PACKAGE_MANAGER = "pnpm@10.11.0"

DEPENDENCIES = {
    "next": "^14.2.0",
    "react": "^18.3.0",
    "react-dom": "^18.3.0",
    "lucide-react": "^0.400.0",
    "clsx": "^2.1.0",
    "tailwind-merge": "^2.3.0",
    "class-variance-authority": "^0.7.0",
    "@radix-ui/react-slot": "^1.1.0",
}

DEV_DEPENDENCIES = {
    "typescript": "^5.0.0",
    "@types/node": "^20.0.0",
    "@types/react": "^18.0.0",
    "@types/react-dom": "^18.0.0",
}

TAILWIND_DEV_DEPENDENCIES = {
    "tailwindcss": "^3.4.0",
    "autoprefixer": "^10.4.0",
    "postcss": "^8.4.0",
}

ESLINT_DEV_DEPENDENCIES = {
    "eslint": "^8.0.0",
    "eslint-config-next": "^14.2.0",
}

TSCONFIG: Dict[str, Any] = {
    "compilerOptions": {
        "target": "es5",
        "lib": ["dom", "dom.iterable", "esnext"],
        "allowJs": True,
        "skipLibCheck": True,
        "strict": True,
        "noEmit": True,
        "esModuleInterop": True,
        "module": "esnext",
        "moduleResolution": "bundler",
        "resolveJsonModule": True,
        "isolatedModules": True,
        "jsx": "preserve",
        "incremental": True,
        "plugins": [{"name": "next"}],
        "paths": {"@/*": ["./*"]},
    },
    "include": ["next-env.d.ts", "**/*.ts", "**/*.tsx", ".next/types/**/*.ts"],
    "exclude": ["node_modules"],
}

COMPONENTS_JSON: Dict[str, Any] = {
    "$schema": "https://ui.shadcn.com/schema.json",
    "style": "default",
    "rsc": True,
    "tsx": True,
    "tailwind": {
        "config": "tailwind.config.ts",
        "css": "app/globals.css",
        "baseColor": "slate",
        "cssVariables": True,
        "prefix": "",
    },
    "aliases": {
        "components": "@/components",
        "utils": "@/lib/utils",
    },
}

APP_ROUTER_FILES = [
    "app/layout.tsx",
    "app/page.tsx",
    "app/globals.css",
    "app/loading.tsx",
    "app/error.tsx",
    "app/not-found.tsx",
]


def to_json(data: Dict[str, Any]) -> str:
    return json.dumps(data, indent=2) + "\n"


@dataclass
class NextJSProjectOptions:
    project_name: str
    project_path: Path
    with_shadcn: bool = True
    with_tailwind: bool = True
    with_typescript: bool = True
    with_eslint: bool = True
    with_app_router: bool = True
    with_layouts: bool = True
    with_components: bool = True


class NextJSProjectGenerator:
    """Generates the Next.js project structure on disk."""

    def __init__(self, options: NextJSProjectOptions, force: bool = False):
        self.options = options
        self.project_root = Path(options.project_path)
        self.force = force
        self.context = {"project_name": options.project_name}

    async def generate_project(self) -> List[GeneratedFile]:
        """
        Generate the complete project.

        Returns:
            Every directory and file written, in generation order

        Raises:
            ScaffoldError: invalid name, or target directory not empty
        """
        self._validate()
        log_section("SCAFFOLD", f"Generating Next.js project: {self.options.project_name}")

        generated: List[GeneratedFile] = []
        opts = self.options

        try:
            await self._create_basic_structure(generated)
            await self._generate_package_json(generated)
            await self._emit_template("next.config.ts", generated)

            if opts.with_typescript:
                await self._emit("tsconfig.json", to_json(TSCONFIG), generated)

            if opts.with_tailwind:
                logger.step("Generating Tailwind CSS configuration...")
                await self._emit_template("tailwind.config.ts", generated)
                await self._emit_template("postcss.config.js", generated)

            if opts.with_app_router:
                logger.step("Generating App Router structure...")
                for rel in APP_ROUTER_FILES:
                    await self._emit_template(rel, generated)

            if opts.with_shadcn:
                await self._emit("components.json", to_json(COMPONENTS_JSON), generated)

            if opts.with_components:
                await self._emit_dir("components/ui", generated)
                await self._emit_template("components/ui/button.tsx", generated)

            if opts.with_layouts:
                logger.step("Generating layout structure...")
                await self._emit_dir("app/dashboard", generated)
                await self._emit_template("app/dashboard/layout.tsx", generated)
                await self._emit_template("app/dashboard/page.tsx", generated)

            await self._emit_template("lib/utils.ts", generated)
            await self._emit_template("next-env.d.ts", generated)
        except OSError as e:
            logger.error(f"Project generation failed: {e}")
            raise ScaffoldError(f"Project generation failed: {e}") from e

        file_count = sum(1 for g in generated if g.type == "file")
        logger.success(f"Generated {file_count} files successfully!")
        return generated

    def build_package_json(self) -> Dict[str, Any]:
        opts = self.options
        dev_dependencies = dict(DEV_DEPENDENCIES)
        if opts.with_tailwind:
            dev_dependencies.update(TAILWIND_DEV_DEPENDENCIES)
        if opts.with_eslint:
            dev_dependencies.update(ESLINT_DEV_DEPENDENCIES)

        scripts = {
            "dev": "next dev",
            "build": "next build",
            "start": "next start",
        }
        if opts.with_eslint:
            scripts["lint"] = "next lint"
        if opts.with_typescript:
            scripts["type-check"] = "tsc --noEmit"

        return {
            "name": slugify_package_name(opts.project_name),
            "version": "0.1.0",
            "private": True,
            "scripts": scripts,
            "dependencies": dict(DEPENDENCIES),
            "devDependencies": dev_dependencies,
            "packageManager": PACKAGE_MANAGER,
        }

    def _validate(self) -> None:
        if not VALID_PROJECT_NAME.match(self.options.project_name or ""):
            raise ScaffoldError(f"Invalid project name: {self.options.project_name!r}")
        if self.project_root.exists() and not self.project_root.is_dir():
            raise ScaffoldError(f"Project path is a file: {self.project_root}")
        if not self.force and not is_empty_dir(self.project_root):
            raise ScaffoldError(
                f"Directory {self.project_root} is not empty (use --force to overwrite)"
            )

    async def _create_basic_structure(self, generated: List[GeneratedFile]) -> None:
        logger.step("Creating basic project structure...")
        for directory in BASE_DIRECTORIES:
            await self._emit_dir(directory, generated)
        await self._emit(".gitignore", load_template("nextjs", "gitignore"), generated)

    async def _generate_package_json(self, generated: List[GeneratedFile]) -> None:
        await self._emit("package.json", to_json(self.build_package_json()), generated)

    async def _emit_template(self, rel_path: str, generated: List[GeneratedFile]) -> None:
        content = load_template("nextjs", rel_path, self.context)
        await self._emit(rel_path, content, generated)

    async def _emit(self, rel_path: str, content: str, generated: List[GeneratedFile]) -> None:
        entry = GeneratedFile(path=rel_path, content=content)
        await write_generated_file(self.project_root, entry)
        generated.append(entry)
        log("SCAFFOLD", f"wrote {rel_path}")

    async def _emit_dir(self, rel_path: str, generated: List[GeneratedFile]) -> None:
        entry = GeneratedFile(path=rel_path, type="directory")
        await write_generated_file(self.project_root, entry)
        generated.append(entry)

# mycontext/commands/init.py
"""
``mycontext init`` - scaffold a Next.js project, .env.example and
(optionally) the InstantDB backend template.
"""
import json
from pathlib import Path
from typing import List, Optional

from mycontext.core.logging import logger
from mycontext.lib.file_system import GeneratedFile, write_file_content
from mycontext.scaffold.env_example import generate_env_example
from mycontext.scaffold.instantdb import InstantDBTemplateInstaller
from mycontext.scaffold.nextjs import NextJSProjectGenerator, NextJSProjectOptions


class InitCommand:
    def __init__(
        self,
        project_name: str,
        base_dir: Optional[Path] = None,
        with_instantdb: bool = True,
        app_id: Optional[str] = None,
        with_tailwind: bool = True,
        with_shadcn: bool = True,
        force: bool = False,
    ):
        base = Path(base_dir or Path.cwd())
        # "." initialises the base directory itself
        self.use_current_dir = project_name == "."
        if self.use_current_dir:
            self.project_path = base
            self.project_name = base.resolve().name
        else:
            self.project_path = base / project_name
            self.project_name = project_name
        self.with_instantdb = with_instantdb
        self.app_id = app_id
        self.force = force
        self.options = NextJSProjectOptions(
            project_name=self.project_name,
            project_path=self.project_path,
            with_tailwind=with_tailwind,
            with_shadcn=with_shadcn,
        )

    async def execute(self) -> List[GeneratedFile]:
        logger.info(f"Creating {self.project_name} in {self.project_path}")

        generator = NextJSProjectGenerator(self.options, force=self.force)
        generated = await generator.generate_project()

        if self.with_instantdb:
            installer = InstantDBTemplateInstaller(self.project_path, self.project_name)
            generated.extend(await installer.install(self.app_id))

        package_json = json.loads((self.project_path / "package.json").read_text(encoding="utf-8"))
        env_example = generate_env_example(package_json)
        await write_file_content(self.project_path / ".env.example", env_example)
        generated.append(GeneratedFile(path=".env.example", content=env_example))

        self.print_next_steps()
        return generated

    def print_next_steps(self) -> None:
        logger.step("Next steps:")
        if not self.use_current_dir:
            logger.plain(f"  cd {self.project_name}")
        logger.plain("  pnpm install")
        if self.with_instantdb and not self.app_id:
            logger.plain("  # set NEXT_PUBLIC_INSTANT_APP_ID in .env")
        logger.plain("  pnpm dev")

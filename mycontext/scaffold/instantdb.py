# mycontext/scaffold/instantdb.py
"""
InstantDB template installer - schema, permissions, client modules and
.env wiring for a generated Next.js project.
"""
import json
from pathlib import Path
from typing import List, Optional

from mycontext.core.logging import log, logger
from mycontext.lib.file_system import (
    GeneratedFile,
    read_file_content,
    write_file_content,
    write_generated_file,
)
from mycontext.scaffold.templates import load_template


TEMPLATE_FILES = [
    "instant.schema.ts",
    "instant.perms.ts",
    "lib/db.ts",
    "lib/instant-admin.ts",
]

INSTANT_DEPENDENCIES = {
    "@instantdb/react": "^0.17.0",
    "@instantdb/admin": "^0.17.0",
}

APP_ID_PLACEHOLDER = "__YOUR_APP_ID_HERE__"

ENV_BLOCK = """# InstantDB Configuration
NEXT_PUBLIC_INSTANT_APP_ID={app_id}
INSTANT_APP_ADMIN_TOKEN=

# Get your app ID from: https://instantdb.com/dash
# Create a new app or use an existing one
"""


class InstantDBTemplateInstaller:
    def __init__(self, project_path: Path, project_name: str = ""):
        self.project_root = Path(project_path)
        self.context = {"project_name": project_name or self.project_root.name}

    async def install(self, app_id: Optional[str] = None) -> List[GeneratedFile]:
        logger.step("Setting up InstantDB...")
        written: List[GeneratedFile] = []

        for rel in TEMPLATE_FILES:
            entry = GeneratedFile(path=rel, content=load_template("instantdb", rel, self.context))
            await write_generated_file(self.project_root, entry)
            written.append(entry)
            log("INSTANTDB", f"wrote {rel}")

        await self.update_env(app_id)
        await self.add_dependencies()
        logger.success("InstantDB template installed")
        return written

    async def update_env(self, app_id: Optional[str] = None) -> bool:
        """
        Create or extend .env with the InstantDB block.

        Returns:
            False when the app id was already configured (file untouched)
        """
        env_path = self.project_root / ".env"
        block = ENV_BLOCK.format(app_id=app_id or APP_ID_PLACEHOLDER)

        if env_path.exists():
            existing = await read_file_content(env_path)
            if "NEXT_PUBLIC_INSTANT_APP_ID" in existing:
                logger.verbose(".env already has InstantDB config")
                return False
            separator = "" if existing.endswith("\n") or not existing else "\n"
            await write_file_content(env_path, existing + separator + "\n" + block)
            logger.verbose(".env updated with InstantDB config")
        else:
            await write_file_content(env_path, block)
            logger.verbose(".env created")
        return True

    async def add_dependencies(self) -> bool:
        """Merge the InstantDB packages into package.json when it exists."""
        package_json = self.project_root / "package.json"
        if not package_json.exists():
            return False

        data = json.loads(await read_file_content(package_json))
        deps = data.setdefault("dependencies", {})
        for name, version in INSTANT_DEPENDENCIES.items():
            deps.setdefault(name, version)
        await write_file_content(package_json, json.dumps(data, indent=2) + "\n")
        return True

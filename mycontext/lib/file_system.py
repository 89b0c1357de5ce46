# mycontext/lib/file_system.py
# MyContext - Unified File System Operations for generated projects

import re
import aiofiles
from pathlib import Path
from typing import Literal
from pydantic import BaseModel

from mycontext.core.exceptions import ScaffoldError

# ================================================================
# MODELS
# ================================================================

class GeneratedFile(BaseModel):
    """A file or directory produced by a generator, relative to the project root"""
    path: str
    content: str = ""
    type: Literal["file", "directory"] = "file"

# ================================================================
# NAME HELPERS
# ================================================================

def slugify_package_name(name: str) -> str:
    """
    npm-safe package name: lowercase, anything not in [a-z0-9-] becomes '-'.
    """
    return re.sub(r"[^a-z0-9-]", "-", name.lower())


def to_kebab_case(name: str) -> str:
    """'UserCard' / 'user card' / 'user_card' -> 'user-card'"""
    spaced = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "-", name.strip())
    return re.sub(r"[\s_-]+", "-", spaced).strip("-").lower()

# ================================================================
# PATH SAFETY
# ================================================================

def within_project(project_root: Path, candidate: Path) -> bool:
    try:
        candidate.resolve().relative_to(project_root.resolve())
        return True
    except ValueError:
        return False


def resolve_in_project(project_root: Path, rel_path: str) -> Path:
    """
    Resolve a project-relative path, refusing anything that escapes the root.
    """
    rel = rel_path.lstrip("/").replace("\\", "/")
    target = project_root / rel
    if not within_project(project_root, target):
        raise ScaffoldError(f"Refusing to write outside project: {rel_path}")
    return target


def is_empty_dir(path: Path) -> bool:
    return not path.exists() or (path.is_dir() and not any(path.iterdir()))

# ================================================================
# FILE I/O OPERATIONS
# ================================================================

async def read_file_content(file_path: Path) -> str:
    """Read a text file asynchronously."""
    async with aiofiles.open(file_path, "r", encoding="utf-8") as f:
        return await f.read()


async def write_file_content(file_path: Path, content: str) -> None:
    """Write text content to a file asynchronously, ensuring parent directory exists."""
    file_path.parent.mkdir(parents=True, exist_ok=True)
    async with aiofiles.open(file_path, "w", encoding="utf-8") as f:
        await f.write(content)


async def write_generated_file(project_root: Path, generated: GeneratedFile) -> Path:
    """
    Materialize one GeneratedFile under project_root.
    Directories are created, files are written.
    """
    target = resolve_in_project(project_root, generated.path)
    if generated.type == "directory":
        target.mkdir(parents=True, exist_ok=True)
    else:
        await write_file_content(target, generated.content)
    return target


"""
Tests for project-relative writes and the path-escape guard.
"""
import pytest

from mycontext.core.exceptions import ScaffoldError
from mycontext.lib.file_system import (
    GeneratedFile,
    resolve_in_project,
    slugify_package_name,
    within_project,
    write_generated_file,
)


@pytest.fixture
def root(tmp_path):
    project = tmp_path / "project"
    project.mkdir()
    return project


def test_slugify_package_name():
    assert slugify_package_name("My Cool_App.v2") == "my-cool-app-v2"


def test_within_project(root):
    assert within_project(root, root / "app" / "page.tsx") is True
    assert within_project(root, root / ".." / "elsewhere") is False


def test_leading_slash_stays_inside(root):
    assert resolve_in_project(root, "/lib/utils.ts") == root / "lib" / "utils.ts"


@pytest.mark.asyncio
async def test_writes_file_and_directory(root):
    target = await write_generated_file(root, GeneratedFile(path="app/page.tsx", content="x"))
    await write_generated_file(root, GeneratedFile(path="public", type="directory"))

    assert target == root / "app" / "page.tsx"
    assert target.read_text(encoding="utf-8") == "x"
    assert (root / "public").is_dir()


@pytest.mark.asyncio
async def test_internal_dotdot_is_allowed(root):
    await write_generated_file(root, GeneratedFile(path="app/../lib/x.ts", content="x"))
    assert (root / "lib" / "x.ts").is_file()


@pytest.mark.asyncio
@pytest.mark.parametrize("rel", ["../x.ts", "app/../../x.ts", "..\\x.ts"])
async def test_parent_escape_refused(root, rel):
    with pytest.raises(ScaffoldError, match="outside project"):
        await write_generated_file(root, GeneratedFile(path=rel, content="pwned"))
    assert not (root.parent / "x.ts").exists()


@pytest.mark.asyncio
async def test_escape_directory_refused(root):
    with pytest.raises(ScaffoldError):
        await write_generated_file(root, GeneratedFile(path="../sibling", type="directory"))
    assert not (root.parent / "sibling").exists()


@pytest.mark.asyncio
async def test_symlinked_directory_refused(root, tmp_path):
    outside = tmp_path / "outside"
    outside.mkdir()
    try:
        (root / "components").symlink_to(outside, target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported here")

    with pytest.raises(ScaffoldError, match="outside project"):
        await write_generated_file(root, GeneratedFile(path="components/card.tsx", content="pwned"))
    assert list(outside.iterdir()) == []

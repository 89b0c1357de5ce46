"""
Tests for the Next.js project generator.
"""
import json

import pytest

from mycontext.core.exceptions import ScaffoldError
from mycontext.scaffold.nextjs import NextJSProjectGenerator, NextJSProjectOptions
from mycontext.scaffold.verify import check_generated_project


def make_generator(project_dir, name="Demo App", force=False, **flags):
    options = NextJSProjectOptions(project_name=name, project_path=project_dir, **flags)
    return NextJSProjectGenerator(options, force=force)


@pytest.mark.asyncio
async def test_full_project(project_dir):
    generated = await make_generator(project_dir).generate_project()

    paths = [g.path for g in generated]
    for rel in [
        ".gitignore",
        "package.json",
        "next.config.ts",
        "tsconfig.json",
        "tailwind.config.ts",
        "postcss.config.js",
        "app/layout.tsx",
        "app/page.tsx",
        "app/globals.css",
        "app/loading.tsx",
        "app/error.tsx",
        "app/not-found.tsx",
        "components.json",
        "components/ui/button.tsx",
        "app/dashboard/layout.tsx",
        "app/dashboard/page.tsx",
        "lib/utils.ts",
        "next-env.d.ts",
    ]:
        assert rel in paths, rel
        assert (project_dir / rel).is_file(), rel

    for directory in ["app", "components", "lib", "hooks", "types", "public", ".mycontext"]:
        assert (project_dir / directory).is_dir()

    assert all(passed for _, passed, _ in check_generated_project(project_dir))


@pytest.mark.asyncio
async def test_generation_order(project_dir):
    paths = [g.path for g in await make_generator(project_dir).generate_project()]
    assert paths.index(".gitignore") < paths.index("package.json") < paths.index("next.config.ts")
    assert paths[-2:] == ["lib/utils.ts", "next-env.d.ts"]


@pytest.mark.asyncio
async def test_returned_content_matches_disk(project_dir):
    for entry in await make_generator(project_dir).generate_project():
        if entry.type == "file":
            assert (project_dir / entry.path).read_text(encoding="utf-8") == entry.content
        else:
            assert entry.content == ""


@pytest.mark.asyncio
async def test_next_config(project_dir):
    await make_generator(project_dir).generate_project()
    config = (project_dir / "next.config.ts").read_text(encoding="utf-8")
    assert "turbo: true" in config
    assert "ignoreBuildErrors: false" in config
    assert "ignoreDuringBuilds: false" in config
    assert "export default nextConfig" in config


@pytest.mark.asyncio
async def test_package_json(project_dir):
    await make_generator(project_dir, name="My Cool_App.v2").generate_project()
    pkg = json.loads((project_dir / "package.json").read_text(encoding="utf-8"))

    assert pkg["name"] == "my-cool-app-v2"
    assert pkg["private"] is True
    assert pkg["packageManager"] == "pnpm@10.11.0"
    assert "lucide-react" in pkg["dependencies"]
    assert "next" in pkg["dependencies"]
    assert "tailwindcss" in pkg["devDependencies"]
    assert "eslint" in pkg["devDependencies"]
    assert pkg["scripts"]["dev"] == "next dev"


@pytest.mark.asyncio
async def test_project_name_is_substituted(project_dir):
    await make_generator(project_dir, name="Acme Portal").generate_project()
    layout = (project_dir / "app/layout.tsx").read_text(encoding="utf-8")
    page = (project_dir / "app/page.tsx").read_text(encoding="utf-8")

    assert 'title: "Acme Portal"' in layout
    assert "Welcome to Acme Portal" in page
    assert "{{project_name}}" not in layout + page


@pytest.mark.asyncio
async def test_optional_parts_skipped(project_dir):
    generated = await make_generator(
        project_dir,
        with_tailwind=False,
        with_typescript=False,
        with_shadcn=False,
        with_components=False,
        with_layouts=False,
        with_app_router=False,
        with_eslint=False,
    ).generate_project()
    paths = {g.path for g in generated}

    for rel in [
        "tailwind.config.ts",
        "postcss.config.js",
        "tsconfig.json",
        "components.json",
        "components/ui/button.tsx",
        "app/dashboard/page.tsx",
        "app/page.tsx",
    ]:
        assert rel not in paths
        assert not (project_dir / rel).exists()

    assert {"package.json", "next.config.ts", "lib/utils.ts", "next-env.d.ts"} <= paths

    pkg = json.loads((project_dir / "package.json").read_text(encoding="utf-8"))
    assert "tailwindcss" not in pkg["devDependencies"]
    assert "eslint" not in pkg["devDependencies"]
    assert "lint" not in pkg["scripts"]


@pytest.mark.asyncio
async def test_non_empty_directory_refused(project_dir):
    project_dir.mkdir()
    (project_dir / "keep.txt").write_text("mine", encoding="utf-8")

    with pytest.raises(ScaffoldError, match="not empty"):
        await make_generator(project_dir).generate_project()
    assert not (project_dir / "package.json").exists()


@pytest.mark.asyncio
async def test_force_writes_into_non_empty_directory(project_dir):
    project_dir.mkdir()
    (project_dir / "keep.txt").write_text("mine", encoding="utf-8")

    await make_generator(project_dir, force=True).generate_project()

    assert (project_dir / "package.json").is_file()
    assert (project_dir / "keep.txt").read_text(encoding="utf-8") == "mine"


@pytest.mark.asyncio
@pytest.mark.parametrize("name", ["", "-leading-dash", "bad/name", "{{project_name}}"])
async def test_invalid_names(project_dir, name):
    with pytest.raises(ScaffoldError, match="Invalid project name"):
        await make_generator(project_dir, name=name).generate_project()


@pytest.mark.asyncio
async def test_progress_output(project_dir, capsys):
    await make_generator(project_dir).generate_project()
    out = capsys.readouterr().out
    assert "Creating basic project structure" in out
    assert "Generated" in out and "files successfully" in out


def test_verify_reports_missing_files(tmp_path):
    (tmp_path / "package.json").write_text(json.dumps({"dependencies": {"next": "14"}}), encoding="utf-8")
    results = {name: passed for name, passed, _ in check_generated_project(tmp_path)}

    assert results["package.json"] is True
    assert results["app/error.tsx"] is False
    assert results["package.json contains next"] is True
    assert results["package.json contains lucide-react"] is False

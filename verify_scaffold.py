#!/usr/bin/env python3
"""
Verification Script: Next.js scaffold

Generates a throwaway project with every option enabled and checks that the
files every scaffold must ship are present. Run this after touching the
generator or its templates.
"""

import asyncio
import shutil
import sys
import tempfile
from pathlib import Path

from mycontext.scaffold.nextjs import NextJSProjectGenerator, NextJSProjectOptions
from mycontext.scaffold.verify import check_generated_project


PROJECT_NAME = "test-scaffold-app"


async def generate(project_path: Path) -> int:
    generator = NextJSProjectGenerator(NextJSProjectOptions(
        project_name=PROJECT_NAME,
        project_path=project_path,
        with_app_router=True,
        with_components=True,
        with_eslint=True,
        with_layouts=True,
        with_shadcn=True,
        with_tailwind=True,
        with_typescript=True,
    ))
    generated = await generator.generate_project()
    return len(generated)


def main():
    print("=" * 70)
    print("SCAFFOLD VERIFICATION")
    print("=" * 70)

    workdir = Path(tempfile.mkdtemp(prefix="mycontext_verify_"))
    project_path = workdir / PROJECT_NAME

    try:
        count = asyncio.run(generate(project_path))
    except Exception as e:
        print(f"❌ Generation crashed: {e}")
        shutil.rmtree(workdir, ignore_errors=True)
        return 1

    print(f"\n🔍 Verifying {count} generated entries...")
    print("-" * 70)

    results = check_generated_project(project_path)
    for name, passed, detail in results:
        status = "✅" if passed else "❌"
        print(f"  {status} {name}: {detail}")

    failed = [name for name, passed, _ in results if not passed]

    print()
    if not failed:
        print(f"✨ Scaffolding verification PASSED ({len(results)} checks)")
        shutil.rmtree(workdir, ignore_errors=True)
        return 0

    print(f"💥 Scaffolding verification FAILED: {len(failed)} check(s)")
    print(f"   Project left for inspection at {project_path}")
    return 1


if __name__ == "__main__":
    sys.exit(main())

# mycontext/scaffold/verify.py
"""
Checks that a generated project contains the files every scaffold must ship.
"""
import json
from pathlib import Path
from typing import List, Tuple

REQUIRED_FILES = [
    "app/error.tsx",
    "app/loading.tsx",
    "app/not-found.tsx",
    "next.config.ts",
    "package.json",
]

REQUIRED_DEPENDENCIES = ["lucide-react", "next", "react"]

CheckResult = Tuple[str, bool, str]


def check_generated_project(project_root: Path) -> List[CheckResult]:
    """
    Returns:
        (check name, passed, detail) for every required file and dependency
    """
    results: List[CheckResult] = []

    for rel in REQUIRED_FILES:
        exists = (project_root / rel).is_file()
        results.append((rel, exists, "found" if exists else "missing"))

    package_json = project_root / "package.json"
    if package_json.is_file():
        try:
            deps = json.loads(package_json.read_text(encoding="utf-8")).get("dependencies", {})
        except json.JSONDecodeError as e:
            results.append(("package.json is valid JSON", False, str(e)))
            return results
        for dep in REQUIRED_DEPENDENCIES:
            present = dep in deps
            results.append((f"package.json contains {dep}", present, deps.get(dep, "missing")))

    return results

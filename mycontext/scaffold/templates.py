# mycontext/scaffold/templates.py
"""
Template files shipped inside the package (mycontext/templates/).

Placeholders use ``{{name}}`` so they never collide with JS template
literals (``${...}``) or JSX expressions.
"""
from pathlib import Path
from typing import Dict, Optional

from mycontext.core.config import settings
from mycontext.core.exceptions import ScaffoldError


def template_root() -> Path:
    return settings.paths.templates_dir


def render(text: str, context: Optional[Dict[str, str]] = None) -> str:
    for key, value in (context or {}).items():
        text = text.replace("{{" + key + "}}", value)
    return text


def load_template(group: str, rel_path: str, context: Optional[Dict[str, str]] = None) -> str:
    """
    Read ``templates/<group>/<rel_path>`` and substitute placeholders.

    Raises:
        ScaffoldError: template missing from the installed package
    """
    path = template_root() / group / rel_path
    if not path.is_file():
        raise ScaffoldError(f"Template not found: {group}/{rel_path}")
    return render(path.read_text(encoding="utf-8"), context)

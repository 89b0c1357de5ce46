# mycontext/scaffold/env_example.py
"""
.env.example generation for scaffolded projects.
"""
from typing import Any, Dict, List, Optional


BASE_VARS = [
    "NODE_ENV=development",
    "NEXT_PUBLIC_APP_URL=http://localhost:3000",
]

MYCONTEXT_VARS = [
    "MYCONTEXT_OPENROUTER_API_KEY=",
    "MYCONTEXT_PROVIDER=openrouter",
    "MYCONTEXT_MODEL=deepseek-ai/DeepSeek-R1",
    "MYCONTEXT_TIMEOUT=60000",
    "MYCONTEXT_MAX_RETRIES=3",
    "MYCONTEXT_TEMPERATURE=0.2",
    "MYCONTEXT_MAX_TOKENS=4000",
]

# dependency name(s) -> vars they require
DATABASE_VARS = [
    (("@instantdb/react", "@instantdb/admin"), [
        "NEXT_PUBLIC_INSTANT_APP_ID=your_instantdb_app_id",
        "INSTANT_APP_ADMIN_TOKEN=your_instantdb_admin_token",
    ]),
    (("@supabase/supabase-js", "supabase"), [
        "NEXT_PUBLIC_SUPABASE_URL=your_supabase_project_url",
        "NEXT_PUBLIC_SUPABASE_ANON_KEY=your_supabase_anon_key",
    ]),
    (("next-auth",), [
        "NEXTAUTH_URL=http://localhost:3000",
        "NEXTAUTH_SECRET=your_nextauth_secret_here",
    ]),
]

HEADER = """# MyContext Environment Variables
#
# Copy this file to .env and fill in your credentials.
# OpenRouter keys: https://openrouter.ai/keys
"""


def collect_env_vars(package_json: Optional[Dict[str, Any]] = None) -> List[str]:
    """Ordered, de-duplicated KEY=value lines for the given package.json."""
    package_json = package_json or {}
    dependencies = {
        **(package_json.get("dependencies") or {}),
        **(package_json.get("devDependencies") or {}),
    }

    lines: List[str] = [*BASE_VARS, *MYCONTEXT_VARS]
    for names, env_vars in DATABASE_VARS:
        if any(name in dependencies for name in names):
            lines.extend(env_vars)

    seen = set()
    unique = []
    for line in lines:
        if line not in seen:
            seen.add(line)
            unique.append(line)
    return unique


def generate_env_example(package_json: Optional[Dict[str, Any]] = None) -> str:
    return HEADER + "\n" + "\n".join(collect_env_vars(package_json)) + "\n"

# mycontext/llm/components.py
"""
AI component generation.

Asks the gateway for a single React/TypeScript component and writes it to
``components/<kebab-name>.tsx`` inside the project.
"""
import re
from pathlib import Path
from typing import Optional

from mycontext.core.exceptions import LLMError, ScaffoldError
from mycontext.core.logging import log, logger
from mycontext.lib.file_system import GeneratedFile, to_kebab_case, write_generated_file
from mycontext.llm.openrouter import OpenRouterClient, PROVIDER


VALID_NAME = re.compile(r"^[A-Za-z][A-Za-z0-9 _-]*$")
THINK_BLOCK = re.compile(r"<think>.*?</think>", re.DOTALL | re.IGNORECASE)
CODE_FENCE = re.compile(r"```(?:tsx|jsx|typescript|ts|javascript|js)?\s*\n(.*?)```", re.DOTALL)

COMPONENT_PROMPT = """You are a senior React engineer working in a Next.js App Router project.

Write ONE React component named {pascal_name} in TypeScript (.tsx).

Requirements:
- {description}
- Use Tailwind CSS utility classes for styling
- Use shadcn/ui primitives from "@/components/ui/*" where they fit (Button is available)
- Use lucide-react for icons
- Add "use client" only if the component needs state or effects
- Export the component as a named export AND as default

Return ONLY the code for the file inside a single ```tsx code block."""


def to_pascal_case(name: str) -> str:
    parts = re.split(r"[\s_-]+", name.strip())
    return "".join(p[:1].upper() + p[1:] for p in parts if p)


def build_component_prompt(name: str, description: str) -> str:
    return COMPONENT_PROMPT.format(
        pascal_name=to_pascal_case(name),
        description=description.strip() or "A reusable UI component",
    )


def extract_component_code(raw_output: str) -> str:
    """
    Strip reasoning blocks and markdown fences from a model reply.

    DeepSeek-R1 style models prefix their answer with <think>...</think>.
    If a fenced block is present the first one wins; otherwise the whole
    remaining reply is taken as code.
    """
    if not raw_output:
        return ""
    text = THINK_BLOCK.sub("", raw_output).strip()
    match = CODE_FENCE.search(text)
    if match:
        text = match.group(1)
    return text.strip() + "\n" if text.strip() else ""


class ComponentGenerator:
    """Generates a component file from a natural-language description."""

    def __init__(self, client: Optional[OpenRouterClient] = None):
        self.client = client or OpenRouterClient()

    async def generate(self, name: str, description: str, project_path: Path) -> GeneratedFile:
        if not VALID_NAME.match(name or ""):
            raise ScaffoldError(f"Invalid component name: {name!r}")

        prompt = build_component_prompt(name, description)
        logger.progress(f"Generating component {to_pascal_case(name)}...")
        raw = await self.client.generate_component(prompt)

        code = extract_component_code(raw)
        if not code:
            raise LLMError(PROVIDER, "Model returned no component code")

        rel_path = f"components/{to_kebab_case(name)}.tsx"
        generated = GeneratedFile(path=rel_path, content=code)
        await write_generated_file(project_path, generated)
        log("COMPONENT", f"Wrote {rel_path} ({len(code)} chars)")
        logger.success(f"Component written to {rel_path}")
        return generated

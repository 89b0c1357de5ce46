# mycontext/llm/__init__.py
"""
LLM module - OpenRouter gateway client and AI component generation.
"""
from .openrouter import OpenRouterClient
from .components import ComponentGenerator, build_component_prompt, extract_component_code

__all__ = ["OpenRouterClient", "ComponentGenerator", "build_component_prompt", "extract_component_code"]

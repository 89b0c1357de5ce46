# mycontext/scaffold/__init__.py
"""
Project scaffolding - Next.js generator, InstantDB template, .env.example.
"""
from .nextjs import NextJSProjectGenerator, NextJSProjectOptions
from .instantdb import InstantDBTemplateInstaller
from .env_example import generate_env_example

__all__ = [
    "NextJSProjectGenerator",
    "NextJSProjectOptions",
    "InstantDBTemplateInstaller",
    "generate_env_example",
]

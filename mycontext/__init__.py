# mycontext/__init__.py
"""
MyContext CLI - Next.js project scaffolding with optional AI components
and an InstantDB backend template.
"""
__version__ = "0.1.0"

__all__ = ["__version__"]

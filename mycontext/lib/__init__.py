# mycontext/lib/__init__.py
"""
Shared helpers for writing generated projects to disk.
"""

# mycontext/commands/__init__.py
"""
CLI command implementations.
"""
from .init import InitCommand
from .status import StatusCommand
from .update import UpdateCommand

__all__ = ["InitCommand", "StatusCommand", "UpdateCommand"]

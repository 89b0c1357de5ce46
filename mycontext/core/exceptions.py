# mycontext/core/exceptions.py
"""
Custom exceptions for the CLI.
"""
from typing import Optional, Dict, Any


class MyContextError(Exception):
    """Base exception for all MyContext errors."""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class SpawnError(MyContextError):
    """External binary could not be launched."""
    def __init__(self, command: str, cause: BaseException):
        super().__init__(
            f"Failed to launch '{command}': {cause}",
            {"command": command, "cause": repr(cause)}
        )
        self.command = command
        self.cause = cause


class CommandFailed(MyContextError):
    """External process ran but did not exit cleanly."""
    def __init__(self, command: str, exit_code: Optional[int], reason: str = ""):
        message = f"Command failed with code {exit_code}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, {"command": command, "exit_code": exit_code})
        self.command = command
        self.exit_code = exit_code


class ConfigurationError(MyContextError):
    """Missing or invalid configuration (env vars, API keys)."""
    pass


class LLMError(MyContextError):
    """LLM gateway error."""
    def __init__(self, provider: str, message: str):
        super().__init__(
            f"LLM error ({provider}): {message}",
            {"provider": provider}
        )
        self.provider = provider


class RateLimitError(LLMError):
    """Gateway answered 429."""
    def __init__(self, provider: str):
        super().__init__(provider, "Rate limited (429)")


class InstantDBError(MyContextError):
    """InstantDB admin API error."""
    def __init__(self, status: int, message: str):
        super().__init__(
            f"InstantDB error {status}: {message}",
            {"status": status}
        )
        self.status = status


class ScaffoldError(MyContextError):
    """Project generation error."""
    pass

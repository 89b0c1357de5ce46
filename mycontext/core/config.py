# mycontext/core/config.py
"""
Application configuration - single source of truth for all settings.
"""
import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class LLMSettings:
    """OpenRouter gateway configuration."""
    # MYCONTEXT_ prefixed key wins over the generic one
    openrouter_api_key: Optional[str] = field(default_factory=lambda: (
        os.getenv("MYCONTEXT_OPENROUTER_API_KEY") or
        os.getenv("OPENROUTER_API_KEY") or
        None
    ))
    base_url: str = field(default_factory=lambda: os.getenv("OPENROUTER_BASE_URL", "https://openrouter.ai/api/v1"))
    default_model: str = field(default_factory=lambda: os.getenv("MYCONTEXT_OPENROUTER_MODEL", "deepseek-ai/DeepSeek-R1"))
    referer: str = "https://mycontext.dev"
    title: str = "MyContext CLI"
    temperature: float = 0.7
    max_tokens: int = 4000
    request_timeout: int = 120


@dataclass
class InstantSettings:
    """InstantDB admin API configuration."""
    app_id: Optional[str] = field(default_factory=lambda: os.getenv("NEXT_PUBLIC_INSTANT_APP_ID") or None)
    admin_token: Optional[str] = field(default_factory=lambda: os.getenv("INSTANT_APP_ADMIN_TOKEN") or None)
    api_url: str = field(default_factory=lambda: os.getenv("INSTANT_API_URL", "https://api.instantdb.com"))
    request_timeout: int = 30


@dataclass
class UpdateSettings:
    """Self-update command configuration."""
    package_manager: str = field(default_factory=lambda: os.getenv("MYCONTEXT_PACKAGE_MANAGER", "pnpm"))
    package_name: str = "mycontext-cli"
    timeout: int = 180  # seconds


@dataclass
class PathSettings:
    """Path configuration."""
    templates_dir: Path = field(default_factory=lambda: Path(__file__).parent.parent / "templates")


@dataclass
class Settings:
    """Main application settings."""
    llm: LLMSettings = field(default_factory=LLMSettings)
    instant: InstantSettings = field(default_factory=InstantSettings)
    update: UpdateSettings = field(default_factory=UpdateSettings)
    paths: PathSettings = field(default_factory=PathSettings)
    debug: bool = field(default_factory=lambda: _env_flag("MYCONTEXT_DEBUG"))


# Singleton instance
settings = Settings()

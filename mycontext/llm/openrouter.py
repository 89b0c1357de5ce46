# mycontext/llm/openrouter.py
"""
OpenRouter client - OpenAI-compatible chat completions over aiohttp.
"""
import asyncio
import aiohttp
from typing import Any, Dict, Optional

from mycontext.core.config import LLMSettings
from mycontext.core.exceptions import ConfigurationError, LLMError, RateLimitError
from mycontext.core.logging import log


PROVIDER = "openrouter"


class OpenRouterClient:
    """
    Thin wrapper around the OpenRouter chat-completions endpoint.

    Constructible without a key; calls that need the gateway raise
    ConfigurationError until one is provided.
    """

    def __init__(self, api_key: Optional[str] = None, llm_settings: Optional[LLMSettings] = None):
        self.settings = llm_settings or LLMSettings()
        self.api_key = api_key or self.settings.openrouter_api_key
        self.base_url = self.settings.base_url.rstrip("/")

    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": self.settings.referer,
            "X-Title": self.settings.title,
        }

    async def check_connection(self) -> bool:
        """Send a tiny completion; False on any failure."""
        if not self.has_api_key():
            return False
        try:
            await self._chat("test", max_tokens=10)
            return True
        except LLMError as e:
            log("OPENROUTER", f"Connection check failed: {e}")
            return False

    async def generate_text(
        self,
        prompt: str,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        model: Optional[str] = None,
    ) -> str:
        """
        Single-turn completion.

        Returns:
            The first choice's message content ("" when the gateway sends none)

        Raises:
            ConfigurationError: no API key
            RateLimitError: HTTP 429
            LLMError: any other gateway failure
        """
        if not self.has_api_key():
            raise ConfigurationError("OpenRouter not configured")

        data = await self._chat(
            prompt,
            temperature=self.settings.temperature if temperature is None else temperature,
            max_tokens=self.settings.max_tokens if max_tokens is None else max_tokens,
            model=model,
        )

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return ""
        return content or ""

    async def generate_component(self, prompt: str, **options: Any) -> str:
        return await self.generate_text(prompt, **options)

    async def _chat(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: int = 4000,
        model: Optional[str] = None,
    ) -> Dict[str, Any]:
        payload = {
            "model": model or self.settings.default_model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        url = f"{self.base_url}/chat/completions"
        log("OPENROUTER", f"POST {url} model={payload['model']} max_tokens={max_tokens}")

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    url,
                    json=payload,
                    headers=self.headers,
                    timeout=aiohttp.ClientTimeout(total=self.settings.request_timeout)
                ) as response:
                    if response.status == 429:
                        raise RateLimitError(PROVIDER)

                    if response.status != 200:
                        text = await response.text()
                        raise LLMError(PROVIDER, f"API error {response.status}: {text[:200]}")

                    try:
                        return await response.json()
                    except ValueError as e:
                        raise LLMError(PROVIDER, f"Invalid JSON response: {e}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise LLMError(PROVIDER, f"Request failed: {e}") from e

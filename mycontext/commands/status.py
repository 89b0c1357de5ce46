# mycontext/commands/status.py
"""
``mycontext status`` - which integrations are configured.
"""
from typing import Dict, Optional

from mycontext.core.logging import logger
from mycontext.db.instant import is_instant_configured
from mycontext.llm.openrouter import OpenRouterClient


class StatusCommand:
    def __init__(self, client: Optional[OpenRouterClient] = None):
        self.client = client or OpenRouterClient()

    async def execute(self, check_connection: bool = False) -> Dict[str, bool]:
        status = {
            "openrouter_key": self.client.has_api_key(),
            "instantdb": is_instant_configured(),
        }

        if status["openrouter_key"]:
            logger.success("OpenRouter API key configured")
        else:
            logger.warn("OpenRouter API key missing (set MYCONTEXT_OPENROUTER_API_KEY)")

        if status["instantdb"]:
            logger.success("InstantDB admin credentials configured")
        else:
            logger.info("InstantDB not configured (NEXT_PUBLIC_INSTANT_APP_ID, INSTANT_APP_ADMIN_TOKEN)")

        if check_connection:
            logger.progress("Checking OpenRouter connection...")
            status["openrouter_reachable"] = await self.client.check_connection()
            if status["openrouter_reachable"]:
                logger.success("OpenRouter reachable")
            else:
                logger.warn("OpenRouter not reachable")

        return status

# mycontext/db/instant.py
"""
InstantDB admin client.

Python has no official InstantDB SDK, so this talks to the hosted admin HTTP
API directly:

    POST {api}/admin/query     {"query": {...}}
    POST {api}/admin/transact  {"steps": [[action, entity, id, attrs], ...]}

Authenticated with the app's admin token plus the ``App-Id`` header.
"""
import asyncio
import uuid
import aiohttp
from typing import Any, Dict, List, Optional

from mycontext.core.config import InstantSettings
from mycontext.core.exceptions import ConfigurationError, InstantDBError
from mycontext.core.logging import log


APP_ID_ENV = "NEXT_PUBLIC_INSTANT_APP_ID"
ADMIN_TOKEN_ENV = "INSTANT_APP_ADMIN_TOKEN"

TxStep = List[Any]


def new_id() -> str:
    """Fresh entity id (InstantDB ids are UUIDs)."""
    return str(uuid.uuid4())


class TxChunk:
    """Builder for a single transaction step: ``db.tx("todos", id).update({...})``."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id

    def update(self, attrs: Dict[str, Any]) -> TxStep:
        return ["update", self.entity, self.entity_id, dict(attrs)]

    def delete(self) -> TxStep:
        return ["delete", self.entity, self.entity_id]

    def link(self, links: Dict[str, str]) -> TxStep:
        return ["link", self.entity, self.entity_id, dict(links)]

    def unlink(self, links: Dict[str, str]) -> TxStep:
        return ["unlink", self.entity, self.entity_id, dict(links)]


class InstantAdminDB:
    """Handle to one InstantDB app through the admin API."""

    def __init__(self, app_id: str, admin_token: str, api_url: str = "https://api.instantdb.com", timeout: int = 30):
        self.app_id = app_id
        self.admin_token = admin_token
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.admin_token}",
            "App-Id": self.app_id,
            "Content-Type": "application/json",
        }

    def tx(self, entity: str, entity_id: Optional[str] = None) -> TxChunk:
        return TxChunk(entity, entity_id or new_id())

    async def query(self, q: Dict[str, Any]) -> Dict[str, Any]:
        """Run an InstaQL query, e.g. ``{"todos": {}}``."""
        return await self._post("/admin/query", {"query": q})

    async def transact(self, steps: List[TxStep]) -> Dict[str, Any]:
        """Apply transaction steps atomically."""
        if not steps:
            raise ValueError("transact() needs at least one step")
        return await self._post("/admin/transact", {"steps": steps})

    async def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = f"{self.api_url}{path}"
        log("INSTANTDB", f"POST {url}")
        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    url,
                    json=payload,
                    headers=self.headers,
                    timeout=aiohttp.ClientTimeout(total=self.timeout)
                ) as response:
                    if response.status >= 400:
                        text = await response.text()
                        raise InstantDBError(response.status, text[:200])
                    try:
                        return await response.json()
                    except ValueError as e:
                        raise InstantDBError(response.status, f"Invalid JSON response: {e}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise InstantDBError(0, f"Request failed: {e}") from e


def init_admin_db(
    app_id: Optional[str] = None,
    admin_token: Optional[str] = None,
    instant_settings: Optional[InstantSettings] = None,
) -> InstantAdminDB:
    """
    Build an admin handle from arguments or the environment.

    Raises:
        ConfigurationError: app id and/or admin token missing
    """
    cfg = instant_settings or InstantSettings()
    app_id = app_id or cfg.app_id
    admin_token = admin_token or cfg.admin_token

    missing = []
    if not app_id:
        missing.append(APP_ID_ENV)
    if not admin_token:
        missing.append(ADMIN_TOKEN_ENV)
    if missing:
        raise ConfigurationError(
            f"InstantDB not configured: set {', '.join(missing)}",
            {"missing": missing}
        )

    return InstantAdminDB(app_id, admin_token, api_url=cfg.api_url, timeout=cfg.request_timeout)


def is_instant_configured(instant_settings: Optional[InstantSettings] = None) -> bool:
    cfg = instant_settings or InstantSettings()
    return bool(cfg.app_id and cfg.admin_token)

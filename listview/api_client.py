# File: /listview/api_client.py | Version: 1.0 | Title: Users API client (httpx, async)
"""HTTP client for the users API."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from listview.core.config import Settings, settings as default_settings
from listview.core.errors import NetworkError
from listview.schemas.user import Record, User, UsersPage

logger = logging.getLogger(__name__)


def _error_message(res: httpx.Response) -> str:
    try:
        body = res.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        msg = body.get("message") or body.get("detail")
        if isinstance(msg, str) and msg:
            return msg
    return f"{res.status_code} {res.reason_phrase}".strip()


class UsersApiClient:
    """
    Thin request/response wrapper over the users endpoints.

    Every failure, transport or HTTP status, surfaces as ``NetworkError``.
    Pass ``transport`` to route requests somewhere other than the network
    (tests use ``httpx.ASGITransport`` over the development API).
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        settings: Optional[Settings] = None,
    ):
        cfg = settings or default_settings
        self.base_url = (base_url or cfg.API_BASE).rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else cfg.API_TIMEOUT,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "UsersApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        try:
            res = await self.client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise NetworkError(str(exc) or exc.__class__.__name__) from exc

        if res.is_error:
            message = _error_message(res)
            logger.warning("%s %s -> %s: %s", method, path, res.status_code, message)
            raise NetworkError(message, status_code=res.status_code)

        if not res.content:
            return None
        try:
            return res.json()
        except ValueError as exc:
            raise NetworkError(f"Invalid JSON from {method} {path}") from exc

    async def _user(self, method: str, path: str, **kwargs) -> Record:
        body = await self._request(method, path, **kwargs)
        try:
            return User.model_validate(body).to_record()
        except ValidationError as exc:
            raise NetworkError(f"Unexpected user payload from {method} {path}") from exc

    async def _page(self, path: str, params: Dict[str, Any]) -> UsersPage:
        body = await self._request("GET", path, params=params)
        try:
            return UsersPage.model_validate(body)
        except ValidationError as exc:
            raise NetworkError(f"Unexpected users payload from GET {path}") from exc

    async def list_all(self, limit: int = 30, offset: int = 0) -> UsersPage:
        return await self._page("/users", {"limit": limit, "skip": offset})

    async def search(self, query: str) -> UsersPage:
        return await self._page("/users/search", {"q": query})

    async def get_one(self, user_id: int) -> Record:
        return await self._user("GET", f"/users/{user_id}")

    async def create_one(self, partial: Record) -> Record:
        body = {k: v for k, v in partial.items() if k != "id"}
        return await self._user("POST", "/users/add", json=body)

    async def update_one(self, user_id: int, partial: Record) -> Record:
        body = {k: v for k, v in partial.items() if k != "id"}
        return await self._user("PUT", f"/users/{user_id}", json=body)

    async def delete_one(self, user_id: int) -> None:
        await self._request("DELETE", f"/users/{user_id}")

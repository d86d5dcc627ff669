# File: /listview/view/store.py | Version: 1.0 | Title: Collection store (fetch, confirmed add/update, optimistic delete)
from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, Dict, List, Optional, Protocol

from listview.core.config import Settings, settings as default_settings
from listview.core.errors import NetworkError
from listview.schemas.user import Record, UsersPage

logger = logging.getLogger(__name__)


class UsersDataSource(Protocol):
    async def list_all(self, limit: int = 30, offset: int = 0) -> UsersPage: ...

    async def get_one(self, user_id: int) -> Record: ...

    async def create_one(self, partial: Record) -> Record: ...

    async def update_one(self, user_id: int, partial: Record) -> Record: ...

    async def delete_one(self, user_id: int) -> None: ...


class _IdLock:
    __slots__ = ("lock", "holders")

    def __init__(self) -> None:
        self.lock = asyncio.Lock()
        self.holders = 0


class CollectionStore:
    """
    Owns the client-side user collection and its loading/error status.

    Creation and updates are confirmed by the server before touching the
    collection; deletion is applied locally first and rolled back if the
    server refuses it. Mutations of the same id are queued behind a per-id
    lock, so responses for one record are applied in call order.
    """

    def __init__(self, client: UsersDataSource, settings: Optional[Settings] = None):
        cfg = settings or default_settings
        self.client = client
        self.fetch_limit = cfg.FETCH_LIMIT
        self.items: List[Record] = []
        self.loading = True
        self.error: Optional[str] = None
        self.total = 0
        self._listeners: List[Callable[[], None]] = []
        self._locks: Dict[int, _IdLock] = {}

    # ----- change notification -----

    def subscribe(self, listener: Callable[[], None]) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self._listeners.remove(listener)

    def _emit(self) -> None:
        for listener in list(self._listeners):
            listener()

    # ----- helpers -----

    def index_of(self, user_id: int) -> int:
        for i, item in enumerate(self.items):
            if item.get("id") == user_id:
                return i
        return -1

    def get_local(self, user_id: int) -> Optional[Record]:
        i = self.index_of(user_id)
        return self.items[i] if i != -1 else None

    @asynccontextmanager
    async def _serialized(self, user_id: int) -> AsyncIterator[None]:
        entry = self._locks.get(user_id)
        if entry is None:
            entry = self._locks[user_id] = _IdLock()
        entry.holders += 1
        try:
            async with entry.lock:
                yield
        finally:
            entry.holders -= 1
            # drop the lock once no mutation of this id is running or queued
            if entry.holders == 0:
                del self._locks[user_id]

    def _fail(self, exc: NetworkError, fallback: str) -> None:
        self.error = exc.message or fallback
        logger.error("%s: %s", fallback, self.error)

    # ----- operations -----

    async def fetch_all(self) -> UsersPage:
        self.loading = True
        self.error = None
        try:
            page = await self.client.list_all(self.fetch_limit, 0)
            self.items = page.records()
            self.total = page.total
            logger.info("Loaded %d of %d users", len(self.items), self.total)
            return page
        except NetworkError as exc:
            self._fail(exc, "Failed to fetch users")
            raise
        finally:
            self.loading = False
            self._emit()

    async def fetch_by_id(self, user_id: int) -> Optional[Record]:
        local = self.get_local(user_id)
        if local is not None:
            return local
        try:
            return await self.client.get_one(user_id)
        except NetworkError as exc:
            self._fail(exc, "Failed to fetch user")
            return None

    async def add(self, record: Record) -> Optional[Record]:
        partial = {k: v for k, v in record.items() if k != "id"}
        try:
            created = await self.client.create_one(partial)
        except NetworkError as exc:
            self._fail(exc, "Failed to add user")
            return None
        self.items.insert(0, created)
        self._emit()
        return created

    async def update(self, user_id: int, patch: Record) -> Optional[Record]:
        async with self._serialized(user_id):
            if self.index_of(user_id) == -1:
                return None
            try:
                updated = await self.client.update_one(user_id, patch)
            except NetworkError as exc:
                self._fail(exc, "Failed to edit user")
                return None
            # the collection may have shifted while the request was in flight
            index = self.index_of(user_id)
            if index == -1:
                logger.info("User %s was removed while its update was in flight", user_id)
                return updated
            self.items[index] = {**self.items[index], **updated}
            self._emit()
            return updated

    async def delete(self, user_id: int) -> bool:
        async with self._serialized(user_id):
            index = self.index_of(user_id)
            if index == -1:
                return False
            removed = self.items.pop(index)
            self._emit()
            try:
                await self.client.delete_one(user_id)
            except NetworkError as exc:
                # a refetch may already have brought the record back
                if self.index_of(user_id) == -1:
                    self.items.insert(min(index, len(self.items)), removed)
                self._fail(exc, "Failed to delete user")
                self._emit()
                return False
            return True

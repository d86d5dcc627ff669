# File: /listview/view/url_sync.py | Version: 1.0 | Title: URL <-> view state bridge (hydrate, canonical write-back)
"""
Two-way mapping between the list view state and the URL query string.

``sync_from_url`` hydrates the state from the current URL once, on load.
``sync_to_url`` writes the canonical query (non-default fields only) back
after user-driven changes. The write-back path checks the bridge phase
first, so assignments made while hydrating never echo back into the URL,
and nothing is written before hydration has run.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Protocol, Sequence, Tuple

from starlette.datastructures import URL, QueryParams

from listview.core.config import Settings, settings as default_settings
from listview.schemas.view_state import SortOrder, ViewState

logger = logging.getLogger(__name__)


class SyncPhase(str, Enum):
    pending = "pending"  # not hydrated yet; write-back disabled
    hydrating = "hydrating"
    idle = "idle"


class QueryKind(str, Enum):
    integer = "integer"
    text = "text"
    text_list = "text_list"
    sort_order = "sort_order"


@dataclass(frozen=True)
class QueryField:
    section: str  # ViewState attribute: "filter" | "sort" | "pagination"
    attr: str
    key: str
    kind: QueryKind
    default: Any


def default_query_fields(cfg: Optional[Settings] = None) -> Tuple[QueryField, ...]:
    cfg = cfg or default_settings
    return (
        QueryField("pagination", "current_page", "page", QueryKind.integer, 1),
        QueryField("pagination", "items_per_page", "limit", QueryKind.integer, cfg.DEFAULT_PAGE_SIZE),
        QueryField("filter", "query", "search", QueryKind.text, ""),
        QueryField("filter", "roles", "roles", QueryKind.text_list, []),
        QueryField("filter", "genders", "genders", QueryKind.text_list, []),
        QueryField("sort", "field", "sort", QueryKind.text, cfg.DEFAULT_SORT_FIELD),
        QueryField("sort", "order", "order", QueryKind.sort_order, SortOrder.asc),
    )


def parse_values(field: QueryField, values: Sequence[str]) -> Any:
    """Raises ValueError for values that cannot populate ``field``."""
    if field.kind is QueryKind.text_list:
        return list(values)
    raw = values[0]
    if field.kind is QueryKind.integer:
        number = int(raw)
        if number < 1:
            raise ValueError(f"{field.key} must be >= 1, got {number}")
        return number
    if field.kind is QueryKind.sort_order:
        return SortOrder(raw)
    return raw


def serialize_value(field: QueryField, value: Any) -> List[str]:
    if field.kind is QueryKind.text_list:
        return [str(v) for v in value]
    if field.kind is QueryKind.sort_order:
        return [SortOrder(value).value]
    return [str(value)]


def is_default(field: QueryField, value: Any) -> bool:
    if field.kind is QueryKind.text_list:
        return list(value) == list(field.default)
    if field.kind is QueryKind.sort_order:
        return SortOrder(value) is SortOrder(field.default)
    return value == field.default


class Navigator(Protocol):
    def current_query(self) -> QueryParams: ...

    def replace_query(self, query: QueryParams) -> None: ...


class MemoryNavigator:
    """Navigator over an in-memory URL; every replacement is kept in ``history``."""

    def __init__(self, url: str = "/users"):
        self.url = URL(url)
        self.history: List[str] = []

    def current_query(self) -> QueryParams:
        return QueryParams(self.url.query)

    def replace_query(self, query: QueryParams) -> None:
        self.url = self.url.replace(query=str(query))
        self.history.append(str(self.url))


class UrlSyncBridge:
    def __init__(
        self,
        state: ViewState,
        navigator: Navigator,
        fields: Optional[Sequence[QueryField]] = None,
    ):
        self.state = state
        self.navigator = navigator
        self.fields = tuple(fields) if fields is not None else default_query_fields()
        self._phase = SyncPhase.pending
        self._listeners: List[Callable[[], None]] = []

    @property
    def phase(self) -> SyncPhase:
        return self._phase

    @property
    def is_syncing(self) -> bool:
        return self._phase is SyncPhase.hydrating

    def subscribe(self, listener: Callable[[], None]) -> None:
        """``listener`` runs after hydration assigned state, still inside the hydrating phase."""
        self._listeners.append(listener)

    def _get(self, field: QueryField) -> Any:
        return getattr(getattr(self.state, field.section), field.attr)

    def _set(self, field: QueryField, value: Any) -> None:
        setattr(getattr(self.state, field.section), field.attr, value)

    async def sync_from_url(self) -> ViewState:
        self._phase = SyncPhase.hydrating
        try:
            query = self.navigator.current_query()
            for field in self.fields:
                values = [v for v in query.getlist(field.key) if v != ""]
                if not values:
                    # absent keys keep the current value
                    continue
                try:
                    self._set(field, parse_values(field, values))
                except ValueError as exc:
                    logger.debug("Ignoring malformed query value %s=%r: %s", field.key, values, exc)
            for listener in self._listeners:
                listener()
            # let reactions to the hydrated state settle before write-back is re-enabled
            await asyncio.sleep(0)
        finally:
            self._phase = SyncPhase.idle
        logger.debug("Hydrated view state from %r", str(self.navigator.current_query()))
        return self.state

    def build_query(self) -> QueryParams:
        pairs: List[Tuple[str, str]] = []
        for field in self.fields:
            value = self._get(field)
            if is_default(field, value):
                continue
            pairs.extend((field.key, v) for v in serialize_value(field, value))
        return QueryParams(pairs)

    def sync_to_url(self) -> bool:
        query = self.build_query()
        if str(query) == str(self.navigator.current_query()):
            return False
        self.navigator.replace_query(query)
        return True

    def on_state_changed(self) -> bool:
        """Write-back entry point for state changes; a no-op unless idle."""
        if self._phase is not SyncPhase.idle:
            logger.debug("Skipping URL write-back while %s", self._phase.value)
            return False
        return self.sync_to_url()

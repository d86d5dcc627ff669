# File: /listview/view/coordinator.py | Version: 1.0 | Title: View coordinator (store -> filter -> sort -> paginate, URL sync)
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Union

from listview.core.config import Settings, settings as default_settings
from listview.schemas.view_state import (
    ALLOW_LIST_FIELDS,
    FilterAttribute,
    PaginationState,
    SortOrder,
    SortState,
    ViewState,
)
from listview.view.filtering import USER_SEARCH_FIELDS, filter_records, reset_filters
from listview.view.pagination import paginate
from listview.view.sorting import USER_SORT_ACCESSORS, Accessor, sort_records
from listview.view.store import CollectionStore, UsersDataSource
from listview.view.url_sync import Navigator, QueryField, UrlSyncBridge, default_query_fields

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListView:
    filtered: List[Mapping[str, Any]]
    sorted: List[Mapping[str, Any]]
    page: List[Mapping[str, Any]]
    total_pages: int

    @property
    def total_filtered(self) -> int:
        return len(self.filtered)


def recompute_view(
    collection: Sequence[Mapping[str, Any]],
    state: ViewState,
    searchable_fields: Sequence[str] = USER_SEARCH_FIELDS,
    sort_accessors: Optional[Mapping[str, Accessor]] = None,
) -> ListView:
    """Run the whole pipeline against the current inputs."""
    accessors = USER_SORT_ACCESSORS if sort_accessors is None else sort_accessors
    filtered = filter_records(collection, state.filter, searchable_fields)
    ordered = sort_records(
        filtered, state.sort.field, state.sort.order, accessors.get(state.sort.field)
    )
    sliced = paginate(ordered, state.pagination)
    return ListView(filtered=filtered, sorted=ordered, page=sliced.page, total_pages=sliced.total_pages)


class ViewCoordinator:
    """
    One list view session: the collection store, the view state and the URL
    bridge, wired together. The derived ``view`` is recomputed explicitly
    after every state or collection change and pushed to subscribers.
    """

    def __init__(
        self,
        client: UsersDataSource,
        navigator: Navigator,
        *,
        settings: Optional[Settings] = None,
        searchable_fields: Sequence[str] = USER_SEARCH_FIELDS,
        sort_accessors: Optional[Mapping[str, Accessor]] = None,
        query_fields: Optional[Sequence[QueryField]] = None,
    ):
        cfg = settings or default_settings
        self.searchable_fields = tuple(searchable_fields)
        self.sort_accessors = USER_SORT_ACCESSORS if sort_accessors is None else dict(sort_accessors)
        self.state = ViewState(
            sort=SortState(field=cfg.DEFAULT_SORT_FIELD),
            pagination=PaginationState(items_per_page=cfg.DEFAULT_PAGE_SIZE),
        )
        self.store = CollectionStore(client, settings=cfg)
        self.url_sync = UrlSyncBridge(
            self.state,
            navigator,
            fields=query_fields if query_fields is not None else default_query_fields(cfg),
        )
        self._observers: List[Callable[[ListView], None]] = []
        self.view = self._derive()

        self.store.subscribe(self.recompute)
        self.url_sync.subscribe(self._state_changed)

    # ----- derived view -----

    def _derive(self) -> ListView:
        return recompute_view(
            self.store.items, self.state, self.searchable_fields, self.sort_accessors
        )

    def subscribe(self, observer: Callable[[ListView], None]) -> None:
        self._observers.append(observer)

    def recompute(self) -> ListView:
        self.view = self._derive()
        for observer in self._observers:
            observer(self.view)
        return self.view

    @property
    def page(self) -> List[Mapping[str, Any]]:
        return self.view.page

    @property
    def total_pages(self) -> int:
        return self.view.total_pages

    # ----- lifecycle -----

    async def initialize(self) -> ListView:
        """Hydrate from the URL, then load the collection unless it is already loaded."""
        await self.url_sync.sync_from_url()
        if not self.store.items:
            await self.store.fetch_all()
        return self.view

    # ----- state changes -----

    def _state_changed(self, filters_changed: bool = False) -> None:
        if filters_changed and not self.url_sync.is_syncing:
            # never encode a stale page number next to a new filter
            self.state.pagination.current_page = 1
        self.recompute()
        self.url_sync.on_state_changed()

    def set_search_query(self, query: str) -> None:
        if query == self.state.filter.query:
            return
        self.state.filter.query = query
        self._state_changed(filters_changed=True)

    def set_attribute_filter(
        self, attribute: Union[FilterAttribute, str], values: Iterable[str]
    ) -> None:
        name = ALLOW_LIST_FIELDS[FilterAttribute(attribute)]
        setattr(self.state.filter, name, list(values))
        self._state_changed(filters_changed=True)

    def toggle_attribute_value(self, attribute: Union[FilterAttribute, str], value: str) -> None:
        current = list(self.state.filter.allowed(FilterAttribute(attribute)))
        if value in current:
            current.remove(value)
        else:
            current.append(value)
        self.set_attribute_filter(attribute, current)

    def reset_filters(self) -> None:
        self.state.filter = reset_filters(self.state.filter)
        self._state_changed(filters_changed=True)

    def set_sort(self, field: str, order: Union[SortOrder, str, None] = None) -> None:
        self.state.sort.field = field
        if order is not None:
            self.state.sort.order = SortOrder(order)
        self._state_changed()

    def toggle_sort(self, field: str) -> None:
        """Same field flips the direction; a new field starts ascending."""
        if field == self.state.sort.field:
            flipped = SortOrder.desc if self.state.sort.order is SortOrder.asc else SortOrder.asc
            self.set_sort(field, flipped)
        else:
            self.set_sort(field, SortOrder.asc)

    def set_page(self, page: int) -> None:
        self.state.pagination.current_page = page
        self._state_changed()

    def set_page_size(self, size: int) -> None:
        self.state.pagination.items_per_page = size
        self.state.pagination.current_page = 1
        self._state_changed()

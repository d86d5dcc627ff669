# File: /listview/view/pagination.py | Version: 1.0 | Title: Pagination engine
from __future__ import annotations

from dataclasses import dataclass
from math import ceil
from typing import Any, List, Mapping, Sequence

from listview.schemas.view_state import PaginationState


@dataclass(frozen=True)
class PageSlice:
    page: List[Mapping[str, Any]]
    total_pages: int


def page_bounds(pagination: PaginationState) -> tuple[int, int]:
    start = (pagination.current_page - 1) * pagination.items_per_page
    return start, start + pagination.items_per_page


def paginate(items: Sequence[Mapping[str, Any]], pagination: PaginationState) -> PageSlice:
    # Out-of-range pages slice to an empty list rather than raising
    start, end = page_bounds(pagination)
    return PageSlice(
        page=list(items[start:end]),
        total_pages=ceil(len(items) / pagination.items_per_page),
    )

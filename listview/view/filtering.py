# File: /listview/view/filtering.py | Version: 1.0 | Title: Filter engine (text search + attribute allow-lists)
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence

from listview.schemas.view_state import FilterState

# Fields the user directory searches by default
USER_SEARCH_FIELDS = ("firstName", "lastName", "email", "username")


def _text_values(item: Mapping[str, Any], fields: Sequence[str]) -> List[str]:
    values = []
    for f in fields:
        val = item.get(f)
        if val is None or val == "":
            continue
        values.append(str(val).lower())
    return values


def matches_query(item: Mapping[str, Any], query: str, fields: Sequence[str]) -> bool:
    """
    Case-insensitive substring match against any searchable field, or against
    all of them joined by spaces (so "jane doe" matches first + last name).
    """
    if not query:
        return True
    needle = query.lower()
    values = _text_values(item, fields)
    if any(needle in v for v in values):
        return True
    return needle in " ".join(values)


def matches_attributes(item: Mapping[str, Any], allow_lists: Dict[str, List[Any]]) -> bool:
    for field, allowed in allow_lists.items():
        # An empty allow-list means "no constraint", not "exclude everything"
        if allowed and item.get(field) not in allowed:
            return False
    return True


def filter_records(
    items: Sequence[Mapping[str, Any]],
    state: FilterState,
    searchable_fields: Sequence[str] = USER_SEARCH_FIELDS,
) -> List[Mapping[str, Any]]:
    """Keep records passing the text predicate AND every active allow-list, in input order."""
    if state.is_empty():
        return list(items)
    allow_lists = state.allow_lists()
    fields = list(searchable_fields)
    return [
        item
        for item in items
        if matches_query(item, state.query, fields) and matches_attributes(item, allow_lists)
    ]


def reset_filters(state: FilterState) -> FilterState:
    """Empty query and every allow-list cleared."""
    return state.model_copy(update={"query": "", "roles": [], "genders": []})

# File: /listview/view/sorting.py | Version: 1.0 | Title: Sort engine (stable, comparator-direction)
from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, List, Mapping, Optional, Sequence

from listview.schemas.view_state import SortOrder

Accessor = Callable[[Mapping[str, Any]], Any]


def full_name(item: Mapping[str, Any]) -> str:
    return f"{item.get('firstName') or ''} {item.get('lastName') or ''}".strip()


# Sort fields whose value is derived rather than read straight off the record
USER_SORT_ACCESSORS = {"firstName": full_name}


def compare_values(a: Any, b: Any) -> int:
    """
    Ascending comparator. Text compares case-insensitively, everything else
    by natural ordering; missing values go last. Values that cannot be
    ordered against each other fall back to their text form.
    """
    if a is None or b is None:
        if a is None and b is None:
            return 0
        return 1 if a is None else -1
    if isinstance(a, str) and isinstance(b, str):
        a, b = a.casefold(), b.casefold()
    try:
        if a < b:
            return -1
        if a > b:
            return 1
        return 0
    except TypeError:
        sa, sb = str(a).casefold(), str(b).casefold()
        return (sa > sb) - (sa < sb)


def sort_records(
    items: Sequence[Mapping[str, Any]],
    field: str,
    order: SortOrder = SortOrder.asc,
    accessor: Optional[Accessor] = None,
) -> List[Mapping[str, Any]]:
    """
    Return a new list ordered by ``field``.

    Descending negates the comparator instead of reversing the output, so
    ties keep their input order in both directions.
    """
    get = accessor or (lambda item: item.get(field))
    sign = -1 if SortOrder(order) is SortOrder.desc else 1

    def cmp(x: Mapping[str, Any], y: Mapping[str, Any]) -> int:
        return sign * compare_values(get(x), get(y))

    return sorted(items, key=cmp_to_key(cmp))

# File: /listview/schemas/view_state.py | Version: 1.1 | Title: List view state (filter, sort, pagination)
from __future__ import annotations

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from listview.core.config import settings


class SortOrder(str, Enum):
    asc = "asc"
    desc = "desc"


class FilterAttribute(str, Enum):
    """Filterable record attributes; the value is the record field name."""

    role = "role"
    gender = "gender"


# FilterAttribute -> FilterState field holding its allow-list
ALLOW_LIST_FIELDS: Dict[FilterAttribute, str] = {
    FilterAttribute.role: "roles",
    FilterAttribute.gender: "genders",
}


class _State(BaseModel):
    model_config = ConfigDict(validate_assignment=True)


class FilterState(_State):
    query: str = ""
    roles: List[str] = Field(default_factory=list)
    genders: List[str] = Field(default_factory=list)

    def allowed(self, attribute: FilterAttribute) -> List[str]:
        return getattr(self, ALLOW_LIST_FIELDS[attribute])

    def allow_lists(self) -> Dict[str, List[str]]:
        """Record field -> allow-list, for every filterable attribute."""
        return {attr.value: self.allowed(attr) for attr in FilterAttribute}

    def is_empty(self) -> bool:
        return not self.query and not any(self.allow_lists().values())


class SortState(_State):
    field: str = settings.DEFAULT_SORT_FIELD
    order: SortOrder = SortOrder.asc


class PaginationState(_State):
    current_page: int = Field(default=1, ge=1)
    items_per_page: int = Field(default=settings.DEFAULT_PAGE_SIZE, ge=1)


class ViewState(_State):
    filter: FilterState = Field(default_factory=FilterState)
    sort: SortState = Field(default_factory=SortState)
    pagination: PaginationState = Field(default_factory=PaginationState)

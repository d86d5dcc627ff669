# File: /listview/view/__init__.py | Version: 1.0 | Title: List view pipeline exports
from .coordinator import ListView, ViewCoordinator, recompute_view
from .filtering import filter_records
from .pagination import PageSlice, paginate
from .sorting import sort_records
from .store import CollectionStore
from .url_sync import MemoryNavigator, SyncPhase, UrlSyncBridge

__all__ = [
    "CollectionStore",
    "ListView",
    "MemoryNavigator",
    "PageSlice",
    "SyncPhase",
    "UrlSyncBridge",
    "ViewCoordinator",
    "filter_records",
    "paginate",
    "recompute_view",
    "sort_records",
]

# File: /listview/schemas/__init__.py | Version: 2.0 | Path: /listview/schemas/__init__.py
from . import user, view_state

__all__ = ["user", "view_state"]

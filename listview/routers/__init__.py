# File: /listview/routers/__init__.py | Version: 2.0 | Path: /listview/routers/__init__.py
"""
Router package exports.

Keeping these explicit helps static analyzers and avoids surprises
when importing submodules like: `from listview.routers import users as users_router`.
"""
from . import health, users

__all__ = ["health", "users"]

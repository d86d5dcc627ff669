# File: /listview/models/__init__.py | Version: 2.0 | Title: Models Package Exports
from .user import User

__all__ = ["User"]

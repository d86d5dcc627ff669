# File: listview/db/__init__.py | Version: 1.1 | Path: /listview/db/__init__.py
# Import models so SQLAlchemy Base knows about them when metadata is created
import listview.models  # noqa: F401

from .base_class import Base
from .session import SessionLocal, engine, get_db

__all__ = ["Base", "get_db", "SessionLocal", "engine"]

# File: /listview/models/user.py | Version: 1.0 | Title: SQLAlchemy model for directory users
from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from listview.db.base_class import Base


class User(Base):
    __tablename__ = "users"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    last_name: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    email: Mapped[str] = mapped_column(String(255), index=True, nullable=False, default="")
    username: Mapped[str] = mapped_column(String(100), index=True, nullable=False, default="")
    age: Mapped[Optional[int]] = mapped_column(Integer)
    gender: Mapped[Optional[str]] = mapped_column(String(20))
    role: Mapped[Optional[str]] = mapped_column(String(20), index=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50))
    image: Mapped[Optional[str]] = mapped_column(String(500))

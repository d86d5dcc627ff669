# File: /listview/schemas/user.py | Version: 3.0 | Path: /listview/schemas/user.py
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import ConfigDict, Field

from ._base import BaseSchema

# A record as held by the client-side collection: camelCase keys, integer "id"
Record = Dict[str, Any]


class UserBase(BaseSchema):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    username: str = ""
    age: Optional[int] = None
    gender: Optional[str] = None
    role: Optional[str] = None
    phone: Optional[str] = None
    image: Optional[str] = None


class User(UserBase):
    # Unknown fields from the API are kept on the record untouched
    model_config = ConfigDict(extra="allow")

    id: int

    def to_record(self) -> Record:
        return self.model_dump(by_alias=True)


class UserCreate(UserBase):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)


class UserUpdate(BaseSchema):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    role: Optional[str] = None
    phone: Optional[str] = None
    image: Optional[str] = None


class DeletedUser(User):
    is_deleted: bool = True
    deleted_on: Optional[str] = None


class UsersPage(BaseSchema):
    """One ``GET /users`` response; ``users`` on the wire, ``items`` in code."""

    items: List[User] = Field(default_factory=list, alias="users")
    total: int = 0
    skip: int = 0
    limit: int = 0

    def records(self) -> List[Record]:
        return [u.to_record() for u in self.items]

# File: /listview/crud/user.py | Version: 1.0 | Path: /listview/crud/user.py
from __future__ import annotations

from typing import List, Optional, Tuple

from sqlalchemy import func, or_, select
from sqlalchemy.orm import Session

from listview.models.user import User
from listview.schemas.user import UserCreate, UserUpdate


def list_users(db: Session, *, limit: int, skip: int) -> Tuple[List[User], int]:
    total = db.execute(select(func.count(User.id))).scalar_one()
    q = select(User).order_by(User.id.asc()).offset(skip)
    # dummyjson convention: limit=0 means "everything"
    if limit > 0:
        q = q.limit(limit)
    return list(db.execute(q).scalars().all()), total


def search_users(db: Session, query: str) -> List[User]:
    pattern = f"%{query.lower()}%"
    q = (
        select(User)
        .where(
            or_(
                func.lower(User.first_name).like(pattern),
                func.lower(User.last_name).like(pattern),
                func.lower(User.email).like(pattern),
                func.lower(User.username).like(pattern),
            )
        )
        .order_by(User.id.asc())
    )
    return list(db.execute(q).scalars().all())


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.get(User, user_id)


def create_user(db: Session, data: UserCreate) -> User:
    try:
        db_obj = User(**data.model_dump())
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj
    except Exception:
        db.rollback()
        raise


def update_user(db: Session, user_id: int, data: UserUpdate) -> Optional[User]:
    db_obj = get_user(db, user_id)
    if not db_obj:
        return None
    for field, value in data.model_dump(exclude_unset=True).items():
        setattr(db_obj, field, value)
    db.commit()
    db.refresh(db_obj)
    return db_obj


def delete_user(db: Session, db_obj: User) -> None:
    try:
        db.delete(db_obj)
        db.commit()
    except Exception:
        db.rollback()
        raise

# File: /listview/routers/users.py | Version: 1.0 | Title: Users Router (dummyjson-compatible shapes)
from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from listview.crud import user as crud
from listview.db.session import get_db
from listview.schemas.user import DeletedUser, User, UserCreate, UserUpdate, UsersPage

router = APIRouter(prefix="/users", tags=["Users"])


def _not_found(user_id: int) -> HTTPException:
    return HTTPException(status_code=404, detail=f"User with id '{user_id}' not found")


@router.get("", response_model=UsersPage, summary="List users (limit/skip window)")
def list_users(
    limit: int = Query(default=30, ge=0),
    skip: int = Query(default=0, ge=0),
    db: Session = Depends(get_db),
):
    rows, total = crud.list_users(db, limit=limit, skip=skip)
    return UsersPage(
        items=[User.model_validate(r) for r in rows], total=total, skip=skip, limit=limit
    )


@router.get("/search", response_model=UsersPage, summary="Search users by name, email or username")
def search_users(q: str = Query(default=""), db: Session = Depends(get_db)):
    rows = crud.search_users(db, q)
    return UsersPage(
        items=[User.model_validate(r) for r in rows], total=len(rows), skip=0, limit=len(rows)
    )


@router.get("/{user_id}", response_model=User)
def get_user(user_id: int, db: Session = Depends(get_db)):
    u = crud.get_user(db, user_id)
    if not u:
        raise _not_found(user_id)
    return User.model_validate(u)


@router.post("/add", response_model=User, status_code=201)
def add_user(data: UserCreate, db: Session = Depends(get_db)):
    return User.model_validate(crud.create_user(db, data))


@router.put("/{user_id}", response_model=User)
def update_user(user_id: int, data: UserUpdate, db: Session = Depends(get_db)):
    u = crud.update_user(db, user_id, data)
    if not u:
        raise _not_found(user_id)
    return User.model_validate(u)


@router.delete("/{user_id}", response_model=DeletedUser)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    u = crud.get_user(db, user_id)
    if not u:
        raise _not_found(user_id)
    # snapshot first; the row is expired once the delete commits
    deleted = DeletedUser.model_validate(u)
    crud.delete_user(db, u)
    return deleted.model_copy(update={"deleted_on": datetime.now(UTC).isoformat()})

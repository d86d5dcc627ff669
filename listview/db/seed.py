# File: /listview/db/seed.py | Version: 1.0 | Title: Demo users for the development API
from __future__ import annotations

import logging
from itertools import cycle, islice

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from listview.models.user import User

logger = logging.getLogger(__name__)

_FIRST = [
    ("Emily", "female"), ("Michael", "male"), ("Sophia", "female"), ("James", "male"),
    ("Emma", "female"), ("Olivia", "female"), ("Alexander", "male"), ("Ava", "female"),
    ("Ethan", "male"), ("Isabella", "female"), ("Liam", "male"), ("Mia", "female"),
    ("Noah", "male"), ("Charlotte", "female"), ("Lucas", "male"),
]
_LAST = ["Johnson", "Williams", "Brown", "Garcia", "Miller", "Davis", "Wilson",
         "Anderson", "Taylor", "Thomas", "Moore", "Martin", "Lee", "Clark", "Lewis"]
_ROLES = ["admin", "moderator", "user", "user", "user"]


def seed_demo_users(db: Session, count: int = 30) -> int:
    """Insert ``count`` demo users into an empty table. Returns rows inserted."""
    existing = db.execute(select(func.count(User.id))).scalar_one()
    if existing:
        return 0

    firsts = islice(cycle(_FIRST), count)
    lasts = islice(cycle(reversed(_LAST)), count)
    roles = islice(cycle(_ROLES), count)
    for n, ((first, gender), last, role) in enumerate(zip(firsts, lasts, roles), start=1):
        username = f"{first[0].lower()}{last.lower()}{n}"
        db.add(
            User(
                first_name=first,
                last_name=last,
                email=f"{username}@example.com",
                username=username,
                age=20 + (n * 7) % 45,
                gender=gender,
                role=role,
            )
        )
    db.commit()
    logger.info("Seeded %d demo users", count)
    return count

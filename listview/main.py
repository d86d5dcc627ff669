# File: /listview/main.py | Version: 1.0 | Title: Development Users API (FastAPI app + demo seed)
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from listview.core.config import settings
from listview.core.logging import configure_logging
from listview.db import Base, SessionLocal, engine
from listview.db.seed import seed_demo_users
from listview.routers import health, users

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    Base.metadata.create_all(bind=engine)
    if settings.SEED_DEMO_USERS:
        with SessionLocal() as db:
            seed_demo_users(db)
    logger.info("Users API ready on %s", settings.DATABASE_URL)
    yield


app = FastAPI(title="Users API (development)", lifespan=lifespan)
app.include_router(users.router)
app.include_router(health.router)

# Optional standardized error responses
if getattr(settings, "ENABLE_STD_ERRORS", False):
    from listview.core.error_handlers import register_exception_handlers

    register_exception_handlers(app)

"""SQLAlchemy engine and sessions, built lazily from DATABASE_URL."""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from portfolio.core.config import get_settings


class Base(DeclarativeBase):
    pass


@lru_cache
def get_engine() -> Engine:
    url = get_settings().database_url
    if not url:
        raise RuntimeError("DATABASE_URL is not set; the SQL store is unavailable.")
    options: dict = {"pool_pre_ping": True}
    if url.startswith("sqlite"):
        # TestClient and uvicorn's threadpool share one SQLite connection pool
        options["connect_args"] = {"check_same_thread": False}
    return create_engine(url, **options)


@lru_cache
def _get_sessionmaker() -> sessionmaker[Session]:
    return sessionmaker(bind=get_engine(), autoflush=False, expire_on_commit=False)


@contextmanager
def get_session() -> Iterator[Session]:
    with _get_sessionmaker()() as session:
        yield session

"""Singleton engine and table bootstrap."""
from __future__ import annotations

from sqlmodel import SQLModel, create_engine

from postboard.config import settings


def _make_engine(url: str):
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, echo=False, connect_args=connect_args)


engine = _make_engine(settings.database_url)


def init_db() -> None:
    """Create all tables on the configured engine."""
    import postboard.models  # noqa: F401  registers table mappers

    if settings.database_url.startswith("sqlite"):
        settings.data_dir.mkdir(parents=True, exist_ok=True)
    SQLModel.metadata.create_all(engine)

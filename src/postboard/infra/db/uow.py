"""Unit of Work: one read-only session per logical operation."""
from __future__ import annotations
from sqlmodel import Session
from postboard.infra.db.engine import engine


class UnitOfWork:
    """Context manager wrapping a single DB session.

    Never commits: rolls back on every exit and always closes, so a query
    that failed mid-operation cannot leave a transaction half open.
    """

    def __init__(self) -> None:
        self._session: Session | None = None

    def __enter__(self) -> "UnitOfWork":
        self._session = Session(engine)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        try:
            self._session.rollback()
        finally:
            self._session.close()
            self._session = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("UnitOfWork is not active; use it as a context manager.")
        return self._session

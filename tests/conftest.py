"""Shared test fixtures.

  use_test_engine  — redirects the UoW + infra layer to a temp-file SQLite DB.
  make_store       — factory for an in-memory DashboardStore fake.
  make_auth        — factory for an AuthClient fake.
  client           — FastAPI TestClient wired to the test engine; sign in
                     with ``client.sign_in(identity)``.
"""
from __future__ import annotations

from datetime import datetime
from typing import Sequence

import pytest
from sqlmodel import SQLModel, create_engine

from postboard.api.schemas.auth import Identity
from postboard.api.schemas.dashboard import ProfileSnapshot, UpcomingPost
from postboard.domain.enums import PostStatus


class FakeStore:
    """DashboardStore returning canned values and recording every call.

    ``fail_on`` names a method that raises ``ConnectionError`` to simulate a
    transport failure in that one sub-query.
    """

    def __init__(
        self,
        *,
        profile: ProfileSnapshot | None = None,
        scheduled: int = 0,
        groups: int = 0,
        assignments: int = 0,
        all_territories: int = 0,
        posted_today: int = 0,
        upcoming: Sequence[UpcomingPost] = (),
        fail_on: str | None = None,
    ) -> None:
        self.profile = profile
        self.scheduled = scheduled
        self.groups = groups
        self.assignments = assignments
        self.all_territories = all_territories
        self.posted_today = posted_today
        self.upcoming = list(upcoming)
        self.fail_on = fail_on
        self.calls: list[tuple[str, tuple]] = []

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, args))
        if name == self.fail_on:
            raise ConnectionError(f"simulated transport error in {name}")

    @property
    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]

    def get_profile(self, identity_id: str) -> ProfileSnapshot | None:
        self._record("get_profile", identity_id)
        return self.profile

    def count_scheduled_posts(self, identity_id: str, status_in: Sequence[PostStatus]) -> int:
        self._record("count_scheduled_posts", identity_id, tuple(status_in))
        return self.scheduled

    def count_active_groups(self, identity_id: str) -> int:
        self._record("count_active_groups", identity_id)
        return self.groups

    def count_territory_assignments(self, identity_id: str) -> int:
        self._record("count_territory_assignments", identity_id)
        return self.assignments

    def count_all_territories(self) -> int:
        self._record("count_all_territories")
        return self.all_territories

    def count_posted_today(self, identity_id: str, since: datetime) -> int:
        self._record("count_posted_today", identity_id, since)
        return self.posted_today

    def list_upcoming_posts(
        self, identity_id: str, status_in: Sequence[PostStatus], limit: int,
    ) -> list[UpcomingPost]:
        self._record("list_upcoming_posts", identity_id, tuple(status_in), limit)
        return list(self.upcoming)


class FakeAuth:
    def __init__(self, identity: Identity | None = None, error: Exception | None = None) -> None:
        self.identity = identity
        self.error = error
        self.calls = 0

    def get_current_identity(self) -> Identity | None:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.identity


@pytest.fixture
def make_store():
    return FakeStore


@pytest.fixture
def make_auth():
    return FakeAuth


@pytest.fixture
def use_test_engine(tmp_path, monkeypatch):
    """Monkeypatch infra/db engine references to an isolated temp-file SQLite DB."""
    db_path = tmp_path / "test_postboard.db"
    test_engine = create_engine(f"sqlite:///{db_path}", echo=False)

    import postboard.models  # noqa: F401 — registers the table mappers
    SQLModel.metadata.create_all(test_engine)

    monkeypatch.setattr("postboard.db.engine", test_engine)
    monkeypatch.setattr("postboard.infra.db.engine.engine", test_engine)
    monkeypatch.setattr("postboard.infra.db.uow.engine", test_engine)

    yield test_engine

    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture
def client(use_test_engine):
    """FastAPI TestClient backed by the isolated test engine.

    Starts signed out; ``client.sign_in(identity)`` swaps in a FakeAuth.
    """
    from fastapi.testclient import TestClient
    from postboard.api.app import create_app
    from postboard.api.deps import get_auth_client

    app = create_app()
    app.dependency_overrides[get_auth_client] = lambda: FakeAuth(None)

    def sign_in(identity: Identity | None) -> None:
        app.dependency_overrides[get_auth_client] = lambda: FakeAuth(identity)

    with TestClient(app, follow_redirects=False) as c:
        c.sign_in = sign_in
        yield c

"""Read contracts the dashboard depends on.

The auth collaborator and the data store live outside this package; services
only see these protocols, so tests can substitute in-memory fakes.
"""
from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence, runtime_checkable

from postboard.api.schemas.auth import Identity
from postboard.api.schemas.dashboard import ProfileSnapshot, UpcomingPost
from postboard.domain.enums import PostStatus


@runtime_checkable
class AuthClient(Protocol):
    """Source of the current authenticated identity."""

    def get_current_identity(self) -> Identity | None:
        """Return the signed-in identity, or None when there is no session."""
        ...


@runtime_checkable
class DashboardStore(Protocol):
    """Read-only queries issued during one aggregation pass."""

    def get_profile(self, identity_id: str) -> ProfileSnapshot | None: ...

    def count_scheduled_posts(self, identity_id: str, status_in: Sequence[PostStatus]) -> int: ...

    def count_active_groups(self, identity_id: str) -> int: ...

    def count_territory_assignments(self, identity_id: str) -> int: ...

    def count_all_territories(self) -> int: ...

    def count_posted_today(self, identity_id: str, since: datetime) -> int:
        """Count posted records with ``posted_at >= since`` (timezone-aware)."""
        ...

    def list_upcoming_posts(
        self, identity_id: str, status_in: Sequence[PostStatus], limit: int,
    ) -> list[UpcomingPost]:
        """Return at most ``limit`` posts ordered by scheduled time ascending."""
        ...

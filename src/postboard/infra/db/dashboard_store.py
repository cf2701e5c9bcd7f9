"""SQL-backed DashboardStore: the dashboard's read queries over the repositories."""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

from postboard.api.schemas.dashboard import ProfileSnapshot, UpcomingPost
from postboard.domain.enums import PostStatus, Role
from postboard.infra.db.repositories.group_repository import GroupRepository
from postboard.infra.db.repositories.post_repository import PostRepository
from postboard.infra.db.repositories.profile_repository import ProfileRepository
from postboard.infra.db.repositories.territory_repository import TerritoryRepository
from postboard.infra.db.uow import UnitOfWork


# Older SQLite column types return naive values; they were written as UTC.
def _as_utc(moment: datetime) -> datetime:
    return moment.replace(tzinfo=timezone.utc) if moment.tzinfo is None else moment


class SqlDashboardStore:
    """One instance per unit of work; every method is a single SELECT."""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def get_profile(self, identity_id: str) -> ProfileSnapshot | None:
        profile = ProfileRepository(self._uow.session).get_by_id(identity_id)
        if profile is None:
            return None
        return ProfileSnapshot(display_name=profile.full_name, role=Role.parse(profile.role))

    def count_scheduled_posts(self, identity_id: str, status_in: Sequence[PostStatus]) -> int:
        return PostRepository(self._uow.session).count_by_status(identity_id, status_in)

    def count_active_groups(self, identity_id: str) -> int:
        return GroupRepository(self._uow.session).count_active(identity_id)

    def count_territory_assignments(self, identity_id: str) -> int:
        return TerritoryRepository(self._uow.session).count_assignments(identity_id)

    def count_all_territories(self) -> int:
        return TerritoryRepository(self._uow.session).count_all()

    def count_posted_today(self, identity_id: str, since: datetime) -> int:
        return PostRepository(self._uow.session).count_posted_since(
            identity_id, since.astimezone(timezone.utc),
        )

    def list_upcoming_posts(
        self, identity_id: str, status_in: Sequence[PostStatus], limit: int,
    ) -> list[UpcomingPost]:
        rows = PostRepository(self._uow.session).list_next_with_group(identity_id, status_in, limit)
        return [
            UpcomingPost(
                id=post.id,
                content=post.generated_content,
                scheduled_for=_as_utc(post.scheduled_for),
                status=post.status,
                group_name=group_name,
                territory_name=territory_name,
            )
            for post, group_name, territory_name in rows
        ]

"""Repository for ScheduledPost records."""
from __future__ import annotations
from datetime import datetime
from typing import Sequence
from sqlalchemy import func
from sqlmodel import Session, select
from postboard.domain.enums import PostStatus
from postboard.models.core import ScheduledPost, SocialGroup, Territory


class PostRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def count_by_status(self, user_id: str, statuses: Sequence[PostStatus]) -> int:
        return self._s.exec(
            select(func.count()).select_from(ScheduledPost).where(
                ScheduledPost.user_id == user_id,
                ScheduledPost.status.in_([s.value for s in statuses]),
            )
        ).one()

    def count_posted_since(self, user_id: str, since: datetime) -> int:
        """``since`` must be timezone-aware UTC, matching the stored timestamps."""
        return self._s.exec(
            select(func.count()).select_from(ScheduledPost).where(
                ScheduledPost.user_id == user_id,
                ScheduledPost.status == PostStatus.POSTED.value,
                ScheduledPost.posted_at.is_not(None),
                ScheduledPost.posted_at >= since,
            )
        ).one()

    def list_next_with_group(
        self, user_id: str, statuses: Sequence[PostStatus], limit: int,
    ) -> list[tuple[ScheduledPost, str | None, str | None]]:
        """Earliest posts first, each with its group name and the group's territory name."""
        rows = self._s.exec(
            select(ScheduledPost, SocialGroup.name, Territory.name)
            .join(SocialGroup, SocialGroup.id == ScheduledPost.group_id, isouter=True)
            .join(Territory, Territory.id == SocialGroup.territory_id, isouter=True)
            .where(
                ScheduledPost.user_id == user_id,
                ScheduledPost.status.in_([s.value for s in statuses]),
            )
            .order_by(ScheduledPost.scheduled_for, ScheduledPost.id)
            .limit(limit)
        ).all()
        return [(post, group_name, territory_name) for post, group_name, territory_name in rows]

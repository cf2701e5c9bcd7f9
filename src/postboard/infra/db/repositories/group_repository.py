"""Repository for SocialGroup records."""
from __future__ import annotations
from sqlalchemy import func
from sqlmodel import Session, select
from postboard.models.core import SocialGroup


class GroupRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def count_active(self, user_id: str) -> int:
        return self._s.exec(
            select(func.count()).select_from(SocialGroup).where(
                SocialGroup.user_id == user_id, SocialGroup.is_active == True  # noqa: E712
            )
        ).one()

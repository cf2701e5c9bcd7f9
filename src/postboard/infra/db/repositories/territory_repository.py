"""Repository for territories and salesperson assignments."""
from __future__ import annotations
from sqlalchemy import func
from sqlmodel import Session, select
from postboard.models.core import ProfileTerritory, Territory


class TerritoryRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def count_all(self) -> int:
        return self._s.exec(select(func.count()).select_from(Territory)).one()

    def count_assignments(self, profile_id: str) -> int:
        return self._s.exec(
            select(func.count()).select_from(ProfileTerritory).where(
                ProfileTerritory.profile_id == profile_id
            )
        ).one()

"""Repository for Profile records. No business logic; caller owns the transaction."""
from __future__ import annotations
from sqlmodel import Session
from postboard.models.core import Profile


class ProfileRepository:
    def __init__(self, session: Session) -> None:
        self._s = session

    def get_by_id(self, profile_id: str) -> Profile | None:
        return self._s.get(Profile, profile_id)

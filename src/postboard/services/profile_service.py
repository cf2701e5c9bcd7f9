"""Profile lookups for operator tooling."""
from __future__ import annotations

from postboard.api.schemas.auth import Identity
from postboard.domain.enums import Role
from postboard.domain.exceptions import NotFoundError
from postboard.infra.db.repositories.profile_repository import ProfileRepository
from postboard.infra.db.uow import UnitOfWork


class ProfileService:
    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def get_identity(self, profile_id: str) -> Identity:
        profile = ProfileRepository(self._uow.session).get_by_id(profile_id)
        if profile is None:
            raise NotFoundError(f"Profile {profile_id} not found")
        return Identity(id=profile.id, email=profile.email, role=Role.parse(profile.role))

"""Identity DTO: the authenticated actor, as reported by the auth collaborator."""
from __future__ import annotations
from pydantic import BaseModel, ConfigDict
from postboard.domain.enums import Role


class Identity(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    email: str = ""
    role: Role | None = None

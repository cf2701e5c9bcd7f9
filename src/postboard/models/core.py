"""Tables read by the dashboard. Owned by the scheduling product, never written here."""
import uuid
from datetime import datetime, timezone

from sqlmodel import Field, SQLModel

from postboard.domain.enums import PostStatus, Role


def _uuid() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Profile(SQLModel, table=True):
    id: str = Field(default_factory=_uuid, primary_key=True)
    email: str
    full_name: str | None = None
    role: str = Field(default=Role.SALESPERSON.value, index=True)
    created_at: datetime = Field(default_factory=_utcnow)


class Territory(SQLModel, table=True):
    id: str = Field(default_factory=_uuid, primary_key=True)
    name: str
    created_at: datetime = Field(default_factory=_utcnow)


class ProfileTerritory(SQLModel, table=True):
    """Assignment of a salesperson to a territory."""

    profile_id: str = Field(foreign_key="profile.id", primary_key=True)
    territory_id: str = Field(foreign_key="territory.id", primary_key=True)
    created_at: datetime = Field(default_factory=_utcnow)


class SocialGroup(SQLModel, table=True):
    id: str = Field(default_factory=_uuid, primary_key=True)
    user_id: str = Field(index=True)
    name: str
    territory_id: str | None = Field(default=None, foreign_key="territory.id")
    is_active: bool = True
    created_at: datetime = Field(default_factory=_utcnow)


class ScheduledPost(SQLModel, table=True):
    id: str = Field(default_factory=_uuid, primary_key=True)
    user_id: str = Field(index=True)
    group_id: str | None = Field(default=None, foreign_key="socialgroup.id")
    generated_content: str = ""
    scheduled_for: datetime = Field(index=True)
    status: str = Field(default=PostStatus.PENDING.value, index=True)
    # stored in UTC
    posted_at: datetime | None = None
    created_at: datetime = Field(default_factory=_utcnow)

"""Dashboard DTOs: pure Pydantic, zero ORM imports.

Serialized in camelCase for the rendering layer; constructible by field name.
"""
from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from postboard.api.schemas.auth import Identity
from postboard.domain.enums import PostStatus, Role


class _ViewModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProfileSnapshot(_ViewModel):
    display_name: str | None = None
    role: Role | None = None


class DashboardStats(_ViewModel):
    scheduled_posts: int = Field(default=0, ge=0)
    active_groups: int = Field(default=0, ge=0)
    territories: int = Field(default=0, ge=0)
    posted_today: int = Field(default=0, ge=0)


class UpcomingPost(_ViewModel):
    id: str
    content: str
    scheduled_for: datetime
    status: PostStatus
    group_name: str | None = None
    territory_name: str | None = None


class DashboardView(_ViewModel):
    display_name: str = ""
    is_manager: bool = False
    stats: DashboardStats = Field(default_factory=DashboardStats)
    upcoming: list[UpcomingPost] = Field(default_factory=list)

    @classmethod
    def empty(cls, identity: Identity | None = None) -> "DashboardView":
        """All-zero view shown when an aggregation pass fails."""
        return cls(display_name=identity.email if identity else "")

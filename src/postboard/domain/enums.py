from __future__ import annotations
from enum import Enum


class Role(str, Enum):
    SALESPERSON = "salesperson"
    MANAGER = "manager"
    ADMIN = "admin"

    @classmethod
    def parse(cls, value: str | None) -> "Role | None":
        """Map a stored role string to a Role; unknown or blank values give None."""
        if not value:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class PostStatus(str, Enum):
    PENDING = "pending"
    READY = "ready"
    POSTED = "posted"
    SKIPPED = "skipped"
    FAILED = "failed"


SCHEDULED_STATUSES: tuple[PostStatus, ...] = (PostStatus.PENDING, PostStatus.READY)

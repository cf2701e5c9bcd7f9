"""Dashboard use-case service: one aggregation pass per page load."""
from __future__ import annotations

import logging
from datetime import datetime, timezone, tzinfo
from typing import Callable
from zoneinfo import ZoneInfo

from postboard.api.schemas.auth import Identity
from postboard.api.schemas.dashboard import DashboardStats, DashboardView
from postboard.config import settings
from postboard.domain.enums import SCHEDULED_STATUSES, Role
from postboard.services.ports import DashboardStore

logger = logging.getLogger(__name__)

_MANAGER_ROLES = (Role.MANAGER, Role.ADMIN)


def configured_timezone() -> tzinfo | None:
    """Zone for "today" boundaries; None means the server's local zone."""
    return ZoneInfo(settings.TIMEZONE) if settings.TIMEZONE else None


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def start_of_day(moment: datetime, tz: tzinfo | None = None) -> datetime:
    """Midnight starting the calendar day that contains ``moment`` in ``tz``.

    With ``tz`` None the day and its midnight offset come from the server's
    local zone rules, so a daylight-saving change later in the day does not
    shift the boundary.
    """
    if tz is not None:
        return moment.astimezone(tz).replace(hour=0, minute=0, second=0, microsecond=0)
    local_midnight = moment.astimezone().replace(
        hour=0, minute=0, second=0, microsecond=0, tzinfo=None,
    )
    return local_midnight.astimezone()


class DashboardService:
    """Gathers the dashboard counts and the upcoming-post preview for one identity.

    Each read is an independent query against the store. No snapshot spans
    them, so under concurrent writes the numbers can disagree with each other
    for a moment. Any failing read turns the whole pass into
    ``DashboardView.empty``; callers never see an exception.
    """

    def __init__(
        self,
        store: DashboardStore,
        *,
        clock: Callable[[], datetime] | None = None,
        tz: tzinfo | None = None,
        upcoming_limit: int | None = None,
    ) -> None:
        self._store = store
        self._clock = clock or utc_now
        self._tz = tz if tz is not None else configured_timezone()
        self._limit = settings.UPCOMING_LIMIT if upcoming_limit is None else upcoming_limit

    def aggregate(self, identity: Identity) -> DashboardView:
        try:
            return self._aggregate(identity)
        except Exception:
            logger.exception("Dashboard aggregation failed for identity %s", identity.id)
            return DashboardView.empty(identity)

    def _aggregate(self, identity: Identity) -> DashboardView:
        store = self._store
        uid = identity.id

        profile = store.get_profile(uid)
        display_name = (profile.display_name if profile else None) or identity.email or ""
        role = (profile.role if profile else None) or identity.role

        scheduled = store.count_scheduled_posts(uid, SCHEDULED_STATUSES)
        groups = store.count_active_groups(uid)

        if role == Role.SALESPERSON:
            territories = store.count_territory_assignments(uid)
        else:
            territories = store.count_all_territories()

        since = start_of_day(self._clock(), self._tz)
        posted_today = store.count_posted_today(uid, since)

        upcoming = store.list_upcoming_posts(uid, SCHEDULED_STATUSES, self._limit)
        upcoming = sorted(upcoming, key=lambda p: p.scheduled_for)[: self._limit]

        logger.debug(
            "Aggregated dashboard for %s (role=%s): %d scheduled, %d upcoming",
            uid, role.value if role else None, scheduled, len(upcoming),
        )
        return DashboardView(
            display_name=display_name,
            is_manager=role in _MANAGER_ROLES,
            stats=DashboardStats(
                scheduled_posts=max(scheduled or 0, 0),
                active_groups=max(groups or 0, 0),
                territories=max(territories or 0, 0),
                posted_today=max(posted_today or 0, 0),
            ),
            upcoming=upcoming,
        )

"""Session resolution: who is signed in, or where to send them instead."""
from __future__ import annotations

import logging
from typing import Callable, Final

from postboard.api.schemas.auth import Identity
from postboard.config import settings
from postboard.services.ports import AuthClient

logger = logging.getLogger(__name__)


class _Unauthenticated:
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNAUTHENTICATED"

    def __bool__(self) -> bool:
        return False


UNAUTHENTICATED: Final = _Unauthenticated()


class SessionResolver:
    """Looks up the current identity and fails closed.

    Any error from the auth collaborator counts as "no session". On no
    session, ``navigate_to(login_path)`` is called once and the sentinel
    ``UNAUTHENTICATED`` is returned.
    """

    def __init__(
        self,
        auth: AuthClient,
        navigate_to: Callable[[str], None],
        *,
        login_path: str | None = None,
    ) -> None:
        self._auth = auth
        self._navigate_to = navigate_to
        self._login_path = login_path or settings.LOGIN_PATH

    def resolve(self) -> Identity | _Unauthenticated:
        try:
            identity = self._auth.get_current_identity()
        except Exception as exc:
            logger.warning("Session lookup failed, treating as signed out: %s", exc)
            identity = None

        if identity is None:
            self._navigate_to(self._login_path)
            return UNAUTHENTICATED
        return identity

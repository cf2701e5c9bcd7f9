"""AuthClient backed by the hosted auth service's ``/auth/v1/user`` endpoint."""
from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from postboard.api.schemas.auth import Identity
from postboard.config import settings
from postboard.domain.enums import Role
from postboard.domain.exceptions import AuthError

logger = logging.getLogger(__name__)


class HttpAuthClient:
    """Exchanges a session access token for the identity it belongs to.

    Returns None when there is no token or the service rejects it (401/403).
    Other failures raise ``AuthError``; the session resolver treats those as
    signed out too.
    """

    def __init__(
        self,
        access_token: str | None,
        *,
        base_url: str | None = None,
        api_key: str | None = None,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._token = access_token
        if api_key is None and settings.AUTH_API_KEY is not None:
            api_key = settings.AUTH_API_KEY.get_secret_value()
        self._api_key = api_key
        self._client = http_client or httpx.Client(
            base_url=base_url or settings.AUTH_URL, timeout=settings.AUTH_TIMEOUT,
        )

    def get_current_identity(self) -> Identity | None:
        if not self._token:
            return None

        headers = {"Authorization": f"Bearer {self._token}"}
        if self._api_key:
            headers["apikey"] = self._api_key
        try:
            resp = self._client.get("/auth/v1/user", headers=headers)
        except httpx.HTTPError as exc:
            raise AuthError(f"Auth service unreachable: {exc}") from exc

        if resp.status_code in (401, 403):
            return None
        if not resp.is_success:
            raise AuthError(f"Auth service returned {resp.status_code}")

        try:
            body = resp.json()
            metadata = body.get("app_metadata") or {}
            return Identity(
                id=body["id"],
                email=body.get("email") or "",
                role=Role.parse(metadata.get("role") or body.get("role")),
            )
        except (ValueError, KeyError, AttributeError, ValidationError) as exc:
            raise AuthError(f"Malformed identity payload: {exc}") from exc

    def close(self) -> None:
        self._client.close()

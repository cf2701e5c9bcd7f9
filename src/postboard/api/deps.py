"""FastAPI dependencies."""
from __future__ import annotations
from typing import Generator
from fastapi import Request
from postboard.config import settings
from postboard.infra.auth.http_auth import HttpAuthClient
from postboard.infra.db.uow import UnitOfWork


def get_read_uow() -> Generator[UnitOfWork, None, None]:
    """Yield one UnitOfWork per request; always rolled back."""
    with UnitOfWork() as uow:
        yield uow


def session_token(request: Request) -> str | None:
    """Access token from the session cookie, else from a bearer Authorization header."""
    token = request.cookies.get(settings.SESSION_COOKIE)
    if token:
        return token
    scheme, _, credentials = request.headers.get("authorization", "").partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return None


def get_auth_client(request: Request) -> Generator[HttpAuthClient, None, None]:
    client = HttpAuthClient(session_token(request))
    try:
        yield client
    finally:
        client.close()

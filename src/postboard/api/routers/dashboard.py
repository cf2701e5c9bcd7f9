"""Dashboard endpoint."""
from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse
from postboard.api.deps import get_auth_client, get_read_uow
from postboard.api.schemas.dashboard import DashboardView
from postboard.infra.db.dashboard_store import SqlDashboardStore
from postboard.infra.db.uow import UnitOfWork
from postboard.services.dashboard_service import DashboardService
from postboard.services.ports import AuthClient
from postboard.services.session_service import SessionResolver, UNAUTHENTICATED

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get(
    "",
    response_model=DashboardView,
    responses={307: {"description": "No session; redirect to the login page"}},
)
def get_dashboard(
    auth: AuthClient = Depends(get_auth_client),
    uow: UnitOfWork = Depends(get_read_uow),
):
    redirects: list[str] = []
    identity = SessionResolver(auth, redirects.append).resolve()
    if identity is UNAUTHENTICATED:
        return RedirectResponse(redirects[0], status_code=307)
    return DashboardService(SqlDashboardStore(uow)).aggregate(identity)

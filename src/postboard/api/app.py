"""FastAPI application factory."""
from __future__ import annotations
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from sqlmodel import SQLModel
from postboard.logging import new_request_id


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        from postboard.infra.db.engine import engine  # triggers WAL pragma + mapper registration
        SQLModel.metadata.create_all(engine)
        yield

    app = FastAPI(
        title="Postboard Dashboard API",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Import routers inside create_app() to avoid circular imports at module load time
    from postboard.api.routers.dashboard import router as dashboard_router

    app.include_router(dashboard_router)

    @app.middleware("http")
    async def _request_id(request: Request, call_next):
        request_id = new_request_id()
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response

    @app.get("/health", tags=["ops"])
    def health() -> dict:
        return {"status": "ok"}

    return app

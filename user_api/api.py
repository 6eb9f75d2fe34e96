"""
FastAPI app entry point aggregating the routers under user_api/routes.
Keep as `uvicorn user_api.api:app`, or build a fresh app with `create_app()`.
"""
from __future__ import annotations

import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import APP_NAME, APP_VERSION, Settings, get_settings
from .repository.user_repo import InMemoryUserRepository, UserRepository

logger = logging.getLogger("user_api.access")


def create_app(settings: Settings | None = None, repo: UserRepository | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title=APP_NAME, version=APP_VERSION)
    app.state.user_repo = repo or InMemoryUserRepository()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s -> %d (%.1fms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    @app.exception_handler(RequestValidationError)
    async def bad_request(request: Request, exc: RequestValidationError):
        # Path params that fail to parse are bad ids; everything else is a bad body
        if any(err.get("loc", ("",))[0] == "path" for err in exc.errors()):
            detail = {"error": "Invalid ID", "message": "ID must be an integer"}
        else:
            detail = {"error": "Invalid data", "message": _describe(exc)}
        return JSONResponse(status_code=400, content={"detail": detail})

    # Include routers
    from .routes import base as base_routes
    from .routes import users as users_routes

    app.include_router(base_routes.router)
    app.include_router(users_routes.router)
    return app


def _describe(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(parts)


app = create_app()

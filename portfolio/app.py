from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from portfolio.core.config import Settings, get_settings
from portfolio.core.errors import ContentError
from portfolio.core.logging import configure_logging, get_logger
from portfolio.core.rate_limiter import RateLimiter
from portfolio.repositories import build_store
from portfolio.routers import admin as admin_router
from portfolio.routers import contact as contact_router
from portfolio.routers import content as content_router
from portfolio.routers import github as github_router
from portfolio.routers import health as health_router
from portfolio.routers import projects as projects_router
from portfolio.services.github_service import GitHubService

log = get_logger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (anti clickjacking, sniffing, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer-when-downgrade")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def _allowed_origins(settings: Settings) -> list[str]:
    allowed = {settings.public_base_url}
    if settings.app_env != "prod":
        allowed.update(
            {
                "http://localhost:5000",
                "http://127.0.0.1:5000",
                "http://localhost:5173",
                "http://127.0.0.1:5173",
            }
        )
    return sorted(origin for origin in allowed if origin)


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ContentError)
    async def content_error(request: Request, exc: ContentError):
        return JSONResponse(exc.to_body(), status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse({"error": exc.detail}, status_code=exc.status_code, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def request_invalid(request: Request, exc: RequestValidationError):
        details = [
            {"field": ".".join(str(part) for part in err.get("loc", ())), "message": err.get("msg", "")}
            for err in exc.errors()
        ]
        return JSONResponse({"error": "Invalid request", "details": details}, status_code=400)

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception):
        log.exception("request_failed", method=request.method, path=request.url.path)
        return JSONResponse({"error": "Internal server error"}, status_code=500)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API with its store, GitHub client and routers."""
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(title="Portfolio API")
    app.state.settings = settings
    app.state.store = build_store(settings)
    app.state.github = GitHubService(settings)
    app.state.rate_limiter = RateLimiter()

    if settings.seed_defaults:
        app.state.store.seed_defaults()

    origins = _allowed_origins(settings)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")
    _install_error_handlers(app)

    settings.uploads_dir.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=str(settings.uploads_dir)), name="uploads")

    app.include_router(health_router.router)
    app.include_router(admin_router.router)
    app.include_router(github_router.router)
    for router in content_router.routers:
        app.include_router(router)
    app.include_router(projects_router.router)
    app.include_router(contact_router.router)

    log.info("app_created", env=settings.app_env, storage=app.state.store.backend)
    return app

from __future__ import annotations

from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from portfolio.core.rate_limiter import rate_limit_ip
from portfolio.core.security import require_admin
from portfolio.routers.deps import get_settings_dep
from portfolio.services.auth_service import AuthService, InvalidCredentialsError
from portfolio.services.content_service import parse_body
from portfolio.domain.schemas import AdminLogin

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post("/auth")
def admin_auth(request: Request, payload: dict | None = Body(None)):
    rate_limit_ip(request, "admin:auth", limit=10, window_seconds=60)
    body = parse_body(AdminLogin, payload, "login")
    service = AuthService(get_settings_dep(request))
    try:
        token = service.login(body.password)
    except InvalidCredentialsError:
        return JSONResponse({"error": "Invalid password"}, status_code=401)
    return {"success": True, "token": token}


@router.get("/verify", dependencies=[Depends(require_admin)])
def admin_verify():
    return {"success": True}

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from auth.middleware import authenticate, current_user, require_role
from auth.tokens import TokenClaims
from container import Services, get_services
from errors import ValidationError
from persistence.records import Role

router = APIRouter(prefix="/api/auth", tags=["auth"])
logger = logging.getLogger(__name__)


def _log_request(services: Services, route: str, body: dict[str, Any]) -> None:
    # SAFE debug: show only keys (not secrets)
    if services.settings.debug_log_requests:
        logger.info("%s REQUEST keys: %s", route, sorted(body.keys()))


@router.post("/register")
async def register(
    request: Request,
    body: dict[str, Any],
    services: Services = Depends(get_services),
) -> JSONResponse:
    _log_request(services, "REGISTER", body)
    role = body.get("role") or Role.customer.value
    if role == Role.admin.value:
        # Only an existing admin may create another admin.
        require_role(authenticate(request.headers.get("Authorization"), services.auth), Role.admin)
    result = await services.auth.register(
        body.get("name"),
        body.get("email"),
        body.get("password"),
        role,
    )
    return JSONResponse(result, status_code=201)


@router.post("/login")
async def login(body: dict[str, Any], services: Services = Depends(get_services)) -> JSONResponse:
    _log_request(services, "LOGIN", body)
    email = body.get("email")
    password = body.get("password")
    if not email or not password:
        raise ValidationError("email and password are required")
    return JSONResponse(await services.auth.login(email, password))


@router.get("/verify")
async def verify(claims: TokenClaims = Depends(current_user)) -> JSONResponse:
    return JSONResponse({"user": claims.model_dump(mode="json")})

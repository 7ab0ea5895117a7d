"""
Authentication middleware.

Plain functions do the work (`authenticate`, `require_role`); the FastAPI
dependencies below wire them to the request:

    @router.post("/", dependencies=[Depends(require_admin)])
"""
from __future__ import annotations

from fastapi import Depends, Request

from container import Services, get_services
from errors import Forbidden, InvalidToken, Unauthenticated
from persistence.records import Role

from .service import AuthService
from .tokens import TokenClaims


def extract_bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    token = token.strip()
    return token or None


def authenticate(authorization: str | None, auth: AuthService) -> TokenClaims:
    """
    Resolve an `Authorization` header value to verified claims.

    Raises:
        Unauthenticated: no bearer token, or the token does not verify
    """
    token = extract_bearer_token(authorization)
    if token is None:
        raise Unauthenticated("No token provided")
    try:
        return auth.verify_token(token)
    except InvalidToken as e:
        raise Unauthenticated("Invalid token") from e


def require_role(claims: TokenClaims, role: Role = Role.admin) -> TokenClaims:
    if claims.role != role:
        raise Forbidden(f"{role.value.capitalize()} access required")
    return claims


async def current_user(request: Request, services: Services = Depends(get_services)) -> TokenClaims:
    """FastAPI dependency: authenticate and attach claims to `request.state.user`."""
    claims = authenticate(request.headers.get("Authorization"), services.auth)
    request.state.user = claims
    return claims


async def require_admin(claims: TokenClaims = Depends(current_user)) -> TokenClaims:
    return require_role(claims, Role.admin)

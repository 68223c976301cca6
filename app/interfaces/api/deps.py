"""FastAPI dependencies — bearer token authentication and the admin gate."""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.services.access_control import AuthorizationPolicy, authorize
from app.application.services.token_service import TokenService
from app.core.exceptions import UnauthorizedException
from app.domain.models.user import UserRole
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import TokenClaims
from app.interfaces.deps import get_token_service, get_user_repository

# Missing credentials are reported by the guard itself, not by HTTPBearer.
security = HTTPBearer(auto_error=False)


def get_optional_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    tokens: TokenService = Depends(get_token_service),
) -> Optional[TokenClaims]:
    """Claims of a valid token, None without a token; an invalid token is still rejected."""
    if credentials is None or not credentials.credentials:
        return None
    return tokens.verify(credentials.credentials)


def get_current_claims(
    claims: Optional[TokenClaims] = Depends(get_optional_claims),
) -> TokenClaims:
    """Extract and validate the caller's identity from the bearer token."""
    if claims is None:
        raise UnauthorizedException("Acesso negado")
    return claims


def require_admin(
    request: Request,
    claims: TokenClaims = Depends(get_current_claims),
    users: UserRepository = Depends(get_user_repository),
) -> TokenClaims:
    """Require admin role."""
    policy = AuthorizationPolicy(request.app.state.settings.ADMIN_AUTHZ_POLICY)
    return authorize(claims, UserRole.ADMIN, users, policy)

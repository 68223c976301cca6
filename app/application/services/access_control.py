"""Role checks for privileged routes."""

import enum

import structlog
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import ForbiddenException, InternalError
from app.domain.models.user import UserRole
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import TokenClaims

logger = structlog.get_logger(__name__)


class AuthorizationPolicy(str, enum.Enum):
    # Accept a matching role claim from a verified token without a lookup.
    TRUST_CLAIM = "trust_claim"
    # Always re-read the current role from the user store.
    VERIFY = "verify"


def authorize(
    claims: TokenClaims,
    required_role: UserRole,
    users: UserRepository,
    policy: AuthorizationPolicy = AuthorizationPolicy.VERIFY,
) -> TokenClaims:
    """
    Return the claims, carrying the role that granted access, or raise ForbiddenException.

    A token can outlive a role change. Under VERIFY the store decides every time;
    under TRUST_CLAIM only tokens that do not already claim the role are re-checked.
    """
    if policy is AuthorizationPolicy.TRUST_CLAIM and claims.tipo_usuario == required_role.value:
        return claims

    try:
        current_role = users.get_role_by_email(claims.email)
    except SQLAlchemyError as exc:
        logger.exception("Role lookup failed", user_id=claims.id)
        raise InternalError("Erro ao verificar permissões") from exc

    if current_role != required_role.value:
        logger.warning(
            "Access denied",
            user_id=claims.id,
            claimed_role=claims.tipo_usuario,
            current_role=current_role,
            required_role=required_role.value,
        )
        raise ForbiddenException()

    return claims.model_copy(update={"tipo_usuario": current_role})

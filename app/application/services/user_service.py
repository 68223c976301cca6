"""User directory — registration, login, profile update and admin listing/removal."""

from typing import List, Optional

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.application.services.token_service import TokenService
from app.core.exceptions import (
    BadRequestException,
    ConflictException,
    EntityNotFoundException,
    InternalError,
    UnauthorizedException,
)
from app.domain.models.user import User, UserRole
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import (
    MessageResponse,
    TokenClaims,
    TokenResponse,
    UserCreate,
    UserProfile,
    UserSummary,
    UserUpdate,
)
from app.infrastructure.security import PasswordHasher

logger = structlog.get_logger(__name__)

VALID_ROLES = {role.value for role in UserRole}
INVALID_CREDENTIALS = "Credenciais inválidas"


def register_user(repo: UserRepository, hasher: PasswordHasher, body: UserCreate) -> User:
    if body.tipo_usuario not in VALID_ROLES:
        raise BadRequestException("Tipo de usuário inválido")

    data = {
        "nome": body.nome,
        "cpf": body.cpf,
        "telefone": body.telefone,
        "email": body.email,
        "senha_hash": hasher.hash(body.senha),
        "tipo_usuario": body.tipo_usuario,
    }
    try:
        user = repo.create(data)
    except IntegrityError as exc:
        # Also covers a concurrent registration that won the race for the same email/cpf.
        logger.warning("Duplicate registration", email=body.email)
        raise ConflictException("Email ou CPF já cadastrado") from exc
    except SQLAlchemyError as exc:
        logger.exception("Registration failed", email=body.email)
        raise InternalError() from exc

    logger.info("User registered", user_id=user.id, role=user.tipo_usuario)
    return user


def login(
    repo: UserRepository,
    hasher: PasswordHasher,
    tokens: TokenService,
    email: str,
    senha: str,
) -> TokenResponse:
    """Unknown email and wrong password fail identically."""
    user = repo.get_by_email(email)
    if user is None:
        hasher.dummy_verify()
        logger.info("Login failed")
        raise UnauthorizedException(INVALID_CREDENTIALS)
    if not hasher.verify(senha, user.senha_hash):
        logger.info("Login failed")
        raise UnauthorizedException(INVALID_CREDENTIALS)

    token = tokens.issue(TokenClaims(id=user.id, email=user.email, tipo_usuario=user.tipo_usuario))
    logger.info("User logged in", user_id=user.id)
    return TokenResponse(
        token=token,
        user=UserProfile(
            id=user.id,
            nome=user.nome,
            email=user.email,
            cpf=user.cpf,
            telefone=user.telefone,
            tipo=user.tipo_usuario,
        ),
    )


def update_profile(
    repo: UserRepository,
    hasher: PasswordHasher,
    body: UserUpdate,
    claims: Optional[TokenClaims] = None,
) -> MessageResponse:
    """Partial update; the email in the body takes precedence over the token's."""
    email = body.email or (claims.email if claims else None)
    if not email:
        raise BadRequestException("Email é obrigatório")

    user = repo.get_by_email(email)
    if user is None:
        raise EntityNotFoundException("Email não encontrado")

    fields = {}
    if body.nome is not None:
        fields["nome"] = body.nome
    if body.telefone is not None:
        fields["telefone"] = body.telefone
    # An empty password counts as not supplied.
    if body.senha:
        fields["senha_hash"] = hasher.hash(body.senha)

    if fields:
        repo.update(user, fields)
        logger.info("User updated", user_id=user.id, fields=sorted(fields))

    return MessageResponse(message="Dados atualizados com sucesso!")


def list_users(repo: UserRepository) -> List[UserSummary]:
    return [UserSummary.model_validate(user) for user in repo.list_ordered()]


def delete_user(repo: UserRepository, email: str) -> MessageResponse:
    user = repo.get_by_email(email)
    if user is None:
        raise EntityNotFoundException("Usuário não encontrado")

    repo.delete_instance(user)
    logger.info("User deleted", user_id=user.id)
    return MessageResponse(message="Usuário excluído com sucesso!")


def ensure_default_admin(
    repo: UserRepository,
    hasher: PasswordHasher,
    email: Optional[str],
    password: Optional[str],
    cpf: str = "00000000000",
) -> Optional[User]:
    if not email or not password:
        return None
    existing = repo.get_by_email(email)
    if existing:
        return existing

    logger.info("Creating default administrator account", email=email)
    try:
        return repo.create({
            "nome": "Administrador",
            "cpf": cpf,
            "telefone": None,
            "email": email,
            "senha_hash": hasher.hash(password),
            "tipo_usuario": UserRole.ADMIN.value,
        })
    except IntegrityError:
        logger.warning("Default administrator not created: cpf already registered", cpf=cpf)
        return None

"""Auth API routes — register, login, update."""

from typing import Optional

from fastapi import APIRouter, Depends, status

from app.application.services.token_service import TokenService
from app.application.services.user_service import login, register_user, update_profile
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import (
    LoginRequest,
    MessageResponse,
    TokenClaims,
    TokenResponse,
    UserCreate,
    UserUpdate,
)
from app.infrastructure.security import PasswordHasher
from app.interfaces.api.deps import get_optional_claims
from app.interfaces.deps import get_password_hasher, get_token_service, get_user_repository

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: UserCreate,
    repo: UserRepository = Depends(get_user_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    register_user(repo, hasher, body)
    return MessageResponse(message="Usuário criado com sucesso!")


@router.post("/login", response_model=TokenResponse)
def login_route(
    body: LoginRequest,
    repo: UserRepository = Depends(get_user_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
):
    return login(repo, hasher, tokens, body.email, body.senha)


@router.put("/update", response_model=MessageResponse)
def update(
    body: UserUpdate,
    repo: UserRepository = Depends(get_user_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
    claims: Optional[TokenClaims] = Depends(get_optional_claims),
):
    return update_profile(repo, hasher, body, claims)

"""Pydantic schemas for User and Auth."""

from pydantic import BaseModel
from typing import Optional


class UserCreate(BaseModel):
    nome: str
    email: str
    senha: str
    cpf: str
    telefone: Optional[str] = None
    tipo_usuario: str


class LoginRequest(BaseModel):
    email: str
    senha: str


class UserUpdate(BaseModel):
    email: Optional[str] = None
    nome: Optional[str] = None
    telefone: Optional[str] = None
    senha: Optional[str] = None


class UserProfile(BaseModel):
    """Public view returned on login; never carries the password hash."""
    id: int
    nome: str
    email: str
    cpf: str
    telefone: Optional[str] = None
    tipo: str


class UserSummary(BaseModel):
    id: int
    nome: str
    email: str
    tipo_usuario: str

    model_config = {"from_attributes": True}


class TokenResponse(BaseModel):
    token: str
    user: UserProfile


class TokenClaims(BaseModel):
    """Identity carried by a verified access token."""
    id: int
    email: str
    tipo_usuario: str


class MessageResponse(BaseModel):
    message: str

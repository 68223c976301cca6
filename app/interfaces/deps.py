"""
API Dependencies.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.application.services.token_service import TokenService
from app.domain.models.gate_action import GateAction
from app.domain.models.user import User
from app.domain.repositories.gate_action_repository import GateActionRepository
from app.domain.repositories.system_log_repository import SystemLogRepository
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.database import get_db
from app.infrastructure.repositories.gate_action_repository import SQLAlchemyGateActionRepository
from app.infrastructure.repositories.system_log_repository import SQLAlchemySystemLogRepository
from app.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
from app.infrastructure.security import PasswordHasher


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get user repository instance."""
    return SQLAlchemyUserRepository(db, User)


def get_gate_action_repository(db: Session = Depends(get_db)) -> GateActionRepository:
    """Get gate action repository instance."""
    return SQLAlchemyGateActionRepository(db, GateAction)


def get_system_log_repository(db: Session = Depends(get_db)) -> SystemLogRepository:
    """Get system log repository instance."""
    return SQLAlchemySystemLogRepository(db)


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service

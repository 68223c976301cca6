"""Admin API routes — user directory and system logs, admin only."""

from typing import List

from fastapi import APIRouter, Depends

from app.application.services.gate_service import list_system_logs
from app.application.services.user_service import delete_user, list_users
from app.domain.repositories.system_log_repository import SystemLogRepository
from app.domain.repositories.user_repository import UserRepository
from app.domain.schemas.auth import MessageResponse, UserSummary
from app.domain.schemas.gate import SystemLogRead
from app.interfaces.api.deps import require_admin
from app.interfaces.deps import get_system_log_repository, get_user_repository

router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(require_admin)])


@router.get("/users", response_model=List[UserSummary])
def users(repo: UserRepository = Depends(get_user_repository)):
    return list_users(repo)


@router.delete("/users/{email}", response_model=MessageResponse)
def remove_user(email: str, repo: UserRepository = Depends(get_user_repository)):
    return delete_user(repo, email)


@router.get("/logs", response_model=List[SystemLogRead])
def logs(repo: SystemLogRepository = Depends(get_system_log_repository)):
    return list_system_logs(repo)

"""Gate API routes — commands, history and system logs."""

from typing import List

from fastapi import APIRouter, Depends

from app.application.services.gate_service import (
    delete_action,
    list_history,
    list_system_logs,
    submit_action,
)
from app.domain.repositories.gate_action_repository import GateActionRepository
from app.domain.repositories.system_log_repository import SystemLogRepository
from app.domain.schemas.auth import MessageResponse, TokenClaims
from app.domain.schemas.gate import GateActionRequest, GateActionResponse, GateHistoryItem, SystemLogRead
from app.interfaces.api.deps import get_current_claims
from app.interfaces.deps import get_gate_action_repository, get_system_log_repository

router = APIRouter(prefix="/gate", tags=["Gate"])


@router.post("/action", response_model=GateActionResponse)
def control_gate(
    body: GateActionRequest,
    repo: GateActionRepository = Depends(get_gate_action_repository),
    claims: TokenClaims = Depends(get_current_claims),
):
    return submit_action(repo, claims, body.acao, body.descricao)


@router.get("/history", response_model=List[GateHistoryItem])
def history(
    repo: GateActionRepository = Depends(get_gate_action_repository),
    claims: TokenClaims = Depends(get_current_claims),
):
    """Latest 50 gate actions, newest first."""
    return list_history(repo)


@router.get("/logs", response_model=List[SystemLogRead])
def logs(
    repo: SystemLogRepository = Depends(get_system_log_repository),
    claims: TokenClaims = Depends(get_current_claims),
):
    """Latest 100 system log entries, newest first."""
    return list_system_logs(repo)


# Any authenticated user may delete history entries, as deployed.
@router.delete("/history/{action_id}", response_model=MessageResponse)
def delete_history_entry(
    action_id: int,
    repo: GateActionRepository = Depends(get_gate_action_repository),
    claims: TokenClaims = Depends(get_current_claims),
):
    return delete_action(repo, action_id)

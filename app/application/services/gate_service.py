"""Gate command audit log — records commands and serves history and system logs."""

from typing import List

import structlog

from app.core.exceptions import BadRequestException, EntityNotFoundException
from app.domain.models.gate_action import GateCommand
from app.domain.repositories.gate_action_repository import GateActionRepository
from app.domain.repositories.system_log_repository import SystemLogRepository
from app.domain.schemas.auth import MessageResponse, TokenClaims
from app.domain.schemas.gate import GateActionResponse, GateHistoryItem, SystemLogRead

logger = structlog.get_logger(__name__)

VALID_COMMANDS = {command.value for command in GateCommand}
HISTORY_LIMIT = 50
SYSTEM_LOG_LIMIT = 100


def submit_action(
    repo: GateActionRepository,
    claims: TokenClaims,
    acao: str,
    descricao: str | None = None,
) -> GateActionResponse:
    if acao not in VALID_COMMANDS:
        raise BadRequestException("Ação inválida")

    action = repo.create({
        "acao": acao,
        "descricao": descricao or f"Portão {acao}",
        "id_usuario": claims.id,
    })
    logger.info("Gate action recorded", action_id=action.id, acao=acao, user_id=claims.id)
    return GateActionResponse(message=f"Portão {acao} com sucesso!", id=action.id)


def list_history(repo: GateActionRepository, limit: int = HISTORY_LIMIT) -> List[GateHistoryItem]:
    return [GateHistoryItem(**row) for row in repo.list_history(limit)]


def list_system_logs(repo: SystemLogRepository, limit: int = SYSTEM_LOG_LIMIT) -> List[SystemLogRead]:
    return [SystemLogRead.model_validate(entry) for entry in repo.list_latest(limit)]


def delete_action(repo: GateActionRepository, action_id: int) -> MessageResponse:
    if repo.get_by_id(action_id) is None:
        raise EntityNotFoundException("Registro não encontrado")

    # A concurrent delete between the check and here leaves nothing to remove.
    if repo.delete(action_id) is None:
        raise EntityNotFoundException("Registro não encontrado")

    logger.info("Gate action deleted", action_id=action_id)
    return MessageResponse(message="Registro excluído com sucesso!")

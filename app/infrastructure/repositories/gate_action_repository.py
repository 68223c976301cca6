"""
SQLAlchemy Implementation of Gate Action Repository.
"""

from typing import Any, Dict, List

from app.domain.models.gate_action import GateAction
from app.domain.models.user import User
from app.domain.repositories.gate_action_repository import GateActionRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyGateActionRepository(SQLAlchemyRepository[GateAction], GateActionRepository):
    """Gate action repository implementation using SQLAlchemy."""

    def list_history(self, limit: int = 50) -> List[Dict[str, Any]]:
        rows = (
            self.db.query(GateAction, User.nome, User.tipo_usuario)
            .join(User, GateAction.id_usuario == User.id)
            .order_by(GateAction.dt_acao.desc(), GateAction.id.desc())
            .limit(limit)
            .all()
        )
        return [
            {
                "id": action.id,
                "acao": action.acao,
                "descricao": action.descricao,
                "dt_acao": action.dt_acao,
                "id_usuario": action.id_usuario,
                "nome": nome,
                "tipo_usuario": tipo_usuario,
            }
            for action, nome, tipo_usuario in rows
        ]

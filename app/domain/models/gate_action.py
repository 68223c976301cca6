"""Gate action — one audited open/close/stop command ('registros' table)."""

import enum

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey
from sqlalchemy.sql import func

from app.infrastructure.database import Base


class GateCommand(str, enum.Enum):
    ABRIR = "abrir"
    FECHAR = "fechar"
    PARAR = "parar"


class GateAction(Base):
    __tablename__ = "registros"

    id = Column(Integer, primary_key=True, autoincrement=True)
    acao = Column(String(20), nullable=False)  # abrir, fechar, parar
    descricao = Column(Text, nullable=False)
    dt_acao = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)
    id_usuario = Column(Integer, ForeignKey("usuarios.id", ondelete="CASCADE"), nullable=False, index=True)

    def __repr__(self):
        return f"<GateAction {self.id} - {self.acao}>"

"""Pydantic schemas for gate commands, history and system logs."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class GateActionRequest(BaseModel):
    acao: str
    descricao: Optional[str] = None


class GateActionResponse(BaseModel):
    message: str
    id: int


class GateHistoryItem(BaseModel):
    id: int
    acao: str
    descricao: str
    dt_acao: Optional[datetime] = None
    id_usuario: int
    nome: str
    tipo_usuario: str


class SystemLogRead(BaseModel):
    id: int
    operacao: str
    descricao: Optional[str] = None
    dt_trigger: Optional[datetime] = None

    model_config = {"from_attributes": True}

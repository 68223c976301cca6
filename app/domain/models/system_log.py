"""System log — rows written by database triggers ('log' table). Read-only here."""

from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func

from app.infrastructure.database import Base


class SystemLog(Base):
    __tablename__ = "log"

    id = Column(Integer, primary_key=True, autoincrement=True)
    operacao = Column(String(50), nullable=False)  # INSERT, UPDATE, DELETE
    descricao = Column(Text, nullable=True)
    dt_trigger = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)

    def __repr__(self):
        return f"<SystemLog {self.operacao} - {self.dt_trigger}>"

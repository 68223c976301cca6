"""
SQLAlchemy Implementation of System Log Repository.
"""

from typing import List

from sqlalchemy.orm import Session

from app.domain.models.system_log import SystemLog
from app.domain.repositories.system_log_repository import SystemLogRepository


class SQLAlchemySystemLogRepository(SystemLogRepository):
    """Read-only view over the trigger-maintained 'log' table."""

    def __init__(self, db: Session):
        self.db = db

    def list_latest(self, limit: int = 100) -> List[SystemLog]:
        return (
            self.db.query(SystemLog)
            .order_by(SystemLog.dt_trigger.desc(), SystemLog.id.desc())
            .limit(limit)
            .all()
        )

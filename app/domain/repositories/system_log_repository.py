"""
System Log Repository Interface.
"""

from typing import List, Protocol

from app.domain.models.system_log import SystemLog


class SystemLogRepository(Protocol):
    """Read-only access to trigger-written log rows."""

    def list_latest(self, limit: int = 100) -> List[SystemLog]:
        """Newest entries first."""
        ...

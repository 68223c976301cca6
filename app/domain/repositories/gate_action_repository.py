"""
Gate Action Repository Interface.
"""

from typing import Any, Dict, List

from app.domain.repositories.base import BaseRepository
from app.domain.models.gate_action import GateAction


class GateActionRepository(BaseRepository[GateAction]):
    """Interface for the gate command audit trail."""

    def list_history(self, limit: int = 50) -> List[Dict[str, Any]]:
        """Newest actions first, joined with the acting user's name and role."""
        ...

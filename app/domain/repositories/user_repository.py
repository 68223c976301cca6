"""
User Repository Interface.
Defines data access operations for the user directory.
"""

from typing import List, Optional

from app.domain.repositories.base import BaseRepository
from app.domain.models.user import User


class UserRepository(BaseRepository[User]):
    """Interface for User-specific operations."""

    def get_by_email(self, email: str) -> Optional[User]:
        """Exact, case-sensitive lookup by email."""
        ...

    def get_role_by_email(self, email: str) -> Optional[str]:
        """Current role of the user with this email, or None."""
        ...

    def list_ordered(self) -> List[User]:
        """All users ordered by id."""
        ...

    def delete_instance(self, user: User) -> None:
        """Remove a loaded user."""
        ...

"""
Base Repository Interface.
Every store the services touch (users, gate actions) is reached through this contract.
"""

from typing import TypeVar, Optional, Any, Protocol

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for generic CRUD operations. Writes commit immediately."""

    def get_by_id(self, id: int) -> Optional[T]:
        """Entity with this primary key, or None."""
        ...

    def create(self, obj_in: Any) -> T:
        """Insert from a dict or pydantic model; constraint violations propagate."""
        ...

    def update(self, db_obj: T, obj_in: Any) -> T:
        """Apply only the supplied fields."""
        ...

    def delete(self, id: int) -> Optional[T]:
        """Remove by id; None when nothing matched."""
        ...

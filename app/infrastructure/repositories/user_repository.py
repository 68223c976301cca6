"""
SQLAlchemy Implementation of User Repository.
"""

from typing import List, Optional

from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyUserRepository(SQLAlchemyRepository[User], UserRepository):
    """User repository implementation using SQLAlchemy."""

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def get_role_by_email(self, email: str) -> Optional[str]:
        row = self.db.query(User.tipo_usuario).filter(User.email == email).first()
        return row[0] if row else None

    def list_ordered(self) -> List[User]:
        return self.db.query(User).order_by(User.id).all()

    def delete_instance(self, user: User) -> None:
        self.db.delete(user)
        self._commit()

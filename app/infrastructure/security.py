"""Credential store adapter — the only place passwords are hashed or checked."""

from passlib.context import CryptContext


class PasswordHasher:
    """bcrypt via passlib; every hash gets a fresh random salt."""

    def __init__(self, rounds: int = 10):
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, hashed_password: str) -> bool:
        try:
            return self._context.verify(password, hashed_password)
        except (ValueError, TypeError):
            # Unknown or malformed digest
            return False

    def dummy_verify(self) -> None:
        """Spend the same time as a real check when no account matched."""
        self._context.dummy_verify()

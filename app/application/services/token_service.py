"""Token service — issues and verifies signed, time-limited access tokens."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog
from jose import JWTError, jwt
from pydantic import ValidationError

from app.core.exceptions import InvalidTokenException
from app.domain.schemas.auth import TokenClaims

logger = structlog.get_logger(__name__)


class TokenService:
    """Stateless JWTs: nothing is stored server-side, so a token cannot be revoked before it expires."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expiration_minutes: int = 60):
        if not secret_key:
            raise RuntimeError("JWT_SECRET não configurado.")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expiration = timedelta(minutes=expiration_minutes)

    def issue(self, claims: TokenClaims, now: Optional[datetime] = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = claims.model_dump()
        payload.update({"iat": issued_at, "exp": issued_at + self._expiration})
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require_exp": True, "require_iat": True},
            )
        except JWTError as exc:
            logger.info("Token rejected", reason=str(exc))
            raise InvalidTokenException() from exc

        try:
            return TokenClaims.model_validate(payload)
        except ValidationError as exc:
            logger.info("Token rejected", reason="missing identity claims")
            raise InvalidTokenException() from exc

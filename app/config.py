"""SafeGate Backend — Configuration via pydantic-settings."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    # Database (required)
    DB_HOST: str = Field(min_length=1)
    DB_USER: str = Field(min_length=1)
    DB_PASSWORD: str = Field(min_length=1)
    DB_NAME: str = Field(min_length=1)
    DB_PORT: int
    DB_DRIVER: str = "postgresql+psycopg2"
    DB_POOL_SIZE: int = 10
    DB_CONNECT_TIMEOUT: int = 10
    CREATE_TABLES: bool = True

    # Security
    JWT_SECRET: str = Field(min_length=1)
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRATION_MINUTES: int = 60
    BCRYPT_ROUNDS: int = 10
    ADMIN_AUTHZ_POLICY: Literal["verify", "trust_claim"] = "verify"

    # Default administrator, created on startup when both are set
    ADMIN_EMAIL: Optional[str] = None
    ADMIN_PASSWORD: Optional[str] = None
    ADMIN_CPF: str = "00000000000"

    # HTTP
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def database_url(self) -> URL:
        return URL.create(
            drivername=self.DB_DRIVER,
            username=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()

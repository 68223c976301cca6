"""
Global exception handling for the application.
Every failure is mapped to one error kind and rendered as
{"error": {"code", "message", "details", "path"}}.
"""

from typing import Any, Dict, Optional

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = structlog.get_logger(__name__)


class AppError(Exception):
    """Base class for all application exceptions."""
    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class UnauthorizedException(AppError):
    """Missing or rejected credentials."""
    def __init__(self, message: str = "Acesso negado", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED, details)


class InvalidTokenException(AppError):
    """Bearer token present but malformed, badly signed or expired."""
    def __init__(self, message: str = "Token inválido", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_400_BAD_REQUEST, details)


class ForbiddenException(AppError):
    """Authorization failure error."""
    def __init__(self, message: str = "Acesso restrito a administradores", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_403_FORBIDDEN, details)


class BadRequestException(AppError):
    """Malformed input: invalid enum value or missing required field."""
    def __init__(self, message: str = "Requisição inválida", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_400_BAD_REQUEST, details)


class EntityNotFoundException(AppError):
    """Resource not found error."""
    def __init__(self, message: str = "Registro não encontrado", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_404_NOT_FOUND, details)


class ConflictException(AppError):
    """Uniqueness violation. Rendered as 400 to stay compatible with existing clients."""
    def __init__(self, message: str = "Registro duplicado", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_400_BAD_REQUEST, details)


class InternalError(AppError):
    """Unexpected persistence or infrastructure failure."""
    def __init__(self, message: str = "Erro no servidor", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR, details)


def _error_response(request: Request, status_code: int, code: str, message: str,
                    details: Optional[Dict[str, Any]] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details or {},
                "path": request.url.path,
            }
        },
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Render a classified application error."""
    log = logger.error if exc.status_code >= 500 else logger.warning
    log(
        "Request failed",
        error_code=exc.__class__.__name__,
        error_message=exc.message,
        status_code=exc.status_code,
        method=request.method,
        path=request.url.path,
    )
    return _error_response(request, exc.status_code, exc.__class__.__name__, exc.message, exc.details)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Body or path validation errors become BadRequest."""
    fields = [".".join(str(part) for part in err.get("loc", ())) for err in exc.errors()]
    logger.warning("Request validation failed", method=request.method, path=request.url.path, fields=fields)
    return _error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        BadRequestException.__name__,
        "Dados da requisição inválidos",
        {"fields": fields},
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all uncaught exceptions globally."""

    if isinstance(exc, AppError):
        return await app_error_handler(request, exc)

    if isinstance(exc, SQLAlchemyError):
        logger.exception("Database error", method=request.method, path=request.url.path)
    else:
        logger.exception("Unexpected error occurred", method=request.method, path=request.url.path)

    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        InternalError.__name__,
        "Erro no servidor",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, global_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

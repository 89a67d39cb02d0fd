from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError


logger = logging.getLogger(__name__)


class PortfolioError(RuntimeError):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class NotFoundError(PortfolioError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class AuthError(PortfolioError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Not authenticated"


class UploadError(PortfolioError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid file type"


class StoreError(PortfolioError):
    message = "Failed to process request"


def _loc_to_field(loc: tuple[Any, ...] | list[Any]) -> str:
    # Drop the "body"/"query"/"path" root and the union tag pydantic prepends for section documents.
    parts = [str(p) for p in loc if p not in ("body", "query", "path", "header")]
    if parts and parts[0] in ("hero", "about", "contact"):
        parts = parts[1:]
    if parts and parts[0] == "content":
        parts = parts[1:]
    return ".".join(parts) or "body"


def format_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    return [{"field": _loc_to_field(err.get("loc", ())), "message": str(err.get("msg", "Invalid value"))} for err in errors]


def _validation_response(errors: list[dict[str, Any]]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Validation failed", "errors": format_validation_errors(errors)},
    )


async def _request_validation_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    return _validation_response(list(exc.errors()))


async def _portfolio_error_handler(request: Request, exc: PortfolioError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    if exc.status_code >= 500:
        logger.error("request failed method=%s path=%s error=%s", request.method, request.url.path, exc)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message}, headers=headers)


async def _sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception("store failure method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": StoreError.message},
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": PortfolioError.message},
    )


def register_error_handlers(application: FastAPI) -> None:
    application.add_exception_handler(RequestValidationError, _request_validation_handler)
    application.add_exception_handler(PortfolioError, _portfolio_error_handler)
    application.add_exception_handler(SQLAlchemyError, _sqlalchemy_error_handler)
    application.add_exception_handler(Exception, _unhandled_error_handler)

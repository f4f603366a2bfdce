# app/core/errors.py
"""
Error model for the callable endpoints.

Handlers raise ``CallableError`` with one of three kinds. The exception
handlers below turn it into the callable protocol error body:

    {"error": {"status": "INVALID_ARGUMENT", "message": "...", "details": ...}}
"""
from enum import Enum
from typing import Any, Optional
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid-argument"
    FAILED_PRECONDITION = "failed-precondition"
    INTERNAL = "internal"

    @property
    def status(self) -> str:
        """Canonical status name used on the wire, e.g. INVALID_ARGUMENT"""
        return self.name

    @property
    def http_status(self) -> int:
        return 500 if self is ErrorKind.INTERNAL else 400


class CallableError(Exception):
    """Error surfaced to the caller with a kind, a message and optional details"""

    def __init__(self, kind: ErrorKind, message: str, details: Any = None):
        super().__init__(message)
        self.kind = ErrorKind(kind)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        body = {"status": self.kind.status, "message": self.message}
        if self.details is not None:
            body["details"] = self.details
        return {"error": body}


def invalid_argument(message: str) -> CallableError:
    return CallableError(ErrorKind.INVALID_ARGUMENT, message)


def error_response(error: CallableError) -> JSONResponse:
    return JSONResponse(status_code=error.kind.http_status, content=error.to_dict())


async def callable_error_handler(request: Request, exc: CallableError) -> JSONResponse:
    if exc.kind is ErrorKind.INTERNAL:
        logger.error(f"{request.url.path} failed: {exc.message} ({exc.details})")
    else:
        logger.info(f"{request.url.path} rejected: {exc.kind.value}: {exc.message}")
    return error_response(exc)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(f"{request.url.path} received a malformed request: {exc.errors()}")
    return error_response(invalid_argument("Bad Request"))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error in {request.url.path}: {exc}", exc_info=exc)
    return error_response(CallableError(ErrorKind.INTERNAL, "INTERNAL"))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CallableError, callable_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

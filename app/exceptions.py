# app/exceptions.py
"""
Application exceptions and their HTTP mapping.

Each exception carries a client-safe ``message`` and a ``context`` dict that is
only ever logged. Handlers registered by ``register_exception_handlers`` turn
them into the failure envelope:

    InvalidRequestError    -> 400
    EmployeeNotFoundError  -> 404
    PersistenceError       -> 500
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.schemas.envelope import Envelope

logger = logging.getLogger(__name__)


class EmployeeServiceError(Exception):
    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidRequestError(EmployeeServiceError):
    status_code = 400


class EmployeeNotFoundError(EmployeeServiceError):
    status_code = 404

    def __init__(self, employee_id: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["employee_id"] = employee_id
        super().__init__(message=f"Employee not found: {employee_id}", context=ctx)
        self.employee_id = employee_id


class PersistenceError(EmployeeServiceError):
    status_code = 500


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=Envelope.failure(message).dump())


def register_exception_handlers(app: FastAPI) -> None:

    @app.exception_handler(EmployeeServiceError)
    async def handle_service_error(request: Request, exc: EmployeeServiceError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s | context: %s",
                         request.method, request.url.path, exc.message, exc.context)
        else:
            logger.warning("%s %s rejected: %s | context: %s",
                           request.method, request.url.path, exc.message, exc.context)
        return error_response(exc.status_code, exc.message)


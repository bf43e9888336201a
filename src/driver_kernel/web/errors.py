# driver_kernel/web/errors.py
from __future__ import annotations
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from driver_kernel.errors import DriverError, DriverErrorKind


def error_envelope(code: str, message: str, details=None):
    return {"error": {"code": code, "message": message, "details": details or {}}}


async def driver_error_handler(request: Request, exc: DriverError) -> JSONResponse:
    status = 404 if exc.kind is DriverErrorKind.NOT_ENABLED else 400
    details = {"code": exc.code}
    if exc.subject is not None:
        details["subject"] = exc.subject
    return JSONResponse(
        error_envelope(exc.kind.name, str(exc), details), status_code=status
    )


def add_error_handlers(app: FastAPI) -> None:
    """Map DriverError to the kernel error envelope."""
    app.add_exception_handler(DriverError, driver_error_handler)

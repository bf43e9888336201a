# src/driver_kernel/web/api.py
from __future__ import annotations
import logging

from fastapi import FastAPI

from driver_kernel.api.drivers_router import router as drivers_router
from driver_kernel.web.errors import add_error_handlers

"""
──────────────────────────────────────────────────────────────
driver_kernel.web.api
──────────────────────────────────────────────────────────────
Purpose:
    Expose the driver registry on a FastAPI app.

Responsibilities:
    • Map DriverError to the kernel error envelope
    • Mount the /drivers status router
──────────────────────────────────────────────────────────────
"""

log = logging.getLogger(__name__)


def mount_drivers(app: FastAPI) -> FastAPI:
    """Attach driver error handlers and the /drivers router to *app*."""
    add_error_handlers(app)
    app.include_router(drivers_router)
    log.info("✅ [kernel] Driver endpoints mounted")
    return app


def create_app(*, title: str = "App") -> FastAPI:
    """Minimal app factory with the driver endpoints mounted."""
    return mount_drivers(FastAPI(title=title))

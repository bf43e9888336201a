"""
──────────────────────────────────────────────────────────────
Driver Status Router
──────────────────────────────────────────────────────────────
Purpose:
    Read-only view of the application's driver registry.

Exports:
    router → FastAPI APIRouter instance
──────────────────────────────────────────────────────────────
"""

from fastapi import APIRouter, Depends

from driver_kernel.errors import DriverError, DriverErrorKind, describe
from driver_kernel.registry import DriverRegistry
from driver_kernel.web.deps import get_registry

router = APIRouter(prefix="/drivers", tags=["drivers"])


@router.get("")
async def list_drivers(registry: DriverRegistry = Depends(get_registry)):
    """Configuration and enabled drivers, with their build state."""
    config = registry.configuration
    if config is None:
        return {"configured": False, "attribute": None, "contract": None, "drivers": []}
    return {
        "configured": True,
        "attribute": describe(config.attribute) if config.attribute else None,
        "contract": describe(config.contract) if config.contract else None,
        "drivers": [
            {"name": describe(cls), "built": registry.is_built(cls)}
            for cls in registry.enabled_drivers()
        ],
    }


@router.get("/{name}")
async def driver_status(name: str, registry: DriverRegistry = Depends(get_registry)):
    """Build state of one enabled driver; 404 when it is not enabled."""
    # match against enabled drivers only; request input never reaches importlib
    for cls in registry.enabled_drivers():
        if describe(cls) == name:
            return {"name": name, "built": registry.is_built(cls)}
    raise DriverError(DriverErrorKind.NOT_ENABLED, name)

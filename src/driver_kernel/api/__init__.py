"""
Built-in kernel routers.
──────────────────────────────────────────────────────────────
Currently includes:
 - /drivers
 - /drivers/{name}
──────────────────────────────────────────────────────────────
"""
from .drivers_router import router as drivers_router

__all__ = ["drivers_router"]

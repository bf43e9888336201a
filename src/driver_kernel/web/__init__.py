"""FastAPI exposure of the driver registry (see web.api.mount_drivers)."""

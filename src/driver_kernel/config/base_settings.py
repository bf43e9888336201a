# src/driver_kernel/config/base_settings.py
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class DriverSettings(BaseSettings):
    """
    Settings for the application-wide driver registry.

    Read from DRIVERS_* environment variables or a .env file, e.g.:
        DRIVERS_CONTRACT=app.storage.StorageContract
        DRIVERS_ENABLED=["app.storage.FileStore"]
    """

    attribute: Optional[str] = None
    contract: Optional[str] = None
    enabled: List[str] = []

    model_config = SettingsConfigDict(
        env_prefix="DRIVERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_set(self) -> bool:
        return self.attribute is not None or self.contract is not None

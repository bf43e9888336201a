from .base_settings import DriverSettings

__all__ = ["DriverSettings"]

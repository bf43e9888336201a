# Driver families used across the test suite.
from abc import ABC, abstractmethod

from driver_kernel.contracts import DriverAttributeContract, DriverContract, attribute


# ──────────────────────────────────────────────
# Attributes
# ──────────────────────────────────────────────
@attribute
class StorageDriver(DriverAttributeContract):
    def __init__(self, name: str = ""):
        self.name = name


@attribute
class TransportDriver(DriverAttributeContract):
    pass


@attribute
class FastStorageDriver(StorageDriver):
    pass


@attribute
class PlainAttribute:
    pass


class NotAnAttribute(DriverAttributeContract):
    pass


# ──────────────────────────────────────────────
# Contracts
# ──────────────────────────────────────────────
class StorageDriverContract(DriverContract):
    @abstractmethod
    def read(self, key: str) -> bytes: ...


class MarkerContract(DriverContract, ABC):
    pass


class ConcreteContract(DriverContract):
    pass


class UnrelatedContract(ABC):
    @abstractmethod
    def run(self) -> None: ...


# ──────────────────────────────────────────────
# Drivers
# ──────────────────────────────────────────────
class Clock:
    def now(self) -> float:
        return 0.0


class FileStore(StorageDriverContract):
    def __init__(self, clock: Clock):
        self.clock = clock

    def read(self, key: str) -> bytes:
        return b""


class S3Store(StorageDriverContract):
    def read(self, key: str) -> bytes:
        return b"s3"


@StorageDriver("memory")
class MemoryStore:
    pass


@FastStorageDriver()
class CachedStore:
    pass


@TransportDriver()
class HttpTransport:
    pass


class Plain:
    pass


class MarkedStore(MarkerContract):
    pass


class BrokenStore(StorageDriverContract):
    fail = True
    attempts = 0

    def __init__(self):
        type(self).attempts += 1
        if type(self).fail:
            raise OSError("disk unavailable")

    def read(self, key: str) -> bytes:
        return b""

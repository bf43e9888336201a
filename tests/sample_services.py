# Classes exercising the DI container.
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Union

from driver_kernel.registry import DriverRegistry


class Settings:
    def __init__(self, root: str = "/var/data"):
        self.root = root


class Repository(ABC):
    @abstractmethod
    def find(self, key: str): ...


class PlainBase(ABC):
    def __init__(self, settings: Settings):
        self.settings = settings


class MemoryRepository(Repository):
    def find(self, key: str):
        return key


class Service:
    def __init__(self, settings: Settings, retries: int = 3):
        self.settings = settings
        self.retries = retries


class NeedsRepository:
    def __init__(self, repo: Repository):
        self.repo = repo


class MaybeRepository:
    def __init__(self, repo: Optional[Repository]):
        self.repo = repo


class Untyped:
    def __init__(self, value):
        self.value = value


class UntypedWithDefault:
    def __init__(self, value=7, *args, **kwargs):
        self.value = value


class UnionParam:
    def __init__(self, value: Union[int, str]):
        self.value = value


class NeedsInt:
    def __init__(self, count: int):
        self.count = count


class BadForwardRef:
    def __init__(self, thing: "DoesNotExist"):  # noqa: F821
        self.thing = thing


class Exploding:
    def __init__(self):
        raise ValueError("boom")


class ChickenService:
    def __init__(self, egg: EggService):
        self.egg = egg


class EggService:
    def __init__(self, chicken: ChickenService):
        self.chicken = chicken


class Consumer:
    def __init__(self, service: Service):
        self.service = service


class Autowired:
    repo: Optional[Repository] = None
    label: str = "x"
    _hidden: Optional[Repository] = None


class StorageFactory:
    def __init__(self, drivers: DriverRegistry):
        self.drivers = drivers

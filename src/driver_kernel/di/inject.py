from __future__ import annotations
import inspect
import types
from dataclasses import dataclass
from typing import Any, List, Tuple, Union, get_args, get_origin, get_type_hints

from .errors import ConstructionError, ConstructionErrorKind
from .registry import ProviderRegistry

"""
──────────────────────────────────────────────────────────────────────────────
Constructor Discovery & Autowiring
──────────────────────────────────────────────────────────────────────────────
Purpose:
    Describe what a class needs to be constructed, and inject registered
    dependencies into an instance based on its class annotations.

Mechanics:
    - discover_parameters(cls) reads __init__'s signature + type hints
    - *args / **kwargs are never required
    - Optional[T] / T | None are unwrapped and flagged
    - autowire(obj, providers) sets instance.attr = provider() for each
      public annotated attribute still missing or None

Used by:
    Container.instantiate()

Example:
    class FileStore(StorageContract):
        clock: Clock | None = None      # autowired after construction

        def __init__(self, settings: StoreSettings, root: str = "/tmp"):
            ...
"""

_EMPTY = inspect.Parameter.empty


@dataclass(frozen=True)
class ParameterSpec:
    name: str
    hint: Any = _EMPTY
    default: Any = _EMPTY
    optional: bool = False

    @property
    def has_hint(self) -> bool:
        return self.hint is not _EMPTY

    @property
    def has_default(self) -> bool:
        return self.default is not _EMPTY


def _unwrap_optional(typ: Any) -> Tuple[Any, bool]:
    origin = get_origin(typ)
    if origin is Union or origin is types.UnionType:
        args = get_args(typ)
        rest = [a for a in args if a is not type(None)]
        if len(rest) == 1 and len(rest) < len(args):
            return rest[0], True
    return typ, False


def discover_parameters(cls: type) -> List[ParameterSpec]:
    """Constructor parameters of *cls*, excluding self and variadics."""
    init = cls.__init__
    if init is object.__init__:
        return []
    try:
        signature = inspect.signature(init)
        hints = get_type_hints(init)
    except (NameError, TypeError, ValueError) as exc:
        raise ConstructionError(
            ConstructionErrorKind.PARAMETER_DISCOVERY_FAILED,
            f"Cannot read constructor of {cls.__qualname__}: {exc}",
            subject=cls.__qualname__,
        ) from exc

    out: List[ParameterSpec] = []
    for param in list(signature.parameters.values())[1:]:
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        hint = hints.get(param.name, _EMPTY)
        optional = False
        if hint is not _EMPTY:
            hint, optional = _unwrap_optional(hint)
        out.append(ParameterSpec(param.name, hint, param.default, optional))
    return out


def autowire(obj: Any, providers: ProviderRegistry) -> None:
    """
    Injects attributes on 'obj' based on its class annotations.
    For each annotated attr that's None/missing and has a registered
    provider, resolve it and set it. Supports Optional[T].
    """
    try:
        hints = get_type_hints(obj.__class__)
    except NameError as exc:
        raise ConstructionError(
            ConstructionErrorKind.PARAMETER_DISCOVERY_FAILED,
            f"Cannot read annotations of {obj.__class__.__qualname__}: {exc}",
            subject=obj.__class__.__qualname__,
        ) from exc
    for name, typ in hints.items():
        # skip non-injectables (dunder, private)
        if name.startswith("_"):
            continue
        # already set? skip
        if getattr(obj, name, None) is not None:
            continue
        t, _ = _unwrap_optional(typ)
        if isinstance(t, type) and providers.has(t):
            setattr(obj, name, providers.resolve(t))

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from inspect import getattr_static, isroutine
from typing import Any, Callable, Dict, List, Mapping, Tuple, Type

from .exceptions import AmbiguousAccessorError, NoAccessorError

ACCESSOR_PREFIXES_ATTRIBUTE = "_populate_accessor_prefixes"


class AccessKind(str, Enum):
    GET = "get"
    SET = "set"


# Prefixed to the property name, e.g. ``set_is_available`` or ``get_available``.
DEFAULT_ACCESSOR_PREFIXES: Dict[str, Tuple[str, ...]] = {
    AccessKind.GET.value: ("get_", "is_", "get_is_"),
    AccessKind.SET.value: ("set_", "set_is_"),
}

PrefixTable = Mapping[str, Tuple[str, ...]]


def accessor_candidates(
    property_name: str,
    kind: AccessKind,
    prefixes: PrefixTable = DEFAULT_ACCESSOR_PREFIXES,
) -> List[str]:
    """Build the method names that may grant ``kind`` access to ``property_name``.

    For a property named ``employed`` and the default prefixes these are
    ``get_employed``, ``is_employed``, ``get_is_employed`` and, for getters
    only, the raw ``employed``; for setters ``set_employed`` and
    ``set_is_employed``.
    """
    kind = AccessKind(kind)
    candidates = [prefix + property_name for prefix in prefixes.get(kind.value, ())]
    if kind is AccessKind.GET:
        candidates.append(property_name)
    return list(dict.fromkeys(candidates))


def get_accessor_prefixes(cls: Type) -> PrefixTable:
    return getattr(cls, ACCESSOR_PREFIXES_ATTRIBUTE, None) or DEFAULT_ACCESSOR_PREFIXES


def has_accessor_method(cls: Type, name: str) -> bool:
    # Only methods of the type count, not stored values such as classes or callables.
    return isroutine(getattr_static(cls, name, None))


@lru_cache(maxsize=1024)
def resolve_accessor_name(cls: Type, property_name: str, kind: AccessKind) -> str:
    """Return the single method name on ``cls`` that grants ``kind`` access.

    Raises NoAccessorError when no candidate exists and
    AmbiguousAccessorError when more than one does, e.g. a class defining
    both ``is_flag()`` and ``flag()``.

    Results are cached per class, so accessors and prefix tables are
    expected to be fixed once a class is first used; call
    ``resolve_accessor_name.cache_clear()`` after changing them.
    """
    kind = AccessKind(kind)
    found = [
        name
        for name in accessor_candidates(property_name, kind, get_accessor_prefixes(cls))
        if has_accessor_method(cls, name)
    ]
    if not found:
        raise NoAccessorError(property_name, kind)
    if len(found) > 1:
        raise AmbiguousAccessorError(property_name, kind, found)
    return found[0]


def resolve_accessor(target: Any, property_name: str, kind: AccessKind) -> Callable:
    return getattr(target, resolve_accessor_name(type(target), property_name, AccessKind(kind)))


def get_property(target: Any, property_name: str) -> Any:
    return resolve_accessor(target, property_name, AccessKind.GET)()


def set_property(target: Any, property_name: str, value: Any) -> None:
    resolve_accessor(target, property_name, AccessKind.SET)(value)

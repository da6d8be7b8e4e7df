from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Dict, Optional, Union

from .exceptions import InputError

PropertyNameMap = Union[Mapping[Any, str], Iterable[str]]


def normalize_property_map(property_name_map: Optional[PropertyNameMap]) -> Dict[str, str]:
    """Convert a property name map into ``{source_name: destination_name}``.

    A plain list of names maps each name onto itself. Mappings are read entry
    by entry: integer keys come from list-style input and become identity
    pairs, any other key maps to its value. So ``["a", "b"]``,
    ``{0: "a", 1: "b"}`` and ``{1: "b", "a": "a"}`` all select ``a`` and ``b``
    unchanged while ``{"a": "x"}`` renames ``a`` to ``x``.
    """
    if not property_name_map:
        return {}
    if isinstance(property_name_map, (str, bytes)):
        raise InputError(
            "Property name map must be a mapping or a collection of property names, "
            f"got {type(property_name_map).__name__}"
        )

    if isinstance(property_name_map, Mapping):
        pairs = [
            (value, value) if _is_index(key) else (key, value)
            for key, value in property_name_map.items()
        ]
    elif isinstance(property_name_map, Iterable):
        pairs = [(name, name) for name in property_name_map]
    else:
        raise InputError(
            "Property name map must be a mapping or a collection of property names, "
            f"got {type(property_name_map).__name__}"
        )

    for source_name, destination_name in pairs:
        _guard_property_name(source_name)
        _guard_property_name(destination_name)
    return dict(pairs)


def _is_index(key: Any) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def _guard_property_name(name: Any) -> None:
    if not isinstance(name, str) or not name:
        raise InputError(f"Invalid property name in property name map: {name!r}")

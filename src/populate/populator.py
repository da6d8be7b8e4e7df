from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from inspect import isclass
from typing import Any, Dict, Iterator, Optional, Protocol, Tuple, runtime_checkable

from .accessors import AccessKind, get_property, set_property
from .adapters import clone_value, get_declared_property_names
from .exceptions import (
    AccessError,
    InvalidSourceTypeError,
    NoAccessorError,
    UnsupportedSourceShapeError,
)
from .property_map import PropertyNameMap, normalize_property_map

logger = logging.getLogger(__name__)


@runtime_checkable
class PopulateInterface(Protocol):
    """Objects that can be populated and can serve as a population source."""

    def populate(
        self,
        source: Any,
        property_name_map: Optional[PropertyNameMap] = None,
        only_mapped_properties: bool = False,
    ) -> None: ...

    def populate_with_clones(
        self,
        source: Any,
        property_name_map: Optional[PropertyNameMap] = None,
        only_mapped_properties: bool = False,
    ) -> None: ...

    def export_gettable_properties(
        self,
        property_name_map: Optional[PropertyNameMap] = None,
        only_mapped_properties: bool = False,
    ) -> Dict[str, Any]: ...


def populate(
    target: Any,
    source: Any,
    property_name_map: Optional[PropertyNameMap] = None,
    only_mapped_properties: bool = False,
    clone_objects: bool = False,
) -> None:
    """Populate ``target`` through its setter methods using data from ``source``.

    Args:
        target: Object whose setters receive the values
        source: A mapping, another populatable object or a keyed container
        property_name_map: Names to populate, either a list of names or a
            ``{source_name: destination_name}`` mapping used for renaming
        only_mapped_properties: Populate only the names in the map
        clone_objects: Pass shallow copies of object values to the setters

    Values of ``None`` are never assigned. Mapped properties are assigned after
    all unmapped ones so that a mapping always wins over a same-named value.
    Assignments made before a failure are not rolled back.
    """
    property_name_map = normalize_property_map(property_name_map)
    source_is_populatable = _is_populatable(source)
    data = _resolve_source_data(source, property_name_map, only_mapped_properties)

    if not only_mapped_properties:
        for property_name, value in _iterate_source(data):
            if property_name in property_name_map:
                continue
            if value is None:
                logger.debug("Skipping property %s without value", property_name)
                continue
            try:
                _set_populated_property(target, property_name, value, clone_objects)
            except NoAccessorError as error:
                # A populatable source may expose more getters than the target has setters.
                if not source_is_populatable:
                    raise
                logger.debug("Skipping property %s: %s", property_name, error)

    for source_name, destination_name in property_name_map.items():
        value = _lookup(data, source_name)
        if value is None:
            continue
        _set_populated_property(target, destination_name, value, clone_objects)


def populate_with_clones(
    target: Any,
    source: Any,
    property_name_map: Optional[PropertyNameMap] = None,
    only_mapped_properties: bool = False,
) -> None:
    populate(target, source, property_name_map, only_mapped_properties, clone_objects=True)


def export_gettable_properties(
    target: Any,
    property_name_map: Optional[PropertyNameMap] = None,
    only_mapped_properties: bool = False,
) -> Dict[str, Any]:
    """Export properties of ``target`` to a plain dict through its getters.

    Without ``only_mapped_properties`` every declared property is exported.
    Properties that can't be read are silently left out, since declared names
    give no guarantee that a getter exists. Properties in the map are an
    explicit request: any AccessError raised for them propagates.
    """
    property_name_map = normalize_property_map(property_name_map)
    export: Dict[str, Any] = {}

    if not only_mapped_properties:
        for property_name in get_declared_property_names(target):
            if property_name in property_name_map:
                continue
            try:
                export[property_name] = get_property(target, property_name)
            except AccessError as error:
                logger.debug("Not exporting property %s: %s", property_name, error)
                continue

    for source_name, destination_name in property_name_map.items():
        export[destination_name] = get_property(target, source_name)

    return export


class Populatable:
    """Mixin adding populate/export methods to a class.

    Setters and getters are found by naming convention, see
    :func:`populate.accessors.accessor_candidates`. Override the convention
    with a ``_populate_accessor_prefixes`` class attribute.
    """

    def populate(
        self,
        source: Any,
        property_name_map: Optional[PropertyNameMap] = None,
        only_mapped_properties: bool = False,
    ) -> None:
        populate(self, source, property_name_map, only_mapped_properties)

    def populate_with_clones(
        self,
        source: Any,
        property_name_map: Optional[PropertyNameMap] = None,
        only_mapped_properties: bool = False,
    ) -> None:
        populate_with_clones(self, source, property_name_map, only_mapped_properties)

    def export_gettable_properties(
        self,
        property_name_map: Optional[PropertyNameMap] = None,
        only_mapped_properties: bool = False,
    ) -> Dict[str, Any]:
        return export_gettable_properties(self, property_name_map, only_mapped_properties)


# region Private functions


def _is_populatable(source: Any) -> bool:
    return not isclass(source) and isinstance(source, PopulateInterface)


def _is_keyed_container(source: Any) -> bool:
    return (
        not isclass(source)
        and hasattr(type(source), "__getitem__")
        and not isinstance(source, (Sequence, bytes, bytearray))
    )


def _resolve_source_data(
    source: Any,
    property_name_map: Dict[str, str],
    only_mapped_properties: bool,
) -> Any:
    if _is_populatable(source):
        # Export under the source names; renaming happens on this side.
        return source.export_gettable_properties(
            list(property_name_map), only_mapped_properties
        )
    if isinstance(source, Mapping):
        return source
    if _is_keyed_container(source):
        if not only_mapped_properties and not isinstance(source, Iterable):
            raise UnsupportedSourceShapeError(type(source).__name__)
        return source
    raise InvalidSourceTypeError(type(source).__name__)


def _iterate_source(data: Any) -> Iterator[Tuple[Any, Any]]:
    if isinstance(data, Mapping):
        yield from data.items()
        return
    for key in data:
        yield key, data[key]


def _lookup(data: Any, property_name: str) -> Any:
    try:
        return data[property_name]
    except LookupError:
        return None


def _set_populated_property(
    target: Any, property_name: Any, value: Any, clone_objects: bool
) -> None:
    if not isinstance(property_name, str):
        raise NoAccessorError(repr(property_name), AccessKind.SET)
    if clone_objects:
        value = clone_value(value)
    set_property(target, property_name, value)


# endregion

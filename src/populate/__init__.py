from .accessors import (
    DEFAULT_ACCESSOR_PREFIXES,
    AccessKind,
    accessor_candidates,
    get_property,
    resolve_accessor,
    resolve_accessor_name,
    set_property,
)
from .exceptions import (
    AccessError,
    AmbiguousAccessorError,
    InputError,
    InvalidSourceTypeError,
    NoAccessorError,
    PopulateError,
    UnsupportedSourceShapeError,
)
from .populator import (
    Populatable,
    PopulateInterface,
    export_gettable_properties,
    populate,
    populate_with_clones,
)
from .property_map import normalize_property_map

__all__ = [
    "DEFAULT_ACCESSOR_PREFIXES",
    "AccessError",
    "AccessKind",
    "AmbiguousAccessorError",
    "InputError",
    "InvalidSourceTypeError",
    "NoAccessorError",
    "Populatable",
    "PopulateError",
    "PopulateInterface",
    "UnsupportedSourceShapeError",
    "accessor_candidates",
    "export_gettable_properties",
    "get_property",
    "normalize_property_map",
    "populate",
    "populate_with_clones",
    "resolve_accessor",
    "resolve_accessor_name",
    "set_property",
]

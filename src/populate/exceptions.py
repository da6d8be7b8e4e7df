"""Errors raised while populating or exporting objects."""

from __future__ import annotations

from typing import Optional, Sequence


class PopulateError(RuntimeError):
    """Base exception for populate/export operations."""

    pass


class InputError(PopulateError):
    """Raised when the source or the property name map has an unusable shape."""

    pass


class UnsupportedSourceShapeError(InputError):
    """Raised when an indexable but non-iterable source would need a full scan."""

    def __init__(self, source_type: str) -> None:
        self.source_type = source_type
        super().__init__(
            f"Indexable source {source_type} without iteration support is only "
            "supported when populating only mapped properties."
        )


class InvalidSourceTypeError(InputError):
    def __init__(self, source_type: str) -> None:
        self.source_type = source_type
        super().__init__(f"Invalid source type: {source_type}")


def _kind_name(kind) -> str:
    return getattr(kind, "value", kind)


class AccessError(PopulateError):
    """Raised when a property cannot be accessed through a getter or setter."""

    def __init__(
        self,
        message: str,
        property_name: str,
        kind: str,
        candidates: Optional[Sequence[str]] = None,
    ) -> None:
        self.property_name = property_name
        self.kind = _kind_name(kind)
        self.candidates = tuple(candidates or ())
        super().__init__(message)


class NoAccessorError(AccessError):
    def __init__(self, property_name: str, kind: str) -> None:
        kind = _kind_name(kind)
        role = "getter" if kind == "get" else "setter"
        super().__init__(
            f"No {role} method can be determined for property {property_name}.",
            property_name,
            kind,
        )


class AmbiguousAccessorError(AccessError):
    def __init__(self, property_name: str, kind: str, candidates: Sequence[str]) -> None:
        kind = _kind_name(kind)
        super().__init__(
            f"No unique {kind} method can be determined for property {property_name}. "
            f"Found multiple access methods ({', '.join(candidates)}) but there must be only one!",
            property_name,
            kind,
            candidates,
        )

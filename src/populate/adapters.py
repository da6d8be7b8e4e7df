from __future__ import annotations

import copy
import typing
from enum import Enum
from inspect import Parameter, get_annotations, isclass, signature
from typing import Any, ClassVar, List, Tuple, Type, Union

from pydantic import BaseModel

from .accessors import ACCESSOR_PREFIXES_ATTRIBUTE

# Values of these types are never duplicated when cloning.
NON_OBJECT_TYPES = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    tuple,
    frozenset,
    Enum,
)


class PopoAdapter:
    """Introspection for plain Python objects, dataclasses included."""

    def get_declared_property_names(self, obj: Union[Type, Any]) -> List[str]:
        """Names declared by class annotations and ``__init__`` parameters.

        Base classes come first. Private names and class variables are left
        out, as is the accessor convention table.
        """
        cls = obj if isclass(obj) else type(obj)
        names: List[str] = []
        for klass in reversed(cls.__mro__):
            names += self.get_annotated_names(klass)
            names += [name for name, _ in self.get_init_params(klass)]
        return [name for name in dict.fromkeys(names) if self._is_property_name(name)]

    def get_annotated_names(self, klass: Type) -> List[str]:
        if klass is object:
            return []
        return [
            name
            for name, annotation in get_annotations(klass).items()
            if not self._is_class_var(annotation)
        ]

    def get_init_params(self, klass: Type) -> List[Tuple[str, Parameter]]:
        """Parameters of the ``__init__`` defined by ``klass`` itself."""
        init = vars(klass).get("__init__")
        if init is None or klass is object:
            return []
        try:
            parameters = signature(init).parameters
        except (TypeError, ValueError):
            return []
        return [
            (name, param)
            for index, (name, param) in enumerate(parameters.items())
            if index > 0
            and param.kind not in (Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD)
        ]

    def clone(self, value: Any) -> Any:
        if isinstance(value, NON_OBJECT_TYPES):
            return value
        return copy.copy(value)

    @staticmethod
    def _is_property_name(name: str) -> bool:
        return not name.startswith("_") and name != ACCESSOR_PREFIXES_ATTRIBUTE

    @staticmethod
    def _is_class_var(annotation: Any) -> bool:
        if isinstance(annotation, str):
            return annotation.startswith(("ClassVar", "typing.ClassVar"))
        return annotation is ClassVar or typing.get_origin(annotation) is ClassVar


class PydanticModelAdapter(PopoAdapter):
    def __init__(self, BaseModel: Type) -> None:
        self.BaseModel = BaseModel

    def get_declared_property_names(self, obj: Union[Type, Any]) -> List[str]:
        cls = obj if isclass(obj) else type(obj)
        if not issubclass(cls, self.BaseModel):
            raise TypeError(
                f"Expected a BaseModel instance or class, got {cls.__name__}"
            )
        return [name for name in cls.model_fields if self._is_property_name(name)]

    def clone(self, value: Any) -> Any:
        return value.model_copy()


def is_pydantic_model(obj: Any) -> bool:
    return isinstance(obj, BaseModel) or (isclass(obj) and issubclass(obj, BaseModel))


def get_adapter(obj: Any) -> PopoAdapter:
    if is_pydantic_model(obj):
        return PydanticModelAdapter(BaseModel)
    return PopoAdapter()


def get_declared_property_names(obj: Any) -> List[str]:
    return get_adapter(obj).get_declared_property_names(obj)


def clone_value(value: Any) -> Any:
    if isclass(value):
        return value
    return get_adapter(value).clone(value)


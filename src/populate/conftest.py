from __future__ import annotations

from typing import Optional

import pytest

from populate import Populatable


class PopulateDummy(Populatable):
    def __init__(
        self,
        property1: Optional[str] = None,
        property2: Optional[str] = None,
        boolean: Optional[bool] = None,
        is_boolean2: Optional[bool] = None,
        related: Optional[PopulateDummy] = None,
        without_setter: Optional[str] = None,
        without_getter: Optional[str] = None,
    ):
        self._property1 = property1
        self._property2 = property2
        self._boolean = boolean
        self._is_boolean2 = is_boolean2
        self._related = related
        self._without_setter = without_setter
        self._without_getter = without_getter

    def get_property1(self) -> Optional[str]:
        return self._property1

    def set_property1(self, property1: str) -> None:
        self._property1 = property1

    def get_property2(self) -> Optional[str]:
        return self._property2

    def set_property2(self, property2: str) -> None:
        self._property2 = property2

    def is_boolean(self) -> Optional[bool]:
        return self._boolean

    def set_boolean(self, boolean: bool) -> None:
        self._boolean = boolean

    def is_boolean2(self) -> Optional[bool]:
        return self._is_boolean2

    def set_is_boolean2(self, is_boolean2: bool) -> None:
        self._is_boolean2 = is_boolean2

    def get_related(self) -> Optional[PopulateDummy]:
        return self._related

    def set_related(self, related: PopulateDummy) -> None:
        self._related = related

    def get_without_setter(self) -> Optional[str]:
        return self._without_setter

    def set_without_getter(self, without_getter: str) -> None:
        self._without_getter = without_getter


class ChildPopulateDummy(PopulateDummy):
    def __init__(self, child_property1: Optional[str] = None, **kwargs):
        super().__init__(**kwargs)
        self._child_property1 = child_property1

    def get_child_property1(self) -> Optional[str]:
        return self._child_property1

    def set_child_property1(self, child_property1: str) -> None:
        self._child_property1 = child_property1


class MultipleAccessMethodsPopulateDummy(Populatable):
    def __init__(self, boolean: Optional[bool] = None):
        self._boolean = boolean

    def is_boolean(self) -> Optional[bool]:
        return self._boolean

    def boolean(self) -> Optional[bool]:
        return self._boolean


class KeyedContainerWithoutIterator:
    """Supports ``container[key]`` but cannot be iterated."""

    def __init__(self, data: Optional[dict] = None):
        self._data = dict(data or {})

    def __getitem__(self, key):
        return self._data[key]

    def __setitem__(self, key, value):
        self._data[key] = value

    def __delitem__(self, key):
        del self._data[key]


class KeyedContainer(KeyedContainerWithoutIterator):
    def __iter__(self):
        return iter(self._data)


@pytest.fixture
def populate_dummy():
    return PopulateDummy


@pytest.fixture
def child_populate_dummy():
    return ChildPopulateDummy


@pytest.fixture
def multiple_access_methods_dummy():
    return MultipleAccessMethodsPopulateDummy


@pytest.fixture
def target(populate_dummy):
    return populate_dummy()

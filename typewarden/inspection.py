from __future__ import annotations
from typing import Any, Iterable

from .registry import (
    class_identity,
    is_interface_type,
    is_open_resource,
    names_routine,
    resolve_class,
)
from .tags import ClassificationFlags, TypeTag

ARRAY_TYPES = (list, tuple, dict)


def _object_type(value: Any, flags: int) -> str:
    if flags & ClassificationFlags.OBJECT_AS_CLASS:
        return class_identity(type(value))
    return TypeTag.OBJECT


def _callable_type(value: Any, flags: int) -> str:
    # strings are never objects here, so a routine name always stays callable
    if flags & ClassificationFlags.CALLABLE_AS_OBJECT and not isinstance(value, str):
        return _object_type(value, flags)
    return TypeTag.CALLABLE


def classify(value: Any, flags: int = 0) -> str:
    """
    Return the type tag of ``value``, or its class identity when
    ``OBJECT_AS_CLASS`` is set and ``value`` is an object.

    The checks run in a fixed order because the categories overlap: ``bool``
    is an ``int``, a string may name a routine, and every callable is
    also an object.
    """
    if isinstance(value, ARRAY_TYPES):
        return TypeTag.ARRAY
    if isinstance(value, bool):
        return TypeTag.BOOL
    if isinstance(value, int):
        return TypeTag.INT
    if isinstance(value, str):
        if names_routine(value):
            return _callable_type(value, flags)
        return TypeTag.STRING
    if value is None:
        return TypeTag.NULL
    if is_open_resource(value):
        return TypeTag.RESOURCE
    if callable(value):
        return _callable_type(value, flags)
    if isinstance(value, float):
        return TypeTag.FLOAT
    return _object_type(value, flags)


def _name_matches(value: str, expected: str | None) -> bool:
    return expected is None or value.casefold() == expected.casefold()


def is_class(value: Any, expected_class: str | None = None) -> bool:
    """True if ``value`` names an existing, non-interface class."""
    if not isinstance(value, str):
        return False
    cls = resolve_class(value)
    if cls is None or is_interface_type(cls):
        return False
    return _name_matches(value, expected_class)


def is_interface(value: Any, expected_interface: str | None = None) -> bool:
    """True if ``value`` names an existing protocol or abstract class."""
    if not isinstance(value, str):
        return False
    cls = resolve_class(value)
    if cls is None or not is_interface_type(cls):
        return False
    return _name_matches(value, expected_interface)


def is_subclass_of(value: Any, parent_class: str | type) -> bool:
    """True if ``value`` names a class strictly descending from ``parent_class``."""
    if not isinstance(value, str):
        return False
    child = resolve_class(value)
    parent = resolve_class(parent_class)
    if child is None or parent is None or child is parent:
        return False
    try:
        return issubclass(child, parent)
    except TypeError:
        # non-runtime-checkable protocols refuse issubclass()
        return False


def is_subclass_of_any(value: Any, parent_classes: Iterable[str | type]) -> bool:
    return any(is_subclass_of(value, parent) for parent in parent_classes)


def is_instance_of(value: Any, class_name: str | type) -> bool:
    cls = resolve_class(class_name)
    if cls is None:
        return False
    try:
        return isinstance(value, cls)
    except TypeError:
        return False


def is_instance_of_any(value: Any, class_names: Iterable[str | type]) -> bool:
    return any(is_instance_of(value, name) for name in class_names)


def is_instance_of_all(value: Any, class_names: Iterable[str | type]) -> bool:
    return all(is_instance_of(value, name) for name in class_names)

from __future__ import annotations
from typing import Any, Iterable, Union

from .inspection import classify, is_instance_of
from .tags import ClassificationFlags, TypeTag

TypeSpec = Union[str, type]

TAG_VALUES = frozenset(tag.value for tag in TypeTag)


def matches(value: Any, expected_type: TypeSpec) -> bool:
    """
    Check ``value`` against a tag, a class/interface name or a class.

    Callable objects are compared by their object identity unless the
    expected type is literally ``callable``. Class objects are always
    checked with ``isinstance``.
    """
    if isinstance(expected_type, type):
        return is_instance_of(value, expected_type)

    flags = 0 if expected_type == TypeTag.CALLABLE else ClassificationFlags.CALLABLE_AS_OBJECT
    actual = classify(value, flags)

    if actual == TypeTag.OBJECT:
        # tags are never class names, so they skip the registry lookup
        if expected_type in TAG_VALUES:
            return expected_type == TypeTag.OBJECT
        return is_instance_of(value, expected_type)
    return actual == expected_type


def matches_any(value: Any, expected_types: Iterable[TypeSpec]) -> bool:
    return any(matches(value, expected) for expected in expected_types)

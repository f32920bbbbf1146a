"""Assertion helpers that raise :class:`TypeMismatchError` on a failed match."""
from __future__ import annotations
import inspect
import logging
from typing import Any, Iterable, Optional, TypeVar, Union

from .errors import TypeMismatchError
from .inspection import classify, is_subclass_of_any
from .matching import TypeSpec, matches_any
from .registry import class_identity
from .tags import ClassificationFlags

logger = logging.getLogger(__name__)

T = TypeVar("T")
ExpectedTypes = Union[TypeSpec, Iterable[TypeSpec]]

UNKNOWN_CALLER = "unknown"
_PACKAGE = __name__.partition(".")[0]


def normalize_types(expected_types: ExpectedTypes) -> list[TypeSpec]:
    """Wrap a single specifier into a one-element list."""
    if isinstance(expected_types, (str, type)):
        return [expected_types]
    return list(expected_types)


def spec_name(spec: TypeSpec) -> str:
    if isinstance(spec, type):
        return class_identity(spec)
    return str(spec)


def _in_package(frame) -> bool:
    module = frame.f_globals.get("__name__", "")
    return module == _PACKAGE or module.startswith(_PACKAGE + ".")


def caller_name() -> str:
    """
    Qualified name of the nearest function outside this package on the stack.

    Methods come out as ``Class.method``. Module-level code and interpreters
    without frame support give ``"unknown"``.
    """
    frame = inspect.currentframe()
    try:
        while frame is not None and _in_package(frame):
            frame = frame.f_back
        if frame is None or frame.f_code.co_name == "<module>":
            return UNKNOWN_CALLER
        code = frame.f_code
        return getattr(code, "co_qualname", code.co_name)
    finally:
        del frame


def mismatch_message(actual: str, expected_types: list[TypeSpec], caller: str) -> str:
    expected = "|".join(spec_name(spec) for spec in expected_types)
    return f"Type mismatch in {caller}: expected [{expected}], got [{actual}]"


def assert_type(value: Any, expected_types: ExpectedTypes, message: Optional[str] = None) -> None:
    """Raise :class:`TypeMismatchError` unless ``value`` matches one of ``expected_types``."""
    types = normalize_types(expected_types)
    if matches_any(value, types):
        return

    caller = caller_name()
    actual = str(classify(value, ClassificationFlags.OBJECT_AS_CLASS))
    if message is None:
        message = mismatch_message(actual, types, caller)
    logger.debug("type assertion failed in %s: %s", caller, message)
    raise TypeMismatchError(
        message,
        expected=tuple(spec_name(spec) for spec in types),
        actual=actual,
        caller=caller,
    )


# Older name kept for callers that still use it.
enforce = assert_type


def assert_not_none(value: Optional[T], expected_types: ExpectedTypes, message: Optional[str] = None) -> T:
    """Like :func:`assert_type`, but rejects ``None`` first and returns ``value`` unchanged."""
    if value is None:
        caller = caller_name()
        logger.debug("None passed to %s", caller)
        raise TypeMismatchError(
            message if message is not None else "Value must not be None",
            expected=tuple(spec_name(spec) for spec in normalize_types(expected_types)),
            actual=None,
            caller=caller,
        )

    assert_type(value, expected_types, message)
    return value


def assert_subclass_of(
    value: Any,
    parent_classes: Union[TypeSpec, Iterable[TypeSpec]],
    message: Optional[str] = None,
) -> None:
    """Raise unless ``value`` names a class strictly descending from one of ``parent_classes``."""
    parents = normalize_types(parent_classes)
    if is_subclass_of_any(value, parents):
        return

    caller = caller_name()
    actual = value if isinstance(value, str) else str(classify(value, ClassificationFlags.OBJECT_AS_CLASS))
    expected = tuple(spec_name(spec) for spec in parents)
    if message is None:
        message = (
            f"Subclass mismatch in {caller}: expected subclass of "
            f"[{'|'.join(expected)}], got [{actual}]"
        )
    logger.debug("subclass assertion failed in %s: %s", caller, message)
    raise TypeMismatchError(message, expected=expected, actual=actual, caller=caller)

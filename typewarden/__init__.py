"""Public interface for the :mod:`typewarden` package.

Everything needed to classify values and assert their runtime types can be
imported directly from ``typewarden``.
"""
from .assertions import assert_not_none, assert_subclass_of, assert_type, enforce
from .decorator import ArgumentResult, EnforcementContext, TypeEnforcer, enforce_types
from .errors import TypeMismatchError
from .inspection import (
    classify,
    is_class,
    is_instance_of,
    is_instance_of_all,
    is_instance_of_any,
    is_interface,
    is_subclass_of,
    is_subclass_of_any,
)
from .matching import matches, matches_any
from .tags import (
    CALLABLE_AS_OBJECT,
    OBJECT_AS_CLASS,
    TYPE_ARRAY,
    TYPE_BOOL,
    TYPE_CALLABLE,
    TYPE_FLOAT,
    TYPE_INT,
    TYPE_NULL,
    TYPE_OBJECT,
    TYPE_RESOURCE,
    TYPE_STRING,
    ClassificationFlags,
    TypeTag,
)

__all__ = [
    "ArgumentResult",
    "CALLABLE_AS_OBJECT",
    "ClassificationFlags",
    "EnforcementContext",
    "OBJECT_AS_CLASS",
    "TYPE_ARRAY",
    "TYPE_BOOL",
    "TYPE_CALLABLE",
    "TYPE_FLOAT",
    "TYPE_INT",
    "TYPE_NULL",
    "TYPE_OBJECT",
    "TYPE_RESOURCE",
    "TYPE_STRING",
    "TypeEnforcer",
    "TypeMismatchError",
    "TypeTag",
    "assert_not_none",
    "assert_subclass_of",
    "assert_type",
    "classify",
    "enforce",
    "enforce_types",
    "is_class",
    "is_instance_of",
    "is_instance_of_all",
    "is_instance_of_any",
    "is_interface",
    "is_subclass_of",
    "is_subclass_of_any",
    "matches",
    "matches_any",
]

__version__ = "0.1.0"

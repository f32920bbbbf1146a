from __future__ import annotations
from enum import Enum, IntFlag


class TypeTag(str, Enum):
    ARRAY = "array"
    OBJECT = "object"
    INT = "int"
    BOOL = "bool"
    STRING = "string"
    RESOURCE = "resource"
    CALLABLE = "callable"
    FLOAT = "float"
    NULL = "null"

    def __str__(self) -> str:
        return self.value


class ClassificationFlags(IntFlag):
    """Modifiers for :func:`typewarden.classify`.

    ``CALLABLE_AS_OBJECT`` routes callable objects through object handling
    instead of tagging them ``callable``. ``OBJECT_AS_CLASS`` reports the
    concrete class identity instead of the generic ``object`` tag.
    """
    NONE = 0
    CALLABLE_AS_OBJECT = 0b01
    OBJECT_AS_CLASS = 0b10


TYPE_ARRAY = TypeTag.ARRAY
TYPE_OBJECT = TypeTag.OBJECT
TYPE_INT = TypeTag.INT
TYPE_BOOL = TypeTag.BOOL
TYPE_STRING = TypeTag.STRING
TYPE_RESOURCE = TypeTag.RESOURCE
TYPE_CALLABLE = TypeTag.CALLABLE
TYPE_FLOAT = TypeTag.FLOAT
TYPE_NULL = TypeTag.NULL

CALLABLE_AS_OBJECT = ClassificationFlags.CALLABLE_AS_OBJECT
OBJECT_AS_CLASS = ClassificationFlags.OBJECT_AS_CLASS

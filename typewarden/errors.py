from __future__ import annotations
from typing import Optional


class TypeMismatchError(TypeError):
    """Raised when a value's runtime type is not one of the expected types."""

    def __init__(
        self,
        message: str,
        expected: tuple[str, ...] = (),
        actual: Optional[str] = None,
        caller: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.expected = expected
        self.actual = actual
        self.caller = caller

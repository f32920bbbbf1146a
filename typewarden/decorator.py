# decorator.py
from __future__ import annotations
from .assertions import ExpectedTypes, mismatch_message, normalize_types, spec_name
from .errors import TypeMismatchError
from .inspection import classify
from .matching import TypeSpec, matches_any
from .tags import ClassificationFlags
from functools import wraps
from typing import Any, Callable
import inspect
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArgumentResult:
    """Outcome of checking one argument against its expected types."""
    name: str
    value: Any
    expected: tuple[TypeSpec, ...]
    passed: bool

    def __repr__(self):
        status = "PASSED" if self.passed else "FAILED"
        return f"<ArgumentResult {status} {self.name}={self.value!r}>"


@dataclass
class EnforcementContext:
    """Everything a failure handler needs to know about a rejected call."""
    func: Callable
    args: tuple
    kwargs: dict
    bound_args: inspect.BoundArguments
    all_results: list[ArgumentResult]
    failed_results: list[ArgumentResult]

    @property
    def passed_results(self) -> list[ArgumentResult]:
        return [r for r in self.all_results if r.passed]


def default_on_enforcement_failure(context: EnforcementContext) -> None:
    """Raise TypeMismatchError for the first failed argument."""
    if not context.failed_results:
        return

    first = context.failed_results[0]
    caller = context.func.__qualname__
    expected = list(first.expected)
    actual = str(classify(first.value, ClassificationFlags.OBJECT_AS_CLASS))
    message = mismatch_message(actual, expected, caller)
    raise TypeMismatchError(
        f"Argument '{first.name}': {message}",
        expected=tuple(spec_name(spec) for spec in expected),
        actual=actual,
        caller=caller,
    )


class TypeEnforcer:
    """Wraps sync and async functions so their arguments are matched on every call."""

    def __init__(self, expected: dict[str, ExpectedTypes], on_failure: Callable | None = None):
        self.expected = {name: tuple(normalize_types(types)) for name, types in expected.items()}
        self.on_failure = on_failure

    def _check_parameters(self, func: Callable, signature: inspect.Signature) -> None:
        unknown = [name for name in self.expected if name not in signature.parameters]
        if unknown:
            raise ValueError(
                f"{func.__qualname__} has no parameter(s) named {', '.join(sorted(unknown))}"
            )

    def _validate_arguments(self, bound_arguments: dict[str, Any]) -> list[ArgumentResult]:
        results = []
        for name, expected in self.expected.items():
            value = bound_arguments[name]
            results.append(ArgumentResult(name, value, expected, matches_any(value, expected)))
        return results

    def _create_context(self, func, args, kwargs, bound, results) -> EnforcementContext | None:
        failed = [r for r in results if not r.passed]
        if not failed:
            return None
        logger.debug(
            "%s rejected argument(s): %s",
            func.__qualname__,
            ", ".join(r.name for r in failed),
        )
        return EnforcementContext(
            func=func,
            args=args,
            kwargs=kwargs,
            bound_args=bound,
            all_results=results,
            failed_results=failed,
        )

    def _bind_and_check(self, func, signature, args, kwargs) -> EnforcementContext | None:
        bound = signature.bind(*args, **kwargs)
        bound.apply_defaults()
        results = self._validate_arguments(bound.arguments)
        return self._create_context(func, args, kwargs, bound, results)

    def _create_sync_wrapper(self, func: Callable, signature: inspect.Signature) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            context = self._bind_and_check(func, signature, args, kwargs)
            if context is not None:
                (self.on_failure or default_on_enforcement_failure)(context)
                return None
            return func(*args, **kwargs)

        return wrapper

    def _create_async_wrapper(
        self,
        func: Callable,
        signature: inspect.Signature,
        is_func_async: bool
    ) -> Callable:
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            context = self._bind_and_check(func, signature, args, kwargs)
            if context is not None:
                handler = self.on_failure or default_on_enforcement_failure
                if inspect.iscoroutinefunction(handler):
                    await handler(context)
                else:
                    handler(context)
                return None
            if is_func_async:
                return await func(*args, **kwargs)
            return func(*args, **kwargs)

        return async_wrapper

    def __call__(self, func: Callable) -> Callable:
        signature = inspect.signature(func)
        self._check_parameters(func, signature)

        is_func_async = inspect.iscoroutinefunction(func)
        is_handler_async = self.on_failure is not None and inspect.iscoroutinefunction(self.on_failure)
        if is_func_async or is_handler_async:
            return self._create_async_wrapper(func, signature, is_func_async)
        return self._create_sync_wrapper(func, signature)


def enforce_types(*, on_failure: Callable | None = None, **expected: ExpectedTypes) -> Callable:
    """
    Decorator matching arguments against type specifiers on every call:

    - @enforce_types(name="string", age=["int", "null"])
    - @enforce_types(user="myapp.models.User", on_failure=handler)

    A parameter literally named ``on_failure`` cannot be enforced, since
    that keyword always selects the failure handler.
    """
    return TypeEnforcer(expected, on_failure=on_failure)

import asyncio

import pytest

from typewarden import EnforcementContext, TypeMismatchError, enforce_types


def test_async_function_enforcement():
    @enforce_types(a="int")
    async def fn(a):
        return a * 2

    assert asyncio.run(fn(5)) == 10

    with pytest.raises(TypeMismatchError):
        asyncio.run(fn("oops"))


def test_async_failure_handler():
    async def handler(context):
        raise ValueError("async fail")

    @enforce_types(a="int", on_failure=handler)
    async def fn(a):
        return a

    with pytest.raises(ValueError) as exc:
        asyncio.run(fn("oops"))

    assert str(exc.value) == "async fail"


def test_async_handler_on_sync_function():
    captured = {}

    async def handler(context: EnforcementContext):
        captured["name"] = context.failed_results[0].name

    @enforce_types(a="int", on_failure=handler)
    def fn(a):
        return a

    assert asyncio.run(fn(3)) == 3
    assert asyncio.run(fn("bad")) is None
    assert captured["name"] == "a"


@pytest.mark.asyncio
async def test_async_custom_handler_receives_failures():
    captured = {}

    async def handler(context: EnforcementContext):
        captured["name"] = context.failed_results[0].name

    @enforce_types(a="int", on_failure=handler)
    async def fn(a):
        return a

    assert await fn("bad") is None
    assert captured["name"] == "a"

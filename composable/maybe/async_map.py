"""Async mapping over optional values

The only suspending operation in the library: the caller awaits the
transformation, and only when there is a value to transform."""

from __future__ import annotations

from kungfu import Nothing, Option, Some

from .._errors import ShapeError
from .._types import AsyncMapper


async def async_map[T, U](option: Option[T], f: AsyncMapper[T, U]) -> Option[U]:
    """
    Map Some(value) through an async transformation, leave Nothing as is.

    **When to use:** When the value inside an Option has to go through an
    async call (fetch, decode, enrich) and absence should stay absence.

    Example:
        from composable import async_map

        async def double(x: int) -> int:
            return x * 2

        value = await async_map(Some(69), double)  # Some(138)
        value = await async_map(Nothing(), double)  # Nothing(), double not called

    NOTE: f is called at most once. Exceptions raised by f (or by the
          awaitable it returns) propagate unchanged.
    """
    match option:
        case Some(value):
            return Some(await f(value))
        case Nothing():
            return Nothing()
        case _:
            raise ShapeError(option, "Option")


async def async_map_optional[T, U](value: T | None, f: AsyncMapper[T, U]) -> U | None:
    """
    Same as async_map() for plain `T | None` values.

    Example:
        user = await async_map_optional(db.find(user_id), enrich_user)
    """
    if value is None:
        return None
    return await f(value)


__all__ = ("async_map", "async_map_optional")

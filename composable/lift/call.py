"""
Lifting composite-returning async functions into LazyCoroResult.

Repositories and clients often return Option[Result[T, E]] or
Result[Option[T], E]. These helpers collapse the composite on every run of
the lazy computation, so the call can be chained like any other
LazyCoroResult.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from functools import wraps

from kungfu import LazyCoroResult, Result

from ..collapse import unwrap_or_else_err, unwrap_or_else_map_err
from .._types import Composite, ErrorMapper, Thunk


def collapsed[T, E, E2](
    thunk: Callable[[], Awaitable[Composite[T, E]]],
    *,
    error: Thunk[E2],
    map_error: ErrorMapper[E, E2] | None = None,
) -> LazyCoroResult[T, E2]:
    """
    Wrap a thunk returning a composite into LazyCoroResult[T, E2].

    **When to use:** When a lookup may fail and may find nothing, and the
    rest of the pipeline only cares about "got a value" vs "one error".

    Example:
        from composable import lift as L

        user = L.collapsed(
            lambda: repo.find_user(user_id),   # Result[Option[User], DbError]
            error=lambda: NotFound(user_id),
            map_error=lambda e: Unavailable(str(e)),
        )
        result = await user  # Ok(User) | Error(NotFound | Unavailable)

    NOTE: Without map_error the original error is dropped and error() is
          used for both the absent and the failed case.
          Nothing runs until the LazyCoroResult is awaited.
    """
    async def run() -> Result[T, E2]:
        value = await thunk()
        if map_error is None:
            return unwrap_or_else_err(value, error)
        return unwrap_or_else_map_err(value, error, map_error)

    return LazyCoroResult(run)


def call_collapsed[T, E, E2, **P](
    func: Callable[P, Awaitable[Composite[T, E]]],
    *args: P.args,
    **kwargs: P.kwargs,
) -> Callable[..., LazyCoroResult[T, E2]]:
    """
    Bind arguments now, choose the errors next.

    Example:
        user = L.call_collapsed(repo.find_user, user_id)(
            error=lambda: NotFound(user_id),
        )
    """
    def bind(
        *,
        error: Thunk[E2],
        map_error: ErrorMapper[E, E2] | None = None,
    ) -> LazyCoroResult[T, E2]:
        return collapsed(lambda: func(*args, **kwargs), error=error, map_error=map_error)

    return bind


def lifted_collapsed[T, E, E2, **P](
    *,
    error: Thunk[E2],
    map_error: ErrorMapper[E, E2] | None = None,
) -> Callable[[Callable[P, Awaitable[Composite[T, E]]]], Callable[P, LazyCoroResult[T, E2]]]:
    """
    Decorator form of collapsed().

    Example:
        @L.lifted_collapsed(error=lambda: NotFound())
        async def find_user(user_id: int) -> Result[Option[User], DbError]:
            ...

        result = await find_user(42)  # Ok(User) | Error(NotFound())
    """
    def decorator(
        func: Callable[P, Awaitable[Composite[T, E]]],
    ) -> Callable[P, LazyCoroResult[T, E2]]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> LazyCoroResult[T, E2]:
            return collapsed(lambda: func(*args, **kwargs), error=error, map_error=map_error)

        return wrapper

    return decorator


__all__ = (
    "collapsed",
    "call_collapsed",
    "lifted_collapsed",
)

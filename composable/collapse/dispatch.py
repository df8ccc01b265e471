"""Collapse dispatch

Functional forms of the four collapse operations. The shape is picked from
the outer container, so the same call works on Option[Result[T, E]] and on
Result[Option[T], E]:

    result = unwrap_or_err(await repo.find(user_id), NotFound(user_id))
"""

from __future__ import annotations

import typing

from kungfu import Error, Nothing, Ok, Result, Some

from .._errors import ShapeError
from .._types import Composite, ErrorMapper, Thunk
from .option_result import OptionResult
from .protocol import Collapsible
from .result_option import ResultOption


def collapsible[T, E](value: Composite[T, E]) -> Collapsible[T, E]:
    """
    Wrap a composite value into the Collapsible for its shape.

    Some/Nothing outside -> OptionResult
    Ok/Error outside     -> ResultOption

    Raises ShapeError for anything else. The inner container is checked
    lazily, by the collapse operation itself.
    """
    match value:
        case Some(_) | Nothing():
            return OptionResult(typing.cast(typing.Any, value))
        case Ok(_) | Error(_):
            return ResultOption(typing.cast(typing.Any, value))
        case _:
            raise ShapeError(value, "Option[Result[T, E]] or Result[Option[T], E]")


def unwrap_or_err[T, E, E2](value: Composite[T, E], default: E2) -> Result[T, E2]:
    """Ok(value) if there is one, otherwise Error(default). The original error is dropped."""
    return collapsible(value).unwrap_or_err(default)


def unwrap_or_else_err[T, E, E2](
    value: Composite[T, E],
    make_error: Thunk[E2],
) -> Result[T, E2]:
    """
    Ok(value) if there is one, otherwise Error(make_error()).

    make_error is not called on the success path.
    """
    return collapsible(value).unwrap_or_else_err(make_error)


def unwrap_or_map_err[T, E, E2](
    value: Composite[T, E],
    default: E2,
    map_error: ErrorMapper[E, E2],
) -> Result[T, E2]:
    """
    Ok(value) if there is one; Error(map_error(e)) for an existing error;
    Error(default) when the value is absent.
    """
    return collapsible(value).unwrap_or_map_err(default, map_error)


def unwrap_or_else_map_err[T, E, E2](
    value: Composite[T, E],
    make_error: Thunk[E2],
    map_error: ErrorMapper[E, E2],
) -> Result[T, E2]:
    """Lazy-default variant of unwrap_or_map_err()."""
    return collapsible(value).unwrap_or_else_map_err(make_error, map_error)


__all__ = (
    "collapsible",
    "unwrap_or_err",
    "unwrap_or_else_err",
    "unwrap_or_map_err",
    "unwrap_or_else_map_err",
)

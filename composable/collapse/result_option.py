"""Collapse for Result[Option[T], E]

Success/failure is checked first:
    Ok(Some(t))  -> Ok(t)
    Ok(Nothing()) -> no-value branch
    Error(e)     -> existing-error branch
"""

from __future__ import annotations

from dataclasses import dataclass

from kungfu import Error, Nothing, Ok, Result, Some

from .._errors import ShapeError
from .._types import ErrorMapper, ResultOption as ResultOptionT, Thunk

_EXPECTED = "Result[Option[T], E]"


@dataclass(frozen=True, slots=True)
class ResultOption[T, E]:
    """
    Collapsible view of a Result[Option[T], E].

    Example:
        from composable import ResultOption

        ResultOption(Ok(Some("x"))).unwrap_or_err(Missing())  # Ok("x")
        ResultOption(Ok(Nothing())).unwrap_or_err(Missing())  # Error(Missing())
        ResultOption(Error(Db())).unwrap_or_err(Missing())    # Error(Missing())
    """

    value: ResultOptionT[T, E]

    def unwrap_or_err[E2](self, default: E2) -> Result[T, E2]:
        match self.value:
            case Ok(Some(t)):
                return Ok(t)
            case Ok(Nothing()) | Error(_):
                return Error(default)
            case _:
                raise ShapeError(self.value, _EXPECTED)

    def unwrap_or_else_err[E2](self, make_error: Thunk[E2]) -> Result[T, E2]:
        match self.value:
            case Ok(Some(t)):
                return Ok(t)
            case Ok(Nothing()) | Error(_):
                return Error(make_error())
            case _:
                raise ShapeError(self.value, _EXPECTED)

    def unwrap_or_map_err[E2](
        self,
        default: E2,
        map_error: ErrorMapper[E, E2],
    ) -> Result[T, E2]:
        match self.value:
            case Ok(Some(t)):
                return Ok(t)
            case Ok(Nothing()):
                return Error(default)
            case Error(e):
                return Error(map_error(e))
            case _:
                raise ShapeError(self.value, _EXPECTED)

    def unwrap_or_else_map_err[E2](
        self,
        make_error: Thunk[E2],
        map_error: ErrorMapper[E, E2],
    ) -> Result[T, E2]:
        match self.value:
            case Ok(Some(t)):
                return Ok(t)
            case Ok(Nothing()):
                return Error(make_error())
            case Error(e):
                return Error(map_error(e))
            case _:
                raise ShapeError(self.value, _EXPECTED)


__all__ = ("ResultOption",)

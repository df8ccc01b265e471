"""Collapse for Option[Result[T, E]]

Absence is checked first:
    Some(Ok(t))    -> Ok(t)
    Some(Error(e)) -> existing-error branch
    Nothing()      -> no-value branch
"""

from __future__ import annotations

from dataclasses import dataclass

from kungfu import Error, Nothing, Ok, Result, Some

from .._errors import ShapeError
from .._types import ErrorMapper, OptionResult as OptionResultT, Thunk

_EXPECTED = "Option[Result[T, E]]"


@dataclass(frozen=True, slots=True)
class OptionResult[T, E]:
    """
    Collapsible view of an Option[Result[T, E]].

    Example:
        from composable import OptionResult

        OptionResult(Some(Ok("x"))).unwrap_or_err(Missing())  # Ok("x")
        OptionResult(Nothing()).unwrap_or_err(Missing())      # Error(Missing())
        OptionResult(Some(Error(Db()))).unwrap_or_map_err(
            Missing(), lambda e: Wrapped(e)
        )                                                     # Error(Wrapped(Db()))
    """

    value: OptionResultT[T, E]

    def unwrap_or_err[E2](self, default: E2) -> Result[T, E2]:
        match self.value:
            case Some(Ok(t)):
                return Ok(t)
            case Some(Error(_)) | Nothing():
                return Error(default)
            case _:
                raise ShapeError(self.value, _EXPECTED)

    def unwrap_or_else_err[E2](self, make_error: Thunk[E2]) -> Result[T, E2]:
        match self.value:
            case Some(Ok(t)):
                return Ok(t)
            case Some(Error(_)) | Nothing():
                return Error(make_error())
            case _:
                raise ShapeError(self.value, _EXPECTED)

    def unwrap_or_map_err[E2](
        self,
        default: E2,
        map_error: ErrorMapper[E, E2],
    ) -> Result[T, E2]:
        match self.value:
            case Some(Ok(t)):
                return Ok(t)
            case Some(Error(e)):
                return Error(map_error(e))
            case Nothing():
                return Error(default)
            case _:
                raise ShapeError(self.value, _EXPECTED)

    def unwrap_or_else_map_err[E2](
        self,
        make_error: Thunk[E2],
        map_error: ErrorMapper[E, E2],
    ) -> Result[T, E2]:
        match self.value:
            case Some(Ok(t)):
                return Ok(t)
            case Some(Error(e)):
                return Error(map_error(e))
            case Nothing():
                return Error(make_error())
            case _:
                raise ShapeError(self.value, _EXPECTED)


__all__ = ("OptionResult",)

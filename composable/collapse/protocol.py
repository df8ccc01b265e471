"""Collapsible capability

The four collapse operations, shared by both composite shapes. Each shape
implements them explicitly; see option_result.py and result_option.py."""

from __future__ import annotations

import typing

from kungfu import Result

from .._types import ErrorMapper, Thunk


@typing.runtime_checkable
class Collapsible[T, E](typing.Protocol):
    """
    Three-state composite that can be collapsed into Result[T, E2].

    Axes:
    - fallback error: eager value (`unwrap_or_*`) or thunk (`unwrap_or_else_*`)
    - existing error: dropped (`*_err`) or remapped (`*_map_err`)
    """

    def unwrap_or_err[E2](self, default: E2) -> Result[T, E2]: ...

    def unwrap_or_else_err[E2](self, make_error: Thunk[E2]) -> Result[T, E2]: ...

    def unwrap_or_map_err[E2](
        self,
        default: E2,
        map_error: ErrorMapper[E, E2],
    ) -> Result[T, E2]: ...

    def unwrap_or_else_map_err[E2](
        self,
        make_error: Thunk[E2],
        map_error: ErrorMapper[E, E2],
    ) -> Result[T, E2]: ...


__all__ = ("Collapsible",)

from __future__ import annotations

import typing


class ShapeError(TypeError):
    """Value is neither Option[Result[T, E]] nor Result[Option[T], E]."""

    value: typing.Any

    def __init__(self, value: typing.Any, expected: str) -> None:
        self.value = value
        super().__init__(f"Expected {expected}, got {value!r}")

__all__ = ("ShapeError",)

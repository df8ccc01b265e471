"""Shared test helpers."""

import enum
import typing

from kungfu import Error, Ok, Result

VALUE = "trans rights"


class ErrorOne(enum.Enum):
    ONE = "one"


class ErrorTwo(enum.Enum):
    TWO = "two"
    THREE = "three"


class Counter:
    """Callable that records how many times it was invoked."""

    def __init__(self, returns: typing.Any = None) -> None:
        self.calls = 0
        self.args: list[tuple[typing.Any, ...]] = []
        self.returns = returns

    def __call__(self, *args: typing.Any) -> typing.Any:
        self.calls += 1
        self.args.append(args)
        return self.returns


def ok_value(result: Result[typing.Any, typing.Any]) -> typing.Any:
    """Return the value of an Ok, fail the test on Error."""
    match result:
        case Ok(value):
            return value
        case Error(error):
            raise AssertionError(f"expected Ok, got Error({error!r})")
        case _:
            raise AssertionError(f"expected Result, got {result!r}")


def err_value(result: Result[typing.Any, typing.Any]) -> typing.Any:
    """Return the error of an Error, fail the test on Ok."""
    match result:
        case Error(error):
            return error
        case Ok(value):
            raise AssertionError(f"expected Error, got Ok({value!r})")
        case _:
            raise AssertionError(f"expected Result, got {result!r}")

"""Pytest configuration and shared fixtures for composable tests."""

import pytest
from kungfu import Error, Nothing, Ok, Some

from support import VALUE, ErrorOne


@pytest.fixture
def result_ok_some():
    """Ok(Some(value))."""
    return Ok(Some(VALUE))


@pytest.fixture
def result_ok_none():
    """Ok(Nothing())."""
    return Ok(Nothing())


@pytest.fixture
def result_err():
    """Error(ErrorOne.ONE)."""
    return Error(ErrorOne.ONE)


@pytest.fixture
def option_some_ok():
    """Some(Ok(value))."""
    return Some(Ok(VALUE))


@pytest.fixture
def option_some_err():
    """Some(Error(ErrorOne.ONE))."""
    return Some(Error(ErrorOne.ONE))


@pytest.fixture
def option_none():
    """Nothing()."""
    return Nothing()

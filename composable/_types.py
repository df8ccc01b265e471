"""
Core type definitions for composable.

Aliases for the two composite shapes and for the callables the combinators
accept.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from kungfu import Option, Result

# ============================================================================
# Composite shapes
# ============================================================================

# Shape A: absence is checked before success/failure
type OptionResult[T, E] = Option[Result[T, E]]

# Shape B: success/failure is checked before absence
type ResultOption[T, E] = Result[Option[T], E]

# Either shape, as accepted by the dispatching functions
type Composite[T, E] = OptionResult[T, E] | ResultOption[T, E]

# ============================================================================
# Callables
# ============================================================================

# Thunk = zero-arg factory, evaluated only on the branch that needs it
type Thunk[E] = Callable[[], E]

# ErrorMapper = turns the original error into the output error
type ErrorMapper[E, E2] = Callable[[E], E2]

# AsyncMapper = transformation that suspends before producing its result
type AsyncMapper[T, U] = Callable[[T], Awaitable[U]]

__all__ = (
    # Shapes
    "OptionResult",
    "ResultOption",
    "Composite",
    # Callables
    "Thunk",
    "ErrorMapper",
    "AsyncMapper",
)

"""
Composition helpers for Option/Result composite shapes.

Collapse Option[Result[T, E]] or Result[Option[T], E] into a single
Result[T, E2] without repeating the four-way case analysis, and map an
Option through an async transformation.

Architecture:
- collapse.*  - four collapse operations, one implementation per shape
- maybe.*     - async mapping over Option / `T | None`
- lift.*      - bridge into kungfu.LazyCoroResult pipelines
"""

# Core types
from ._types import (
    AsyncMapper,
    Composite,
    ErrorMapper,
    OptionResult as OptionResultT,
    ResultOption as ResultOptionT,
    Thunk,
)

# Collapse-to-result
from .collapse import (
    Collapsible,
    OptionResult,
    ResultOption,
    collapsible,
    unwrap_or_err,
    unwrap_or_else_err,
    unwrap_or_else_map_err,
    unwrap_or_map_err,
)

# Maybe-mapper
from .maybe import async_map, async_map_optional

# Lift helpers (namespace import - preferred)
from . import lift
from .lift import call_collapsed, collapsed, lifted_collapsed

# Errors
from ._errors import ShapeError

__all__ = (
    # Types
    "AsyncMapper",
    "Composite",
    "ErrorMapper",
    "OptionResultT",
    "ResultOptionT",
    "Thunk",
    # Collapse
    "Collapsible",
    "OptionResult",
    "ResultOption",
    "collapsible",
    "unwrap_or_err",
    "unwrap_or_else_err",
    "unwrap_or_map_err",
    "unwrap_or_else_map_err",
    # Maybe
    "async_map",
    "async_map_optional",
    # Lift
    "lift",
    "collapsed",
    "call_collapsed",
    "lifted_collapsed",
    # Errors
    "ShapeError",
)

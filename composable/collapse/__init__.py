from .dispatch import (
    collapsible,
    unwrap_or_err,
    unwrap_or_else_err,
    unwrap_or_else_map_err,
    unwrap_or_map_err,
)
from .option_result import OptionResult
from .protocol import Collapsible
from .result_option import ResultOption

__all__ = (
    # Capability
    "Collapsible",
    # Per-shape implementations
    "OptionResult",
    "ResultOption",
    # Dispatch
    "collapsible",
    "unwrap_or_err",
    "unwrap_or_else_err",
    "unwrap_or_map_err",
    "unwrap_or_else_map_err",
)

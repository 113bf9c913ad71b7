"""Diagnostics and debugging utilities for Graph Conduit."""

from .core import (
    assert_acyclic_predecessors,
    assert_partition,
    assert_spanning_forest,
    assert_topological_order,
    is_spanning_forest,
    is_valid_path,
    total_weight,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
    verify_result,
)

__all__ = [
    "is_valid_path",
    "assert_topological_order",
    "assert_partition",
    "assert_acyclic_predecessors",
    "assert_spanning_forest",
    "is_spanning_forest",
    "total_weight",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "verify_result",
]

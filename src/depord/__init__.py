"""Lazy topological ordering with cycle reporting."""

__all__ = [
    "CaseInsensitiveEquality",
    "ConfigError",
    "CycleError",
    "DefaultEquality",
    "IdentityEquality",
    "KeyEquality",
    "NullDependencySequenceError",
    "NullKeyError",
    "TopologicalOrderError",
    "TopologicalSorter",
    "UsageError",
    "VisitState",
    "find_cycle",
    "format_cycle_tree",
    "render_cycle",
    "topological_order",
]

from ._equality import CaseInsensitiveEquality, DefaultEquality, IdentityEquality, KeyEquality
from ._errors import (
    ConfigError,
    CycleError,
    NullDependencySequenceError,
    NullKeyError,
    TopologicalOrderError,
    UsageError,
)
from ._graph import TopologicalSorter, VisitState, find_cycle, topological_order
from ._render import format_cycle_tree, render_cycle

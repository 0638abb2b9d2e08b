"""Exceptions raised while computing a topological order."""

from collections.abc import Sequence
from typing import Any


class TopologicalOrderError(Exception):
    """Base class for every error raised by depord."""


class UsageError(TopologicalOrderError, ValueError):
    """A caller-supplied selector returned a value the traversal cannot use.

    Attributes:
        node: The node that was passed to the selector.
        param_name: Name of the offending selector parameter.

    """

    param_name: str = ""

    def __init__(self, node: Any) -> None:
        self.node = node
        super().__init__(f"{self.param_name} returned None for {node}.")


class NullDependencySequenceError(UsageError):
    """Raised when ``dependencies_of`` returns ``None`` instead of an iterable."""

    param_name = "dependencies_of"


class NullKeyError(UsageError):
    """Raised when ``key_of`` returns ``None`` for a node."""

    param_name = "key_of"


class CycleError(TopologicalOrderError, ValueError):
    """Raised when a node is reached again while it is still being visited.

    The cycle is kept as data: ``cycle`` starts at the first occurrence of the
    repeated node on the traversal path and ends with its recurrence.

    Example:
        >>> err = CycleError([1, 2, 3, 1])
        >>> print(err)
        Cyclic dependency found.
        Cycle: 1 -> 2 -> 3 -> 1

    """

    def __init__(self, cycle: Sequence[Any]) -> None:
        self.cycle: tuple[Any, ...] = tuple(cycle)
        super().__init__(f"Cyclic dependency found.\nCycle: {format_path(self.cycle)}")


class ConfigError(TopologicalOrderError, TypeError):
    """Invalid sorter configuration."""


def format_path(nodes: Sequence[Any]) -> str:
    """Join the string forms of ``nodes`` with ``" -> "``."""
    return " -> ".join(str(node) for node in nodes)

"""Depth-first topological ordering over an implicit dependency graph."""

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

from depord._equality import KeyEquality, equate
from depord._errors import CycleError, NullDependencySequenceError, NullKeyError, format_path

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


class VisitState(StrEnum):
    """Visitation state of a key during a single traversal."""

    UNVISITED = auto()  # Not seen yet
    IN_PROGRESS = auto()  # On the current traversal path
    DONE = auto()  # Emitted, along with everything it depends on


@dataclass(slots=True)
class _Frame[T]:
    """One entry of the traversal path."""

    node: T
    key: Any = None
    pending: Iterator[T] = field(default_factory=lambda: iter(()))


def iter_topological_order[T](
    source: Iterable[T],
    dependencies_of: Callable[[T], Iterable[T] | None],
    key_of: Callable[[T], Any] | None = None,
    key_equality: KeyEquality[Any] | None = None,
) -> Iterator[T]:
    """Yield nodes so that every node comes after the nodes it depends on.

    Nodes are visited in source order and their dependencies in the order
    ``dependencies_of`` returns them; the result is the DFS post-order of that
    traversal. The traversal keeps its own work stack, so chain depth is not
    bounded by the interpreter recursion limit.

    This is a generator: the graph is only explored as far as needed to
    produce the next node, and errors are raised when the offending node is
    reached.

    Args:
        source: Nodes to order. Duplicates (by key) are emitted once.
        dependencies_of: Returns the nodes a node depends on.
        key_of: Derives the identity key of a node. Defaults to the node itself.
        key_equality: Custom equality over keys. Defaults to ``==``/``hash()``.

    Yields:
        Nodes in topological order.

    Raises:
        NullKeyError: If the key of a node is None.
        NullDependencySequenceError: If ``dependencies_of`` returns None.
        CycleError: If a node depends on itself, directly or transitively.

    """
    states: dict[Any, VisitState] = {}
    path: list[_Frame[T]] = []

    def enter(node: T) -> None:
        frame = _Frame(node)
        path.append(frame)

        key = node if key_of is None else key_of(node)
        if key is None:
            logger.debug("key_of returned None for %r", node)
            raise NullKeyError(node)
        frame.key = equate(key, key_equality)

        match states.get(frame.key, VisitState.UNVISITED):
            case VisitState.IN_PROGRESS:
                start = next(i for i, f in enumerate(path) if f.key == frame.key)
                cycle = [f.node for f in path[start:]]
                logger.debug("Cycle detected: %s", format_path(cycle))
                raise CycleError(cycle)
            case VisitState.DONE:
                logger.debug("Skipping %r (already emitted)", node)
                path.pop()
            case VisitState.UNVISITED:
                logger.debug("Expanding %r (key %r)", node, frame.key)
                states[frame.key] = VisitState.IN_PROGRESS
                dependencies = dependencies_of(node)
                if dependencies is None:
                    logger.debug("dependencies_of returned None for %r", node)
                    raise NullDependencySequenceError(node)
                frame.pending = iter(dependencies)

    logger.debug("Starting topological order")
    for node in source:
        enter(node)
        while path:
            frame = path[-1]
            dependency = next(frame.pending, _EXHAUSTED)
            if dependency is _EXHAUSTED:
                yield frame.node
                states[frame.key] = VisitState.DONE
                path.pop()
            else:
                enter(dependency)

"""Reusable sorter configuration and convenience entry points."""

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

from depord._equality import KeyEquality
from depord._errors import ConfigError, CycleError

from ._algorithms import iter_topological_order


@dataclass(frozen=True, slots=True)
class TopologicalSorter[T]:
    """Orders nodes of an implicit dependency graph.

    The graph is never stored: each call to ``order`` walks it afresh through
    ``dependencies_of``. A sorter holds no traversal state and can be reused.

    Attributes:
        dependencies_of: Returns the nodes a node depends on (must precede it).
        key_of: Derives the identity key of a node. None means the node itself.
        key_equality: Equality over keys. None means natural ``==``/``hash()``.

    Example:
        >>> deps = {"app": ["lib", "util"], "lib": ["util"], "util": []}
        >>> list(TopologicalSorter(deps.__getitem__).order(["app"]))
        ['util', 'lib', 'app']

    """

    dependencies_of: Callable[[T], Iterable[T] | None]
    key_of: Callable[[T], Any] | None = None
    key_equality: KeyEquality[Any] | None = None

    def __post_init__(self) -> None:
        if not callable(self.dependencies_of):
            msg = f"dependencies_of must be callable, got {type(self.dependencies_of).__name__}"
            raise ConfigError(msg)
        if self.key_of is not None and not callable(self.key_of):
            msg = f"key_of must be callable, got {type(self.key_of).__name__}"
            raise ConfigError(msg)
        if self.key_equality is not None and not (
            isinstance(self.key_equality, KeyEquality)
            and callable(getattr(self.key_equality, "equals", None))
            and callable(getattr(self.key_equality, "hash", None))
        ):
            msg = "key_equality must provide callable 'equals' and 'hash' methods"
            raise ConfigError(msg)

    def order(self, source: Iterable[T]) -> Iterator[T]:
        """Return a lazy iterator over ``source`` in topological order.

        Args:
            source: Nodes to order.

        Returns:
            A single-pass iterator. Errors surface while it is consumed.

        """
        return iter_topological_order(source, self.dependencies_of, self.key_of, self.key_equality)

    def find_cycle(self, source: Iterable[T]) -> tuple[T, ...] | None:
        """Return the first cycle reachable from ``source``, or None if acyclic."""
        try:
            for _ in self.order(source):
                pass
        except CycleError as e:
            return e.cycle
        return None


def topological_order[T](
    source: Iterable[T],
    dependencies_of: Callable[[T], Iterable[T] | None],
    *,
    key_of: Callable[[T], Any] | None = None,
    key_equality: KeyEquality[Any] | None = None,
) -> Iterator[T]:
    """Lazily order ``source`` so that each node follows its dependencies.

    Supplying only ``key_equality`` compares the nodes themselves with it;
    supplying ``key_of`` as well compares the derived keys.

    Raises:
        ConfigError: Immediately, if an option is not usable.

    """
    sorter = TopologicalSorter(dependencies_of, key_of=key_of, key_equality=key_equality)
    return sorter.order(source)


def find_cycle[T](
    source: Iterable[T],
    dependencies_of: Callable[[T], Iterable[T] | None],
    *,
    key_of: Callable[[T], Any] | None = None,
    key_equality: KeyEquality[Any] | None = None,
) -> tuple[T, ...] | None:
    """Return the cycle found while ordering ``source``, or None if there is none.

    Usage errors from the selectors still propagate.
    """
    sorter = TopologicalSorter(dependencies_of, key_of=key_of, key_equality=key_equality)
    return sorter.find_cycle(source)

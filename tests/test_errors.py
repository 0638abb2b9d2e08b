"""Tests for the error taxonomy."""

import pytest

from depord import (
    ConfigError,
    CycleError,
    NullDependencySequenceError,
    NullKeyError,
    TopologicalOrderError,
    UsageError,
)


class TestCycleError:
    """Tests for CycleError."""

    def test_message_joins_nodes(self) -> None:
        """Should join nodes with arrows after the fixed prefix."""
        err = CycleError([1, 2, 3, 1])
        assert str(err) == "Cyclic dependency found.\nCycle: 1 -> 2 -> 3 -> 1"

    def test_cycle_is_stored_as_tuple(self) -> None:
        """Should copy the cycle into a tuple."""
        cycle = ["a", "b", "a"]
        err = CycleError(cycle)
        cycle.append("c")
        assert err.cycle == ("a", "b", "a")

    def test_uses_str_of_nodes(self) -> None:
        """Should use str() of each node."""

        class Named:
            def __str__(self) -> str:
                return "named"

        node = Named()
        assert str(CycleError([node, node])).endswith("Cycle: named -> named")


class TestUsageErrors:
    """Tests for the selector usage errors."""

    def test_null_dependency_sequence(self) -> None:
        """Should carry the node and selector name."""
        err = NullDependencySequenceError("a")
        assert err.node == "a"
        assert err.param_name == "dependencies_of"
        assert str(err) == "dependencies_of returned None for a."

    def test_null_key(self) -> None:
        """Should carry the node and selector name."""
        err = NullKeyError(3)
        assert err.node == 3
        assert err.param_name == "key_of"
        assert str(err) == "key_of returned None for 3."


@pytest.mark.parametrize(
    ("error_type", "bases"),
    [
        (NullDependencySequenceError, (UsageError, ValueError, TopologicalOrderError)),
        (NullKeyError, (UsageError, ValueError, TopologicalOrderError)),
        (CycleError, (ValueError, TopologicalOrderError)),
        (ConfigError, (TypeError, TopologicalOrderError)),
    ],
)
def test_hierarchy(error_type: type[Exception], bases: tuple[type[Exception], ...]) -> None:
    """Should subclass the expected bases."""
    for base in bases:
        assert issubclass(error_type, base)


def test_cycle_error_is_not_usage_error() -> None:
    """Should keep cycle errors apart from usage errors."""
    assert not issubclass(CycleError, UsageError)

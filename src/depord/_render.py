"""Rich rendering utilities for cycle errors.

Presentation only: these helpers turn a CycleError into Rich renderables and
never inspect the graph themselves.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape
from rich.tree import Tree

if TYPE_CHECKING:
    from rich.console import Console

    from depord._errors import CycleError


def format_cycle_tree(error: CycleError) -> Tree:
    """Build a tree showing the cycle path, one level per dependency hop.

    The first and last entries are the repeated node and are highlighted.

    Args:
        error: The cycle error to render.

    Returns:
        A Rich Tree rooted at the first node of the cycle.

    """
    first, *rest = error.cycle
    tree = Tree(f"[bold red]{escape(str(first))}[/bold red]")
    branch = tree
    for index, node in enumerate(rest, start=1):
        label = escape(str(node))
        if index == len(rest):
            label = f"[bold red]{label}[/bold red] [dim](cycle)[/dim]"
        branch = branch.add(label)
    return tree


def render_cycle(error: CycleError, console: Console) -> None:
    """Print a summary line and the cycle tree.

    Args:
        error: The cycle error to render.
        console: Rich console to print to.

    """
    # A self-cycle has two entries for one distinct node
    length = len(error.cycle) - 1
    noun = "node" if length == 1 else "nodes"
    console.print(f"[red]✗ Cyclic dependency found[/red] [dim]({length} {noun})[/dim]")
    console.print(format_cycle_tree(error))

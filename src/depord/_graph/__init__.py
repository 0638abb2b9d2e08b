"""Graph module providing topological ordering.

This module contains:
- TopologicalSorter[T]: Reusable ordering configuration
- topological_order: Lazy DFS post-order with cycle reporting
- find_cycle: Cycle query without exception handling
"""

from ._algorithms import VisitState
from ._sorter import TopologicalSorter, find_cycle, topological_order

__all__ = ["TopologicalSorter", "VisitState", "find_cycle", "topological_order"]

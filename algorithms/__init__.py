"""
algorithms/__init__.py — Algorithm Registry
===========================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm, simulate

REGISTRY maps an algorithm id to its AlgorithmDescriptor (name, category,
complexity, source listing, flow diagram).  SIMULATORS maps the ids that
have a dedicated step simulator to that simulator.  Adding a simulated
algorithm is: write the simulator, add one entry to each dict.

simulate() is the one entry point the engine uses.  It never raises: ids
without a simulator (including ids nobody has ever heard of) get the
generic three-step trace.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from flowgraph import FlowGraph, flowchart_for
from algorithms.step import ExecutionStep
from algorithms.generic import generic_trace
from algorithms import listings

# ---------------------------------------------------------------------------
# Import all simulator modules
# ---------------------------------------------------------------------------
from algorithms.bubble_sort   import bubble_sort   as _bubble_sort,   SOURCE as _bubble_src
from algorithms.binary_search import binary_search as _binary_search, SOURCE as _binary_src

logger = logging.getLogger(__name__)


Simulator = Callable[[Any, Any], Tuple[ExecutionStep, ...]]
FlowSpec = Union[FlowGraph, Callable[[str], FlowGraph]]


class UnsupportedAlgorithm(LookupError):
    """No dedicated simulator is registered for an algorithm id."""


# ---------------------------------------------------------------------------
# AlgorithmDescriptor — metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class AlgorithmDescriptor:
    id:               str                    # registry key, e.g. "bubble-sort"
    name:             str                    # display name, e.g. "Bubble Sort"
    category:         str                    # "sorting", "searching", "graph", "array"
    complexity_time:  str                    # e.g. "O(n²)"
    complexity_space: str                    # e.g. "O(1)"
    source_text:      str                    # listing shown in the code view
    flow_spec:        FlowSpec = flowchart_for
    description:      str      = ""

    def flow_graph(self) -> FlowGraph:
        if isinstance(self.flow_spec, FlowGraph):
            return self.flow_spec
        return self.flow_spec(self.name)

    def to_dict(self, include_source: bool = True) -> Dict[str, Any]:
        data = {
            "id":          self.id,
            "name":        self.name,
            "category":    self.category,
            "description": self.description,
            "complexity":  {"time": self.complexity_time, "space": self.complexity_space},
        }
        if include_source:
            data["sourceText"] = self.source_text
        return data


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, AlgorithmDescriptor] = {

    "bubble-sort": AlgorithmDescriptor(
        id="bubble-sort", name="Bubble Sort", category="sorting",
        complexity_time="O(n²)", complexity_space="O(1)", source_text=_bubble_src,
        description="Repeatedly compares adjacent elements and swaps them when out of order.",
    ),

    "quick-sort": AlgorithmDescriptor(
        id="quick-sort", name="Quick Sort", category="sorting",
        complexity_time="O(n log n) average", complexity_space="O(log n)",
        source_text=listings.QUICK_SORT,
        description="Divide and conquer around a pivot element.",
    ),

    "merge-sort": AlgorithmDescriptor(
        id="merge-sort", name="Merge Sort", category="sorting",
        complexity_time="O(n log n)", complexity_space="O(n)",
        source_text=listings.MERGE_SORT,
        description="Stable divide and conquer: split in halves, sort, merge back.",
    ),

    "binary-search": AlgorithmDescriptor(
        id="binary-search", name="Binary Search", category="searching",
        complexity_time="O(log n)", complexity_space="O(1)", source_text=_binary_src,
        description="Halves a sorted array until the target is found or the range is empty.",
    ),

    "linear-search": AlgorithmDescriptor(
        id="linear-search", name="Linear Search", category="searching",
        complexity_time="O(n)", complexity_space="O(1)",
        source_text=listings.LINEAR_SEARCH,
        description="Checks each element in turn until the target turns up.",
    ),

    "dijkstra": AlgorithmDescriptor(
        id="dijkstra", name="Dijkstra's Algorithm", category="graph",
        complexity_time="O(V²)", complexity_space="O(V)",
        source_text=listings.DIJKSTRA,
        description="Shortest paths from one node in a graph with non-negative weights.",
    ),

    "bfs": AlgorithmDescriptor(
        id="bfs", name="BFS", category="graph",
        complexity_time="O(V + E)", complexity_space="O(V)",
        source_text=listings.BFS,
        description="Breadth-first traversal, level by level, using a queue.",
    ),

    "dfs": AlgorithmDescriptor(
        id="dfs", name="DFS", category="graph",
        complexity_time="O(V + E)", complexity_space="O(V)",
        source_text=listings.DFS,
        description="Depth-first traversal, as deep as possible before backtracking.",
    ),

    "two-sum": AlgorithmDescriptor(
        id="two-sum", name="Two Sum", category="array",
        complexity_time="O(n)", complexity_space="O(n)",
        source_text=listings.TWO_SUM,
        description="Finds two numbers that add up to a target with one hash-map pass.",
    ),
}


SIMULATORS: Dict[str, Simulator] = {
    "bubble-sort":   _bubble_sort,
    "binary-search": _binary_search,
}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgorithmDescriptor]:
    """Return AlgorithmDescriptor by id, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgorithmDescriptor]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_category() -> Dict[str, List[AlgorithmDescriptor]]:
    grouped: Dict[str, List[AlgorithmDescriptor]] = {}
    for algo in REGISTRY.values():
        grouped.setdefault(algo.category, []).append(algo)
    return grouped


def find_by_name(name: str) -> Optional[AlgorithmDescriptor]:
    """Case-insensitive display-name lookup."""
    wanted = (name or "").strip().lower()
    for algo in REGISTRY.values():
        if algo.name.lower() == wanted:
            return algo
    return None


def resolve_algorithm(key: str) -> Optional[AlgorithmDescriptor]:
    """Accept an id ("bubble-sort"), a display name ("Bubble Sort") or a
    name-ish slug ("bubble sort") and return the descriptor, or None."""
    text = str(key or "").strip()
    if text in REGISTRY:
        return REGISTRY[text]
    by_name = find_by_name(text)
    if by_name is not None:
        return by_name
    return REGISTRY.get("-".join(text.lower().split()))


def get_simulator(key: str) -> Simulator:
    try:
        return SIMULATORS[key]
    except KeyError:
        raise UnsupportedAlgorithm(key) from None


# ---------------------------------------------------------------------------
# Simulation — steps + diagram for one (algorithm, input) pair
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Simulation:
    algorithm_id: str
    name:         str
    steps:        Tuple[ExecutionStep, ...]
    flow_graph:   FlowGraph
    descriptor:   Optional[AlgorithmDescriptor] = None

    @property
    def step_count(self) -> int:
        return len(self.steps)

    @property
    def final_step(self) -> Optional[ExecutionStep]:
        return self.steps[-1] if self.steps else None

    @property
    def source_text(self) -> str:
        return self.descriptor.source_text if self.descriptor else ""


def simulate(algorithm: str, raw_input: Any = None, target: Any = None) -> Simulation:
    """
    Produce the step trace and flow diagram for one run.

    Args:
        algorithm : Registry id or display name.
        raw_input : List, number or text; see algorithms.inputs.
        target    : Search target, for search simulators.
    """
    descriptor = resolve_algorithm(algorithm)
    key = descriptor.id if descriptor else str(algorithm).strip()
    name = descriptor.name if descriptor else key

    try:
        simulator = get_simulator(key)
    except UnsupportedAlgorithm:
        logger.debug("no simulator for %r, using the generic trace", key)
        steps = generic_trace(name, raw_input)
    else:
        steps = simulator(raw_input, target)

    flow = descriptor.flow_graph() if descriptor else flowchart_for(name)
    return Simulation(algorithm_id=key, name=name, steps=steps, flow_graph=flow, descriptor=descriptor)


__all__ = [
    "AlgorithmDescriptor",
    "REGISTRY",
    "SIMULATORS",
    "Simulation",
    "UnsupportedAlgorithm",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_category",
    "find_by_name",
    "resolve_algorithm",
    "get_simulator",
    "simulate",
]

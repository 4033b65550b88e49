"""
catalogue.py — Flow Diagram Catalogue
=====================================
Maps an algorithm's display name to the flow diagram drawn next to its code.

    from flowgraph.catalogue import flowchart_for
    graph = flowchart_for("Bubble Sort")

Matching is an explicit ordered list of (keywords, generator) pairs checked
top to bottom against the lower-cased name.  The FIRST pair with a keyword
contained in the name wins, so a name that mentions two algorithms resolves
to whichever entry comes first in CATALOGUE.  Nothing matches → the generic
five-box diagram with the name in the middle box.

The diagrams are illustrative: they show the algorithm's full control
structure (early exits included) even where a simulator's trace never takes
that branch.
"""

from typing import Callable, List, Sequence, Tuple

from flowgraph.node import FlowNode, NodeKind
from flowgraph.edge import FlowEdge, FlowGraph


FlowGenerator = Callable[[str], FlowGraph]


# ---------------------------------------------------------------------------
# Builder helper — (id, label, kind, x, y) rows and (from, to[, label]) rows
# ---------------------------------------------------------------------------
def _diagram(node_rows: Sequence[tuple], edge_rows: Sequence[tuple]) -> FlowGraph:
    nodes = tuple(
        FlowNode(id=nid, label=label, kind=NodeKind(kind), position=(x, y))
        for nid, label, kind, x, y in node_rows
    )
    edges = tuple(FlowEdge(*row) for row in edge_rows)
    return FlowGraph(nodes=nodes, edges=edges)


# ---------------------------------------------------------------------------
# Diagrams
# ---------------------------------------------------------------------------
def bubble_sort_flow(_name: str = "") -> FlowGraph:
    return _diagram(
        [
            ("start",    "Start",                  "start",    300, 50),
            ("input",    "Read Array",             "process",  300, 130),
            ("outer",    "i = 0 to n-2",           "process",  300, 210),
            ("inner",    "j = 0 to n-i-2",         "process",  300, 290),
            ("compare",  "arr[j] > arr[j+1]?",     "decision", 300, 370),
            ("swap",     "Swap arr[j] & arr[j+1]", "process",  150, 450),
            ("continue", "Continue",               "process",  450, 450),
            ("next",     "Next iteration",         "process",  300, 530),
            ("noswap",   "No swaps? Break",        "decision", 450, 530),
            ("end",      "End (Sorted)",           "end",      300, 610),
        ],
        [
            ("start", "input"),
            ("input", "outer"),
            ("outer", "inner"),
            ("inner", "compare"),
            ("compare", "swap", "Yes"),
            ("compare", "continue", "No"),
            ("swap", "continue"),
            ("continue", "next"),
            ("next", "compare"),
            ("next", "noswap"),
            ("noswap", "end", "Yes"),
            ("outer", "end"),
        ],
    )


def binary_search_flow(_name: str = "") -> FlowGraph:
    return _diagram(
        [
            ("start",    "Start",                "start",    300, 50),
            ("init",     "left=0, right=n-1",    "process",  300, 130),
            ("loop",     "left <= right?",       "decision", 300, 210),
            ("mid",      "mid = (left+right)/2", "process",  300, 290),
            ("check",    "arr[mid] == target?",  "decision", 300, 370),
            ("found",    "Found at mid",         "process",  150, 450),
            ("greater",  "target > arr[mid]",    "process",  450, 450),
            ("smaller",  "target < arr[mid]",    "process",  300, 530),
            ("update",   "Update left/right",    "process",  300, 610),
            ("notfound", "Not Found",            "process",  150, 690),
            ("end",      "End",                  "end",      300, 770),
        ],
        [
            ("start", "init"),
            ("init", "loop"),
            ("loop", "mid", "Yes"),
            ("loop", "notfound", "No"),
            ("mid", "check"),
            ("check", "found", "Yes"),
            ("check", "greater", "target > arr[mid]"),
            ("check", "smaller", "target < arr[mid]"),
            ("greater", "update"),
            ("smaller", "update"),
            ("update", "loop"),
            ("found", "end"),
            ("notfound", "end"),
        ],
    )


def quick_sort_flow(_name: str = "") -> FlowGraph:
    return _diagram(
        [
            ("start",     "Start",                 "start",    300, 50),
            ("base",      "Is array length <= 1?", "decision", 300, 130),
            ("pivot",     "Choose pivot",          "process",  300, 210),
            ("partition", "Partition array",       "process",  300, 290),
            ("recurse1",  "QuickSort left",        "process",  150, 370),
            ("recurse2",  "QuickSort right",       "process",  450, 370),
            ("end",       "End (Sorted)",          "end",      300, 450),
        ],
        [
            ("start", "base"),
            ("base", "end", "Yes"),
            ("base", "pivot", "No"),
            ("pivot", "partition"),
            ("partition", "recurse1"),
            ("recurse1", "recurse2"),
            ("recurse2", "end"),
        ],
    )


def merge_sort_flow(_name: str = "") -> FlowGraph:
    return _diagram(
        [
            ("start", "Start",                 "start",    300, 50),
            ("base",  "Is array length <= 1?", "decision", 300, 130),
            ("mid",   "mid = n/2",             "process",  300, 210),
            ("left",  "MergeSort left half",   "process",  150, 290),
            ("right", "MergeSort right half",  "process",  450, 290),
            ("merge", "Merge both halves",     "process",  300, 370),
            ("end",   "End (Sorted)",          "end",      300, 450),
        ],
        [
            ("start", "base"),
            ("base", "end", "Yes"),
            ("base", "mid", "No"),
            ("mid", "left"),
            ("left", "right"),
            ("right", "merge"),
            ("merge", "end"),
        ],
    )


def linear_search_flow(_name: str = "") -> FlowGraph:
    return _diagram(
        [
            ("start",     "Start",             "start",    300, 50),
            ("init",      "i = 0",             "process",  300, 130),
            ("loop",      "i < n?",            "decision", 300, 210),
            ("check",     "arr[i] == target?", "decision", 300, 290),
            ("found",     "Found at i",        "process",  150, 370),
            ("increment", "i++",               "process",  450, 370),
            ("notfound",  "Not Found",         "process",  300, 450),
            ("end",       "End",               "end",      300, 530),
        ],
        [
            ("start", "init"),
            ("init", "loop"),
            ("loop", "check", "Yes"),
            ("loop", "notfound", "No"),
            ("check", "found", "Yes"),
            ("check", "increment", "No"),
            ("increment", "loop"),
            ("found", "end"),
            ("notfound", "end"),
        ],
    )


def dijkstra_flow(_name: str = "") -> FlowGraph:
    return _diagram(
        [
            ("start",  "Start",                 "start",    300, 50),
            ("init",   "Initialize distances",  "process",  300, 130),
            ("select", "Select unvisited node", "process",  300, 210),
            ("check",  "Any unvisited?",        "decision", 300, 290),
            ("update", "Update distances",      "process",  300, 370),
            ("mark",   "Mark as visited",       "process",  300, 450),
            ("end",    "End",                   "end",      300, 530),
        ],
        [
            ("start", "init"),
            ("init", "select"),
            ("select", "check"),
            ("check", "update", "Yes"),
            ("check", "end", "No"),
            ("update", "mark"),
            ("mark", "select"),
        ],
    )


def _traversal_flow(container: str, take: str, put: str) -> FlowGraph:
    return _diagram(
        [
            ("start",    "Start",                             "start",    300, 50),
            ("init",     f"Create {container}, add start",    "process",  300, 130),
            ("loop",     f"{container.capitalize()} empty?",  "decision", 300, 210),
            (take,       f"{take.capitalize()} node",         "process",  300, 290),
            ("visit",    "Visit neighbors",                   "process",  300, 370),
            (put,        f"{put.capitalize()} unvisited",     "process",  300, 450),
            ("end",      "End",                               "end",      300, 530),
        ],
        [
            ("start", "init"),
            ("init", "loop"),
            ("loop", take, "No"),
            ("loop", "end", "Yes"),
            (take, "visit"),
            ("visit", put),
            (put, "loop"),
        ],
    )


def bfs_flow(_name: str = "") -> FlowGraph:
    return _traversal_flow("queue", "dequeue", "enqueue")


def dfs_flow(_name: str = "") -> FlowGraph:
    return _traversal_flow("stack", "pop", "push")


def two_sum_flow(_name: str = "") -> FlowGraph:
    return _diagram(
        [
            ("start",    "Start",                 "start",    300, 50),
            ("init",     "Create hash map",       "process",  300, 130),
            ("loop",     "For each num in array", "process",  300, 210),
            ("check",    "complement in map?",    "decision", 300, 290),
            ("found",    "Return indices",        "process",  150, 370),
            ("add",      "Add num to map",        "process",  450, 370),
            ("continue", "Continue loop",         "process",  300, 450),
            ("notfound", "Not found",             "process",  300, 530),
            ("end",      "End",                   "end",      300, 610),
        ],
        [
            ("start", "init"),
            ("init", "loop"),
            ("loop", "check"),
            ("check", "found", "Yes"),
            ("check", "add", "No"),
            ("add", "continue"),
            ("continue", "loop"),
            ("found", "end"),
            ("loop", "notfound"),
            ("notfound", "end"),
        ],
    )


def generic_flow(name: str) -> FlowGraph:
    """Start → Process Input → <name> → Return Result → End."""
    return _diagram(
        [
            ("start",     "Start",         "start",   300, 50),
            ("process",   "Process Input", "process", 300, 130),
            ("algorithm", name,            "process", 300, 210),
            ("result",    "Return Result", "process", 300, 290),
            ("end",       "End",           "end",     300, 370),
        ],
        [
            ("start", "process"),
            ("process", "algorithm"),
            ("algorithm", "result"),
            ("result", "end"),
        ],
    )


# ---------------------------------------------------------------------------
# THE CATALOGUE — order matters, first match wins
# ---------------------------------------------------------------------------
CATALOGUE: List[Tuple[Tuple[str, ...], FlowGenerator]] = [
    (("bubble sort", "bubblesort"),     bubble_sort_flow),
    (("binary search", "binarysearch"), binary_search_flow),
    (("quick sort", "quicksort"),       quick_sort_flow),
    (("merge sort", "mergesort"),       merge_sort_flow),
    (("linear search", "linearsearch"), linear_search_flow),
    (("dijkstra",),                     dijkstra_flow),
    (("bfs",),                          bfs_flow),
    (("dfs",),                          dfs_flow),
    (("two sum", "twosum"),             two_sum_flow),
]


def flowchart_for(name: str) -> FlowGraph:
    """Return the diagram for an algorithm display name."""
    lowered = (name or "").lower()
    for keywords, generator in CATALOGUE:
        if any(k in lowered for k in keywords):
            return generator(name)
    return generic_flow(name)

"""
bubble_sort.py — Bubble Sort
============================
Emits a step at every meaningful event:
  1. Announce the input array
  2. Start of each outer pass
  3. Every adjacent comparison
  4. A swap, only when the comparison swapped something
  5. Final step  →  the sorted array

The listing's early exit (`if not swapped: break`) is part of the drawn
diagram but the trace never emits a step for it; every pass runs to the
end and the summary step closes the run.

Source lines are 1-based and match the SOURCE listing exported alongside
the simulator so the code view can highlight them live.
"""

from typing import Any, List, Tuple

from algorithms.inputs import normalize_input, greater, format_array, format_value
from algorithms.step import ExecutionStep, TraceBuilder


# ---------------------------------------------------------------------------
# Source listing — each string is one displayed line; line number = index + 1
# ---------------------------------------------------------------------------
SOURCE_LINES: List[str] = [
    "def bubble_sort(arr):",                                   # 1
    "    n = len(arr)",                                        # 2
    "    for i in range(n - 1):",                              # 3
    "        swapped = False",                                 # 4
    "        for j in range(0, n - i - 1):",                   # 5
    "            if arr[j] > arr[j + 1]:",                     # 6
    "                arr[j], arr[j + 1] = arr[j + 1], arr[j]", # 7
    "                swapped = True",                          # 8
    "        if not swapped:",                                 # 9
    "            break",                                       # 10
    "    return arr",                                          # 11
    "",                                                        # 12
    "",                                                        # 13
    "arr = [64, 34, 25, 12, 22, 11, 90]",                      # 14
    'print(f"Sorted array: {bubble_sort(arr)}")',              # 15
]
SOURCE = "\n".join(SOURCE_LINES)

LINE_INPUT   = 2
LINE_PASS    = 3
LINE_COMPARE = 6
LINE_SWAP    = 7
LINE_RETURN  = 11


# ---------------------------------------------------------------------------
# Simulator
# ---------------------------------------------------------------------------
def bubble_sort(raw_input: Any, target: Any = None) -> Tuple[ExecutionStep, ...]:
    """
    Returns the step trace for bubble-sorting the normalised input.

    Args:
        raw_input : Anything normalize_input accepts.
        target    : Ignored; sorts have no target.
    """
    arr = normalize_input(raw_input)
    n = len(arr)
    tb = TraceBuilder()

    tb.emit(
        "Start Bubble Sort",
        f"Input array: {format_array(arr)}",
        source_line=LINE_INPUT, flow_node="input", array=arr,
    )

    for i in range(n - 1):
        tb.emit(
            f"Outer loop iteration {i + 1}",
            f"Checking positions 0 to {n - i - 1}",
            source_line=LINE_PASS, flow_node="outer", array=arr,
        )

        for j in range(n - i - 1):
            tb.emit(
                f"Compare {format_value(arr[j])} and {format_value(arr[j + 1])}",
                f"Comparing elements at indices {j} and {j + 1}",
                source_line=LINE_COMPARE, flow_node="compare", array=arr, indices=(j, j + 1),
            )

            if greater(arr[j], arr[j + 1]):
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                tb.emit(
                    f"Swap {format_value(arr[j])} and {format_value(arr[j + 1])}",
                    f"Swapped! New order: {format_array(arr)}",
                    source_line=LINE_SWAP, flow_node="swap", array=arr, indices=(j, j + 1),
                    swapped=True,
                )

    tb.emit(
        "Complete",
        f"Final sorted array: {format_array(arr)}",
        source_line=LINE_RETURN, flow_node="end", array=arr, terminal=True,
    )
    return tb.build()

"""
binary_search.py — Binary Search
================================
Sorts the input, then emits:
  1. A start step with the sorted array and the target
  2. Per loop iteration: one "check middle" step, then exactly one of
       • Found!             (terminal, carries found_index, returns)
       • Target is greater  (left bound moves right)
       • Target is smaller  (right bound moves left)
  3. Loop exhausted  →  terminal "Not Found"
"""

from typing import Any, List, Tuple

from algorithms.inputs import split_search_input, order_key, format_array, format_value
from algorithms.step import ExecutionStep, TraceBuilder


SOURCE_LINES: List[str] = [
    "def binary_search(arr, target):",              # 1
    "    left = 0",                                 # 2
    "    right = len(arr) - 1",                     # 3
    "    while left <= right:",                     # 4
    "        mid = (left + right) // 2",            # 5
    "        if arr[mid] == target:",               # 6
    "            return mid",                       # 7
    "        elif arr[mid] < target:",              # 8
    "            left = mid + 1",                   # 9
    "        else:",                                # 10
    "            right = mid - 1",                  # 11
    "    return -1",                                # 12
    "",                                             # 13
    "",                                             # 14
    "arr = [2, 5, 8, 12, 16, 23, 38, 45, 67, 77]",  # 15
    "print(binary_search(arr, 23))",                # 16
]
SOURCE = "\n".join(SOURCE_LINES)

# searched when the input is a lone number
EXAMPLE_ARRAY: Tuple[int, ...] = (2, 5, 8, 12, 16, 23, 38, 45, 67, 77)

LINE_INIT      = 2
LINE_MID       = 5
LINE_FOUND     = 7
LINE_GO_RIGHT  = 9
LINE_GO_LEFT   = 11
LINE_NOT_FOUND = 12


def binary_search(raw_input: Any, target: Any = None) -> Tuple[ExecutionStep, ...]:
    arr, target = split_search_input(raw_input, target, default_array=EXAMPLE_ARRAY)
    ordered = sorted(arr, key=order_key)
    wanted = order_key(target)
    shown = format_value(target)
    tb = TraceBuilder()

    tb.emit(
        "Start Binary Search",
        f"Searching for {shown} in sorted array {format_array(ordered)}",
        source_line=LINE_INIT, flow_node="init", array=ordered, target=target,
    )

    left, right = 0, len(ordered) - 1
    while left <= right:
        mid = (left + right) // 2
        value = ordered[mid]
        tb.emit(
            f"Check middle element at index {mid}",
            f"Checking middle element: {format_value(value)}",
            source_line=LINE_MID, flow_node="mid", array=ordered, indices=(left, mid, right),
        )

        if order_key(value) == wanted:
            tb.emit(
                "Found!",
                f"Found {shown} at index {mid}!",
                source_line=LINE_FOUND, flow_node="found", array=ordered, indices=(mid,),
                found_index=mid, terminal=True,
            )
            return tb.build()

        if order_key(value) < wanted:
            left = mid + 1
            tb.emit(
                "Target is greater",
                f"{shown} > {format_value(value)}, search right half",
                source_line=LINE_GO_RIGHT, flow_node="greater", array=ordered,
            )
        else:
            right = mid - 1
            tb.emit(
                "Target is smaller",
                f"{shown} < {format_value(value)}, search left half",
                source_line=LINE_GO_LEFT, flow_node="smaller", array=ordered,
            )

    tb.emit(
        "Not Found",
        f"{shown} not found in array",
        source_line=LINE_NOT_FOUND, flow_node="notfound", terminal=True,
    )
    return tb.build()

"""
generic.py — Fallback Trace
===========================
Three-step Start / Processing / Complete trace for algorithms that have no
dedicated simulator.  Every message carries the algorithm's display name.
"""

from typing import Any, Tuple

from algorithms.inputs import normalize_input
from algorithms.step import ExecutionStep, TraceBuilder


def generic_trace(name: str, raw_input: Any = None) -> Tuple[ExecutionStep, ...]:
    values = normalize_input(raw_input)
    tb = TraceBuilder()
    tb.emit("Start", f"Processing algorithm: {name}", flow_node="start", array=values)
    tb.emit("Processing", f"Algorithm {name} is executing...")
    tb.emit("Complete", f"Algorithm {name} completed", flow_node="end", array=values, terminal=True)
    return tb.build()

"""
step.py — Execution Step Record
===============================
Every simulator produces a tuple of ExecutionStep objects.  A step is a
frozen-in-time picture of everything the two synchronized views and the
trace log need to render one frame:

    • What happened (action) and a plain-English message for the log
    • Which line of the algorithm's source listing is executing
    • Which flow-diagram node to highlight
    • The array as it looks right now, and which indices are in play
    • Whether this is the final step of the run

Design decisions:
  - ExecutionStep is a frozen dataclass with tuple fields.  A trace is
    produced once per (algorithm, input) and never edited afterwards.
  - Simulators never build ExecutionStep directly; they go through
    TraceBuilder, which owns the running index so steps are always
    0-based and contiguous.
  - `to_dict()` emits the camelCase keys the browser client reads.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class ExecutionStep:
    """
    Attributes:
        index               : 0-based position of this step in the trace.
        action              : Short headline ("Compare 64 and 34").
        message             : Trace-log line.
        source_line         : 1-based line in the source listing, or None.
        flow_node           : ID of the flow-diagram node to highlight, or None.
        array_snapshot      : The working array after this step, or None.
        highlighted_indices : Array indices this step touches.
        terminal            : True on the very last step of a run.
        found_index         : Search result index (search simulators only).
        target              : Search target (search simulators only).
        swapped             : True on a step that swapped two elements.
    """

    index:               int
    action:              str
    message:             str
    source_line:         Optional[int]              = None
    flow_node:           Optional[str]              = None
    array_snapshot:      Optional[Tuple[Any, ...]]  = None
    highlighted_indices: Tuple[int, ...]            = ()
    terminal:            bool                       = False
    found_index:         Optional[int]              = None
    target:              Any                        = None
    swapped:             bool                       = False

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "step":     self.index,
            "action":   self.action,
            "message":  self.message,
            "terminal": self.terminal,
        }
        if self.source_line is not None:
            data["sourceLine"] = self.source_line
        if self.flow_node is not None:
            data["flowNode"] = self.flow_node
        if self.array_snapshot is not None:
            data["arraySnapshot"] = list(self.array_snapshot)
        if self.highlighted_indices:
            data["highlightedIndices"] = list(self.highlighted_indices)
        if self.found_index is not None:
            data["foundIndex"] = self.found_index
        if self.target is not None:
            data["target"] = self.target
        if self.swapped:
            data["swapped"] = True
        return data


# ---------------------------------------------------------------------------
# Convenience builder so simulators don't have to track indices
# ---------------------------------------------------------------------------
class TraceBuilder:
    """
    Append-only scratch-pad that simulators use to emit steps.

    Usage inside a simulator:
        tb = TraceBuilder()
        tb.emit("Start", "Input array: [3, 1]", source_line=3, array=arr)
        ...
        return tb.build()
    """

    def __init__(self):
        self._steps: List[ExecutionStep] = []

    def __len__(self) -> int:
        return len(self._steps)

    def emit(
        self,
        action: str,
        message: str,
        *,
        source_line: Optional[int] = None,
        flow_node: Optional[str] = None,
        array: Optional[Sequence[Any]] = None,
        indices: Sequence[int] = (),
        terminal: bool = False,
        **extra: Any,
    ) -> ExecutionStep:
        step = ExecutionStep(
            index=len(self._steps),
            action=action,
            message=message,
            source_line=source_line,
            flow_node=flow_node,
            array_snapshot=tuple(array) if array is not None else None,
            highlighted_indices=tuple(indices),
            terminal=terminal,
            **extra,
        )
        self._steps.append(step)
        return step

    def build(self) -> Tuple[ExecutionStep, ...]:
        return tuple(self._steps)

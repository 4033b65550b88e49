"""
recorder.py — Run Recorder & Metrics
====================================
Records a complete simulation and computes the summary numbers shown next
to the trace.  Also builds the serialisable payload the remote visualize
endpoint returns.

Usage:
    rec = record("bubble-sort", [5, 1, 4])
    rec.metrics.swaps          # analytics
    rec.export()               # JSON-ready dict
"""

import logging
import time
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from algorithms import Simulation, simulate
from flowgraph import layout

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass — what the summary panel renders
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class RunMetrics:
    algorithm_id:    str           = ""
    name:            str           = ""
    total_steps:     int           = 0
    comparisons:     int           = 0
    swaps:           int           = 0
    found_index:     Optional[int] = None
    terminal_action: str           = ""
    wall_time_ms:    float         = 0.0


# ---------------------------------------------------------------------------
# Recording
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Recording:
    simulation: Simulation
    raw_input:  Any
    target:     Any
    metrics:    RunMetrics

    def export(self) -> Dict[str, Any]:
        sim = self.simulation
        payload = {
            "algorithm": sim.algorithm_id,
            "name":      sim.name,
            "input":     self.raw_input,
            "steps":     [s.to_dict() for s in sim.steps],
            "stepCount": sim.step_count,
            "flowchart": sim.flow_graph.to_dict(),
            "layout":    layout(sim.flow_graph.nodes, sim.flow_graph.edges).to_dict(),
            "metrics":   asdict(self.metrics),
        }
        if self.target is not None:
            payload["target"] = self.target
        return payload


def record(algorithm: str, raw_input: Any = None, target: Any = None) -> Recording:
    """Run the simulator once and measure what it produced."""
    start = time.monotonic()
    sim = simulate(algorithm, raw_input, target)
    wall_ms = (time.monotonic() - start) * 1000

    metrics = compute_metrics(sim, wall_ms)
    logger.debug("recorded %s: %d steps in %.2f ms", sim.algorithm_id, sim.step_count, wall_ms)
    return Recording(simulation=sim, raw_input=raw_input, target=target, metrics=metrics)


def compute_metrics(sim: Simulation, wall_ms: float = 0.0) -> RunMetrics:
    # comparison = a non-terminal step that points at indices without moving them
    comparisons = sum(
        1 for s in sim.steps
        if s.highlighted_indices and not s.swapped and not s.terminal
    )
    swaps = sum(1 for s in sim.steps if s.swapped)
    found = next((s.found_index for s in sim.steps if s.found_index is not None), None)
    last = sim.final_step

    return RunMetrics(
        algorithm_id=sim.algorithm_id,
        name=sim.name,
        total_steps=sim.step_count,
        comparisons=comparisons,
        swaps=swaps,
        found_index=found,
        terminal_action=last.action if last else "",
        wall_time_ms=round(wall_ms, 2),
    )

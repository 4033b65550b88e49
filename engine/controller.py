"""
controller.py — Playback Controller
===================================
The PlaybackController is the ONLY object the views interact with during a
run.  It owns the active Simulation, the step cursor and the playback timer,
and exposes a clean select/play/pause/step/reset/speed API.

State machine:
    IDLE      →  select()                   →  LOADED
    any       →  select()                   →  LOADED   (cursor = 0)
    LOADED / PAUSED / FINISHED  →  play()   →  PLAYING  (FINISHED restarts at 0)
    PLAYING   →  pause()                    →  PAUSED
    PLAYING   →  tick reaches last step     →  FINISHED
    any step op landing on the last step    →  FINISHED
    FINISHED  →  step_backward()            →  PAUSED
    any       →  reset()                    →  LOADED   (cursor = 0)

Timer discipline:
  At most one tick is outstanding.  Every transition that supersedes it
  (select, pause, reset, finishing) cancels the handle AND bumps a
  generation counter; a tick that still fires with an old generation is
  ignored, so a late callback can never move the cursor of a newer trace.

Thread safety:
  This class is NOT thread-safe.  Drive it from one thread / one event
  loop, the same one the scheduler fires callbacks on.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from algorithms import Simulation, simulate
from algorithms.step import ExecutionStep
from engine.scheduler import ManualScheduler, Scheduler, TimerHandle
from flowgraph import FlowGraph

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Phases
# ---------------------------------------------------------------------------
class PlaybackPhase(Enum):
    IDLE     = "idle"
    LOADED   = "loaded"
    PLAYING  = "playing"
    PAUSED   = "paused"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed tiers (milliseconds per step)
# ---------------------------------------------------------------------------
SPEED_TIERS: Dict[int, int] = {
    1: 2000,   # slow
    2: 1000,   # medium
    3: 500,    # fast
}
SPEED_LABELS: Dict[int, str] = {1: "Slow", 2: "Medium", 3: "Fast"}
DEFAULT_SPEED_TIER = 2


# ---------------------------------------------------------------------------
# Snapshots handed to the views
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class PlaybackState:
    cursor:     int
    is_playing: bool
    speed_tier: int
    step_count: int
    phase:      PlaybackPhase

    def to_dict(self) -> Dict[str, Any]:
        return {
            "cursor":    self.cursor,
            "isPlaying": self.is_playing,
            "speedTier": self.speed_tier,
            "stepCount": self.step_count,
            "phase":     self.phase.value,
        }


@dataclass(frozen=True)
class TraceLine:
    label:   str
    message: str
    index:   Optional[int] = None      # None on the final-answer line
    active:  bool          = False
    kind:    str           = "step"    # "step" | "result"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label":   self.label,
            "message": self.message,
            "index":   self.index,
            "active":  self.active,
            "kind":    self.kind,
        }


@dataclass(frozen=True)
class PlaybackView:
    """
    Everything the diagram view, the code view and the trace log need for
    the current cursor position.
    """

    state:                   PlaybackState
    algorithm_id:            str                     = ""
    name:                    str                     = ""
    current_step:            Optional[ExecutionStep] = None
    highlighted_source_line: Optional[int]           = None
    highlighted_node:        Optional[str]           = None
    trace_log:               Tuple[TraceLine, ...]   = ()
    source_text:             str                     = ""
    flow_graph:              FlowGraph               = field(default_factory=FlowGraph)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "algorithm":             self.algorithm_id,
            "name":                  self.name,
            "state":                 self.state.to_dict(),
            "currentStep":           self.current_step.to_dict() if self.current_step else None,
            "highlightedSourceLine": self.highlighted_source_line,
            "highlightedNode":       self.highlighted_node,
            "traceLog":              [line.to_dict() for line in self.trace_log],
        }


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------
class PlaybackController:
    """
    Attributes:
        simulation : The active Simulation, or None before the first select().
        cursor     : Index into simulation.steps that is currently displayed.
        phase      : Current PlaybackPhase.
        speed_tier : 1 (slow), 2 (medium) or 3 (fast).
        on_change  : Optional callback(PlaybackView) fired every time the
                     cursor or phase changes.  The UI hooks its re-render here.
    """

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        on_change: Optional[Callable[[PlaybackView], None]] = None,
        speed_tier: int = DEFAULT_SPEED_TIER,
    ):
        self.scheduler:  Scheduler                = scheduler or ManualScheduler()
        self.on_change:  Optional[Callable[[PlaybackView], None]] = on_change
        self.simulation: Optional[Simulation]     = None
        self.cursor:     int                      = 0
        self.phase:      PlaybackPhase            = PlaybackPhase.IDLE
        self.speed_tier: int                      = DEFAULT_SPEED_TIER
        self.set_speed(speed_tier)

        self._timer:      Optional[TimerHandle] = None
        self._generation: int                   = 0

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select(self, algorithm: str, raw_input: Any = None, target: Any = None) -> PlaybackView:
        """Simulate `algorithm` on `raw_input` and load the resulting trace."""
        return self.load(simulate(algorithm, raw_input, target))

    def load(self, simulation: Simulation) -> PlaybackView:
        self._cancel_tick()
        self.simulation = simulation
        self.cursor = 0
        self.phase = PlaybackPhase.LOADED
        logger.info("loaded %s (%d steps)", simulation.algorithm_id, simulation.step_count)
        return self._notify()

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.step_count == 0 or self.phase == PlaybackPhase.PLAYING:
            return
        if self.cursor >= self.last_index:
            self.cursor = 0
        if self.cursor >= self.last_index:
            # single-step trace: nothing to play through
            self.phase = PlaybackPhase.FINISHED
        else:
            self.phase = PlaybackPhase.PLAYING
            self._schedule_tick()
        self._notify()

    def pause(self) -> None:
        if self.phase != PlaybackPhase.PLAYING:
            return
        self._cancel_tick()
        self.phase = PlaybackPhase.PAUSED
        self._notify()

    def toggle_play(self) -> None:
        if self.phase == PlaybackPhase.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def step_forward(self) -> bool:
        """Advance one step.  Returns False if already at the end."""
        if self.step_count == 0 or self.cursor >= self.last_index:
            return False
        self.cursor += 1
        self._settle()
        self._notify()
        return True

    def step_backward(self) -> bool:
        """Rewind one step.  Returns False if already at the start."""
        if self.cursor <= 0:
            return False
        self.cursor -= 1
        self._settle()
        self._notify()
        return True

    def seek(self, index: int) -> None:
        """Jump to a step index, clamped into the trace."""
        if self.step_count == 0:
            return
        self.cursor = min(max(0, int(index)), self.last_index)
        self._settle()
        self._notify()

    def reset(self) -> None:
        self._cancel_tick()
        self.cursor = 0
        self.phase = PlaybackPhase.LOADED if self.simulation else PlaybackPhase.IDLE
        self._notify()

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, tier: int) -> None:
        """Takes effect from the next scheduled tick."""
        if tier not in SPEED_TIERS:
            logger.warning("unknown speed tier %r, using %d", tier, DEFAULT_SPEED_TIER)
            tier = DEFAULT_SPEED_TIER
        self.speed_tier = tier

    @property
    def interval_ms(self) -> int:
        return SPEED_TIERS[self.speed_tier]

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def steps(self) -> Tuple[ExecutionStep, ...]:
        return self.simulation.steps if self.simulation else ()

    @property
    def step_count(self) -> int:
        return len(self.steps)

    @property
    def last_index(self) -> int:
        return self.step_count - 1

    @property
    def current_step(self) -> Optional[ExecutionStep]:
        if 0 <= self.cursor < self.step_count:
            return self.steps[self.cursor]
        return None

    @property
    def is_playing(self) -> bool:
        return self.phase == PlaybackPhase.PLAYING

    @property
    def is_finished(self) -> bool:
        return self.phase == PlaybackPhase.FINISHED

    @property
    def state(self) -> PlaybackState:
        return PlaybackState(
            cursor=self.cursor,
            is_playing=self.is_playing,
            speed_tier=self.speed_tier,
            step_count=self.step_count,
            phase=self.phase,
        )

    def trace_log(self) -> Tuple[TraceLine, ...]:
        lines = [
            TraceLine(
                label=f"Step {step.index + 1}",
                message=step.message,
                index=step.index,
                active=step.index == self.cursor,
            )
            for step in self.steps[: self.cursor + 1]
        ]
        if self.step_count and self.cursor == self.last_index:
            lines.append(TraceLine(label="Final Answer", message=self.steps[-1].message, kind="result"))
        return tuple(lines)

    def view(self) -> PlaybackView:
        sim = self.simulation
        if sim is None:
            return PlaybackView(state=self.state)
        step = self.current_step
        return PlaybackView(
            state=self.state,
            algorithm_id=sim.algorithm_id,
            name=sim.name,
            current_step=step,
            highlighted_source_line=step.source_line if step else None,
            highlighted_node=step.flow_node if step else None,
            trace_log=self.trace_log(),
            source_text=sim.source_text,
            flow_graph=sim.flow_graph,
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _settle(self) -> None:
        """Re-derive the phase after a manual cursor move."""
        if self.cursor >= self.last_index:
            self._cancel_tick()
            self.phase = PlaybackPhase.FINISHED
        elif self.phase == PlaybackPhase.FINISHED:
            self.phase = PlaybackPhase.PAUSED

    def _schedule_tick(self) -> None:
        generation = self._generation
        self._timer = self.scheduler.call_later(self.interval_ms, lambda: self._on_tick(generation))

    def _cancel_tick(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        self._generation += 1

    def _on_tick(self, generation: int) -> None:
        if generation != self._generation or self.phase != PlaybackPhase.PLAYING:
            logger.debug("ignoring stale tick (generation %d)", generation)
            return
        self._timer = None
        self.cursor = min(self.cursor + 1, self.last_index)
        if self.cursor >= self.last_index:
            self._generation += 1
            self.phase = PlaybackPhase.FINISHED
        else:
            self._schedule_tick()
        self._notify()

    def _notify(self) -> PlaybackView:
        view = self.view()
        if self.on_change is not None:
            self.on_change(view)
        return view

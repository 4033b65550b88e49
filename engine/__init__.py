"""
engine/
-------
Playback & recording layer.

    from engine import PlaybackController, ManualScheduler, record
"""

from engine.scheduler  import ManualScheduler, AsyncioScheduler
from engine.controller import (
    PlaybackController,
    PlaybackPhase,
    PlaybackState,
    PlaybackView,
    TraceLine,
    SPEED_TIERS,
    SPEED_LABELS,
    DEFAULT_SPEED_TIER,
)
from engine.recorder   import Recording, RunMetrics, record, compute_metrics

__all__ = [
    "ManualScheduler",
    "AsyncioScheduler",
    "PlaybackController",
    "PlaybackPhase",
    "PlaybackState",
    "PlaybackView",
    "TraceLine",
    "SPEED_TIERS",
    "SPEED_LABELS",
    "DEFAULT_SPEED_TIER",
    "Recording",
    "RunMetrics",
    "record",
    "compute_metrics",
]

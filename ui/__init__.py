"""
ui/
---
Presentation layer.

    from ui import render_flowchart
    from ui import playback_controls, algorithm_selector, code_viewer, trace_log_panel
"""

from ui.flowchart import render_flowchart, FlowchartStyle

from ui.panels import (
    playback_controls,
    algorithm_selector,
    code_viewer,
    trace_log_panel,
)

__all__ = [
    "render_flowchart",
    "FlowchartStyle",
    "playback_controls",
    "algorithm_selector",
    "code_viewer",
    "trace_log_panel",
]

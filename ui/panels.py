"""
panels.py — UI Panels
=====================
Every panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls   – reset/prev/play/next + speed tier
  • algorithm_selector  – catalogue dropdown grouped by category
  • code_viewer         – source listing with live line highlighting
  • trace_log_panel     – every step up to the cursor, plus the final answer

Design:
  - All panels are stateless render functions.
  - State is passed in as arguments.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from html import escape
from typing import Dict, List, Optional, Sequence

from algorithms import AlgorithmDescriptor
from engine import PlaybackState, TraceLine, SPEED_LABELS


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(state: PlaybackState) -> str:
    play_icon = "⏸" if state.is_playing else "▶"
    play_label = "Pause" if state.is_playing else "Play"
    at_start = state.cursor == 0
    at_end = state.step_count == 0 or state.cursor >= state.step_count - 1

    options = []
    for tier, label in SPEED_LABELS.items():
        sel = 'selected' if tier == state.speed_tier else ''
        options.append(f'<option value="{tier}" {sel}>{label}</option>')

    return f"""
    <div class="panel playback-controls">
      <div class="button-row">
        <button id="btn-reset" title="Reset">⟲</button>
        <button id="btn-prev" title="Step Backward" {'disabled' if at_start else ''}>⏮</button>
        <button id="btn-play" title="{play_label}">{play_icon}</button>
        <button id="btn-next" title="Step Forward" {'disabled' if at_end else ''}>⏭</button>
      </div>
      <div class="step-info">
        Step <span id="current-step">{state.cursor + 1 if state.step_count else 0}</span>
        / <span id="total-steps">{state.step_count}</span>
        {' <span class="finished-badge">FINISHED</span>' if state.phase.value == 'finished' else ''}
      </div>
      <div class="speed-control">
        <label>Speed:</label>
        <select id="speed-selector">{''.join(options)}</select>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    grouped: Dict[str, List[AlgorithmDescriptor]],
    selected_id: str = "",
) -> str:
    groups = []
    for category, algos in grouped.items():
        options = []
        for algo in algos:
            sel = 'selected' if algo.id == selected_id else ''
            options.append(
                f'<option value="{escape(algo.id)}" {sel}>{escape(algo.name)} — {escape(algo.complexity_time)}</option>'
            )
        groups.append(f'<optgroup label="{escape(category.capitalize())}">{"".join(options)}</optgroup>')

    return f"""
    <div class="panel algorithm-selector">
      <select id="algo-selector">
        {''.join(groups)}
      </select>
      <input id="algo-input" type="text" placeholder="[64, 34, 25, 12, 22, 11, 90]"/>
      <button id="btn-run" class="btn-primary">▶ Visualize</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Code Viewer
# ---------------------------------------------------------------------------
def code_viewer(source_text: str, highlighted_line: Optional[int] = None) -> str:
    """`highlighted_line` is 1-based, matching ExecutionStep.source_line."""
    if not source_text:
        return """
        <div class="code-block">
          <div class="placeholder">Select an algorithm to view its code</div>
        </div>
        """

    lines_html = []
    for number, line in enumerate(source_text.split("\n"), start=1):
        highlight = 'highlight' if number == highlighted_line else ''
        lines_html.append(
            f'<div class="code-line {highlight}" data-line="{number}">'
            f'<span class="line-no">{number}</span>{escape(line) or "&nbsp;"}</div>'
        )

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Trace Log
# ---------------------------------------------------------------------------
def trace_log_panel(lines: Sequence[TraceLine]) -> str:
    if not lines:
        return '<div class="output-placeholder">Output will appear here when you run the program</div>'

    rows = []
    for line in lines:
        css = "output-line"
        if line.active:
            css += " active"
        if line.kind == "result":
            css += " output-result"
        rows.append(
            f'<div class="{css}"><span class="output-label">{escape(line.label)}:</span> '
            f'<span class="output-message">{escape(line.message)}</span></div>'
        )
    return "\n".join(rows)

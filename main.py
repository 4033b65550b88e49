"""
main.py — Algorithm Flow Visualizer Flask App
=============================================
The web server that powers the visualizer.

Routes:
  GET  /                              – main UI (?algo=<id>)
  GET  /api/health                    – liveness probe
  GET  /api/algorithms                – catalogue grouped by category
  GET  /api/algorithms/<id>           – one descriptor
  GET  /api/algorithms/name/<name>    – one descriptor by display name
  POST /api/visualize                 – steps + flowchart for {algorithm, input}
  POST /api/playback/select           – load an algorithm into the session
  POST /api/playback/next             – advance one step
  POST /api/playback/prev             – rewind one step
  POST /api/playback/reset            – back to step 0
  POST /api/playback/speed            – change speed tier
  GET  /api/playback/state            – current view

State management:
  The session holds only what is needed to rebuild a PlaybackController
  on every request: algorithm id, raw input, target, cursor and speed
  tier.  Traces are deterministic, so re-simulating is exact.  The
  browser owns the playback timer and calls /api/playback/next once per
  interval.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from flask import Flask, render_template_string, request, jsonify, session

from config import Config
from algorithms import (
    algorithms_by_category,
    find_by_name,
    get_algorithm,
    resolve_algorithm,
)
from engine import PlaybackController, PlaybackView, SPEED_TIERS, record
from flowgraph import layout
from ui import (
    render_flowchart,
    playback_controls,
    algorithm_selector,
    code_viewer,
    trace_log_panel,
)

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = Config.secret_key


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def is_blank(value: Any) -> bool:
    """Missing or empty request field: None, blank text, empty list/mapping."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def json_body() -> dict:
    """Request JSON as a mapping; anything that is not an object reads as {}."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def default_input_for(algorithm_id: str) -> str:
    algo = resolve_algorithm(algorithm_id)
    if algo is None:
        return ""
    return Config.default_inputs.get(algo.category, "")


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_controller() -> PlaybackController:
    """Rebuild the session's controller at its stored cursor."""
    ctrl = PlaybackController(speed_tier=session.get("speed", Config.default_speed_tier))
    algo = session.get("algorithm")
    if algo:
        ctrl.select(algo, session.get("input"), session.get("target"))
        ctrl.seek(session.get("cursor", 0))
    return ctrl


def save_controller(ctrl: PlaybackController) -> None:
    session["cursor"] = ctrl.cursor
    session["speed"] = ctrl.speed_tier


def select_into_session(algorithm: str, raw_input: Any, target: Any = None) -> PlaybackController:
    descriptor = resolve_algorithm(algorithm)
    session["algorithm"] = descriptor.id if descriptor else algorithm
    session["input"] = raw_input
    session["target"] = target
    session["cursor"] = 0
    return get_controller()


def render_fragments(view: PlaybackView) -> dict:
    diagram = layout(view.flow_graph.nodes, view.flow_graph.edges)
    return {
        "svg":      render_flowchart(diagram, view.highlighted_node),
        "code":     code_viewer(view.source_text, view.highlighted_source_line),
        "trace":    trace_log_panel(view.trace_log),
        "controls": playback_controls(view.state),
    }


def playback_response(ctrl: PlaybackController, moved: bool = True):
    save_controller(ctrl)
    view = ctrl.view()
    payload = view.to_dict()
    payload["moved"] = moved
    payload["intervalMs"] = ctrl.interval_ms
    payload["html"] = render_fragments(view)
    return jsonify(payload)


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    algo_id = request.args.get("algo", Config.default_algorithm)
    descriptor = resolve_algorithm(algo_id) or get_algorithm(Config.default_algorithm)
    ctrl = select_into_session(descriptor.id, default_input_for(descriptor.id))
    save_controller(ctrl)

    view = ctrl.view()
    fragments = render_fragments(view)
    return render_template_string(
        INDEX_TEMPLATE,
        title=descriptor.name,
        category=descriptor.category,
        selector=algorithm_selector(algorithms_by_category(), descriptor.id),
        intervals=SPEED_TIERS,
        **fragments,
    )


# ---------------------------------------------------------------------------
# API: Catalogue
# ---------------------------------------------------------------------------
@app.route("/api/health")
def api_health():
    return jsonify({
        "status": "OK",
        "message": "Backend server is running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    })


@app.route("/api/algorithms")
def api_algorithms():
    grouped = algorithms_by_category()
    return jsonify({
        category: [a.to_dict(include_source=False) for a in algos]
        for category, algos in grouped.items()
    })


@app.route("/api/algorithms/name/<path:name>")
def api_algorithm_by_name(name):
    algo = find_by_name(name)
    if algo is None:
        return jsonify({"error": "Algorithm not found"}), 404
    return jsonify(algo.to_dict())


@app.route("/api/algorithms/<algo_id>")
def api_algorithm(algo_id):
    algo = get_algorithm(algo_id)
    if algo is None:
        return jsonify({"error": "Algorithm not found"}), 404
    return jsonify(algo.to_dict())


# ---------------------------------------------------------------------------
# API: Remote step generation
# ---------------------------------------------------------------------------
@app.route("/api/visualize", methods=["POST"])
def api_visualize():
    data = json_body()
    algorithm = data.get("algorithm")
    raw_input = data.get("input")

    if is_blank(algorithm):
        return jsonify({"error": "Algorithm name is required"}), 400
    if is_blank(raw_input):
        return jsonify({"error": "Input is required"}), 400

    try:
        rec = record(str(algorithm), raw_input, data.get("target"))
    except Exception as e:
        logger.exception("visualization failed for %r", algorithm)
        return jsonify({"error": "Failed to generate visualization", "message": str(e)}), 500

    return jsonify(rec.export())


# ---------------------------------------------------------------------------
# API: Playback
# ---------------------------------------------------------------------------
@app.route("/api/playback/select", methods=["POST"])
def api_playback_select():
    data = json_body()
    algorithm = data.get("algorithm")
    if is_blank(algorithm):
        return jsonify({"error": "Algorithm name is required"}), 400

    raw_input = data.get("input")
    if is_blank(raw_input):
        raw_input = default_input_for(str(algorithm))

    ctrl = select_into_session(str(algorithm), raw_input, data.get("target"))
    logger.info("session selected %s", ctrl.simulation.algorithm_id)
    return playback_response(ctrl)


@app.route("/api/playback/next", methods=["POST"])
def api_playback_next():
    ctrl = get_controller()
    moved = ctrl.step_forward()
    return playback_response(ctrl, moved)


@app.route("/api/playback/prev", methods=["POST"])
def api_playback_prev():
    ctrl = get_controller()
    moved = ctrl.step_backward()
    return playback_response(ctrl, moved)


@app.route("/api/playback/reset", methods=["POST"])
def api_playback_reset():
    ctrl = get_controller()
    ctrl.reset()
    return playback_response(ctrl)


@app.route("/api/playback/speed", methods=["POST"])
def api_playback_speed():
    data = json_body()
    try:
        tier = int(data.get("tier"))
    except (TypeError, ValueError):
        tier = None
    if tier not in SPEED_TIERS:
        return jsonify({"error": "Speed tier must be 1, 2 or 3"}), 400

    ctrl = get_controller()
    ctrl.set_speed(tier)
    return playback_response(ctrl, moved=False)


@app.route("/api/playback/state")
def api_playback_state():
    return playback_response(get_controller(), moved=False)


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{{ title }} · Algorithm Flow Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }
    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-teal: #06b6d4;
    }
    body {
      font-family: -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      flex-direction: column;
      height: 100vh;
    }
    header {
      display: flex;
      align-items: center;
      gap: 24px;
      padding: 12px 20px;
      background: var(--bg-dark);
      border-bottom: 1px solid var(--border);
    }
    header h2 { font-size: 18px; }
    .algorithm-category { color: var(--text-secondary); text-transform: uppercase; font-size: 12px; }
    .panel { display: flex; align-items: center; gap: 10px; }
    button, select, input {
      background: var(--bg-panel);
      color: var(--text-primary);
      border: 1px solid var(--border);
      border-radius: 6px;
      padding: 6px 10px;
    }
    button:disabled { opacity: 0.4; }
    #split { flex: 1; display: grid; grid-template-columns: 1fr 1fr; overflow: hidden; }
    #flowchart { overflow: auto; border-right: 1px solid var(--border); padding: 12px; }
    #right { display: flex; flex-direction: column; overflow: hidden; }
    .code-block {
      flex: 1;
      overflow-y: auto;
      font-family: 'JetBrains Mono', 'Courier New', monospace;
      font-size: 13px;
      line-height: 1.6;
      padding: 12px;
    }
    .code-line { white-space: pre; padding-right: 8px; }
    .code-line.highlight { background: rgba(6, 182, 212, 0.25); border-left: 3px solid var(--accent-teal); }
    .line-no { display: inline-block; width: 32px; color: var(--text-secondary); }
    #trace { height: 35%; overflow-y: auto; border-top: 1px solid var(--border); padding: 12px; font-size: 13px; }
    .output-line { padding: 2px 0; color: var(--text-secondary); }
    .output-line.active { color: var(--text-primary); font-weight: 600; }
    .output-result { color: var(--accent-cyan); }
    .output-label { margin-right: 6px; }
    .finished-badge { color: var(--accent-cyan); font-weight: 700; }
  </style>
</head>
<body>
  <header>
    <div>
      <h2 id="algo-title">{{ title }}</h2>
      <span class="algorithm-category">{{ category }}</span>
    </div>
    {{ selector|safe }}
    <div id="controls">{{ controls|safe }}</div>
  </header>

  <div id="split">
    <div id="flowchart">{{ svg|safe }}</div>
    <div id="right">
      <div id="code">{{ code|safe }}</div>
      <div id="trace">{{ trace|safe }}</div>
    </div>
  </div>

  <script>
    const INTERVALS = {{ intervals|tojson }};
    let timer = null;
    let playing = false;
    let state = null;
    // bumped by stop(); a tick response from an older generation is dropped
    let generation = 0;
    // one request at a time, so every request carries the latest session cookie
    let queue = Promise.resolve();

    function post(url, body = {}) {
      const send = () => fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(body),
      }).then(r => r.json());
      const result = queue.then(send);
      queue = result.catch(() => null);
      return result;
    }

    function apply(data) {
      if (!data || !data.html) return;
      state = data.state;
      document.getElementById('flowchart').innerHTML = data.html.svg;
      document.getElementById('code').innerHTML = data.html.code;
      document.getElementById('trace').innerHTML = data.html.trace;
      document.getElementById('controls').innerHTML = data.html.controls;
      if (data.name) document.getElementById('algo-title').textContent = data.name;
      const active = document.querySelector('.code-line.highlight');
      if (active) active.scrollIntoView({block: 'nearest'});
      setPlayIcon();
    }

    function setPlayIcon() {
      const btn = document.getElementById('btn-play');
      if (btn) btn.textContent = playing ? '⏸' : '▶';
    }

    function stop() {
      playing = false;
      generation += 1;
      if (timer) clearTimeout(timer);
      timer = null;
      setPlayIcon();
    }

    async function tick() {
      const sent = generation;
      const data = await post('/api/playback/next');
      if (sent !== generation || !playing) return;
      apply(data);
      if (!data.moved || data.state.phase === 'finished') { stop(); return; }
      timer = setTimeout(tick, INTERVALS[data.state.speedTier]);
    }

    async function play() {
      if (!state || state.stepCount === 0) return;
      if (state.cursor >= state.stepCount - 1) apply(await post('/api/playback/reset'));
      playing = true;
      setPlayIcon();
      timer = setTimeout(tick, INTERVALS[state.speedTier]);
    }

    document.addEventListener('click', async (e) => {
      const id = e.target.id;
      if (id === 'btn-play') { playing ? stop() : play(); }
      if (id === 'btn-next') apply(await post('/api/playback/next'));
      if (id === 'btn-prev') apply(await post('/api/playback/prev'));
      if (id === 'btn-reset') { stop(); apply(await post('/api/playback/reset')); }
      if (id === 'btn-run') {
        stop();
        const algorithm = document.getElementById('algo-selector').value;
        const input = document.getElementById('algo-input').value;
        apply(await post('/api/playback/select', {algorithm, input}));
      }
    });

    document.addEventListener('change', async (e) => {
      if (e.target.id === 'speed-selector') {
        apply(await post('/api/playback/speed', {tier: +e.target.value}));
      }
      if (e.target.id === 'algo-selector') {
        stop();
        apply(await post('/api/playback/select', {algorithm: e.target.value}));
      }
    });

    fetch('/api/playback/state').then(r => r.json()).then(apply);
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=getattr(logging, Config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Algorithm Flow Visualizer on http://%s:%d", Config.host, Config.port)
    app.run(host=Config.host, port=Config.port, debug=False)

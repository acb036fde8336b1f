"""
main.py — Quicksort Visualizer Flask App
==========================================
The web server that hosts the sort animation.

Routes:
  GET  /                    – page (intro screen + sort screen)
  POST /api/numbers         – generate N random numbers from the intro input
  POST /api/numbers/click   – regenerate from a clicked value ≤ 30
  POST /api/sort/start      – flip direction, lock controls, start a run
  POST /api/sort/tick       – advance the running animator by one tick
  POST /api/reset           – abandon any run, back to the intro screen
  GET  /api/state           – current session state (for polling)

State management:
  A browser gets a session id in the Flask session cookie the first
  time a route changes its state; read-only routes render a blank
  SortSession without storing anything.  The SortSession itself lives
  server-side (in-memory for now) as a plain dict, rebuilt on every
  request, so the animator's stack and queue survive between ticks
  without any captured closures.  At most MAX_SESSIONS are kept; the
  least recently used one is dropped first.

Configuration:
  Defaults below can be overridden with QUICKSORT_* environment
  variables, e.g. QUICKSORT_TICK_INTERVAL_MS=200.
"""

from flask import Flask, render_template_string, request, jsonify, session
from collections import OrderedDict
import logging
import random
import secrets
import sys
import os

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from sequence import SequenceStore, InvalidCountError, RegenerationRefused, parse_count
from algorithms import get_algorithm
from engine import Recorder, SortSession, SessionBusy, NoActiveRun
from ui import (
    numbers_grid,
    intro_panel,
    action_buttons,
    message_box,
    pseudocode_viewer,
    explanation_panel,
    analytics_panel,
)


app = Flask(__name__)
app.config.from_mapping(
    SECRET_KEY=secrets.token_hex(32),
    TICK_INTERVAL_MS=300,
    DEFAULT_COUNT=20,
    SEED=None,
    MAX_SESSIONS=1000,
)
app.config.from_prefixed_env("QUICKSORT")

# sid → SortSession.to_dict(), least recently used first
SESSIONS: "OrderedDict[str, dict]" = OrderedDict()

# pseudocode line to highlight for each tick phase
PHASE_LINES = {
    "partition":    5,
    "discard":      4,
    "highlighting": 8,
    "clearing":     8,
    "finished":     11,
}


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_sort_session() -> SortSession:
    """Load this browser's session, or a blank one that is not stored yet."""
    sid = session.get("sid")
    if sid is None or sid not in SESSIONS:
        return SortSession()
    SESSIONS.move_to_end(sid)
    return SortSession.from_dict(SESSIONS[sid])


def save_sort_session(sess: SortSession) -> None:
    sid = session.get("sid")
    if sid is None or sid not in SESSIONS:
        sid = secrets.token_hex(8)
        session["sid"] = sid
    SESSIONS[sid] = sess.to_dict()
    SESSIONS.move_to_end(sid)
    while len(SESSIONS) > app.config["MAX_SESSIONS"]:
        dropped, _ = SESSIONS.popitem(last=False)
        app.logger.info("dropped idle session %s", dropped)


def make_rng():
    seed = app.config.get("SEED")
    return random.Random(seed) if seed is not None else None


def state_payload(sess: SortSession) -> dict:
    values = sess.store.values() if sess.store else []
    return {
        "screen":           "sort" if sess.store else "intro",
        "values":           values,
        "direction":        sess.direction.value,
        "sort_label":       sess.sort_button_label(),
        "controls_enabled": sess.controls_enabled,
        "highlighted":      sorted(sess.highlighted),
        "is_running":       sess.is_running,
        "tick_interval_ms": app.config["TICK_INTERVAL_MS"],
    }


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------
@app.errorhandler(InvalidCountError)
@app.errorhandler(RegenerationRefused)
def handle_bad_input(e):
    return jsonify({"error": str(e), "message": message_box(str(e))}), 400


@app.errorhandler(SessionBusy)
def handle_busy(e):
    return jsonify({"error": str(e)}), 409


@app.errorhandler(NoActiveRun)
def handle_no_run(e):
    return jsonify({"error": str(e)}), 400


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    sess = get_sort_session()
    algo_info = get_algorithm("quicksort")

    html = render_template_string(INDEX_TEMPLATE,
        intro=intro_panel(default_count=app.config["DEFAULT_COUNT"]),
        grid=numbers_grid(sess.store.values(), sess.highlighted) if sess.store else "",
        actions=action_buttons(sess.sort_button_label(), sess.controls_enabled),
        pseudocode=pseudocode_viewer(algo_info),
        explanation=explanation_panel(),
        analytics=analytics_panel(),
        show_sort=sess.store is not None,
        tick_interval=app.config["TICK_INTERVAL_MS"],
    )
    return html


# ---------------------------------------------------------------------------
# API: Numbers
# ---------------------------------------------------------------------------
@app.route("/api/numbers", methods=["POST"])
def api_numbers():
    data = request.get_json(silent=True) or {}
    count = parse_count(data.get("count"))

    sess = get_sort_session()
    store = sess.load_numbers(count, rng=make_rng())
    save_sort_session(sess)
    app.logger.info("generated %d numbers", count)

    payload = state_payload(sess)
    payload["grid"] = numbers_grid(store.values())
    return jsonify(payload)


@app.route("/api/numbers/click", methods=["POST"])
def api_numbers_click():
    data = request.get_json(silent=True) or {}
    try:
        index = int(data.get("index"))
    except (TypeError, ValueError):
        return jsonify({"error": "Missing button index."}), 400

    sess = get_sort_session()
    if sess.store is None or not 0 <= index < len(sess.store):
        return jsonify({"error": "No such number."}), 400

    store = sess.regenerate(index, rng=make_rng())
    save_sort_session(sess)

    payload = state_payload(sess)
    payload["grid"] = numbers_grid(store.values())
    return jsonify(payload)


# ---------------------------------------------------------------------------
# API: Sort run
# ---------------------------------------------------------------------------
@app.route("/api/sort/start", methods=["POST"])
def api_sort_start():
    sess = get_sort_session()
    commands = sess.start_sort()

    # dry-run on a copy so the page can show progress and analytics up front
    preview = Recorder()
    preview.start(SequenceStore(sess.store.values()), sess.direction)
    metrics = preview.run_to_completion()

    save_sort_session(sess)
    app.logger.info("sort run started (%s, %d ticks expected)", sess.direction.value, metrics.total_ticks)

    payload = state_payload(sess)
    payload.update({
        "commands":    [c.to_dict() for c in commands],
        "total_ticks": metrics.total_ticks,
        "analytics":   analytics_panel(metrics),
        "actions":     action_buttons(sess.sort_button_label(), sess.controls_enabled),
    })
    return jsonify(payload)


@app.route("/api/sort/tick", methods=["POST"])
def api_sort_tick():
    sess = get_sort_session()
    result = sess.tick()
    save_sort_session(sess)

    algo_info = get_algorithm("quicksort")
    payload = state_payload(sess)
    payload.update({
        "tick":        result.to_dict(),
        "pseudocode":  pseudocode_viewer(algo_info, PHASE_LINES.get(result.phase, -1)),
        "explanation": explanation_panel(result.explanation),
    })
    if result.is_final:
        payload["actions"] = action_buttons(sess.sort_button_label(), True)
        app.logger.info("sort run finished after %d ticks", result.tick_number + 1)
    return jsonify(payload)


@app.route("/api/reset", methods=["POST"])
def api_reset():
    sess = get_sort_session()
    sess.reset()
    if session.get("sid") in SESSIONS:
        save_sort_session(sess)
    return jsonify(state_payload(sess))


@app.route("/api/state")
def api_state():
    return jsonify(state_payload(get_sort_session()))


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = r"""
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Quicksort Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-amber: #facc15;
    }

    body {
      font-family: -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-dark);
      color: var(--text-primary);
      display: flex;
      gap: 20px;
      padding: 20px;
      min-height: 100vh;
    }

    #main { flex: 1; }
    #side { width: 380px; }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }

    button {
      background: var(--accent-cyan);
      color: #fff;
      border: none;
      padding: 8px 14px;
      border-radius: 6px;
      cursor: pointer;
      font-weight: 600;
    }
    button:disabled { opacity: 0.4; cursor: not-allowed; }

    .num-btn { background: #1c2128; border: 1px solid var(--border); min-width: 56px; }
    .num-btn.highlight { background: var(--accent-amber); color: #000; }

    .message { color: #f43f5e; margin-top: 10px; min-height: 1em; }
    .code-block { font-family: monospace; font-size: 13px; line-height: 1.6; }
    .code-line { padding: 2px 8px; }
    .code-line.highlight { background: rgba(14, 165, 233, 0.2); border-left: 3px solid var(--accent-cyan); }
    .explanation-text, .hint { color: var(--text-secondary); }
    .hidden { display: none; }
  </style>
</head>
<body>
  <div id="main">
    <div id="intro-screen" class="{{ 'hidden' if show_sort else '' }}">{{ intro|safe }}</div>
    <div id="sort-screen" class="{{ '' if show_sort else 'hidden' }}">
      <div class="panel"><div id="grid">{{ grid|safe }}</div><div id="sort-message" class="message"></div></div>
      <div id="actions">{{ actions|safe }}</div>
      <div id="progress" class="hint"></div>
    </div>
  </div>

  <div id="side">
    <div class="panel"><div id="pseudocode">{{ pseudocode|safe }}</div></div>
    <div class="panel"><div id="explanation">{{ explanation|safe }}</div></div>
    <div id="analytics">{{ analytics|safe }}</div>
  </div>

  <script>
    const TICK_MS = {{ tick_interval }};
    let totalTicks = 0;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function showScreen(name) {
      document.getElementById('intro-screen').classList.toggle('hidden', name !== 'intro');
      document.getElementById('sort-screen').classList.toggle('hidden', name !== 'sort');
    }

    function setControls(enabled) {
      document.querySelectorAll('#actions button').forEach(b => b.disabled = !enabled);
    }

    function applyCommands(commands) {
      for (const c of commands) {
        if (c.kind === 'set') {
          document.getElementById('num-' + c.index).textContent = c.value;
        } else if (c.kind === 'highlight') {
          document.getElementById('num-' + c.index).classList.toggle('highlight', c.on);
        } else if (c.kind === 'controls') {
          setControls(c.enabled);
        }
      }
    }

    async function tickLoop() {
      const data = await post('/api/sort/tick');
      if (data.error) return;
      applyCommands(data.tick.commands);
      document.getElementById('pseudocode').innerHTML = data.pseudocode;
      document.getElementById('explanation').innerHTML = data.explanation;
      document.getElementById('progress').textContent =
        'Tick ' + (data.tick.tick_number + 1) + ' / ' + totalTicks;
      if (data.tick.is_final) {
        document.getElementById('actions').innerHTML = data.actions;
        bindActions();
        return;
      }
      setTimeout(tickLoop, TICK_MS);
    }

    function bindActions() {
      document.getElementById('btn-sort').addEventListener('click', async () => {
        const data = await post('/api/sort/start');
        if (data.error) return;
        document.getElementById('actions').innerHTML = data.actions;
        document.getElementById('analytics').innerHTML = data.analytics;
        totalTicks = data.total_ticks;
        applyCommands(data.commands);
        setTimeout(tickLoop, TICK_MS);
      });
      document.getElementById('btn-reset').addEventListener('click', async () => {
        await post('/api/reset');
        showScreen('intro');
      });
    }

    function showGrid(data) {
      document.getElementById('grid').innerHTML = data.grid;
      document.getElementById('sort-message').textContent = '';
      showScreen('sort');
    }

    async function enter() {
      const count = document.getElementById('count-input').value;
      const data = await post('/api/numbers', {count: count});
      if (data.error) {
        document.getElementById('message').textContent = data.error;
        return;
      }
      document.getElementById('message').textContent = '';
      showGrid(data);
    }

    document.getElementById('btn-enter').addEventListener('click', enter);
    document.getElementById('count-input').addEventListener('keydown', (e) => {
      if (e.key === 'Enter') enter();
    });

    document.getElementById('grid').addEventListener('click', async (e) => {
      const btn = e.target.closest('.num-btn');
      if (!btn) return;
      const data = await post('/api/numbers/click', {index: +btn.dataset.index});
      if (data.error) {
        document.getElementById('sort-message').textContent = data.error;
        return;
      }
      showGrid(data);
    });

    bindActions();
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print("=" * 60)
    print("  Quicksort Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=True, host="0.0.0.0", port=5000)

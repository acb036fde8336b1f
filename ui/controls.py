"""
controls.py — UI Control Panels
=================================
Every panel is a pure function that takes state and returns HTML.

Panels:
  • intro_panel        – "how many numbers?" input
  • action_buttons     – Sort ↑/↓ and Reset
  • message_box        – inline replacement for a dialog box
  • pseudocode_viewer  – quicksort pseudocode with live line highlighting
  • explanation_panel  – what the last tick did
  • analytics_panel    – run counters
"""

from html import escape
from typing import Optional

from algorithms import AlgoInfo
from engine import RunMetrics


def intro_panel(message: Optional[str] = None, default_count: int = 20) -> str:
    return f"""
    <div class="panel intro-panel" id="intro">
      <label for="count-input">Enter number of random values:</label>
      <input id="count-input" type="text" size="10" value="{default_count}">
      <button id="btn-enter">Enter</button>
      {message_box(message)}
    </div>
    """


def action_buttons(sort_label: str = "Sort", enabled: bool = True) -> str:
    disabled = "" if enabled else "disabled"
    return f"""
    <div class="panel action-buttons">
      <button id="btn-sort" {disabled}>{escape(sort_label)}</button>
      <button id="btn-reset" {disabled}>Reset</button>
    </div>
    """


def message_box(message: Optional[str]) -> str:
    if not message:
        return '<div class="message" id="message"></div>'
    return f'<div class="message" id="message">{escape(message)}</div>'


def pseudocode_viewer(info: AlgoInfo, current_line: int = -1) -> str:
    rows = []
    for i, line in enumerate(info.pseudocode):
        css = "code-line highlight" if i == current_line else "code-line"
        rows.append(f'<div class="{css}">{escape(line)}</div>')
    return f"""
    <div class="pseudocode">
      <div class="algo-label">{escape(info.label)}</div>
      <div class="code-block">{''.join(rows)}</div>
      <p class="hint">Time {escape(info.complexity_time)} · space {escape(info.complexity_space)}</p>
      <p class="hint">{escape(info.description)}</p>
    </div>
    """


def explanation_panel(text: str = "", show: bool = True) -> str:
    if not show:
        return ""
    body = escape(text) if text else "Press Sort to start the animation."
    return f'<div class="explanation-text">{body}</div>'


def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if metrics is None:
        return '<div class="panel analytics"><h3>Analytics</h3><p class="hint">No run yet.</p></div>'
    return f"""
    <div class="panel analytics">
      <h3>Analytics</h3>
      <table>
        <tr><td>Numbers</td><td>{metrics.length}</td></tr>
        <tr><td>Direction</td><td>{metrics.direction}</td></tr>
        <tr><td>Ticks</td><td>{metrics.total_ticks}</td></tr>
        <tr><td>Partitions</td><td>{metrics.partitions}</td></tr>
        <tr><td>Swaps</td><td>{metrics.swaps}</td></tr>
      </table>
    </div>
    """

from html import escape

import pytest

from ui import (
    grid_shape,
    grid_cells,
    numbers_grid,
    action_buttons,
    intro_panel,
    message_box,
    pseudocode_viewer,
    analytics_panel,
)
from algorithms import AlgoInfo, get_algorithm
from engine import RunMetrics


@pytest.mark.parametrize("count, shape", [(0, (0, 0)), (1, (1, 1)), (10, (10, 1)), (11, (10, 2)), (25, (10, 3))])
def test_grid_shape(count, shape):
    assert grid_shape(count) == shape


def test_cells_fill_column_major_with_padding():
    cells = grid_cells(12)
    assert cells[0] == [0, 10]
    assert cells[1] == [1, 11]
    assert cells[2] == [2, None]
    assert len(cells) == 10


def test_numbers_grid_marks_highlighted_buttons():
    html = numbers_grid([7, 8, 9], highlighted=[1])
    assert 'id="num-0">7<' in html
    assert 'class="num-btn highlight" data-index="1"' in html
    assert 'class="num-btn" data-index="2"' in html


def test_action_buttons_disabled():
    assert action_buttons("Sort ↑", enabled=False).count("disabled") == 2
    assert "disabled" not in action_buttons("Sort", enabled=True)


def test_text_is_escaped():
    assert "&lt;b&gt;" in message_box("<b>")
    card = AlgoInfo(key="k", label="<L>", pseudocode=["a < b"], complexity_time="O(n)")
    assert "&lt;" in pseudocode_viewer(card, 0)
    assert "count-input" in intro_panel("oops")


def test_analytics_panel():
    assert "No run yet" in analytics_panel()
    assert "<td>42</td>" in analytics_panel(RunMetrics(length=42))


def test_pseudocode_viewer_shows_complexity_and_description():
    info = get_algorithm("quicksort")
    html = pseudocode_viewer(info, current_line=5)
    assert escape(info.complexity_time) in html
    assert escape(info.description) in html
    assert html.count("code-line highlight") == 1

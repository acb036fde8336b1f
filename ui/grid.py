"""
grid.py — Number Button Grid
==============================
Pure rendering function: values + highlighted indices → HTML grid.

Buttons fill column by column, at most MAX_BUTTONS_PER_COLUMN per
column; the last column is padded with empty cells so the grid stays
rectangular.  Each button carries its index so the page can patch a
single label or highlight from a tick's render commands.
"""

import math
from typing import Iterable, List, Optional, Set, Tuple


MAX_BUTTONS_PER_COLUMN = 10


class GridConfig:
    gap_px:          int = 5
    highlight_class: str = "num-btn highlight"
    normal_class:    str = "num-btn"


CONFIG = GridConfig()


def grid_shape(count: int, per_column: int = MAX_BUTTONS_PER_COLUMN) -> Tuple[int, int]:
    """(rows, columns) for `count` buttons."""
    if count <= 0:
        return (0, 0)
    return (min(count, per_column), math.ceil(count / per_column))


def grid_cells(count: int, per_column: int = MAX_BUTTONS_PER_COLUMN) -> List[List[Optional[int]]]:
    """Row-major table of button indices, None for padding cells."""
    rows, columns = grid_shape(count, per_column)
    table = []
    for row in range(rows):
        line = []
        for col in range(columns):
            index = col * per_column + row
            line.append(index if index < count else None)
        table.append(line)
    return table


def numbers_grid(
    values: List[int],
    highlighted: Optional[Iterable[int]] = None,
    config: GridConfig = CONFIG,
) -> str:
    lit: Set[int] = set(highlighted or ())
    rows, columns = grid_shape(len(values))

    cells = []
    for line in grid_cells(len(values)):
        for index in line:
            if index is None:
                cells.append('<span class="num-pad"></span>')
                continue
            css = config.highlight_class if index in lit else config.normal_class
            cells.append(
                f'<button class="{css}" data-index="{index}" id="num-{index}">{values[index]}</button>'
            )

    return (
        f'<div id="numbers-grid" style="display:grid;'
        f'grid-template-columns:repeat({columns}, 1fr);'
        f'grid-template-rows:repeat({rows}, auto);gap:{config.gap_px}px;">'
        + "".join(cells)
        + "</div>"
    )

"""
ui/
---
Presentation layer.

    from ui import numbers_grid, intro_panel, action_buttons, …
"""

from ui.grid import numbers_grid, grid_shape, grid_cells, GridConfig

from ui.controls import (
    intro_panel,
    action_buttons,
    message_box,
    pseudocode_viewer,
    explanation_panel,
    analytics_panel,
)

__all__ = [
    "numbers_grid",
    "grid_shape",
    "grid_cells",
    "GridConfig",
    "intro_panel",
    "action_buttons",
    "message_box",
    "pseudocode_viewer",
    "explanation_panel",
    "analytics_panel",
]

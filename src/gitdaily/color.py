# SPDX-License-Identifier: MIT

import random

MAIN_BRANCH_COLOR = "#9ca3af"

BRANCH_COLORS = [
    "#3b82f6",  # blue
    "#10b981",  # emerald
    "#f59e0b",  # amber
    "#8b5cf6",  # violet
    "#ef4444",  # red
]

# Ghosted history before a branch's restore date
GHOST_LINE_COLOR = "#e5e7eb"
GHOST_NODE_COLOR = "#d1d5db"

# Table rows for completed tasks
COMPLETED_TASK_COLOR = "bright_black"

# Node fill for planned (uncommitted) tasks
PLANNED_NODE_FILL = "#f8fafc"


def get_random_color() -> str:
    """Return a random color from the branch palette."""
    return random.choice(BRANCH_COLORS)


def get_palette_color(index: int) -> str:
    return BRANCH_COLORS[index % len(BRANCH_COLORS)]

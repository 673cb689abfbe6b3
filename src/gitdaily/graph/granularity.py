# SPDX-License-Identifier: MIT

from gitdaily.model.granularity_type import TimeGranularity

ROW_HEIGHTS: dict[TimeGranularity, int] = {
    TimeGranularity.DAY: 60,
    TimeGranularity.WEEK: 28,
    TimeGranularity.BIWEEK: 28,
    TimeGranularity.MONTH: 12,
}

# depth at which a branch collapses to a mini track, None means never
MINI_DEPTHS: dict[TimeGranularity, int | None] = {
    TimeGranularity.DAY: None,
    TimeGranularity.WEEK: 3,
    TimeGranularity.BIWEEK: 3,
    TimeGranularity.MONTH: 2,
}

NODE_RADIUS = 7
MINI_NODE_RADIUS = 3
MERGE_NODE_RADIUS = 9

FORK_DOT_RADIUS = 4
MINI_FORK_DOT_RADIUS = 2


def row_height(granularity: TimeGranularity) -> int:
    return ROW_HEIGHTS[TimeGranularity(granularity)]


def is_mini(depth: int, granularity: TimeGranularity) -> bool:
    cutoff = MINI_DEPTHS[TimeGranularity(granularity)]
    return cutoff is not None and depth >= cutoff


def stroke_width(depth: int, is_mini: bool) -> float:
    if is_mini:
        return 1.5
    if depth <= 1:
        return 3
    if depth == 2:
        return 2.2
    return 1.5


def hierarchy_gap(depth: int, is_mini: bool, spacing_multiplier: float) -> float:
    """
    Horizontal distance a branch sits from the previous one on its side.
    """
    if is_mini:
        return 20 * spacing_multiplier
    if depth <= 1:
        return 80 * spacing_multiplier
    if depth == 2:
        return 40 * spacing_multiplier
    return 24 * spacing_multiplier


def node_radius(is_mini: bool, is_merge_commit: bool) -> float:
    if is_mini:
        return MINI_NODE_RADIUS
    if is_merge_commit:
        return MERGE_NODE_RADIUS
    return NODE_RADIUS


def fork_dot_radius(is_mini: bool) -> float:
    return MINI_FORK_DOT_RADIUS if is_mini else FORK_DOT_RADIUS

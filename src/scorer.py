"""
Quality scoring for a completed placement attempt.

score = 100 * words + 50 * intersections + 30 * compactness + 20 * area efficiency
"""
#
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

import os
import sys
from typing import Sequence

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import CrosswordGrid, Direction, GridSize, PlacedWord, find_bounds

WORD_WEIGHT = 100
INTERSECTION_WEIGHT = 50
COMPACTNESS_WEIGHT = 30
EFFICIENCY_WEIGHT = 20


def words_intersect(first: PlacedWord, second: PlacedWord) -> bool:
    """Perpendicular words whose runs share a cell."""
    if first.direction == second.direction:
        return False

    if first.direction == Direction.HORIZONTAL:
        across, down = first, second
    else:
        across, down = second, first

    return (down.start_row <= across.start_row <= down.end_row and
            across.start_col <= down.start_col <= across.end_col)


def count_intersections(placed_words: Sequence[PlacedWord]) -> int:
    """Count intersecting word pairs."""
    count = 0
    for i, first in enumerate(placed_words):
        for second in placed_words[i + 1:]:
            if words_intersect(first, second):
                count += 1
    return count


def calculate_min_grid_size(placed_words: Sequence[PlacedWord]) -> GridSize:
    """Width and height spanned by the placed words."""
    if not placed_words:
        return GridSize(width=0, height=0)

    min_row = min(w.start_row for w in placed_words)
    min_col = min(w.start_col for w in placed_words)
    max_row = max(w.end_row for w in placed_words)
    max_col = max(w.end_col for w in placed_words)
    return GridSize(width=max_col - min_col + 1, height=max_row - min_row + 1)


def calculate_compactness(rows: CrosswordGrid) -> float:
    """Percentage of filled cells within the occupied bounding box."""
    bounds = find_bounds(rows)
    if bounds is None:
        return 0.0

    min_row, min_col, max_row, max_col = bounds
    total = (max_row - min_row + 1) * (max_col - min_col + 1)
    filled = sum(
        1 for row in rows[min_row:max_row + 1]
        for cell in row[min_col:max_col + 1]
        if cell is not None
    )
    return filled / total * 100


def calculate_area_efficiency(placed_words: Sequence[PlacedWord]) -> float:
    """Total word length as a percentage of the words' bounding area."""
    size = calculate_min_grid_size(placed_words)
    if size.width == 0 or size.height == 0:
        return 0.0

    letters = sum(len(w.word) for w in placed_words)
    return letters / (size.width * size.height) * 100


def score_attempt(rows: CrosswordGrid, placed_words: Sequence[PlacedWord]) -> float:
    """
    Score an attempt from its grid and placements.

    Args:
        rows: The attempt's grid cells (trimmed or not)
        placed_words: Words placed during the attempt

    Returns:
        Score, 0 when nothing was placed
    """
    if not placed_words:
        return 0.0

    return (
        len(placed_words) * WORD_WEIGHT +
        count_intersections(placed_words) * INTERSECTION_WEIGHT +
        calculate_compactness(rows) * COMPACTNESS_WEIGHT +
        calculate_area_efficiency(placed_words) * EFFICIENCY_WEIGHT
    )

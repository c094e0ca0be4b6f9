"""
Crops a grid to its occupied bounding box and moves placements into the
cropped coordinate frame.
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
from typing import List, Sequence, Tuple

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import CrosswordGrid, PlacedWord, find_bounds


def trim_grid(rows: CrosswordGrid) -> CrosswordGrid:
    """Crop to the bounding box of non-empty cells ([] if none)."""
    bounds = find_bounds(rows)
    if bounds is None:
        return []

    min_row, min_col, max_row, max_col = bounds
    return [list(rows[r][min_col:max_col + 1]) for r in range(min_row, max_row + 1)]


def adjust_word_coordinates(
    placed_words: Sequence[PlacedWord],
    original_rows: CrosswordGrid
) -> List[PlacedWord]:
    """
    Translate placements into the frame produced by trim_grid.

    Placements are returned unchanged when the original grid is empty.
    """
    bounds = find_bounds(original_rows)
    if bounds is None:
        return list(placed_words)

    min_row, min_col = bounds[0], bounds[1]
    return [word.translated(-min_row, -min_col) for word in placed_words]


def trim_attempt(
    rows: CrosswordGrid,
    placed_words: Sequence[PlacedWord]
) -> Tuple[CrosswordGrid, List[PlacedWord]]:
    """Trim a grid and its placements together."""
    return trim_grid(rows), adjust_word_coordinates(placed_words, rows)

"""
Placement Validator

Decides whether a word may occupy a run of the grid:
1. The whole run lies inside the grid
2. Every occupied cell on the run already holds the same letter
3. The run is not glued onto existing letters (no accidental words)
4. In strict mode, every side neighbor belongs to a recorded word

The validator never mutates the grid.
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

from models import Grid, PlacedWord, Direction, ValidationLevel


def run_cells(
    word: str,
    start_row: int,
    start_col: int,
    direction: Direction
) -> List[Tuple[int, int]]:
    """Cell positions a word would occupy."""
    if direction == Direction.HORIZONTAL:
        return [(start_row, start_col + i) for i in range(len(word))]
    return [(start_row + i, start_col) for i in range(len(word))]


def _side_offsets(direction: Direction) -> List[Tuple[int, int]]:
    """Neighbor offsets perpendicular to the run direction."""
    if direction == Direction.HORIZONTAL:
        return [(-1, 0), (1, 0)]
    return [(0, -1), (0, 1)]


def is_recorded_crossing(
    row: int,
    col: int,
    letter: str,
    direction: Direction,
    placed_words: Sequence[PlacedWord]
) -> bool:
    """
    Check that a placed word perpendicular to `direction` covers (row, col)
    with the same letter.
    """
    crossing = direction.opposite()
    for placed in placed_words:
        if placed.direction == crossing and placed.letter_at(row, col) == letter:
            return True
    return False


def is_part_of_placed_word(
    row: int,
    col: int,
    placed_words: Sequence[PlacedWord]
) -> bool:
    """Check if (row, col) lies on any recorded word."""
    return any(placed.covers(row, col) for placed in placed_words)


def check_bounds(
    grid: Grid,
    word: str,
    start_row: int,
    start_col: int,
    direction: Direction
) -> bool:
    """Whole run must fit inside the grid."""
    if not word:
        return False
    cells = run_cells(word, start_row, start_col, direction)
    first_row, first_col = cells[0]
    last_row, last_col = cells[-1]
    return (grid.is_valid_position(first_row, first_col) and
            grid.is_valid_position(last_row, last_col))


def check_cells(
    grid: Grid,
    word: str,
    start_row: int,
    start_col: int,
    direction: Direction
) -> bool:
    """Every occupied cell on the run must already hold the matching letter."""
    for i, (row, col) in enumerate(run_cells(word, start_row, start_col, direction)):
        cell = grid.get_cell(row, col)
        if cell is not None and cell != word[i]:
            return False
    return True


def check_word_boundaries(
    grid: Grid,
    word: str,
    start_row: int,
    start_col: int,
    direction: Direction,
    placed_words: Sequence[PlacedWord]
) -> bool:
    """
    Prevent the run from lengthening or touching existing words.

    The cells just before and after the run must be empty. A run cell with a
    letter beside it is only allowed where the run crosses a recorded
    perpendicular word, and any occupied run cell must be such a crossing.
    """
    cells = run_cells(word, start_row, start_col, direction)
    d_row, d_col = (0, 1) if direction == Direction.HORIZONTAL else (1, 0)

    before = (cells[0][0] - d_row, cells[0][1] - d_col)
    after = (cells[-1][0] + d_row, cells[-1][1] + d_col)
    for row, col in (before, after):
        if grid.is_valid_position(row, col) and not grid.is_empty(row, col):
            return False

    for i, (row, col) in enumerate(cells):
        letter = word[i]
        crossing = None  # computed lazily

        if not grid.is_empty(row, col):
            crossing = is_recorded_crossing(row, col, letter, direction, placed_words)
            if not crossing:
                return False

        for side_row, side_col in _side_offsets(direction):
            n_row, n_col = row + side_row, col + side_col
            if not grid.is_valid_position(n_row, n_col) or grid.is_empty(n_row, n_col):
                continue
            if crossing is None:
                crossing = is_recorded_crossing(
                    row, col, letter, direction, placed_words
                )
            if not crossing:
                return False

    return True


def check_surrounding_cells(
    grid: Grid,
    word: str,
    start_row: int,
    start_col: int,
    direction: Direction,
    placed_words: Sequence[PlacedWord]
) -> bool:
    """Strict mode: every lettered side neighbor must lie on a recorded word."""
    for row, col in run_cells(word, start_row, start_col, direction):
        for side_row, side_col in _side_offsets(direction):
            n_row, n_col = row + side_row, col + side_col
            if not grid.is_valid_position(n_row, n_col) or grid.is_empty(n_row, n_col):
                continue
            if not is_part_of_placed_word(n_row, n_col, placed_words):
                return False
    return True


def can_place(
    grid: Grid,
    word: str,
    start_row: int,
    start_col: int,
    direction: Direction,
    placed_words: Sequence[PlacedWord] = (),
    level: ValidationLevel = ValidationLevel.NORMAL
) -> bool:
    """
    Check whether `word` may legally occupy the given run.

    Args:
        grid: Current attempt grid (read only)
        word: Word to place, any case
        start_row: Anchor row
        start_col: Anchor column
        direction: Run direction
        placed_words: Words already committed to the grid
        level: Strictness tier

    Returns:
        True if the placement is allowed
    """
    word = word.upper()

    if not check_bounds(grid, word, start_row, start_col, direction):
        return False

    if not check_cells(grid, word, start_row, start_col, direction):
        return False

    if not check_word_boundaries(
        grid, word, start_row, start_col, direction, placed_words
    ):
        return False

    if level == ValidationLevel.STRICT:
        return check_surrounding_cells(
            grid, word, start_row, start_col, direction, placed_words
        )

    return True

"""
Data models for the crossword generator.
"""
#
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Dict, Tuple, Any


# A grid cell holds a single uppercase letter or None when empty
CrosswordCell = Optional[str]
CrosswordGrid = List[List[CrosswordCell]]


class CrosswordGenerationError(Exception):
    """Base class for failures contained inside the attempt optimizer."""
    pass


class SelectionExhaustedError(CrosswordGenerationError):
    """Raised when no word survives length filtering for an attempt."""
    pass


class PlacementExhaustedError(CrosswordGenerationError):
    """Raised when a word has no valid intersection anchor."""
    pass


class GenerationExhaustedError(CrosswordGenerationError):
    """Raised when no attempt across the budget placed any word."""
    pass


class Direction(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    def opposite(self) -> 'Direction':
        if self == Direction.HORIZONTAL:
            return Direction.VERTICAL
        return Direction.HORIZONTAL


class ValidationLevel(Enum):
    STRICT = "strict"
    NORMAL = "normal"
    LENIENT = "lenient"


@dataclass(frozen=True)
class PlacedWord:
    """A word committed to the grid. End coordinates are always derived."""
    word: str
    start_row: int
    start_col: int
    direction: Direction

    @property
    def end_row(self) -> int:
        if self.direction == Direction.VERTICAL:
            return self.start_row + len(self.word) - 1
        return self.start_row

    @property
    def end_col(self) -> int:
        if self.direction == Direction.HORIZONTAL:
            return self.start_col + len(self.word) - 1
        return self.start_col

    def cells(self) -> List[Tuple[int, int]]:
        """Calculate all cell positions covered by this word."""
        cells = []
        for i in range(len(self.word)):
            if self.direction == Direction.HORIZONTAL:
                cells.append((self.start_row, self.start_col + i))
            else:
                cells.append((self.start_row + i, self.start_col))
        return cells

    def covers(self, row: int, col: int) -> bool:
        """Check if (row, col) lies on this word's run."""
        if self.direction == Direction.HORIZONTAL:
            return row == self.start_row and self.start_col <= col <= self.end_col
        return col == self.start_col and self.start_row <= row <= self.end_row

    def letter_at(self, row: int, col: int) -> Optional[str]:
        """Letter this word puts at (row, col), or None if not covered."""
        if not self.covers(row, col):
            return None
        if self.direction == Direction.HORIZONTAL:
            return self.word[col - self.start_col]
        return self.word[row - self.start_row]

    def translated(self, d_row: int, d_col: int) -> 'PlacedWord':
        """Return a copy shifted by (d_row, d_col)."""
        return PlacedWord(
            word=self.word,
            start_row=self.start_row + d_row,
            start_col=self.start_col + d_col,
            direction=self.direction,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "start_row": self.start_row,
            "start_col": self.start_col,
            "direction": self.direction.value,
            "end_row": self.end_row,
            "end_col": self.end_col,
        }


@dataclass
class Grid:
    """Square letter buffer owned by a single attempt."""
    size: int
    cells: CrosswordGrid = field(default_factory=list)

    def __post_init__(self):
        if not self.cells:
            self.cells = [[None for _ in range(self.size)] for _ in range(self.size)]

    def get_cell(self, row: int, col: int) -> CrosswordCell:
        """Get cell at position."""
        return self.cells[row][col]

    def set_letter(self, row: int, col: int, letter: str):
        """Set a letter in a cell."""
        self.cells[row][col] = letter.upper()

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row: int, col: int) -> bool:
        return self.cells[row][col] is None

    def count_filled(self) -> int:
        """Count cells holding a letter."""
        count = 0
        for row in self.cells:
            for cell in row:
                if cell is not None:
                    count += 1
        return count

    def bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """
        Bounding box of occupied cells.

        Returns:
            (min_row, min_col, max_row, max_col) or None if the grid is empty
        """
        return find_bounds(self.cells)

    def to_rows(self) -> CrosswordGrid:
        """Copy of the cell matrix."""
        return [list(row) for row in self.cells]


def find_bounds(rows: CrosswordGrid) -> Optional[Tuple[int, int, int, int]]:
    """Bounding box (min_row, min_col, max_row, max_col) of non-empty cells."""
    min_row = min_col = None
    max_row = max_col = -1
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell is None:
                continue
            if min_row is None:
                min_row = r
            min_col = c if min_col is None else min(min_col, c)
            max_row = r
            max_col = max(max_col, c)
    if min_row is None:
        return None
    return (min_row, min_col, max_row, max_col)


@dataclass
class GenerationState:
    """Mutable state of one placement attempt."""
    grid: Grid
    available_words: List[str]
    attempt: int
    placed_words: List[PlacedWord] = field(default_factory=list)
    failures: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class GridSize:
    width: int
    height: int


@dataclass(frozen=True)
class CrosswordStats:
    words_used: int
    grid_size: GridSize
    total_intersections: int
    attempts: int


@dataclass(frozen=True)
class CrosswordResult:
    """Final trimmed crossword handed to rendering collaborators."""
    grid: CrosswordGrid
    placed_words: List[PlacedWord]
    stats: CrosswordStats

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    def to_string(self, empty: str = ".") -> str:
        """Convert grid to string representation."""
        return "\n".join(
            " ".join(cell if cell is not None else empty for cell in row)
            for row in self.grid
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "grid": [list(row) for row in self.grid],
            "placed_words": [w.to_dict() for w in self.placed_words],
            "stats": {
                "words_used": self.stats.words_used,
                "grid_size": {
                    "width": self.stats.grid_size.width,
                    "height": self.stats.grid_size.height,
                },
                "total_intersections": self.stats.total_intersections,
                "attempts": self.stats.attempts,
            },
        }

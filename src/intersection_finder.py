"""
Finds crossing anchors between an unplaced word and the words on the grid.
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
from dataclasses import dataclass
from typing import List, Sequence

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import PlacedWord, Direction


@dataclass(frozen=True)
class IntersectionCandidate:
    """Proposed anchor for a word crossing `placed_word`."""
    row: int
    col: int
    direction: Direction
    placed_word: PlacedWord
    new_word_index: int
    placed_word_index: int


def find_intersections(
    new_word: str,
    placed_words: Sequence[PlacedWord]
) -> List[IntersectionCandidate]:
    """
    Enumerate perpendicular crossings on shared letters.

    Candidates are not bounds-checked; that is left to the validator.

    Args:
        new_word: Word to place, any case
        placed_words: Words already on the grid

    Returns:
        One candidate per (placed word, new index, placed index) letter match
    """
    candidates = []
    word = new_word.upper()

    for placed in placed_words:
        for i, letter in enumerate(word):
            for j, placed_letter in enumerate(placed.word):
                if letter != placed_letter:
                    continue

                if placed.direction == Direction.HORIZONTAL:
                    row = placed.start_row - i
                    col = placed.start_col + j
                else:
                    row = placed.start_row + j
                    col = placed.start_col - i

                candidates.append(IntersectionCandidate(
                    row=row,
                    col=col,
                    direction=placed.direction.opposite(),
                    placed_word=placed,
                    new_word_index=i,
                    placed_word_index=j,
                ))

    return candidates

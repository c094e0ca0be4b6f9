"""
Placement Engine

Runs a single placement attempt:
1. Select and shuffle the attempt's word pool
2. Seed the grid with the first word near the center
3. Repeatedly cross remaining words with placed ones until the target
   count is met, the pool empties or the failure budget runs out
"""
#
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

import logging
import os
import random
import sys
from typing import List, Optional

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import (
    Grid, PlacedWord, Direction, GenerationState,
    SelectionExhaustedError, PlacementExhaustedError
)
from config import GeneratorOptions
from word_selector import select_words, shuffle_items
from intersection_finder import find_intersections
from placement_validator import can_place, run_cells

logger = logging.getLogger(__name__)


def place_word(
    grid: Grid,
    word: str,
    start_row: int,
    start_col: int,
    direction: Direction
) -> PlacedWord:
    """
    Write a word into the grid.

    This is the only operation that mutates a grid; callers validate first.

    Returns:
        The committed PlacedWord
    """
    word = word.upper()
    for letter, (row, col) in zip(word, run_cells(word, start_row, start_col, direction)):
        grid.set_letter(row, col, letter)

    return PlacedWord(
        word=word,
        start_row=start_row,
        start_col=start_col,
        direction=direction,
    )


class PlacementEngine:
    """Builds one candidate layout per call to run_attempt."""

    def __init__(
        self,
        options: GeneratorOptions,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the engine.

        Args:
            options: Generator options (clamped on entry)
            rng: Random source shared by every attempt of a run
        """
        self.options = options.normalized()
        self.rng = rng if rng is not None else options.create_rng()

    def run_attempt(self, words: List[str], attempt_number: int) -> GenerationState:
        """
        Run a complete attempt on a fresh grid.

        Args:
            words: Raw input words
            attempt_number: 1-based attempt counter

        Returns:
            Final GenerationState (possibly with fewer words than requested)

        Raises:
            SelectionExhaustedError: If no word survives length filtering
        """
        selected = select_words(
            words,
            count=self.options.word_count,
            min_word_length=self.options.min_word_length,
            max_word_length=self.options.max_word_length,
            rng=self.rng,
        )
        if not selected:
            raise SelectionExhaustedError("No valid words available")

        state = GenerationState(
            grid=Grid(size=self.options.max_grid_size),
            available_words=selected,
            attempt=attempt_number,
        )

        self.place_first_word(state)
        self.place_remaining_words(state)

        logger.debug(
            f"Attempt {attempt_number}: placed {len(state.placed_words)}"
            f"/{len(selected)} words"
        )
        return state

    def place_first_word(self, state: GenerationState):
        """Seed the grid with the first pool word near the center."""
        if not state.available_words:
            return

        word = state.available_words.pop(0)
        size = state.grid.size
        margin = size // 4

        if self.rng.random() < 0.5:
            direction = Direction.HORIZONTAL
        else:
            direction = Direction.VERTICAL

        # Along the run: keep clear of the edges when the word is short enough
        low, high = margin, size - len(word) - margin
        if high < low:
            low, high = 0, size - len(word)
        along = self.rng.randint(low, high)

        # Across the run: anywhere inside the central band
        band = size - margin * 2
        across = margin + self.rng.randrange(band) if band > 0 else self.rng.randrange(size)

        if direction == Direction.HORIZONTAL:
            start_row, start_col = across, along
        else:
            start_row, start_col = along, across

        placed = place_word(state.grid, word, start_row, start_col, direction)
        state.placed_words.append(placed)
        logger.debug(
            f"Seeded {word} {direction.value} at ({start_row}, {start_col})"
        )

    def place_remaining_words(self, state: GenerationState):
        """Cross pool words with the grid until a stop condition is hit."""
        target = min(self.options.word_count - 1, len(state.available_words))
        words_placed = 0
        consecutive_failures = 0

        while (words_placed < target and
               state.available_words and
               consecutive_failures < self.options.max_consecutive_failures):

            index = self.rng.randrange(len(state.available_words))
            word = state.available_words[index]

            try:
                self.try_place_word(state, word)
            except PlacementExhaustedError:
                consecutive_failures += 1
                state.failures[word] = state.failures.get(word, 0) + 1

                if state.failures[word] >= self.options.max_failures_per_word:
                    logger.debug(
                        f"Dropping {word} after {state.failures[word]} failures"
                    )
                    state.available_words.pop(index)
                    consecutive_failures = 0
                continue

            state.available_words.pop(index)
            words_placed += 1
            consecutive_failures = 0

        if consecutive_failures >= self.options.max_consecutive_failures:
            logger.debug(
                f"Attempt {state.attempt}: stopped after "
                f"{consecutive_failures} consecutive failures"
            )

    def try_place_word(self, state: GenerationState, word: str) -> PlacedWord:
        """
        Place a word across one of the placed words.

        Raises:
            PlacementExhaustedError: If no candidate anchor is valid
        """
        candidates = shuffle_items(find_intersections(word, state.placed_words), self.rng)

        for candidate in candidates:
            if can_place(
                state.grid,
                word,
                candidate.row,
                candidate.col,
                candidate.direction,
                state.placed_words,
                self.options.level,
            ):
                placed = place_word(
                    state.grid, word, candidate.row, candidate.col, candidate.direction
                )
                state.placed_words.append(placed)
                return placed

        raise PlacementExhaustedError(
            f"No valid anchor for {word} among {len(candidates)} candidates"
        )

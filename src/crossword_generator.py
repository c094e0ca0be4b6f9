#!/usr/bin/env python3
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Crossword Layout Generator

Builds a compact crossword grid from a word list:
1. Runs up to max_attempts randomized placement attempts
2. Scores every attempt and keeps the best one
3. Stops early once an attempt reaches the requested word count
4. Trims the winning grid to its bounding box

Usage:
    # Inline words:
    python crossword_generator.py --words CAT CAR ART --word-count 3

    # Word file with a fixed seed:
    python crossword_generator.py --words-file words.txt --seed 7

    # With YAML configuration:
    python crossword_generator.py --config crossword.yaml
"""

import logging
import os
import random
import sys
from dataclasses import replace
from typing import List, Optional

import yaml

# Add src to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import (
    CrosswordResult, CrosswordStats, Direction, Grid, GridSize,
    GenerationState, SelectionExhaustedError, GenerationExhaustedError
)
from config import (
    GeneratorOptions, ConfigValidationError, create_argument_parser,
    load_config, load_word_list
)
from word_selector import select_words
from placement_engine import PlacementEngine, place_word
from scorer import score_attempt, count_intersections, calculate_min_grid_size
from grid_trimmer import trim_attempt
from logging_config import setup_logging

logger = logging.getLogger(__name__)


class CrosswordGenerator:
    """
    Multi-attempt crossword layout optimizer.

    Workflow:
    1. Run an independent placement attempt on a fresh grid
    2. Score it; remember it if it beats the best score so far
    3. Stop once the best attempt meets the word count, or the budget ends
    4. Trim the winning attempt (or fall back to a single word)
    """

    def __init__(
        self,
        options: Optional[GeneratorOptions] = None,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the generator.

        Args:
            options: Generator options; malformed values are clamped
            rng: Injected random source. When omitted, each generate() call
                 builds a fresh one from options.seed.
        """
        self.options = (options or GeneratorOptions()).normalized()
        self._rng = rng

    def generate(self, words: List[str]) -> CrosswordResult:
        """
        Generate a crossword from a word list.

        Args:
            words: Candidate words in any case

        Returns:
            CrosswordResult (never None)
        """
        rng = self._rng if self._rng is not None else self.options.create_rng()
        logger.info(
            f"Generating crossword: {len(words)} input words, "
            f"target {self.options.word_count}, grid {self.options.max_grid_size}, "
            f"level {self.options.validation_level}"
        )

        try:
            best = self._run_attempts(words, rng)
        except GenerationExhaustedError as e:
            logger.warning(f"{e}; falling back to a single word")
            return self._fallback_result(words, rng)

        return self._build_result(best)

    def _run_attempts(self, words: List[str], rng: random.Random) -> GenerationState:
        """
        Run attempts and return the best-scoring state.

        Raises:
            GenerationExhaustedError: If no attempt placed any word
        """
        engine = PlacementEngine(self.options, rng)
        best_state = None
        best_score = 0.0

        for attempt in range(self.options.max_attempts):
            try:
                state = engine.run_attempt(words, attempt + 1)
            except SelectionExhaustedError as e:
                logger.debug(f"Attempt {attempt + 1} abandoned: {e}")
                continue

            score = score_attempt(state.grid.cells, state.placed_words)
            if score > best_score:
                best_score = score
                best_state = state
                logger.debug(
                    f"Attempt {attempt + 1}: new best score {score:.1f} "
                    f"with {len(state.placed_words)} words"
                )

                # Good enough: later attempts might still score higher
                if len(state.placed_words) >= self.options.word_count:
                    break

        if best_state is None:
            raise GenerationExhaustedError(
                f"No word placed in {self.options.max_attempts} attempts"
            )

        logger.info(
            f"Best attempt {best_state.attempt}: {len(best_state.placed_words)} "
            f"words, score {best_score:.1f}"
        )
        return best_state

    def _build_result(self, state: GenerationState) -> CrosswordResult:
        """Trim the winning attempt and collect its stats."""
        rows, placed_words = trim_attempt(state.grid.cells, state.placed_words)
        return CrosswordResult(
            grid=rows,
            placed_words=placed_words,
            stats=CrosswordStats(
                words_used=len(placed_words),
                grid_size=calculate_min_grid_size(placed_words),
                total_intersections=count_intersections(placed_words),
                attempts=state.attempt,
            ),
        )

    def _fallback_result(self, words: List[str], rng: random.Random) -> CrosswordResult:
        """Single horizontal word at the origin, or an empty result."""
        selected = select_words(
            words,
            count=1,
            min_word_length=self.options.min_word_length,
            max_word_length=self.options.max_word_length,
            rng=rng,
        )

        if not selected:
            return CrosswordResult(
                grid=[],
                placed_words=[],
                stats=CrosswordStats(
                    words_used=0,
                    grid_size=GridSize(width=0, height=0),
                    total_intersections=0,
                    attempts=self.options.max_attempts,
                ),
            )

        word = selected[0]
        grid = Grid(size=len(word))
        placed = place_word(grid, word, 0, 0, Direction.HORIZONTAL)
        rows, placed_words = trim_attempt(grid.cells, [placed])

        return CrosswordResult(
            grid=rows,
            placed_words=placed_words,
            stats=CrosswordStats(
                words_used=1,
                grid_size=calculate_min_grid_size(placed_words),
                total_intersections=0,
                attempts=self.options.max_attempts,
            ),
        )


def generate_crossword(
    words: List[str],
    options: Optional[GeneratorOptions] = None,
    rng: Optional[random.Random] = None,
    **overrides
) -> CrosswordResult:
    """
    Convenience function to generate a crossword.

    Args:
        words: Candidate words
        options: Generator options (defaults if None)
        rng: Injected random source (built from the seed if None)
        **overrides: GeneratorOptions fields, e.g. word_count=5, seed=1

    Returns:
        CrosswordResult
    """
    options = options or GeneratorOptions()
    if overrides:
        options = replace(options, **overrides)
    return CrosswordGenerator(options, rng).generate(words)


def format_result(result: CrosswordResult) -> str:
    """Plain text listing: grid, placed words and stats."""
    lines = [result.to_string(), ""]
    for word in result.placed_words:
        lines.append(
            f"{word.word:<15} {word.direction.value:<10} "
            f"({word.start_row}, {word.start_col}) -> ({word.end_row}, {word.end_col})"
        )
    stats = result.stats
    lines.append("")
    lines.append(
        f"Words: {stats.words_used}  Size: {stats.grid_size.width}x"
        f"{stats.grid_size.height}  Intersections: {stats.total_intersections}  "
        f"Attempts: {stats.attempts}"
    )
    return "\n".join(lines)


def main():
    """Main entry point."""
    parser = create_argument_parser()
    args = parser.parse_args()

    try:
        # Load configuration
        config = load_config(args)

        setup_logging(
            output_dir=config.output.log_directory,
            log_level=config.output.log_level,
            log_file_prefix=config.output.log_file_prefix,
            enable_console=config.output.enable_console_logging,
        )

        words = list(config.words)
        if config.words_file:
            words.extend(load_word_list(config.words_file))

        # Handle dry-run
        if args.dry_run:
            options = config.generation.normalized()
            print("Configuration valid:")
            print(f"  Words: {len(words)}")
            print(f"  Word Count: {options.word_count}")
            print(f"  Max Attempts: {options.max_attempts}")
            print(f"  Max Grid Size: {options.max_grid_size}")
            print(f"  Validation Level: {options.validation_level}")
            print(f"  Word Length: {options.min_word_length}-{options.max_word_length}")
            print(f"  Seed: {options.seed}")
            return

        result = CrosswordGenerator(config.generation).generate(words)

        if config.output.format == "yaml":
            print(yaml.safe_dump(result.to_dict(), sort_keys=False), end="")
        else:
            print(format_result(result))

    except ConfigValidationError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nGeneration cancelled.")
        sys.exit(0)


if __name__ == "__main__":
    main()

"""
Word selection for a placement attempt.

Filters the caller's word list by length, normalizes case and draws a
random sample using the attempt's random source.
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
import random
from typing import Iterable, List, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def shuffle_items(items: List[T], rng: random.Random) -> List[T]:
    """Return a uniformly shuffled copy (Fisher-Yates via Random.shuffle)."""
    shuffled = list(items)
    rng.shuffle(shuffled)
    return shuffled


def normalize_words(
    words: Iterable[str],
    min_word_length: int,
    max_word_length: int
) -> List[str]:
    """
    Uppercase, strip and length-filter words, dropping duplicates.

    Args:
        words: Raw input words in any case
        min_word_length: Shortest allowed word
        max_word_length: Longest allowed word

    Returns:
        Unique uppercase words in input order
    """
    seen = set()
    valid = []
    for word in words:
        if not isinstance(word, str):
            continue
        word = word.strip().upper()
        if not min_word_length <= len(word) <= max_word_length:
            continue
        if word in seen:
            continue
        seen.add(word)
        valid.append(word)
    return valid


def select_words(
    words: Iterable[str],
    count: int,
    min_word_length: int,
    max_word_length: int,
    rng: random.Random
) -> List[str]:
    """
    Select a random sample of usable words.

    Args:
        words: Raw input words
        count: Requested number of words
        min_word_length: Shortest allowed word
        max_word_length: Longest allowed word (callers cap it to the grid size)
        rng: Random source for the shuffle

    Returns:
        Up to `count` uppercase words in random order (possibly empty)
    """
    valid = normalize_words(words, min_word_length, max_word_length)
    selected = shuffle_items(valid, rng)[:max(0, min(count, len(valid)))]
    logger.debug(f"Selected {len(selected)} of {len(valid)} usable words")
    return selected

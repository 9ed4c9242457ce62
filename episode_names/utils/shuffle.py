"""Shuffling utilities."""

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")


def fisher_yates_shuffle(items: Sequence[T], rng: Optional[random.Random] = None) -> list[T]:
    """Return a uniformly shuffled copy of items (Fisher-Yates).

    The input is never modified.
    """
    rng = rng or random
    shuffled = list(items)
    
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    
    return shuffled

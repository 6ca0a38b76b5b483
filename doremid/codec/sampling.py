"""Sampling positions without replacement."""

from __future__ import annotations

import random
from fractions import Fraction

from doremid.utils.constants import SHUFFLE_CROSSOVER


def shuffle_positions(max_value: int, rng: random.Random) -> list[int]:
    """Fisher-Yates shuffle of range(max_value) using provided RNG."""
    positions = list(range(max_value))
    for i in range(max_value - 1, 0, -1):
        j = rng.randint(0, i)
        positions[i], positions[j] = positions[j], positions[i]
    return positions


def rejection_sample(max_value: int, count: int, rng: random.Random) -> list[int]:
    """Draw uniform positions until count distinct ones are collected.

    Cheap while count is small relative to max_value. Callers must keep
    count <= max_value or this never returns.
    """
    used: set[int] = set()
    positions: list[int] = []
    while len(positions) < count:
        pos = rng.randrange(max_value)
        if pos not in used:
            used.add(pos)
            positions.append(pos)
    return positions


def random_sample(
    max_value: int,
    count: int,
    rng: random.Random,
    crossover: Fraction = SHUFFLE_CROSSOVER,
) -> list[int]:
    """Pick count distinct positions from [0, max_value), uniformly.

    Returns positions in draw order. Large requests (count at or above
    crossover * max_value) shuffle the whole range; smaller ones use
    rejection sampling. The crossover is an exact Fraction so the
    comparison stays exact at any size. count above max_value is
    clamped to a full permutation.
    """
    if count <= 0 or max_value <= 0:
        return []
    count = min(count, max_value)
    if count >= max_value * crossover:
        return shuffle_positions(max_value, rng)[:count]
    return rejection_sample(max_value, count, rng)

"""Random sources for identifier generation."""

import random
import secrets


def create_rng(seed: int | None = None) -> random.Random:
    """Create a Random instance owned by a single generator.

    If seed is provided, returns a deterministic Random (for tests/replay).
    If seed is None, returns SystemRandom, which keeps no shared state.
    """
    if seed is not None:
        return random.Random(seed)
    return secrets.SystemRandom()

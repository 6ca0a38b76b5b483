"""Tests for random sources."""

import random
import secrets

from doremid.utils.rng import create_rng


class TestCreateRng:
    def test_seeded_is_deterministic(self):
        r1 = create_rng(42)
        r2 = create_rng(42)
        assert [r1.randrange(1000) for _ in range(10)] == [
            r2.randrange(1000) for _ in range(10)
        ]

    def test_seeded_returns_plain_random(self):
        rng = create_rng(7)
        assert type(rng) is random.Random

    def test_unseeded_returns_system_random(self):
        assert isinstance(create_rng(), secrets.SystemRandom)

    def test_instances_do_not_share_state(self):
        r1 = create_rng(42)
        r2 = create_rng(42)
        r1.random()
        assert r1.getstate() != r2.getstate()

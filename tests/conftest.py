"""Shared test fixtures for doremid."""

from __future__ import annotations

import pytest

from doremid.codec.generator import Generator
from doremid.codec.models import Config
from doremid.utils.rng import create_rng


@pytest.fixture
def small_gen():
    """1 melody digit, 2 pitch digits: 7 * 144 = 1008 positions."""
    return Generator(Config(melody_digits=1, pitch_digits=2, separator="-"), rng=create_rng(42))


@pytest.fixture
def tiny_gen():
    """1 melody digit, 1 pitch digit: 84 positions."""
    return Generator(Config(melody_digits=1, pitch_digits=1, separator="-"), rng=create_rng(42))


@pytest.fixture
def default_gen():
    return Generator.from_defaults(rng=create_rng(42))


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("DOREMID_MELODY_DIGITS", "DOREMID_PITCH_DIGITS", "DOREMID_SEPARATOR"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch

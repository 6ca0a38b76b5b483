"""Identifier generator: the position <-> identifier codec and batch draws."""

from __future__ import annotations

import json
import logging
import random
from types import MappingProxyType
from typing import Mapping

from doremid.codec.models import Config, ParseResult, RenderResult
from doremid.codec.sampling import random_sample
from doremid.utils.constants import (
    INVALID_ID,
    INVALID_POSITION,
    MELODY_ALPHABET,
    MELODY_SYMBOL_WIDTH,
    PITCH_ALPHABET,
)
from doremid.utils.rng import create_rng

logger = logging.getLogger("doremid.generator")


class Generator:
    """Maps positions in [0, max_combinations) onto melody/pitch identifiers.

    Position = melody_value * 12**pitch_digits + pitch_value, where the
    melody digits are base 7 (most significant) and the pitch digits base 12.

    Rendering and parsing only read the immutable lookup tables, so they
    are safe to share across threads. The random operations advance this
    instance's rng and need external locking if shared.
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        rng: random.Random | None = None,
        seed: int | None = None,
    ) -> None:
        self._config = config or Config.default()
        errors = self._config.validate()
        if errors:
            raise ValueError("Invalid config: " + "; ".join(errors))

        self._melody_alphabet = tuple(MELODY_ALPHABET)
        self._pitch_alphabet = tuple(PITCH_ALPHABET)
        self._melody_len = len(self._melody_alphabet)
        self._pitch_len = len(self._pitch_alphabet)
        self._melody_index = MappingProxyType(
            {symbol: i for i, symbol in enumerate(self._melody_alphabet)}
        )
        self._pitch_index = MappingProxyType(
            {symbol: i for i, symbol in enumerate(self._pitch_alphabet)}
        )

        self._melody_width = self._config.melody_digits * MELODY_SYMBOL_WIDTH
        self._pitch_max = self._pitch_len ** self._config.pitch_digits
        self._max_combinations = (
            self._melody_len ** self._config.melody_digits * self._pitch_max
        )
        if rng is not None and seed is not None:
            raise ValueError("Pass either rng or seed, not both")
        self._rng = rng or create_rng(seed)

    @classmethod
    def from_defaults(cls, **kwargs) -> Generator:
        """Generator with 4 melody digits, 5 pitch digits and "-"."""
        return cls(Config.default(), **kwargs)

    # -- Introspection ---------------------------------------------------

    @property
    def config(self) -> Config:
        return self._config

    @property
    def melody_digits(self) -> int:
        return self._config.melody_digits

    @property
    def pitch_digits(self) -> int:
        return self._config.pitch_digits

    @property
    def separator(self) -> str:
        return self._config.separator

    @property
    def melody_alphabet(self) -> tuple[str, ...]:
        return self._melody_alphabet

    @property
    def pitch_alphabet(self) -> tuple[str, ...]:
        return self._pitch_alphabet

    @property
    def melody_index(self) -> Mapping[str, int]:
        return self._melody_index

    @property
    def pitch_index(self) -> Mapping[str, int]:
        return self._pitch_index

    @property
    def max_combinations(self) -> int:
        """7**melody_digits * 12**pitch_digits, exact at any size."""
        return self._max_combinations

    @property
    def identifier_length(self) -> int:
        return self._melody_width + len(self.separator) + self.pitch_digits

    def summary(self) -> dict:
        return {
            "config": self._config.to_dict(),
            "maxCombinations": self._max_combinations,
            "identifierLength": self.identifier_length,
            "first": self.position_to_id(0),
            "last": self.position_to_id(self._max_combinations - 1),
        }

    # -- Codec -------------------------------------------------------------

    def render(self, position: int) -> RenderResult:
        """Encode a position.

        Positions >= max_combinations still render: only the low
        melody_digits base-7 digits of the melody value are kept.
        """
        if position < 0:
            return RenderResult(success=False, error=f"Negative position: {position}")

        melody_value, pitch_value = divmod(position, self._pitch_max)
        melody = "".join(
            self._melody_alphabet[d]
            for d in _digits(melody_value, self._melody_len, self.melody_digits)
        )
        pitch = "".join(
            self._pitch_alphabet[d]
            for d in _digits(pitch_value, self._pitch_len, self.pitch_digits)
        )
        return RenderResult(success=True, identifier=melody + self.separator + pitch)

    def position_to_id(self, position: int) -> str:
        """Encode a position. Returns "" for a negative position."""
        return self.render(position).identifier

    def parse(self, identifier: str) -> ParseResult:
        """Decode an identifier back into its position."""
        parts = self._split(identifier)
        if len(parts) != 2:
            return ParseResult(
                success=False,
                error=f"Expected 2 segments around {self.separator!r}, got {len(parts)}",
            )

        melody, pitch = parts
        if len(melody) != self._melody_width:
            return ParseResult(
                success=False,
                error=f"Melody segment must be {self._melody_width} characters, got {len(melody)}",
            )
        if len(pitch) != self.pitch_digits:
            return ParseResult(
                success=False,
                error=f"Pitch segment must be {self.pitch_digits} characters, got {len(pitch)}",
            )

        melody_value = 0
        for i in range(0, len(melody), MELODY_SYMBOL_WIDTH):
            symbol = melody[i:i + MELODY_SYMBOL_WIDTH]
            index = self._melody_index.get(symbol)
            if index is None:
                return ParseResult(success=False, error=f"Unknown melody symbol {symbol!r}")
            melody_value = melody_value * self._melody_len + index

        pitch_value = 0
        for symbol in pitch:
            index = self._pitch_index.get(symbol)
            if index is None:
                return ParseResult(success=False, error=f"Unknown pitch symbol {symbol!r}")
            pitch_value = pitch_value * self._pitch_len + index

        return ParseResult(
            success=True, position=melody_value * self._pitch_max + pitch_value
        )

    def id_to_position(self, identifier: str) -> int:
        """Decode an identifier. Returns -1 if the format is invalid."""
        return self.parse(identifier).position

    def is_valid(self, identifier: str) -> bool:
        return self.parse(identifier).success

    def _split(self, identifier: str) -> list[str]:
        if self.separator:
            return identifier.split(self.separator)
        # Symbols are fixed-width, so an empty separator splits by position
        return [identifier[:self._melody_width], identifier[self._melody_width:]]

    # -- Generation --------------------------------------------------------

    def new_id(self) -> str:
        """Random identifier. Independent draws; collisions are possible."""
        melody = "".join(
            self._rng.choice(self._melody_alphabet) for _ in range(self.melody_digits)
        )
        pitch = "".join(
            self._rng.choice(self._pitch_alphabet) for _ in range(self.pitch_digits)
        )
        return melody + self.separator + pitch

    def batch_generate_ids(self, count: int, start_position: int = 0) -> list[str]:
        """Sequential identifiers for start_position, start_position+1, ...

        count is silently clamped to the positions left before
        max_combinations. Returns [] if count <= 0 or start_position is
        outside [0, max_combinations).
        """
        if count <= 0 or start_position < 0:
            logger.debug(
                "Rejected sequential batch: count=%s start=%s", count, start_position
            )
            return []
        if start_position >= self._max_combinations:
            logger.debug(
                "Rejected sequential batch: start %s >= %s",
                start_position,
                self._max_combinations,
            )
            return []

        count = min(count, self._max_combinations - start_position)
        ids = [self.position_to_id(start_position + i) for i in range(count)]

        event = {
            "event": "batch_sequential",
            "count": count,
            "startPosition": start_position,
        }
        logger.debug(json.dumps(event))
        return ids

    def batch_generate_random_ids(self, count: int) -> list[str]:
        """count distinct random identifiers.

        Distinctness comes from sampling positions without replacement.
        Returns [] if count <= 0 or count > max_combinations.
        """
        if count <= 0 or count > self._max_combinations:
            logger.debug(
                "Rejected random batch: count=%s max=%s", count, self._max_combinations
            )
            return []

        positions = random_sample(self._max_combinations, count, self._rng)
        ids = [self.position_to_id(pos) for pos in positions]

        event = {
            "event": "batch_random",
            "count": count,
            "maxCombinations": self._max_combinations,
        }
        logger.debug(json.dumps(event))
        return ids


def _digits(value: int, radix: int, width: int) -> list[int]:
    """Fixed-width base-radix digits of value, most significant first.

    Digits above width are dropped.
    """
    digits = [0] * width
    for i in range(width - 1, -1, -1):
        value, digits[i] = divmod(value, radix)
    return digits

"""Data models for doremid configuration and codec results."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from doremid.utils.constants import (
    DEFAULT_MELODY_DIGITS,
    DEFAULT_PITCH_DIGITS,
    DEFAULT_SEPARATOR,
    ENV_MELODY_DIGITS,
    ENV_PITCH_DIGITS,
    ENV_SEPARATOR,
    INVALID_ID,
    INVALID_POSITION,
    MELODY_ALPHABET,
    PITCH_ALPHABET,
)


@dataclass(frozen=True)
class Config:
    """Identifier layout.

    "dorefaso-01ab3" is melody_digits=4, pitch_digits=5, separator="-".
    """

    melody_digits: int = DEFAULT_MELODY_DIGITS
    pitch_digits: int = DEFAULT_PITCH_DIGITS
    separator: str = DEFAULT_SEPARATOR

    @classmethod
    def default(cls) -> Config:
        return cls()

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        """Build a config from DOREMID_* variables, falling back to defaults.

        Raises ValueError if a digit variable is not an integer.
        """
        env = os.environ if environ is None else environ
        return cls(
            melody_digits=_int_from_env(env, ENV_MELODY_DIGITS, DEFAULT_MELODY_DIGITS),
            pitch_digits=_int_from_env(env, ENV_PITCH_DIGITS, DEFAULT_PITCH_DIGITS),
            separator=env.get(ENV_SEPARATOR, DEFAULT_SEPARATOR),
        )

    def validate(self) -> list[str]:
        """Check the layout. Returns list of errors (empty = OK)."""
        errors: list[str] = []
        for name in ("melody_digits", "pitch_digits"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                errors.append(f"{name} must be an integer, got {value!r}")
            elif value < 1:
                errors.append(f"{name} must be >= 1, got {value}")

        if not isinstance(self.separator, str):
            errors.append(f"separator must be a string, got {self.separator!r}")
        else:
            symbol_chars = set("".join(MELODY_ALPHABET)) | set(PITCH_ALPHABET)
            clashing = sorted(set(self.separator) & symbol_chars)
            if clashing:
                errors.append(
                    f"separator {self.separator!r} shares characters with the "
                    f"alphabets: {''.join(clashing)}"
                )
        return errors

    def to_dict(self) -> dict:
        """Serialize for JSON config files."""
        return {
            "melodyDigits": self.melody_digits,
            "pitchDigits": self.pitch_digits,
            "separator": self.separator,
        }

    @classmethod
    def from_dict(cls, d: dict) -> Config:
        return cls(
            melody_digits=d.get("melodyDigits", DEFAULT_MELODY_DIGITS),
            pitch_digits=d.get("pitchDigits", DEFAULT_PITCH_DIGITS),
            separator=d.get("separator", DEFAULT_SEPARATOR),
        )


@dataclass(frozen=True)
class ParseResult:
    """Outcome of decoding an identifier into a position."""

    success: bool
    position: int = INVALID_POSITION
    error: str | None = None


@dataclass(frozen=True)
class RenderResult:
    """Outcome of encoding a position into an identifier."""

    success: bool
    identifier: str = INVALID_ID
    error: str | None = None


def _int_from_env(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None

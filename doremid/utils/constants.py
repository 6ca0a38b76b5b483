"""Constants for doremid identifiers."""

from fractions import Fraction

# Melody alphabet: solfège note names, two characters each
MELODY_ALPHABET = ["do", "re", "mi", "fa", "so", "la", "ti"]
MELODY_SYMBOL_WIDTH = 2

# Pitch alphabet: the 12 semitones of an octave
PITCH_ALPHABET = list("0123456789ab")

# Default configuration
DEFAULT_MELODY_DIGITS = 4
DEFAULT_PITCH_DIGITS = 5
DEFAULT_SEPARATOR = "-"

# Environment variables read by Config.from_env()
ENV_MELODY_DIGITS = "DOREMID_MELODY_DIGITS"
ENV_PITCH_DIGITS = "DOREMID_PITCH_DIGITS"
ENV_SEPARATOR = "DOREMID_SEPARATOR"

# Sampling: switch from rejection sampling to a full shuffle once the
# requested count reaches this fraction of the position space
SHUFFLE_CROSSOVER = Fraction(1, 2)

# Sentinels returned at the compatibility boundary
INVALID_POSITION = -1
INVALID_ID = ""

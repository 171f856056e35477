"""
Constants for the pitch-class set system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal

# Pitch classes per octave; every level and pitch integer is reduced by this
PITCH_CLASS_COUNT = 12


class SetOperation(str, Enum):
    """Set transforms reported by the tools."""

    TRANSPOSE = "transpose"
    TRANSPOSE_TO = "transpose_to"
    INVERT = "invert"
    INVERT_BY_PAIR = "invert_by_pair"


# Serialization formats for analysis output
OutputFormat = Literal["json", "yaml"]

# Prime form conventions: Forte packs to the left, Rahn packs from the right
PrimeFormAlgorithm = Literal["forte", "rahn"]


class ErrorMessages:
    """Standardized error messages."""

    UNKNOWN_PITCH_CLASS = "Unknown pitch class: {name}"
    INVALID_PITCH_CLASS_TYPE = "Pitch classes must be names or integers, got {value!r}"
    INVALID_PAIR = "An inversion pair needs exactly two pitch classes, got {count}"
    INVALID_OUTPUT_FORMAT = "Invalid output format: '{output_format}'. Expected 'json' or 'yaml'."
    INVALID_PRIME_FORM_ALGORITHM = (
        "Invalid prime form algorithm: '{algorithm}'. Expected 'forte' or 'rahn'."
    )

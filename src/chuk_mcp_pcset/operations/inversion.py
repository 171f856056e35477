"""
Inversion (In).

If In(x) = y, then y = n - x (mod 12), so x + y = n.

Inversion reflects the set, so the result is returned in the reverse of
the input order. Unlike T0, I0 is not an identity.
"""

from __future__ import annotations

from collections.abc import Sequence

from chuk_mcp_pcset.constants import PITCH_CLASS_COUNT, ErrorMessages
from chuk_mcp_pcset.core.pcset import PitchClassSet
from chuk_mcp_pcset.core.pitch import PitchClass


def invert(pc_set: PitchClassSet, level: int) -> PitchClassSet:
    """
    Invert every pitch class around a level (mod 12).

    Args:
        pc_set: The set to invert
        level: Inversion index n, any integer

    Returns:
        A new PitchClassSet, canonically spelled, in reversed order

    Example:
        invert(pc_set(C, D, F), 4) == pc_set(B, D, E)
    """
    return PitchClassSet.from_integers(level - pc.to_integer() for pc in reversed(pc_set))


def invert_by_pair(
    pc_set: PitchClassSet,
    pair: Sequence[PitchClass],
) -> PitchClassSet:
    """
    Invert around the level that maps one pitch class of a pair onto the other.

    For the pair (a, b), In(a) = b and In(b) = a, so n = a + b.

    Args:
        pc_set: The set to invert
        pair: Two pitch classes

    Raises:
        ValueError: If pair does not hold exactly two pitch classes
    """
    if len(pair) != 2:
        raise ValueError(ErrorMessages.INVALID_PAIR.format(count=len(pair)))
    a, b = pair
    level = (a.to_integer() + b.to_integer()) % PITCH_CLASS_COUNT
    return invert(pc_set, level)

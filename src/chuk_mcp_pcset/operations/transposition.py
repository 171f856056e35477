"""
Transposition (Tn).

If Tn(x) = y, then y = x + n (mod 12).
"""

from __future__ import annotations

from chuk_mcp_pcset.core.pcset import PitchClassSet


def transpose(pc_set: PitchClassSet, level: int) -> PitchClassSet:
    """
    Transpose every pitch class by a level (mod 12).

    Order is preserved and results are canonically spelled. Negative
    levels wrap (transpose by -3 == transpose by 9). Transposing a
    canonically spelled set by 0 returns an equal set.

    Args:
        pc_set: The set to transpose
        level: Semitones to shift, any integer

    Returns:
        A new PitchClassSet
    """
    return PitchClassSet.from_integers(pc.to_integer() + level for pc in pc_set)


def transpose_to(pc_set: PitchClassSet, start: int) -> PitchClassSet:
    """
    Transpose so that the first pitch class lands on start.

    Example:
        transpose_to(pc_set(Cs, Ef, G), 0) == pc_set(C, D, Fs)
    """
    if not pc_set:
        return PitchClassSet()
    return transpose(pc_set, start - pc_set[0].to_integer())

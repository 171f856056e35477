"""
Fixed-level transforms: t0..t11 and i0..i11.

Each is an alias for transpose(pc_set, n) or invert(pc_set, n).
"""

from __future__ import annotations

from collections.abc import Callable

from chuk_mcp_pcset.constants import PITCH_CLASS_COUNT
from chuk_mcp_pcset.core.pcset import PitchClassSet

from .inversion import invert
from .transposition import transpose

SetTransformFn = Callable[[PitchClassSet], PitchClassSet]


def _transposition_at(level: int) -> SetTransformFn:
    def transform(pc_set: PitchClassSet) -> PitchClassSet:
        return transpose(pc_set, level)

    transform.__name__ = transform.__qualname__ = f"t{level}"
    transform.__doc__ = f"Transpose a PitchClassSet by {level}. Same as transpose(pc_set, {level})."
    return transform


def _inversion_at(level: int) -> SetTransformFn:
    def transform(pc_set: PitchClassSet) -> PitchClassSet:
        return invert(pc_set, level)

    transform.__name__ = transform.__qualname__ = f"i{level}"
    transform.__doc__ = f"Invert a PitchClassSet around {level}. Same as invert(pc_set, {level})."
    return transform


TRANSPOSITIONS: dict[int, SetTransformFn] = {
    level: _transposition_at(level) for level in range(PITCH_CLASS_COUNT)
}
INVERSIONS: dict[int, SetTransformFn] = {
    level: _inversion_at(level) for level in range(PITCH_CLASS_COUNT)
}

t0, t1, t2, t3, t4, t5, t6, t7, t8, t9, t10, t11 = TRANSPOSITIONS.values()
i0, i1, i2, i3, i4, i5, i6, i7, i8, i9, i10, i11 = INVERSIONS.values()

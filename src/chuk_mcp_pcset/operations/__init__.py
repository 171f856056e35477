"""
Set operations - transforms and canonical forms.

- transpose, transpose_to: Tn
- invert, invert_by_pair: In
- t0..t11, i0..i11: fixed-level aliases
- normal_form: most compact rotation
- prime_form, rahn_prime_form: base form of the T/I set class
"""

from chuk_mcp_pcset.operations.inversion import invert, invert_by_pair
from chuk_mcp_pcset.operations.levels import (
    INVERSIONS,
    TRANSPOSITIONS,
    i0,
    i1,
    i2,
    i3,
    i4,
    i5,
    i6,
    i7,
    i8,
    i9,
    i10,
    i11,
    t0,
    t1,
    t2,
    t3,
    t4,
    t5,
    t6,
    t7,
    t8,
    t9,
    t10,
    t11,
)
from chuk_mcp_pcset.operations.normal_form import normal_form
from chuk_mcp_pcset.operations.prime_form import prime_form, rahn_prime_form
from chuk_mcp_pcset.operations.transposition import transpose, transpose_to

__all__ = [
    # Transposition
    "transpose",
    "transpose_to",
    "TRANSPOSITIONS",
    "t0",
    "t1",
    "t2",
    "t3",
    "t4",
    "t5",
    "t6",
    "t7",
    "t8",
    "t9",
    "t10",
    "t11",
    # Inversion
    "invert",
    "invert_by_pair",
    "INVERSIONS",
    "i0",
    "i1",
    "i2",
    "i3",
    "i4",
    "i5",
    "i6",
    "i7",
    "i8",
    "i9",
    "i10",
    "i11",
    # Canonical forms
    "normal_form",
    "prime_form",
    "rahn_prime_form",
]

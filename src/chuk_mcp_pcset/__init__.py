"""
Pitch-class set analysis for atonal music theory.

    from chuk_mcp_pcset import PitchClass as P, normal_form, pc_set, prime_form

    normal_form(pc_set(P.A, P.Bf, P.F))   # pc_set(F, A, Bf)
    prime_form(pc_set(P.Cs, P.F, P.Fs, P.G))   # [0, 1, 2, 6]

The MCP server lives in chuk_mcp_pcset.async_server and is not imported here.
"""

from chuk_mcp_pcset.core import (
    PitchClass,
    PitchClassSet,
    interval_between,
    interval_scan,
    intervals,
    pc_set,
    total_span,
)
from chuk_mcp_pcset.operations import (
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
    invert,
    invert_by_pair,
    normal_form,
    prime_form,
    rahn_prime_form,
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
    transpose,
    transpose_to,
)

__all__ = [
    # Core
    "PitchClass",
    "PitchClassSet",
    "pc_set",
    "interval_between",
    "intervals",
    "interval_scan",
    "total_span",
    # Operations
    "transpose",
    "transpose_to",
    "invert",
    "invert_by_pair",
    "normal_form",
    "prime_form",
    "rahn_prime_form",
    # Level aliases
    "TRANSPOSITIONS",
    "INVERSIONS",
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
]

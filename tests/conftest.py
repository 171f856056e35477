"""
Pytest configuration and shared fixtures.
"""

import pytest

from chuk_mcp_pcset.core import PitchClass, PitchClassSet, pc_set

P = PitchClass


@pytest.fixture
def sample_sets() -> list[PitchClassSet]:
    """A spread of sets: trichords through hexachords, symmetric and not."""
    return [
        pc_set(P.C, P.D, P.F),
        pc_set(P.A, P.Bf, P.F),
        pc_set(P.F, P.Af, P.A, P.Cs),
        pc_set(P.E, P.Af, P.A, P.B, P.C),
        pc_set(P.Cs, P.F, P.Fs, P.G),
        pc_set(P.C, P.E, P.Af),  # augmented triad
        pc_set(P.C, P.Ef, P.Fs, P.A),  # diminished seventh
        pc_set(P.G, P.B, P.D, P.F),
        PitchClassSet.from_integers([0, 1, 3, 6, 8, 9]),
        PitchClassSet.from_integers([11, 4, 2, 7, 5, 10]),
    ]

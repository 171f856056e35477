#!/usr/bin/env python3
"""
Example: Pitch-class set analysis.

Walks through normal form, prime form, transposition and inversion on a
few familiar sets, then dumps one analysis as YAML.

Usage:
    python examples/analyze_sets.py
"""

import yaml

from chuk_mcp_pcset import (
    PitchClass as P,
    PitchClassSet,
    invert,
    invert_by_pair,
    normal_form,
    pc_set,
    prime_form,
    t4,
    transpose,
)
from chuk_mcp_pcset.models import SetAnalysis


def main() -> None:
    """Run the analysis demo."""
    print("CHUK Pitch-Class Set Demo")
    print("=" * 40)
    print()

    sets = {
        "Unordered trichord": pc_set(P.Bf, P.F, P.A),
        "Tied spans": pc_set(P.F, P.Af, P.A, P.Cs),
        "Mirrored packing": pc_set(P.E, P.Af, P.A, P.B, P.C),
        "Right-packed tetrachord": pc_set(P.Cs, P.F, P.Fs, P.G),
        "All-interval tetrachord": PitchClassSet.from_integers([0, 1, 4, 6]),
        "Conventions disagree": PitchClassSet.from_integers([0, 1, 3, 7, 8]),
    }

    print("Canonical forms:")
    for label, s in sets.items():
        print(f"  {label}: {s}")
        print(f"    normal form: {normal_form(s)}")
        print(f"    prime form:  {prime_form(s)}")
        print(f"    rahn prime:  {prime_form(s, algorithm='rahn')}")
    print()

    s = pc_set(P.C, P.D, P.F)
    print(f"Transforms of {s}:")
    print(f"  T3:          {transpose(s, 3)}")
    print(f"  T4 (alias):  {t4(s)}")
    print(f"  I4:          {invert(s, 4)}")
    print(f"  I by (C#,F): {invert_by_pair(s, (P.Cs, P.F))}")
    print()

    print("Analysis as YAML:")
    analysis = SetAnalysis.from_set(sets["Mirrored packing"])
    print(yaml.safe_dump(analysis.to_yaml_dict(), default_flow_style=None, sort_keys=False))


if __name__ == "__main__":
    main()

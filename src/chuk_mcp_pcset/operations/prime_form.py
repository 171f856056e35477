"""
Prime form derivation.

The prime form is the base form of a set's T/I set class, re-based to
start on 0. Two conventions are in use and they disagree on a handful of
set classes:

- forte (default): the normal form's intervals, read in whichever
  direction is packed more to the left.
- rahn: the set or its inversion, whichever is packed more tightly
  from the right. Packing is compared as a bitmask with one bit per
  pitch above the first, so the highest pitch weighs the most.

For example {0, 1, 3, 7, 8} is [0, 1, 3, 7, 8] under forte and
[0, 1, 5, 6, 8] under rahn.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from operator import or_

from chuk_mcp_pcset.constants import PITCH_CLASS_COUNT, ErrorMessages, PrimeFormAlgorithm
from chuk_mcp_pcset.core.interval import interval_scan, intervals
from chuk_mcp_pcset.core.pcset import PitchClassSet

from .normal_form import normal_form


def prime_form(pc_set: PitchClassSet, algorithm: PrimeFormAlgorithm = "forte") -> list[int]:
    """
    Convert a pitch class set to the prime form of its set class.

    Args:
        pc_set: Any pitch class set
        algorithm: "forte" (left-packed normal form) or "rahn"

    Returns:
        Pitch integers starting on 0, one per element of pc_set
        (empty for an empty set)

    Raises:
        ValueError: If algorithm is not a known convention

    Example:
        prime_form(pc_set(Bf, F, A)) == [0, 1, 5]
        prime_form(pc_set(E, Ef, Af)) == [0, 1, 5]
    """
    if algorithm == "rahn":
        return rahn_prime_form(pc_set)
    if algorithm != "forte":
        raise ValueError(ErrorMessages.INVALID_PRIME_FORM_ALGORITHM.format(algorithm=algorithm))

    if not pc_set:
        return []

    forward = intervals(normal_form(pc_set))
    backward = forward[::-1]
    left_packed = min(forward, backward)
    return interval_scan([0, *left_packed])


def rahn_prime_form(pc_set: PitchClassSet) -> list[int]:
    """
    Prime form under Rahn's convention.

    Both the set and its inversion are put in Rahn normal form and moved
    to start on 0; the one with the smaller packing weight wins, the set
    itself on a tie.

    Example:
        rahn_prime_form(PitchClassSet.from_integers([0, 1, 3, 7, 8])) == [0, 1, 5, 6, 8]
    """
    if not pc_set:
        return []

    zeroed = _from_zero(_rahn_normal_order(pc_set.to_integers()))
    inverted = _from_zero(_rahn_normal_order([-v for v in zeroed]))
    return min(zeroed, inverted, key=_packing_weight)


def _rahn_normal_order(values: Sequence[int]) -> list[int]:
    """Rotation of the sorted values with the smallest packing weight."""
    ordered = sorted(v % PITCH_CLASS_COUNT for v in values)
    lifted = ordered + [v + PITCH_CLASS_COUNT for v in ordered]
    size = len(ordered)
    best = min((lifted[i : i + size] for i in range(size)), key=_packing_weight)
    return [v % PITCH_CLASS_COUNT for v in best]


def _packing_weight(values: Sequence[int]) -> int:
    """One bit per pitch above the first; smaller means packed further right."""
    first = values[0]
    return reduce(or_, (1 << (v - first) for v in values), 0)


def _from_zero(values: Sequence[int]) -> list[int]:
    first = values[0]
    return [(v - first) % PITCH_CLASS_COUNT for v in values]

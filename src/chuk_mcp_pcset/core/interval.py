"""
Interval utilities.

Intervals here are ascending and circular: the distance from 9 up to 2
is 5, never the shorter descending 7. All values fall in [0, 12).
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, pairwise

from chuk_mcp_pcset.constants import PITCH_CLASS_COUNT

from .pitch import PitchClass


def interval_between(a: int, b: int) -> int:
    """Ascending interval from pitch integer a to pitch integer b."""
    return (b - a) % PITCH_CLASS_COUNT


def intervals(pitch_classes: Iterable[PitchClass]) -> list[int]:
    """
    Ascending intervals between adjacent pitch classes.

    Args:
        pitch_classes: Ordered pitch classes

    Returns:
        n - 1 intervals for n pitch classes (empty for fewer than two)
    """
    return [a.interval_to(b) for a, b in pairwise(pitch_classes)]


def total_span(pitch_classes: Sequence[PitchClass]) -> int:
    """
    Ascending interval from the first pitch class to the last.

    This is not the sum of the internal intervals: a sequence that wraps
    all the way around still has a span below 12. Empty sequences span 0.
    """
    if not pitch_classes:
        return 0
    return pitch_classes[0].interval_to(pitch_classes[-1])


def interval_scan(values: Iterable[int]) -> list[int]:
    """Running cumulative sum of an interval sequence."""
    return list(accumulate(values))

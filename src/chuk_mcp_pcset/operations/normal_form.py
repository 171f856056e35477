"""
Normal form reduction.

The normal form is the rotation of the sorted set that is most compactly
packed:

1. Sort by pitch integer and take every rotation (n for n elements).
2. Keep the rotations with the smallest total span (first -> last).
3. If more than one is left, compare interval scans (running sums of the
   adjacent intervals) of each candidate read forwards and backwards.
   The smallest scan wins; on an exact tie the forward reading wins.

For example {F, Ab, A, C#} has two rotations spanning 8:

    [C#, F, Ab, A]  intervals [4, 3, 1]  scans fwd [4, 7, 8]  rev [1, 4, 8]
    [F, Ab, A, C#]  intervals [3, 1, 4]  scans fwd [3, 4, 8]  rev [4, 5, 8]

The smallest scan is [1, 4, 8], so the normal form is [C#, F, Ab, A].
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chuk_mcp_pcset.core.interval import interval_scan, intervals, total_span
from chuk_mcp_pcset.core.pcset import PitchClassSet
from chuk_mcp_pcset.core.pitch import PitchClass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rotation:
    """One candidate ordering with its cached span and intervals."""

    pc_set: PitchClassSet
    intervals: tuple[int, ...]
    total_span: int

    @classmethod
    def of(cls, pitch_classes: tuple[PitchClass, ...]) -> Rotation:
        """Build a rotation from an ordering, measuring its span and intervals."""
        return cls(
            pc_set=PitchClassSet(pitch_classes),
            intervals=tuple(intervals(pitch_classes)),
            total_span=total_span(pitch_classes),
        )

    def scan_key(self, reverse: bool) -> tuple[list[int], bool]:
        """Sort key for one reading of this rotation: (interval scan, is_reversed)."""
        readings = reversed(self.intervals) if reverse else self.intervals
        return interval_scan(readings), reverse


def rotations(pitch_classes: tuple[PitchClass, ...]) -> list[Rotation]:
    """Every cyclic rotation, starting with the identity rotation."""
    return [
        Rotation.of(pitch_classes[i:] + pitch_classes[:i]) for i in range(len(pitch_classes))
    ]


def normal_form(pc_set: PitchClassSet) -> PitchClassSet:
    """
    Reorder a pitch class set into normal form.

    The original spellings are kept; only the order changes.

    Args:
        pc_set: Any pitch class set (order and spelling are free)

    Returns:
        A new PitchClassSet in normal form. Empty and single-element
        sets are returned as they are.

    Example:
        normal_form(pc_set(A, Bf, F)) == pc_set(F, A, Bf)
    """
    ordered = tuple(sorted(pc_set, key=PitchClass.to_integer))
    if len(ordered) < 2:
        return PitchClassSet(ordered)

    candidates = rotations(ordered)
    min_span = min(candidate.total_span for candidate in candidates)
    smallest = [candidate for candidate in candidates if candidate.total_span == min_span]

    if len(smallest) == 1:
        return smallest[0].pc_set

    return _best_packed(smallest).pc_set


def _best_packed(candidates: list[Rotation]) -> Rotation:
    """Pick the candidate whose forward or reversed scan sorts first."""
    readings = [
        (candidate.scan_key(reverse), index)
        for index, candidate in enumerate(candidates)
        for reverse in (False, True)
    ]
    readings.sort()
    (scan, is_reversed), index = readings[0]
    winner = candidates[index]

    logger.debug(
        "Normal form tie-break across %d rotations: %s wins with %s scan %s",
        len(candidates),
        winner.pc_set,
        "reversed" if is_reversed else "forward",
        scan,
    )
    return winner

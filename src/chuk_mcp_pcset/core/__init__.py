"""
Core pitch-class set primitives.

- PitchClass: 31 spellings mapped onto the 12 chromatic pitch classes
- PitchClassSet: ordered, immutable collection of pitch classes
- Interval helpers: ascending intervals, total span, interval scans
"""

from chuk_mcp_pcset.core.interval import interval_between, interval_scan, intervals, total_span
from chuk_mcp_pcset.core.pcset import PitchClassSet, pc_set
from chuk_mcp_pcset.core.pitch import PitchClass

__all__ = [
    # Pitch
    "PitchClass",
    # Set
    "PitchClassSet",
    "pc_set",
    # Intervals
    "interval_between",
    "intervals",
    "interval_scan",
    "total_span",
]

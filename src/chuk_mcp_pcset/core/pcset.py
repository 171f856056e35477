"""
PitchClassSet - an ordered, immutable collection of pitch classes.

The container imposes no ordering and no uniqueness; the operations that
consume it decide what order means (normal form sorts first, inversion
reverses). Transforms always return new instances.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import overload

from chuk_mcp_pcset.constants import ErrorMessages

from .pitch import PitchClass


@dataclass(frozen=True)
class PitchClassSet:
    """
    An ordered sequence of pitch classes.

    Duplicates are allowed (multiset semantics), though by convention
    sets contain distinct pitch classes. Equality compares spellings
    element by element, in order.

    Immutable and hashable.
    """

    pitch_classes: tuple[PitchClass, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable (lists from callers) but store a tuple
        if not isinstance(self.pitch_classes, tuple):
            object.__setattr__(self, "pitch_classes", tuple(self.pitch_classes))

    @classmethod
    def from_integers(cls, values: Iterable[int]) -> PitchClassSet:
        """Build a set of canonical spellings from pitch integers (any int, reduced mod 12)."""
        return cls(tuple(PitchClass.from_integer(value) for value in values))

    @classmethod
    def parse(cls, values: Iterable[str | int | PitchClass]) -> PitchClassSet:
        """
        Build a set from names, integers, or PitchClass members.

        Args:
            values: Items like "C#", "Df", 7, or PitchClass.E

        Returns:
            A new PitchClassSet in the given order

        Raises:
            ValueError: If a name is unknown or an item has an unsupported type
        """
        return cls(tuple(_coerce(value) for value in values))

    def to_integers(self) -> list[int]:
        """Pitch integers (0-11) in set order."""
        return [pc.to_integer() for pc in self.pitch_classes]

    def spell(self) -> list[str]:
        """Spellings in set order."""
        return [pc.spelling for pc in self.pitch_classes]

    def __iter__(self) -> Iterator[PitchClass]:
        return iter(self.pitch_classes)

    def __len__(self) -> int:
        return len(self.pitch_classes)

    @overload
    def __getitem__(self, index: int) -> PitchClass: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[PitchClass, ...]: ...

    def __getitem__(self, index: int | slice) -> PitchClass | tuple[PitchClass, ...]:
        return self.pitch_classes[index]

    def __repr__(self) -> str:
        return f"pc_set({', '.join(pc.name for pc in self.pitch_classes)})"

    def __str__(self) -> str:
        return "{" + ", ".join(self.spell()) + "}"


def pc_set(*pitch_classes: PitchClass) -> PitchClassSet:
    """
    Shorthand for creating a PitchClassSet.

    Example:
        pc_set(PitchClass.C, PitchClass.E, PitchClass.G)
    """
    return PitchClassSet(pitch_classes)


def _coerce(value: str | int | PitchClass) -> PitchClass:
    """Convert one user-supplied item to a PitchClass."""
    if isinstance(value, PitchClass):
        return value
    # bool is an int subclass but never a pitch class
    if isinstance(value, bool):
        raise ValueError(ErrorMessages.INVALID_PITCH_CLASS_TYPE.format(value=value))
    if isinstance(value, int):
        return PitchClass.from_integer(value)
    if isinstance(value, str):
        return PitchClass.parse(value)
    raise ValueError(ErrorMessages.INVALID_PITCH_CLASS_TYPE.format(value=value))

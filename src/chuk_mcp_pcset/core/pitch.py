"""
Pitch primitives - the PitchClass encoding.

PitchClass is a closed set of 31 spellings (naturals, sharps, flats,
double sharps and double flats of the seven letters). Each spelling maps
to one of the 12 chromatic pitch classes (0-11). The mapping is
many-to-one: C#, Db and B## would all be 1, but B## is not a member
because it moves the letter by more than one step.
"""

from __future__ import annotations

from enum import Enum

from chuk_mcp_pcset.constants import PITCH_CLASS_COUNT, ErrorMessages

# Accidental suffixes accepted by PitchClass.parse, longest first
_ACCIDENTALS: list[tuple[str, str]] = [
    ("##", "ss"),
    ("x", "ss"),
    ("bb", "ff"),
    ("#", "s"),
    ("b", "f"),
]


class PitchClass(Enum):
    """
    A spelled pitch class.

    Members are distinct even when enharmonically equivalent
    (PitchClass.Cs != PitchClass.Df). Compare with to_integer()
    for enharmonic equality.

    Member names use 's' for sharp and 'f' for flat, doubled for
    double alterations (Css, Bff).
    """

    Cf = ("Cb", 11)
    C = ("C", 0)
    Cs = ("C#", 1)
    Css = ("C##", 2)

    Dff = ("Dbb", 0)
    Df = ("Db", 1)
    D = ("D", 2)
    Ds = ("D#", 3)
    Dss = ("D##", 4)

    Eff = ("Ebb", 2)
    Ef = ("Eb", 3)
    E = ("E", 4)
    Es = ("E#", 5)

    Ff = ("Fb", 4)
    F = ("F", 5)
    Fs = ("F#", 6)
    Fss = ("F##", 7)

    Gff = ("Gbb", 5)
    Gf = ("Gb", 6)
    G = ("G", 7)
    Gs = ("G#", 8)
    Gss = ("G##", 9)

    Aff = ("Abb", 7)
    Af = ("Ab", 8)
    A = ("A", 9)
    As = ("A#", 10)
    Ass = ("A##", 11)

    Bff = ("Bbb", 9)
    Bf = ("Bb", 10)
    B = ("B", 11)
    Bs = ("B#", 0)

    def __init__(self, spelling: str, semitones: int) -> None:
        self.spelling = spelling
        self.semitones = semitones

    def to_integer(self) -> int:
        """
        Numeric pitch class (0-11), with C = 0.

        Enharmonic spellings share a value:
            PitchClass.Bs.to_integer() == PitchClass.C.to_integer() == 0
        """
        return self.semitones

    @classmethod
    def from_integer(cls, value: int) -> PitchClass:
        """
        Canonical spelling for an integer pitch class.

        The value is reduced modulo 12 first (floored, so -1 -> B).
        Only naturals, sharps and the flats Eb, Ab, Bb are returned.
        """
        return _CANONICAL[value % PITCH_CLASS_COUNT]

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a pitch class from a string like 'C', 'C#', 'Db', 'Bbb' or 'Fs'."""
        name = name.strip()
        if not name:
            raise ValueError(ErrorMessages.UNKNOWN_PITCH_CLASS.format(name=repr(name)))

        # Enum names (C, Cs, Dff, etc.)
        if name in cls.__members__:
            return cls[name]

        # Written spellings (C#, Db, C##, Bbb, Cx)
        letter, accidental = name[0].upper(), name[1:]
        if not accidental:
            member_name = letter
        else:
            member_name = ""
            for symbol, suffix in _ACCIDENTALS:
                if accidental == symbol:
                    member_name = letter + suffix
                    break

        if member_name in cls.__members__:
            return cls[member_name]

        raise ValueError(ErrorMessages.UNKNOWN_PITCH_CLASS.format(name=name))

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones; the result is canonically spelled."""
        return PitchClass.from_integer(self.semitones + semitones)

    def interval_to(self, other: PitchClass) -> int:
        """Ascending interval in semitones from this pitch class to another."""
        return (other.semitones - self.semitones) % PITCH_CLASS_COUNT

    def __repr__(self) -> str:
        return f"PitchClass.{self.name}"

    def __str__(self) -> str:
        return self.spelling


# Reverse mapping, indexed by integer pitch class
_CANONICAL: tuple[PitchClass, ...] = (
    PitchClass.C,
    PitchClass.Cs,
    PitchClass.D,
    PitchClass.Ef,
    PitchClass.E,
    PitchClass.F,
    PitchClass.Fs,
    PitchClass.G,
    PitchClass.Af,
    PitchClass.A,
    PitchClass.Bf,
    PitchClass.B,
)

assert len(_CANONICAL) == PITCH_CLASS_COUNT and all(
    pc.semitones == residue for residue, pc in enumerate(_CANONICAL)
), "every pitch class residue needs exactly one canonical spelling"

"""
Analysis models - serializable results of set operations.

These are what the MCP tools hand back: everything is plain strings and
integers so results round-trip through JSON and YAML.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_pcset.constants import PITCH_CLASS_COUNT, PrimeFormAlgorithm, SetOperation
from chuk_mcp_pcset.core.interval import intervals, total_span
from chuk_mcp_pcset.core.pcset import PitchClassSet
from chuk_mcp_pcset.operations import normal_form, prime_form


class SetAnalysis(BaseModel):
    """
    Canonical forms of a pitch class set.

    Span and intervals describe the normal form, which is the ordering
    they are meaningful for.
    """

    pitch_classes: list[str] = Field(..., description="Input spellings, in input order")
    integers: list[int] = Field(..., description="Input pitch integers (0-11)")
    normal_form: list[str] = Field(..., description="Normal form spellings")
    normal_form_integers: list[int] = Field(..., description="Normal form pitch integers")
    prime_form: list[int] = Field(..., description="Prime form, starting on 0")
    prime_form_algorithm: PrimeFormAlgorithm = Field(
        default="forte", description="Convention the prime form was computed with"
    )
    total_span: int = Field(..., ge=0, lt=12, description="Normal form span, first to last")
    intervals: list[int] = Field(
        default_factory=list, description="Ascending intervals between normal form neighbours"
    )

    model_config = {"frozen": True}

    @classmethod
    def from_set(
        cls, pc_set: PitchClassSet, algorithm: PrimeFormAlgorithm = "forte"
    ) -> SetAnalysis:
        """Analyze a set, computing its prime form with the given convention."""
        normal = normal_form(pc_set)
        return cls(
            pitch_classes=pc_set.spell(),
            integers=pc_set.to_integers(),
            normal_form=normal.spell(),
            normal_form_integers=normal.to_integers(),
            prime_form=prime_form(pc_set, algorithm),
            prime_form_algorithm=algorithm,
            total_span=total_span(normal.pitch_classes),
            intervals=intervals(normal),
        )

    def to_yaml_dict(self) -> dict[str, Any]:
        """
        Convert to a YAML-friendly dict.

        Groups the input and each canonical form under its own key.
        """
        return {
            "set": {
                "pitch_classes": self.pitch_classes,
                "integers": self.integers,
            },
            "normal_form": {
                "pitch_classes": self.normal_form,
                "integers": self.normal_form_integers,
                "total_span": self.total_span,
                "intervals": self.intervals,
            },
            "prime_form": self.prime_form,
            "prime_form_algorithm": self.prime_form_algorithm,
        }


class SetTransform(BaseModel):
    """The input and output of a transposition or inversion."""

    operation: SetOperation = Field(..., description="Transform applied")
    level: int = Field(..., ge=0, lt=12, description="Transform level, reduced mod 12")
    pitch_classes: list[str] = Field(..., description="Input spellings")
    integers: list[int] = Field(..., description="Input pitch integers")
    result: list[str] = Field(..., description="Result spellings")
    result_integers: list[int] = Field(..., description="Result pitch integers")

    model_config = {"frozen": True}

    @classmethod
    def from_sets(
        cls,
        operation: SetOperation,
        level: int,
        source: PitchClassSet,
        result: PitchClassSet,
    ) -> SetTransform:
        """Describe a transform from its input and output sets."""
        return cls(
            operation=operation,
            level=level % PITCH_CLASS_COUNT,
            pitch_classes=source.spell(),
            integers=source.to_integers(),
            result=result.spell(),
            result_integers=result.to_integers(),
        )

"""
Transform tools - MCP tools for transposition and inversion.

Every tool takes pitch classes as names ("C#", "Df") or integers (0-11)
and returns the input and result sets.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_pcset.constants import PITCH_CLASS_COUNT, ErrorMessages, SetOperation
from chuk_mcp_pcset.core import PitchClass, PitchClassSet
from chuk_mcp_pcset.models import SetTransform
from chuk_mcp_pcset.operations import invert, invert_by_pair, transpose, transpose_to

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_transform_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register transposition and inversion tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_transpose(pitch_classes: list[str | int], level: int) -> str:
        """
        Transpose a pitch class set (Tn).

        Every pitch class moves up by level semitones, mod 12.
        Order is preserved.

        Args:
            pitch_classes: Pitch classes as names or integers
            level: Transposition level (any integer, negative goes down)

        Returns:
            JSON string with the transposed set

        Example:
            pcset_transpose(pitch_classes=["C", "D", "F"], level=3)
        """
        try:
            source = PitchClassSet.parse(pitch_classes)
            result = transpose(source, level)
            transform = SetTransform.from_sets(SetOperation.TRANSPOSE, level, source, result)
            return json.dumps({"status": "success", "transform": transform.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to transpose set")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_transpose"] = pcset_transpose

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_transpose_to(pitch_classes: list[str | int], start: int) -> str:
        """
        Transpose a set so its first pitch class lands on start.

        Args:
            pitch_classes: Pitch classes as names or integers
            start: Target pitch integer for the first element

        Returns:
            JSON string with the transposed set and the level used

        Example:
            pcset_transpose_to(pitch_classes=[1, 3, 7], start=0)
        """
        try:
            source = PitchClassSet.parse(pitch_classes)
            result = transpose_to(source, start)
            level = start - source[0].to_integer() if source else 0
            transform = SetTransform.from_sets(SetOperation.TRANSPOSE_TO, level, source, result)
            return json.dumps({"status": "success", "transform": transform.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to transpose set")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_transpose_to"] = pcset_transpose_to

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_invert(pitch_classes: list[str | int], level: int) -> str:
        """
        Invert a pitch class set (In).

        Each pitch class x becomes level - x, mod 12. The result is
        listed in reverse order. Inverting around 0 is not an identity.

        Args:
            pitch_classes: Pitch classes as names or integers
            level: Inversion index (any integer)

        Returns:
            JSON string with the inverted set

        Example:
            pcset_invert(pitch_classes=["C", "D", "F"], level=4)
        """
        try:
            source = PitchClassSet.parse(pitch_classes)
            result = invert(source, level)
            transform = SetTransform.from_sets(SetOperation.INVERT, level, source, result)
            return json.dumps({"status": "success", "transform": transform.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to invert set")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_invert"] = pcset_invert

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_invert_by_pair(pitch_classes: list[str | int], pair: list[str]) -> str:
        """
        Invert a set around the level that swaps two pitch classes.

        For the pair (a, b) the level is a + b, so a maps to b and
        b maps to a.

        Args:
            pitch_classes: Pitch classes as names or integers
            pair: Exactly two pitch class names

        Returns:
            JSON string with the inverted set and the derived level

        Example:
            pcset_invert_by_pair(pitch_classes=["G", "Ab", "B"], pair=["G", "B"])
        """
        try:
            if len(pair) != 2:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_PAIR.format(count=len(pair)),
                    }
                )
            source = PitchClassSet.parse(pitch_classes)
            a, b = (PitchClass.parse(name) for name in pair)
            result = invert_by_pair(source, (a, b))
            level = (a.to_integer() + b.to_integer()) % PITCH_CLASS_COUNT
            transform = SetTransform.from_sets(SetOperation.INVERT_BY_PAIR, level, source, result)
            return json.dumps({"status": "success", "transform": transform.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to invert set by pair")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_invert_by_pair"] = pcset_invert_by_pair

    return tools

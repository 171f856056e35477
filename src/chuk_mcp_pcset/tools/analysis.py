"""
Analysis tools - MCP tools for normal form and prime form.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import yaml

from chuk_mcp_pcset.constants import ErrorMessages, OutputFormat, PrimeFormAlgorithm
from chuk_mcp_pcset.core import PitchClassSet
from chuk_mcp_pcset.models import SetAnalysis
from chuk_mcp_pcset.operations import normal_form, prime_form

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_analysis_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register set analysis tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_normal_form(pitch_classes: list[str | int]) -> str:
        """
        Reorder a pitch class set into normal form.

        Normal form is the rotation with the smallest span from first
        to last element. Ties go to the rotation whose small intervals
        are packed towards the start.

        Args:
            pitch_classes: Pitch classes as names or integers

        Returns:
            JSON string with the normal form as names and integers

        Example:
            pcset_normal_form(pitch_classes=["F", "Ab", "A", "C#"])
        """
        try:
            normal = normal_form(PitchClassSet.parse(pitch_classes))
            return json.dumps(
                {
                    "status": "success",
                    "normal_form": normal.spell(),
                    "integers": normal.to_integers(),
                }
            )
        except Exception as e:
            logger.exception("Failed to compute normal form")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_normal_form"] = pcset_normal_form

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_prime_form(
        pitch_classes: list[str | int],
        algorithm: PrimeFormAlgorithm = "forte",
    ) -> str:
        """
        Compute the prime form of a pitch class set.

        The prime form names the set class: every transposition and
        inversion of the set has the same prime form.

        Args:
            pitch_classes: Pitch classes as names or integers
            algorithm: "forte" (left-packed, the default) or "rahn"
                (packed from the right). The two disagree on a few
                set classes, such as [0, 1, 3, 7, 8].

        Returns:
            JSON string with the prime form (integers starting on 0)

        Example:
            pcset_prime_form(pitch_classes=["Bb", "F", "A"])
            pcset_prime_form(pitch_classes=[0, 1, 3, 7, 8], algorithm="rahn")
        """
        try:
            if algorithm not in ("forte", "rahn"):
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_PRIME_FORM_ALGORITHM.format(
                            algorithm=algorithm
                        ),
                    }
                )
            prime = prime_form(PitchClassSet.parse(pitch_classes), algorithm)
            return json.dumps(
                {"status": "success", "prime_form": prime, "algorithm": algorithm}
            )
        except Exception as e:
            logger.exception("Failed to compute prime form")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_prime_form"] = pcset_prime_form

    @mcp.tool  # type: ignore[arg-type]
    async def pcset_analyze(
        pitch_classes: list[str | int],
        output_format: OutputFormat = "json",
        algorithm: PrimeFormAlgorithm = "forte",
    ) -> str:
        """
        Full analysis of a pitch class set.

        Reports the normal form, its span and intervals, and the
        prime form in one call.

        Args:
            pitch_classes: Pitch classes as names or integers
            output_format: "json" for a structured analysis, "yaml" for
                a YAML document suitable for notes or version control
            algorithm: Prime form convention, "forte" or "rahn"

        Returns:
            JSON string with the analysis (or its YAML text)

        Example:
            pcset_analyze(pitch_classes=["E", "Ab", "A", "B", "C"], output_format="yaml")
        """
        try:
            if output_format not in ("json", "yaml"):
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_OUTPUT_FORMAT.format(
                            output_format=output_format
                        ),
                    }
                )
            if algorithm not in ("forte", "rahn"):
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_PRIME_FORM_ALGORITHM.format(
                            algorithm=algorithm
                        ),
                    }
                )

            analysis = SetAnalysis.from_set(PitchClassSet.parse(pitch_classes), algorithm)

            if output_format == "yaml":
                yaml_content = yaml.safe_dump(
                    analysis.to_yaml_dict(), default_flow_style=False, sort_keys=False
                )
                return json.dumps({"status": "success", "yaml": yaml_content})

            return json.dumps({"status": "success", "analysis": analysis.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to analyze set")
            return json.dumps({"status": "error", "message": str(e)})

    tools["pcset_analyze"] = pcset_analyze

    return tools

"""
Pydantic models for the pitch-class set system.

This module provides:
- SetAnalysis: Normal form, prime form, span and intervals of a set
- SetTransform: Input and output of a transposition or inversion
"""

from chuk_mcp_pcset.models.analysis import SetAnalysis, SetTransform

__all__ = [
    "SetAnalysis",
    "SetTransform",
]

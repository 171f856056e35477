"""
MCP tool implementations.

Tools are organized by domain:
- transforms - Transposition and inversion
- analysis - Normal form, prime form, full analysis
"""

from chuk_mcp_pcset.tools.analysis import register_analysis_tools
from chuk_mcp_pcset.tools.transforms import register_transform_tools

__all__ = [
    "register_analysis_tools",
    "register_transform_tools",
]

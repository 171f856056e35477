#!/usr/bin/env python3
"""
Async Pitch-Class Set MCP Server using chuk-mcp-server

This server provides MCP tools for atonal pitch-class set analysis.

The server provides tools for:
- Transposing and inverting pitch class sets
- Reducing sets to normal form
- Finding the prime form of a set's T/I set class
- Full set analysis as JSON or YAML
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_pcset.tools import register_analysis_tools, register_transform_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-pcset")

# Register all tools
transform_tools = register_transform_tools(mcp)
analysis_tools = register_analysis_tools(mcp)

# Export tool functions for direct access
pcset_transpose = transform_tools["pcset_transpose"]
pcset_transpose_to = transform_tools["pcset_transpose_to"]
pcset_invert = transform_tools["pcset_invert"]
pcset_invert_by_pair = transform_tools["pcset_invert_by_pair"]

pcset_normal_form = analysis_tools["pcset_normal_form"]
pcset_prime_form = analysis_tools["pcset_prime_form"]
pcset_analyze = analysis_tools["pcset_analyze"]

logger.info("CHUK Pitch-Class Set MCP Server initialized")
logger.info(f"  Tools: {', '.join(sorted({**transform_tools, **analysis_tools}))}")

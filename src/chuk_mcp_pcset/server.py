#!/usr/bin/env python3
"""
Entry point for the CHUK Pitch-Class Set MCP Server.

Runs the pcset_* tools over stdio (default, for MCP clients that spawn
the server) or http.
"""

import argparse
import asyncio
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Command line options for the server."""
    parser = argparse.ArgumentParser(
        prog="chuk-mcp-pcset",
        description="CHUK Pitch-Class Set MCP Server",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging (includes normal form tie-breaks)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse options, then start the server on the chosen transport."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Registering tools logs at INFO, so import after the level is set
    from chuk_mcp_pcset.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Pitch-Class Set MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Pitch-Class Set MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Entry point for the CHUK Harmony MCP Server.

Serves the harmony tools over stdio or HTTP, or prints the built-in chord
catalog with --list-qualities and exits without starting a server.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import Sequence

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for the harmony server."""
    parser = argparse.ArgumentParser(description="CHUK Harmony MCP Server")
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
        "--log-level",
        choices=LOG_LEVELS,
        default="INFO",
        type=str.upper,
        help="Root log level (default: INFO); DEBUG shows each catalog registration",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Shorthand for --log-level DEBUG",
    )
    parser.add_argument(
        "--list-qualities",
        action="store_true",
        help="Print the built-in chord qualities and exit",
    )
    return parser


def list_qualities() -> None:
    """Print each built-in quality with its interval set and abbreviations."""
    from chuk_mcp_harmony.core import REGISTRY

    for quality in REGISTRY:
        abbrs = " ".join(repr(abbr) for abbr in quality.abbrs)
        print(f"{quality.name:14} {quality.canonical_key:14} {abbrs}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args(argv)

    level = "DEBUG" if args.debug else args.log_level
    logging.getLogger().setLevel(level)

    # The catalog loads on first import of the core, after the level is set
    if args.list_qualities:
        list_qualities()
        return

    from chuk_mcp_harmony.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Harmony MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Harmony MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()

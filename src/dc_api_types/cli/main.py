#!/usr/bin/env python3
"""
dc-api-types CLI - Main entry point.

Usage:
    dc-api-types init                        # Write a default dc-api-types.yaml
    dc-api-types list                        # List the wire type names
    dc-api-types decode QueryRequest req.json # Validate a payload
    dc-api-types openapi -o openapi.json     # Export the OpenAPI document
    dc-api-types check http://localhost:8100 # Validate a live agent's replies
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .. import __version__
from ..client import AgentClient
from ..core.codec import decode_json, encode_json
from ..core.errors import AgentError, ConfigError, DecodeError, UnknownTypeError, format_path
from ..core.registry import default_registry, type_kind
from ..openapi import generate_openapi, render
from .config import DEFAULT_CONFIG_PATH, LOG_LEVELS, ToolConfig, load_config

logger = logging.getLogger(__name__)


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text()


def cmd_init(args: argparse.Namespace, config: ToolConfig) -> int:
    """Write a default configuration file."""
    config_path = Path(args.config)

    if config_path.exists() and not args.force:
        print(f"Error: {config_path} already exists. Use --force to overwrite.")
        return 1

    ToolConfig().save(config_path)
    print(f"Created {config_path}")
    return 0


def cmd_list(args: argparse.Namespace, config: ToolConfig) -> int:
    """Print the registered type names."""
    for name, tp in default_registry().items():
        if args.kinds:
            print(f"{name:<40} {type_kind(tp)}")
        else:
            print(name)
    return 0


def cmd_decode(args: argparse.Namespace, config: ToolConfig) -> int:
    """Decode a JSON payload and print it re-encoded."""
    registry = default_registry()

    try:
        tp = registry.get(args.type)
    except UnknownTypeError as e:
        print(f"Error: {e}. Run 'dc-api-types list' for the available names.")
        return 1

    try:
        text = _read_input(args.file)
    except OSError as e:
        print(f"Error reading {args.file}: {e}")
        return 1

    try:
        value = decode_json(tp, text)
    except DecodeError as e:
        for issue in e.issues:
            print(f"{format_path(issue.path)}: {issue.message}")
        return 1

    print(encode_json(value, tp, indent=2))
    return 0


def cmd_openapi(args: argparse.Namespace, config: ToolConfig) -> int:
    """Write the OpenAPI document."""
    document = generate_openapi(
        title=config.openapi.title,
        version=config.openapi.version,
    )
    content = render(document, args.format or config.openapi.format)

    if args.output:
        Path(args.output).write_text(content)
        print(f"Wrote {args.output}")
    else:
        print(content)
    return 0


async def _check_agent(url: str, config: ToolConfig) -> int:
    failures = 0
    async with AgentClient(
        url,
        config=config.agent.config,
        source_name=config.agent.source_name,
        timeout=config.agent.timeout,
    ) as agent:
        for name, call in (("capabilities", agent.capabilities), ("schema", agent.schema)):
            try:
                await call()
            except (AgentError, DecodeError) as e:
                failures += 1
                print(f"{name}: FAILED - {e}")
            else:
                print(f"{name}: ok")
    return 1 if failures else 0


def cmd_check(args: argparse.Namespace, config: ToolConfig) -> int:
    """Fetch /capabilities and /schema from an agent and decode them."""
    return asyncio.run(_check_agent(args.url, config))


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="dc-api-types",
        description="Hasura GraphQL Data Connector API types",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", "-c", default=DEFAULT_CONFIG_PATH, help="Config file path")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Override the configured log level")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # init
    init_parser = subparsers.add_parser("init", help="Write a default config file")
    init_parser.add_argument("--force", "-f", action="store_true", help="Overwrite existing config")

    # list
    list_parser = subparsers.add_parser("list", help="List the wire type names")
    list_parser.add_argument("--kinds", action="store_true", help="Show whether each name is a model, enum or alias")

    # decode
    decode_parser = subparsers.add_parser("decode", help="Decode and validate a JSON payload")
    decode_parser.add_argument("type", help="Type name, e.g. QueryRequest")
    decode_parser.add_argument("file", nargs="?", default="-", help="JSON file ('-' for stdin)")

    # openapi
    openapi_parser = subparsers.add_parser("openapi", help="Export the OpenAPI document")
    openapi_parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    openapi_parser.add_argument("--format", choices=("json", "yaml"), help="Output format")

    # check
    check_parser = subparsers.add_parser("check", help="Validate a live agent's replies")
    check_parser.add_argument("url", help="Agent base URL")

    return parser


def app(args: Optional[List[str]] = None) -> int:
    """Main CLI application."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    if not parsed.command:
        parser.print_help()
        return 0

    try:
        config = load_config(parsed.config) or ToolConfig()
    except ConfigError as e:
        print(f"Error: {e}")
        return 1

    logging.basicConfig(
        level=parsed.log_level or config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "init": cmd_init,
        "list": cmd_list,
        "decode": cmd_decode,
        "openapi": cmd_openapi,
        "check": cmd_check,
    }

    handler = commands.get(parsed.command)
    if handler:
        return handler(parsed, config)

    parser.print_help()
    return 1


def main() -> None:
    """Entry point for CLI."""
    sys.exit(app())


if __name__ == "__main__":
    main()

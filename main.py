#!/usr/bin/env python3

##############################################
#                                            #
#       GOOGLE MAPS PLATFORM TOOLS CLI       #
#                                            #
##############################################
"""
Inspect and invoke the Maps Platform tools from a shell.

Usage:
    python main.py list
    python main.py describe geocode_address
    python main.py declarations
    python main.py call geocode_address '{"address": "1600 Amphitheatre Pkwy"}'
    python main.py call get_street_view '{"size": "600x400", "location": "46.414382,10.013988"}' --output view.jpg
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from dotenv import load_dotenv

from gmp_tools.tools import GoogleMapsTools
from gmp_tools.tools.exceptions import ToolError
from gmp_tools.tools.executor import is_error_envelope
from gmp_tools.utils.load_config import load_config, load_maps_config, resolve_logging_config
from gmp_tools.utils.logger import get_logger, init_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Google Maps Platform agent tools")
    parser.add_argument("--config", help="Path to config.toml", default=None)
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List every tool with its summary")
    sub.add_parser("declarations", help="Print all function-call declarations as JSON")

    describe = sub.add_parser("describe", help="Print one tool's declaration")
    describe.add_argument("tool")

    call = sub.add_parser("call", help="Invoke a tool with JSON arguments")
    call.add_argument("tool")
    call.add_argument("arguments", nargs="?", default="{}", help="JSON object of arguments")
    call.add_argument("--output", "-o", help="File to write binary (image) results to")
    return parser


def _print_json(value: Any, indent: int) -> None:
    print(json.dumps(value, indent=indent, ensure_ascii=False))


def _write_binary(payload: bytes, output: Optional[str]) -> None:
    if output:
        Path(output).write_bytes(payload)
        print(f"✅ Wrote {len(payload)} bytes to {output}")
    else:
        print(f"📦 Binary result ({len(payload)} bytes). Use --output to save it.")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    # .env may set LOG_LEVEL for init_logger.
    load_dotenv()
    config = load_config(args.config)
    logging_config = resolve_logging_config(config, args.config)
    if logging_config.is_file():
        init_logger(logging_config)
    else:
        init_logger(None)
        logger.warning("logging_config_missing", path=str(logging_config))

    try:
        tools = GoogleMapsTools(load_maps_config(config))

        if args.command == "list":
            for tool in tools.tools:
                print(tool.get_summary())
        elif args.command == "declarations":
            _print_json(tools.get_declarations(), config.cli.indent)
        elif args.command == "describe":
            _print_json(tools.get(args.tool).declaration(), config.cli.indent)
        elif args.command == "call":
            try:
                arguments = json.loads(args.arguments)
            except json.JSONDecodeError as exc:
                print(f"❌ Arguments are not valid JSON: {exc}", file=sys.stderr)
                return 2
            result = tools.execute(args.tool, arguments)
            if isinstance(result, bytes):
                _write_binary(result, args.output)
            else:
                _print_json(result, config.cli.indent)
                if is_error_envelope(result):
                    return 1
    except ToolError as exc:
        logger.error("cli_failed", command=args.command, error=str(exc))
        print(f"❌ {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

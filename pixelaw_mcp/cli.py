"""CLI entry point for the PixeLAW MCP server.

Usage:
    pixelaw-mcp                                   # serve on stdio
    pixelaw-mcp serve --transport sse --log-level DEBUG
    pixelaw-mcp list
    pixelaw-mcp check --content-dir ./docs
"""

import argparse
import logging
import sys
from pathlib import Path

from . import settings

logger = logging.getLogger("pixelaw_mcp")


def _configure_logging(level: str) -> None:
    # stdout belongs to the stdio transport; everything else goes to stderr.
    logging.basicConfig(level=level.upper(), format=settings.LOG_FORMAT, stream=sys.stderr)


def cmd_serve(args: argparse.Namespace) -> None:
    """Build the server and block until the transport closes."""
    from .catalog import DuplicateToolError
    from .server import create_server, run_server

    # MCP_TRANSPORT bypasses argparse choices when no subcommand is given.
    if args.transport not in settings.TRANSPORTS:
        logger.error("Unknown transport '%s', expected one of %s", args.transport, settings.TRANSPORTS)
        sys.exit(1)

    try:
        mcp = create_server()
    except DuplicateToolError as exc:
        logger.error("Invalid tool catalog: %s", exc)
        sys.exit(1)
    except Exception:
        logger.exception("Server error")
        sys.exit(1)

    print(f"PixeLAW MCP server running on {args.transport}", file=sys.stderr)
    try:
        run_server(mcp, args.transport)
    except Exception:
        logger.exception("Server error")
        sys.exit(1)


def cmd_list(args: argparse.Namespace) -> None:
    """Print every tool name and title."""
    from .catalog import default_catalog

    catalog = default_catalog()
    width = max(len(name) for name in catalog.names())
    for tool in catalog:
        print(f"{tool.name:<{width}}  {tool.title}")


def cmd_check(args: argparse.Namespace) -> None:
    """Read every guide once and report the ones that fail."""
    from .catalog import default_catalog
    from .store import GuideStore, GuideStoreError

    store = GuideStore()
    failures: list[tuple[str, GuideStoreError]] = []
    for tool in default_catalog():
        try:
            store.read(tool.path)
        except GuideStoreError as exc:
            failures.append((tool.name, exc))

    if failures:
        print(f"Unreadable guides in {store.base_dir}:", file=sys.stderr)
        for name, exc in failures:
            print(f"  {name}: {exc.path} ({exc.reason})", file=sys.stderr)
        sys.exit(1)
    print(f"All guides readable in {store.base_dir}.")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="pixelaw-mcp",
        description="MCP server exposing the PixeLAW developer guides as tools",
    )
    parser.add_argument(
        "--content-dir",
        type=Path,
        default=None,
        help="Root the guide paths are resolved against (default: packaged guides)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default=settings.LOG_LEVEL,
        help=f"Logging level (default: {settings.LOG_LEVEL})",
    )

    subparsers = parser.add_subparsers(dest="command")

    # serve
    p_serve = subparsers.add_parser("serve", help="Run the MCP server (default)")
    p_serve.add_argument(
        "--transport",
        choices=settings.TRANSPORTS,
        default=settings.TRANSPORT,
        help=f"Transport to serve on (default: {settings.TRANSPORT})",
    )
    p_serve.set_defaults(func=cmd_serve)

    # list
    p_list = subparsers.add_parser("list", help="List the tools this server exposes")
    p_list.set_defaults(func=cmd_list)

    # check
    p_check = subparsers.add_parser("check", help="Verify every guide can be read")
    p_check.set_defaults(func=cmd_check)

    args = parser.parse_args(argv)
    if args.command is None:
        args.func = cmd_serve
        args.transport = settings.TRANSPORT

    _configure_logging(args.log_level)
    if args.content_dir is not None:
        settings.set_base_dir(args.content_dir)
    args.func(args)


if __name__ == "__main__":
    main()

"""
PixeLAW MCP Server — one tool per developer guide.

  pixelaw_101()             → beginner overview
  pixelaw_app_structure()   → app layout and lifecycle
  ...                       → see catalog.TOOLS for the full list

Each tool takes no arguments and returns its guide as Markdown, verbatim.

Run with:
    pixelaw-mcp            # stdio, for Claude Desktop / Claude Code
    pixelaw-mcp serve --transport sse
"""

from __future__ import annotations

import logging
from typing import Iterable

from mcp.server.fastmcp import FastMCP

from . import settings
from .catalog import Catalog, GuideTool, TOOLS
from .dispatcher import register_tools
from .store import GuideStore

logger = logging.getLogger(__name__)


def create_server(
    tools: Iterable[GuideTool] | None = None,
    store: GuideStore | None = None,
) -> FastMCP:
    """Validate the catalog, then build a FastMCP app with every guide registered.

    Raises DuplicateToolError before any app exists if two tools share a name.
    """
    catalog = Catalog(TOOLS if tools is None else tools)
    store = store or GuideStore()

    mcp = FastMCP(
        settings.SERVER_NAME,
        instructions=settings.INSTRUCTIONS,
        host=settings.HOST,
        port=settings.port(),
    )
    register_tools(mcp, catalog, store.fetch)
    return mcp


def run_server(mcp: FastMCP, transport: str = "stdio") -> None:
    """Serve until the client closes the transport."""
    if transport not in settings.TRANSPORTS:
        raise ValueError(f"Unknown transport '{transport}', expected one of {settings.TRANSPORTS}")
    logger.info("Starting %s %s on %s", settings.SERVER_NAME, settings.SERVER_VERSION, transport)
    mcp.run(transport=transport)

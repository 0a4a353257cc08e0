"""Binds catalog entries to FastMCP tool handlers.

Every handler is parameterless and total: it awaits one fetch and returns a
CallToolResult either way. A failed fetch becomes an ``isError`` result, so
one unreadable guide never takes the stdio session down with it.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent

from .catalog import Catalog, GuideTool

logger = logging.getLogger(__name__)

Fetch = Callable[[str], Awaitable[str]]
Handler = Callable[[], Awaitable[CallToolResult]]


# ---------------------------------------------------------------------------
# Result envelopes
# ---------------------------------------------------------------------------

def text_result(text: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=False)


def error_result(message: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=message)], isError=True)


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

def make_handler(tool: GuideTool, fetch: Fetch) -> Handler:
    """Build the handler for *tool*. No state is kept between calls."""

    async def handler() -> CallToolResult:
        logger.debug("Tool %s: fetching %s", tool.name, tool.path)
        try:
            content = await fetch(tool.path)
        except Exception as exc:  # noqa: BLE001
            logger.warning("Tool %s failed: %s", tool.name, exc, exc_info=True)
            return error_result(f"Error reading guide: {exc}")
        return text_result(content)

    handler.__name__ = tool.name
    handler.__doc__ = tool.description
    return handler


def register_tools(mcp: FastMCP, catalog: Catalog, fetch: Fetch) -> list[str]:
    """Register one handler per catalog entry. Returns the names registered."""
    registered: list[str] = []
    for tool in catalog:
        mcp.add_tool(
            make_handler(tool, fetch),
            name=tool.name,
            title=tool.title,
            description=tool.description,
            structured_output=False,
        )
        registered.append(tool.name)
    logger.info("Registered %d tools: %s", len(registered), ", ".join(registered))
    return registered

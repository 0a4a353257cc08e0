"""PixeLAW MCP - the PixeLAW developer guides exposed as individually callable MCP tools."""

from pixelaw_mcp.catalog import Catalog, DuplicateToolError, GuideTool, TOOLS
from pixelaw_mcp.server import create_server, run_server
from pixelaw_mcp.store import GuideStore, GuideStoreError

__version__ = "1.0.0"

__all__ = [
    "Catalog",
    "DuplicateToolError",
    "GuideStore",
    "GuideStoreError",
    "GuideTool",
    "TOOLS",
    "create_server",
    "run_server",
]

"""
All tuneable constants for pixelaw-mcp.
Override any value via the corresponding environment variable.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Server identity
# ---------------------------------------------------------------------------

SERVER_NAME: str = os.environ.get("PIXELAW_MCP_NAME", "pixelaw-mcp")
SERVER_VERSION = "1.0.0"

INSTRUCTIONS = (
    "PixeLAW development guides. Each tool returns one guide as Markdown; "
    "pick the guide that matches the task instead of loading all of them."
)

# ---------------------------------------------------------------------------
# Content store root
# ---------------------------------------------------------------------------

# Guide paths in the catalog (guides/<name>.md) are relative to this root.
_PACKAGE_DIR = Path(__file__).resolve().parent

# Mutable via set_base_dir(). Tests use that to point at a temp store.
BASE_DIR: Path = Path(os.environ.get("PIXELAW_CONTENT_DIR", _PACKAGE_DIR)).resolve()


def set_base_dir(path: str | Path) -> None:
    """Override BASE_DIR at runtime (e.g. for tests or a local docs checkout)."""
    global BASE_DIR
    BASE_DIR = Path(path).resolve()

# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------

TRANSPORTS = ("stdio", "sse", "streamable-http")

TRANSPORT = os.environ.get("MCP_TRANSPORT", "stdio")
HOST      = os.environ.get("MCP_HOST", "127.0.0.1")


def port() -> int:
    """MCP_PORT as an int. Read on demand so a bad value fails inside the CLI."""
    raw = os.environ.get("MCP_PORT", "8000")
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"MCP_PORT must be an integer, got '{raw}'") from None

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL  = os.environ.get("PIXELAW_MCP_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

"""Guide catalog: the fixed set of tools the server advertises.

Each entry maps a tool name to its title, the usage description shown to
the calling agent, and the guide file that backs it. The catalog is built
once at startup and never changes afterwards.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator


class DuplicateToolError(ValueError):
    """Raised when two catalog entries share a tool name."""


@dataclass(frozen=True)
class GuideTool:
    name: str
    title: str
    description: str
    path: str


class Catalog:
    """Read-only, ordered collection of GuideTool entries with unique names."""

    def __init__(self, tools: Iterable[GuideTool]) -> None:
        entries = tuple(tools)
        dupes = sorted(name for name, n in Counter(t.name for t in entries).items() if n > 1)
        if dupes:
            raise DuplicateToolError(f"Duplicate tool name(s) in catalog: {', '.join(dupes)}")
        self._entries = entries

    def __iter__(self) -> Iterator[GuideTool]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def names(self) -> list[str]:
        return [t.name for t in self._entries]


# ---------------------------------------------------------------------------
# Shipped guides
# ---------------------------------------------------------------------------

TOOLS: tuple[GuideTool, ...] = (
    GuideTool(
        name="pixelaw_101",
        title="PixeLAW 101",
        description=(
            "Beginner-friendly introduction to PixeLAW development. Use this when "
            "starting a new PixeLAW project, understanding the basic workflow, or "
            "when you need a high-level overview of PixeLAW architecture."
        ),
        path="guides/pixelaw_101.md",
    ),
    GuideTool(
        name="pixelaw_app_structure",
        title="PixeLAW App Structure",
        description=(
            "Essential guidance for structuring PixeLAW applications. Use this when "
            "creating new apps, organizing files, or understanding the app "
            "development lifecycle."
        ),
        path="guides/pixelaw_app_structure.md",
    ),
    GuideTool(
        name="pixelaw_models",
        title="PixeLAW Models",
        description=(
            "Specialized guidance for creating and working with PixeLAW models. Use "
            "this when you need to define data structures, create model schemas, or "
            "understand model relationships."
        ),
        path="guides/pixelaw_models.md",
    ),
    GuideTool(
        name="pixelaw_systems",
        title="PixeLAW Systems",
        description=(
            "Expert guidance on implementing PixeLAW systems and game logic. Use this "
            "when writing contract functions, implementing game mechanics, or working "
            "with pixel interactions."
        ),
        path="guides/pixelaw_systems.md",
    ),
    GuideTool(
        name="pixelaw_hooks",
        title="PixeLAW Hooks",
        description=(
            "Comprehensive guide for implementing the PixeLAW hook system. Use this "
            "when creating app-to-app interactions, implementing permission-controlled "
            "updates, or working with pre/post hooks."
        ),
        path="guides/pixelaw_hooks.md",
    ),
    GuideTool(
        name="pixelaw_testing",
        title="PixeLAW Testing",
        description=(
            "Comprehensive guide for writing tests for PixeLAW applications. Use this "
            "when creating unit tests, integration tests, or setting up test "
            "environments."
        ),
        path="guides/pixelaw_testing.md",
    ),
    GuideTool(
        name="pixelaw_deployment",
        title="PixeLAW Deployment",
        description=(
            "Deployment workflows and infrastructure setup. Use this when deploying "
            "apps locally, to testnets, or managing infrastructure."
        ),
        path="guides/pixelaw_deployment.md",
    ),
    GuideTool(
        name="pixelaw_patterns",
        title="PixeLAW Patterns",
        description=(
            "Common patterns and best practices for PixeLAW development. Use this for "
            "queue systems, area management, app coordination, and advanced patterns."
        ),
        path="guides/pixelaw_patterns.md",
    ),
)


def default_catalog() -> Catalog:
    """Catalog of the guides shipped with the package."""
    return Catalog(TOOLS)

"""Tool catalog: every tool a generated skill may be granted.

Changing this table is a release decision, never a runtime input.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Literal

RiskTier = Literal["low", "medium", "high"]

RISK_ORDER: dict[str, int] = {"low": 0, "medium": 1, "high": 2}


@dataclass(frozen=True)
class ToolSpec:
    """Permissions and risk tier for one tool."""

    permissions: tuple[str, ...]
    risk: RiskTier
    description: str


TOOL_CATALOG = MappingProxyType({
    "read": ToolSpec(("files:read",), "low", "Read file contents"),
    "write": ToolSpec(("files:write",), "medium", "Create and write files"),
    "edit": ToolSpec(("files:edit",), "medium", "Edit existing files"),
    "bash": ToolSpec(("system:execute",), "high", "Run shell commands"),
    "webfetch": ToolSpec(("network:fetch",), "medium", "Fetch web content"),
    "websearch": ToolSpec(("network:search",), "medium", "Search the web"),
    "context": ToolSpec(("context:read", "context:write"), "high", "Read and manage conversation context"),
    "glob": ToolSpec(("files:search",), "low", "Find files by pattern"),
})

KNOWN_TOOLS = tuple(TOOL_CATALOG)

# Combinations that warrant an explicit confirmation step
DANGEROUS_COMBINATIONS = (
    ("bash", "write"),
    ("bash", "context"),
    ("webfetch", "write"),
)

DANGEROUS_TOOLS = frozenset({"bash", "context"})
SENSITIVE_TOOLS = frozenset({"write", "webfetch", "websearch"})

# Keyword -> tools suggested for a function/description mentioning it
TOOL_KEYWORDS = (
    (("read", "view", "show", "inspect"), ("read",)),
    (("write", "create", "generate", "save"), ("write",)),
    (("edit", "modify", "update", "refactor"), ("read", "edit")),
    (("execute", "run", "command", "shell"), ("bash",)),
    (("fetch", "download", "http"), ("webfetch",)),
    (("search", "lookup", "query"), ("websearch",)),
    (("context", "conversation", "memory"), ("context",)),
    (("find files", "glob", "pattern"), ("glob",)),
)

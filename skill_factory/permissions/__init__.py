"""Tool catalog and permission resolution."""

from .catalog import DANGEROUS_COMBINATIONS, KNOWN_TOOLS, TOOL_CATALOG, ToolSpec
from .resolver import (
    check_combinations,
    detect_escalation,
    find_dangerous_combinations,
    recommend_tools,
    resolve_permissions,
    risk_level,
)

__all__ = [
    "TOOL_CATALOG",
    "KNOWN_TOOLS",
    "DANGEROUS_COMBINATIONS",
    "ToolSpec",
    "resolve_permissions",
    "risk_level",
    "find_dangerous_combinations",
    "check_combinations",
    "detect_escalation",
    "recommend_tools",
]

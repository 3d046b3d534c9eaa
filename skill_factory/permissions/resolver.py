"""Map requested tools to a minimal permission set.

resolve_permissions tolerates duplicate tool names and folds them away;
rejecting duplicates in user input is the request validator's job.
"""

from collections.abc import Iterable

from ..errors import DangerousCombinationError, UnknownToolError
from .catalog import (
    DANGEROUS_COMBINATIONS,
    DANGEROUS_TOOLS,
    KNOWN_TOOLS,
    RISK_ORDER,
    SENSITIVE_TOOLS,
    TOOL_CATALOG,
    TOOL_KEYWORDS,
)


def resolve_permissions(tools: Iterable[str]) -> tuple[str, ...]:
    """
    Union the catalog permissions of every tool.

    Args:
        tools: Tool identifiers, in any order, duplicates allowed.

    Returns:
        Deduplicated, lexicographically sorted permission strings.

    Raises:
        UnknownToolError: Naming every tool missing from the catalog.
    """
    tools = list(tools)
    unknown = [t for t in dict.fromkeys(tools) if t not in TOOL_CATALOG]
    if unknown:
        raise UnknownToolError(unknown)

    permissions: set[str] = set()
    for tool in tools:
        permissions.update(TOOL_CATALOG[tool].permissions)
    return tuple(sorted(permissions))


def risk_level(tools: Iterable[str]) -> str:
    """Return the highest risk tier among known tools (low when empty)."""
    level = "low"
    for tool in tools:
        spec = TOOL_CATALOG.get(tool)
        if spec is not None and RISK_ORDER[spec.risk] > RISK_ORDER[level]:
            level = spec.risk
    return level


def find_dangerous_combinations(tools: Iterable[str]) -> list[tuple[str, ...]]:
    """Return every configured dangerous combination fully present in tools."""
    present = set(tools)
    return [combo for combo in DANGEROUS_COMBINATIONS if present.issuperset(combo)]


def check_combinations(tools: Iterable[str], *, block: bool = False) -> list[str]:
    """
    Describe dangerous tool combinations as advisory messages.

    Args:
        tools: Requested tool identifiers.
        block: Raise on the first combination instead of reporting it.

    Raises:
        DangerousCombinationError: If block is set and a combination is found.
    """
    combos = find_dangerous_combinations(tools)
    if block and combos:
        raise DangerousCombinationError(combos[0])
    return [f"dangerous tool combination: {' + '.join(combo)}" for combo in combos]


def detect_escalation(
    requested: Iterable[str], existing: Iterable[str]
) -> dict[str, list[str]]:
    """Report dangerous and sensitive tools newly added to an existing grant."""
    requested = set(requested)
    existing = set(existing)
    added = [t for t in KNOWN_TOOLS if t in requested and t not in existing]
    return {
        "dangerous": [t for t in added if t in DANGEROUS_TOOLS],
        "sensitive": [t for t in added if t in SENSITIVE_TOOLS],
    }


def recommend_tools(primary_function: str, description: str = "") -> list[str]:
    """Suggest the smallest tool set matching keywords in the skill text."""
    text = f"{primary_function} {description}".lower()
    recommended = {"read"}
    for keywords, tools in TOOL_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            recommended.update(tools)
    return sorted(recommended)

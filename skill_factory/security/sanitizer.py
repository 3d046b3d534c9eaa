"""Normalize free-text request fields before validation.

Sanitization never raises: anything it cannot clean up is left for the
request validator to reject.
"""

from collections.abc import Mapping
from typing import Any

from .policy import (
    FREE_TEXT_FIELDS,
    HIDDEN_UNICODE,
    INJECTION_CHARACTERS,
    JAVASCRIPT_SCHEME,
    SCRIPT_BLOCK,
    SCRIPT_TAG,
    TRIM_CHARACTERS,
    WHITESPACE_RUN,
)


def sanitize_text(text: str) -> str:
    """Strip hidden Unicode and injection fragments, then collapse whitespace."""
    text = HIDDEN_UNICODE.sub("", text)
    text = SCRIPT_BLOCK.sub("", text)
    text = SCRIPT_TAG.sub("", text)
    text = JAVASCRIPT_SCHEME.sub("", text)
    text = INJECTION_CHARACTERS.sub("", text)
    return WHITESPACE_RUN.sub(" ", text).strip(TRIM_CHARACTERS)


def sanitize(request: Any) -> Any:
    """
    Return a sanitized copy of a raw request mapping.

    Args:
        request: Raw request as decoded from JSON or CLI flags.

    Returns:
        A new dict with free-text fields and use cases cleaned and
        skill_name lower-cased. Non-mapping input is returned unchanged.
    """
    if not isinstance(request, Mapping):
        return request

    cleaned: dict[str, Any] = dict(request)

    for field in FREE_TEXT_FIELDS:
        value = cleaned.get(field)
        if isinstance(value, str):
            cleaned[field] = sanitize_text(value)

    if isinstance(cleaned.get("skill_name"), str):
        cleaned["skill_name"] = cleaned["skill_name"].lower()

    use_cases = cleaned.get("use_cases")
    if isinstance(use_cases, list | tuple):
        cleaned["use_cases"] = [
            sanitize_text(case) if isinstance(case, str) else case for case in use_cases
        ]

    tools = cleaned.get("tools_needed")
    if isinstance(tools, list | tuple):
        cleaned["tools_needed"] = list(tools)

    return cleaned

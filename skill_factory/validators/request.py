"""Request validation: the first hard gate of the pipeline.

Checks run in a fixed order and the first failure is raised:
1. Presence of required fields
2. Required text fields are strings and non-empty after trimming
3. skill_name pattern
4. Length bounds (including use_cases)
5. Control characters and hidden Unicode in the description
6. tools_needed shape, known identifiers, no duplicates
7. output_format enum
8. skill_type type
"""

import re
from collections.abc import Mapping
from typing import Any

from ..errors import (
    ControlCharacterError,
    DuplicateToolError,
    EmptyFieldError,
    FormatError,
    InvalidOutputFormatError,
    MissingFieldError,
    UnknownToolError,
)
from ..models.request import (
    DEFAULT_OUTPUT_FORMAT,
    MAX_DESCRIPTION_LENGTH,
    MAX_PRIMARY_FUNCTION_LENGTH,
    MAX_SKILL_NAME_LENGTH,
    MAX_USE_CASE_LENGTH,
    MAX_USE_CASES,
    OUTPUT_FORMATS,
    SKILL_NAME_PATTERN,
    SkillRequest,
)
from ..permissions.catalog import TOOL_CATALOG
from ..security.policy import CONTROL_CHARACTERS, HIDDEN_UNICODE, TRIM_CHARACTERS

REQUIRED_FIELDS = ("skill_name", "description", "primary_function")

_SKILL_NAME_RE = re.compile(SKILL_NAME_PATTERN)


def validate_tool_list(tools: Any) -> tuple[str, ...]:
    """
    Validate a user-supplied tool list.

    Unlike permission resolution, duplicates are rejected here.

    Raises:
        FormatError: If tools is not a list.
        UnknownToolError: Naming every identifier missing from the catalog.
        DuplicateToolError: Naming every identifier listed more than once.
    """
    if not isinstance(tools, list | tuple):
        raise FormatError("tools_needed must be an array", field="tools_needed")

    unknown: list[Any] = []
    for tool in tools:
        if (not isinstance(tool, str) or tool not in TOOL_CATALOG) and tool not in unknown:
            unknown.append(tool)
    if unknown:
        raise UnknownToolError(unknown)

    seen: set[str] = set()
    duplicates: list[str] = []
    for tool in tools:
        if tool in seen and tool not in duplicates:
            duplicates.append(tool)
        seen.add(tool)
    if duplicates:
        raise DuplicateToolError(duplicates)

    return tuple(tools)


def _check_length(value: str, limit: int, field: str) -> None:
    if len(value) > limit:
        raise FormatError(f"{field} is too long (max {limit} characters)", field=field)


def _validate_use_cases(use_cases: Any) -> tuple[str, ...]:
    if not isinstance(use_cases, list | tuple):
        raise FormatError("use_cases must be an array", field="use_cases")
    if len(use_cases) > MAX_USE_CASES:
        raise FormatError(
            f"use_cases has too many entries (max {MAX_USE_CASES})", field="use_cases"
        )
    for index, case in enumerate(use_cases):
        if not isinstance(case, str):
            raise FormatError(f"use_cases[{index}] must be a string", field=f"use_cases[{index}]")
        if len(case) > MAX_USE_CASE_LENGTH:
            raise FormatError(
                f"use_cases[{index}] is too long (max {MAX_USE_CASE_LENGTH} characters)",
                field=f"use_cases[{index}]",
            )
    return tuple(use_cases)


def validate_request(request: Any) -> SkillRequest:
    """
    Validate a sanitized raw request and build the strict request record.

    Args:
        request: Raw request mapping, already passed through the sanitizer.

    Returns:
        A frozen SkillRequest.

    Raises:
        SkillRequestError: The subclass for the first rule that fails.
    """
    if not isinstance(request, Mapping):
        raise FormatError("request must be an object")

    # 1. Presence
    missing = [f for f in REQUIRED_FIELDS if request.get(f) is None]
    if missing:
        raise MissingFieldError(missing)

    # 2. Strings, non-empty after trim
    for field in REQUIRED_FIELDS:
        if not isinstance(request[field], str):
            raise FormatError(f"{field} must be a string", field=field)
    description = request["description"].strip(TRIM_CHARACTERS)
    primary_function = request["primary_function"].strip(TRIM_CHARACTERS)
    if not description:
        raise EmptyFieldError("description")
    if not primary_function:
        raise EmptyFieldError("primary_function")

    # 3. skill_name pattern
    skill_name = request["skill_name"]
    if not _SKILL_NAME_RE.fullmatch(skill_name):
        raise FormatError(
            "skill_name may only contain lowercase letters, digits and hyphens",
            field="skill_name",
        )

    # 4. Lengths
    _check_length(skill_name, MAX_SKILL_NAME_LENGTH, "skill_name")
    _check_length(description, MAX_DESCRIPTION_LENGTH, "description")
    _check_length(primary_function, MAX_PRIMARY_FUNCTION_LENGTH, "primary_function")
    use_cases: tuple[str, ...] = ()
    if request.get("use_cases") is not None:
        use_cases = _validate_use_cases(request["use_cases"])

    # 5. Control characters
    if CONTROL_CHARACTERS.search(description) or HIDDEN_UNICODE.search(description):
        raise ControlCharacterError("description")

    # 6. Tools
    tools: tuple[str, ...] = ()
    if request.get("tools_needed") is not None:
        tools = validate_tool_list(request["tools_needed"])

    # 7. Output format
    output_format = request.get("output_format")
    if output_format is None:
        output_format = DEFAULT_OUTPUT_FORMAT
    elif output_format not in OUTPUT_FORMATS:
        raise InvalidOutputFormatError(output_format, OUTPUT_FORMATS)

    # 8. Skill type
    skill_type = request.get("skill_type")
    if skill_type is not None and not isinstance(skill_type, str):
        raise FormatError("skill_type must be a string", field="skill_type")

    return SkillRequest(
        skill_name=skill_name,
        description=description,
        primary_function=primary_function,
        skill_type=skill_type,
        tools_needed=tools,
        use_cases=use_cases,
        output_format=output_format,
    )

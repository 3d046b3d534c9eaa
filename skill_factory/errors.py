"""Request rejection errors raised by the generation pipeline."""

from __future__ import annotations

from typing import Any


class SkillRequestError(ValueError):
    """Base error for a rejected skill request.

    Attributes:
        kind: Stable identifier for the rejection rule.
        field: Name of the offending request field, if any.
    """

    kind = "invalid_request"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "field": self.field, "message": self.message}


class MissingFieldError(SkillRequestError):
    kind = "missing_field"

    def __init__(self, fields: list[str]) -> None:
        self.fields = list(fields)
        super().__init__(
            f"Missing required fields: {', '.join(self.fields)}",
            field=", ".join(self.fields),
        )


class EmptyFieldError(SkillRequestError):
    kind = "empty_field"

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} must not be empty", field=field)


class FormatError(SkillRequestError):
    """Pattern, type or length violation."""

    kind = "format"


class ControlCharacterError(SkillRequestError):
    kind = "control_character"

    def __init__(self, field: str) -> None:
        super().__init__(
            f"{field} contains control characters or hidden Unicode",
            field=field,
        )


class UnknownToolError(SkillRequestError):
    kind = "unknown_tool"

    def __init__(self, tools: list[str]) -> None:
        self.tools = list(tools)
        super().__init__(
            f"Unknown tools: {', '.join(str(t) for t in self.tools)}",
            field="tools_needed",
        )


class DuplicateToolError(SkillRequestError):
    kind = "duplicate_tool"

    def __init__(self, tools: list[str]) -> None:
        self.tools = list(tools)
        super().__init__(
            f"Duplicate tools: {', '.join(self.tools)}",
            field="tools_needed",
        )


class InvalidOutputFormatError(SkillRequestError):
    kind = "invalid_output_format"

    def __init__(self, value: object, allowed: tuple[str, ...]) -> None:
        self.value = value
        super().__init__(
            f"Unsupported output format: {value!r} (expected one of {', '.join(allowed)})",
            field="output_format",
        )


class UnsafePathError(SkillRequestError):
    kind = "unsafe_path"

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid output path: {message}", field="output_dir")


class DangerousCombinationError(SkillRequestError):
    """Raised only when dangerous tool combinations are configured to block."""

    kind = "dangerous_combination"

    def __init__(self, combination: tuple[str, ...]) -> None:
        self.combination = combination
        super().__init__(
            f"Dangerous tool combination: {' + '.join(combination)}",
            field="tools_needed",
        )

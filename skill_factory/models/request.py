"""Skill request data model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

OUTPUT_FORMATS = ("full-package", "minimal", "template-only")
DEFAULT_OUTPUT_FORMAT = "full-package"

SKILL_NAME_PATTERN = r"^[a-z0-9-]+$"
MAX_SKILL_NAME_LENGTH = 50
MAX_DESCRIPTION_LENGTH = 1000
MAX_PRIMARY_FUNCTION_LENGTH = 500
MAX_USE_CASES = 10
MAX_USE_CASE_LENGTH = 100


class SkillRequest(BaseModel):
    """
    A validated request for a new skill package.

    Built by the request validator only after every check has passed;
    raw user input never reaches this model directly.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
    skill_name: str = Field(
        ..., pattern=SKILL_NAME_PATTERN, min_length=1, max_length=MAX_SKILL_NAME_LENGTH
    )
    description: str = Field(..., min_length=1, max_length=MAX_DESCRIPTION_LENGTH)
    primary_function: str = Field(..., min_length=1, max_length=MAX_PRIMARY_FUNCTION_LENGTH)
    skill_type: str | None = None
    tools_needed: tuple[str, ...] = ()
    use_cases: tuple[str, ...] = Field(default=(), max_length=MAX_USE_CASES)
    output_format: Literal["full-package", "minimal", "template-only"] = DEFAULT_OUTPUT_FORMAT

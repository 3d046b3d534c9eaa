"""Template family selection."""

from .selector import (
    DEFAULT_TEMPLATE,
    FUNCTION_KEYWORDS,
    SKILL_TYPE_TEMPLATES,
    TEMPLATE_FAMILIES,
    infer_template,
    resolve_skill_type,
    select_template,
)

__all__ = [
    "DEFAULT_TEMPLATE",
    "FUNCTION_KEYWORDS",
    "SKILL_TYPE_TEMPLATES",
    "TEMPLATE_FAMILIES",
    "infer_template",
    "resolve_skill_type",
    "select_template",
]

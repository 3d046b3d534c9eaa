"""Choose a template family for a skill.

An explicit skill type always wins. Without one, the primary function is
scanned against FUNCTION_KEYWORDS in declared order and the first entry with
a matching keyword decides. Matching is a case-insensitive substring test.
"""

from types import MappingProxyType

DEFAULT_TEMPLATE = "default-template"

TEMPLATE_FAMILIES = (
    "coordinator-template",
    "specialist-template",
    "integration-template",
    "analytics-template",
    DEFAULT_TEMPLATE,
)

SKILL_TYPE_TEMPLATES = MappingProxyType({
    "coordinator": "coordinator-template",
    "specialist": "specialist-template",
    "tool-integration": "integration-template",
    "learning-analytics": "analytics-template",
    "analytics": "analytics-template",
})

# Skill type reported for a template chosen without an explicit type
TEMPLATE_SKILL_TYPES = MappingProxyType({
    "coordinator-template": "coordinator",
    "specialist-template": "specialist",
    "integration-template": "tool-integration",
    "analytics-template": "learning-analytics",
    DEFAULT_TEMPLATE: "specialist",
})

FUNCTION_KEYWORDS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("analy", "statistic", "metric", "report", "dashboard"), "analytics-template"),
    (("integrat", "webhook", "connector", "third-party", "sync"), "integration-template"),
    (("workflow", "coordinat", "orchestrat", "delegat", "pipeline"), "coordinator-template"),
    (("review", "lint", "refactor", "debug"), "specialist-template"),
)


def infer_template(primary_function: str) -> str:
    """Infer a template family from free text, falling back to the default."""
    text = primary_function.lower()
    for keywords, template in FUNCTION_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return template
    return DEFAULT_TEMPLATE


def select_template(skill_type: str | None, primary_function: str) -> str:
    """
    Resolve the template family for a request.

    Args:
        skill_type: Explicit skill type, or None when the request omits it.
        primary_function: The skill's primary function text.

    Returns:
        A member of TEMPLATE_FAMILIES.
    """
    if skill_type is not None and skill_type in SKILL_TYPE_TEMPLATES:
        return SKILL_TYPE_TEMPLATES[skill_type]
    return infer_template(primary_function)


def resolve_skill_type(skill_type: str | None, template: str) -> str:
    """Return the skill type to report, deriving it from the template if needed."""
    if skill_type is not None and skill_type in SKILL_TYPE_TEMPLATES:
        return skill_type
    return TEMPLATE_SKILL_TYPES[template]

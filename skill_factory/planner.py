"""Plan the artifact list for a skill package.

Each output format maps to a fixed, ordered list of files below
skills/<skill_name>/. The planner emits paths and descriptions only; file
bodies are rendered elsewhere.
"""

from types import MappingProxyType

from .models.manifest import ArtifactDescriptor, skill_root
from .security.path_guard import PathGuard

DEFINITION = ("skill-definition/skill.json", "Skill definition")
TOOL_CONFIG = ("tools/tools.json", "Tool configuration")
IMPLEMENTATION = ("implementation.py", "Implementation stub ({template})")

FORMAT_ARTIFACTS = MappingProxyType({
    "full-package": (
        DEFINITION,
        TOOL_CONFIG,
        IMPLEMENTATION,
        ("tests/unit/test_basic.py", "Unit test stub"),
        ("tests/integration/test_integration.py", "Integration test stub"),
        ("examples/basic-usage.md", "Basic usage example"),
        ("examples/advanced-usage.md", "Advanced usage example"),
        ("docs/README.md", "README"),
        ("docs/API-reference.md", "API reference"),
        ("docs/development-guide.md", "Development guide"),
        (".gitignore", "VCS ignore rules"),
        ("pyproject.toml", "Package manifest"),
    ),
    "minimal": (
        DEFINITION,
        TOOL_CONFIG,
        IMPLEMENTATION,
    ),
    "template-only": (
        DEFINITION,
        ("templates/main-template.json", "Main template ({template})"),
        ("templates/variables-config.json", "Template variable configuration"),
    ),
})


def plan_artifacts(template: str, skill_name: str, output_format: str) -> tuple[ArtifactDescriptor, ...]:
    """
    Build the ordered artifact list for a package.

    Args:
        template: Selected template family.
        skill_name: Validated skill name.
        output_format: One of the known output formats.

    Returns:
        Artifact descriptors with paths relative to the output directory.

    Raises:
        KeyError: If output_format is not a known format. Requests are
            validated before planning, so this indicates a caller bug.
    """
    entries = FORMAT_ARTIFACTS[output_format]
    root = skill_root(skill_name)
    guard = PathGuard()

    artifacts = []
    for relative, description in entries:
        path = guard.check(root + relative)
        artifacts.append(
            ArtifactDescriptor(path=path, description=description.format(template=template))
        )
    return tuple(artifacts)


def next_steps(artifacts: tuple[ArtifactDescriptor, ...], has_tests: bool) -> tuple[str, ...]:
    """Follow-up instructions shown to the user after generation."""
    steps = ["Load the generated skill into your agent"]
    if has_tests:
        steps.append("Run the generated tests to verify the skill")
    steps.append(f"Adapt the {len(artifacts)} generated files to your requirements")
    return tuple(steps)

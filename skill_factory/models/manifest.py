"""Generation manifest data models."""

import posixpath
from typing import Literal

from pydantic import BaseModel, ConfigDict, computed_field


def skill_root(skill_name: str) -> str:
    """Return the relative directory every artifact of a skill lives under."""
    return f"skills/{skill_name}/"


class ArtifactDescriptor(BaseModel):
    """A planned output file (path relative to the output directory)."""

    model_config = ConfigDict(frozen=True, extra="forbid")
    path: str
    description: str


class SkillDefinition(BaseModel):
    """Resolved identity of the skill being generated."""

    model_config = ConfigDict(frozen=True, extra="forbid")
    name: str
    type: str
    description: str
    primary_function: str
    template: str
    output_format: str
    use_cases: tuple[str, ...] = ()


class ToolConfig(BaseModel):
    """Tools granted to the skill and the permissions they expand to."""

    model_config = ConfigDict(frozen=True, extra="forbid")
    tools: tuple[str, ...] = ()
    permissions: tuple[str, ...] = ()
    risk_level: Literal["low", "medium", "high"] = "low"
    advisories: tuple[str, ...] = ()


class StructureSummary(BaseModel):
    """Shape of a planned package, derived from its artifact list."""

    model_config = ConfigDict(frozen=True)
    format: str
    file_count: int
    has_tests: bool
    has_docs: bool
    has_examples: bool

    @classmethod
    def from_artifacts(
        cls, output_format: str, skill_name: str, artifacts: tuple[ArtifactDescriptor, ...]
    ) -> "StructureSummary":
        root = skill_root(skill_name)
        # Only the part below the skill root counts, so a skill named
        # "unit-tests" does not report tests it does not have.
        suffixes = [a.path[len(root):] if a.path.startswith(root) else a.path for a in artifacts]
        return cls(
            format=output_format,
            file_count=len(artifacts),
            has_tests=any("tests/" in s for s in suffixes),
            has_docs=any("docs/" in s for s in suffixes),
            has_examples=any("examples/" in s for s in suffixes),
        )


class GenerationManifest(BaseModel):
    """
    Terminal artifact of the generation pipeline.

    Created once per accepted request and never mutated. The structure
    summary is computed from the artifact list on every access.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
    skill_definition: SkillDefinition
    tools: ToolConfig
    artifacts: tuple[ArtifactDescriptor, ...]
    output_dir: str
    next_steps: tuple[str, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def structure_summary(self) -> StructureSummary:
        return StructureSummary.from_artifacts(
            self.skill_definition.output_format,
            self.skill_definition.name,
            self.artifacts,
        )

    def target_paths(self) -> list[str]:
        """Return every artifact path joined under the output directory."""
        base = self.output_dir.replace("\\", "/")
        return [posixpath.join(base, a.path) for a in self.artifacts]

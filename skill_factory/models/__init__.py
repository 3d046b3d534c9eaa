"""Data models for skill requests and generation manifests."""

from .manifest import (
    ArtifactDescriptor,
    GenerationManifest,
    SkillDefinition,
    StructureSummary,
    ToolConfig,
    skill_root,
)
from .request import DEFAULT_OUTPUT_FORMAT, OUTPUT_FORMATS, SkillRequest

__all__ = [
    "ArtifactDescriptor",
    "GenerationManifest",
    "SkillDefinition",
    "StructureSummary",
    "ToolConfig",
    "skill_root",
    "SkillRequest",
    "OUTPUT_FORMATS",
    "DEFAULT_OUTPUT_FORMAT",
]

"""Tests for request and manifest models."""

import pytest
from pydantic import ValidationError

from skill_factory.factory import generate_manifest
from skill_factory.models import (
    ArtifactDescriptor,
    GenerationManifest,
    SkillRequest,
    StructureSummary,
    ToolConfig,
)


class TestSkillRequest:
    """Tests for the SkillRequest model."""

    def test_defaults(self) -> None:
        request = SkillRequest(skill_name="demo-skill", description="d", primary_function="f")
        assert request.output_format == "full-package"
        assert request.tools_needed == ()

    def test_frozen(self) -> None:
        request = SkillRequest(skill_name="demo-skill", description="d", primary_function="f")
        with pytest.raises(ValidationError):
            request.skill_name = "other"

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            SkillRequest(skill_name="demo-skill", description="d", primary_function="f", owner="me")

    def test_name_pattern_enforced(self) -> None:
        with pytest.raises(ValidationError):
            SkillRequest(skill_name="Demo Skill", description="d", primary_function="f")

    def test_output_format_enforced(self) -> None:
        with pytest.raises(ValidationError):
            SkillRequest(
                skill_name="demo-skill", description="d", primary_function="f", output_format="zip"
            )


class TestToolConfig:
    """Tests for the ToolConfig model."""

    def test_risk_level_enforced(self) -> None:
        with pytest.raises(ValidationError):
            ToolConfig(tools=("read",), permissions=("files:read",), risk_level="extreme")


class TestGenerationManifest:
    """Tests for the GenerationManifest model."""

    @pytest.fixture
    def manifest(self, valid_request) -> GenerationManifest:
        return generate_manifest(valid_request, "out")

    def test_frozen(self, manifest) -> None:
        with pytest.raises(ValidationError):
            manifest.output_dir = "/tmp/elsewhere"

    def test_summary_computed_from_artifacts(self, manifest) -> None:
        """The summary always reflects the artifact list."""
        summary = manifest.structure_summary
        assert isinstance(summary, StructureSummary)
        assert summary.file_count == len(manifest.artifacts)
        assert summary.has_tests and summary.has_docs and summary.has_examples

    def test_summary_in_dump(self, manifest) -> None:
        dump = manifest.model_dump(mode="json")
        assert dump["structure_summary"]["file_count"] == len(dump["artifacts"])
        assert dump["structure_summary"]["format"] == "full-package"

    def test_summary_cannot_be_supplied(self, manifest) -> None:
        """A hand-written summary is rejected rather than trusted."""
        data = manifest.model_dump()
        with pytest.raises(ValidationError):
            GenerationManifest(**data)

    def test_copy_reflects_new_artifacts(self, manifest) -> None:
        """Replacing artifacts recomputes the summary."""
        trimmed = manifest.model_copy(update={"artifacts": manifest.artifacts[:3]})
        assert trimmed.structure_summary.file_count == 3
        assert not trimmed.structure_summary.has_tests

    def test_target_paths(self, manifest) -> None:
        paths = manifest.target_paths()
        assert paths[0] == "out/skills/format-test/skill-definition/skill.json"
        assert len(paths) == len(manifest.artifacts)

    def test_target_paths_windows_separators(self, valid_request) -> None:
        manifest = generate_manifest(valid_request, "build\\skills")
        assert manifest.target_paths()[0].startswith("build/skills/skills/format-test/")

    def test_artifact_descriptor_frozen(self) -> None:
        artifact = ArtifactDescriptor(path="skills/x/a.json", description="A")
        with pytest.raises(ValidationError):
            artifact.path = "elsewhere"

"""Tests for manifest validator."""

import pytest

from skill_factory.factory import generate_manifest
from skill_factory.validators.manifest import validate_manifest


@pytest.fixture
def valid_manifest(valid_request) -> dict:
    """Return a valid manifest dictionary."""
    return generate_manifest(valid_request).model_dump(mode="json")


class TestValidManifest:
    """Tests for valid manifest validation."""

    def test_valid_manifest_passes(self, valid_manifest) -> None:
        """A freshly generated manifest passes validation."""
        is_valid, errors = validate_manifest(valid_manifest)
        assert is_valid is True
        assert errors == []

    @pytest.mark.parametrize("fmt", ["full-package", "minimal", "template-only"])
    def test_every_format_passes(self, minimal_request, fmt) -> None:
        minimal_request["output_format"] = fmt
        is_valid, errors = validate_manifest(generate_manifest(minimal_request).model_dump(mode="json"))
        assert is_valid, errors

    def test_without_next_steps(self, valid_manifest) -> None:
        """next_steps is optional."""
        del valid_manifest["next_steps"]
        is_valid, _ = validate_manifest(valid_manifest)
        assert is_valid is True


class TestSchemaErrors:
    """Tests for violations caught by the JSON schema."""

    @pytest.mark.parametrize(
        "field", ["skill_definition", "tools", "artifacts", "structure_summary", "output_dir"]
    )
    def test_missing_top_level_field(self, valid_manifest, field) -> None:
        del valid_manifest[field]
        is_valid, errors = validate_manifest(valid_manifest)
        assert is_valid is False
        assert any(field in e for e in errors)

    def test_extra_top_level_field(self, valid_manifest) -> None:
        """Unknown keys are rejected."""
        valid_manifest["author"] = "someone"
        is_valid, errors = validate_manifest(valid_manifest)
        assert is_valid is False
        assert errors[0].startswith("Schema validation error")

    def test_bad_permission_pattern(self, valid_manifest) -> None:
        valid_manifest["tools"]["permissions"] = ["files-read"]
        is_valid, _ = validate_manifest(valid_manifest)
        assert is_valid is False

    def test_unknown_template(self, valid_manifest) -> None:
        valid_manifest["skill_definition"]["template"] = "custom-template"
        is_valid, _ = validate_manifest(valid_manifest)
        assert is_valid is False

    def test_empty_artifacts(self, valid_manifest) -> None:
        valid_manifest["artifacts"] = []
        is_valid, _ = validate_manifest(valid_manifest)
        assert is_valid is False

    def test_invalid_skill_name(self, valid_manifest) -> None:
        valid_manifest["skill_definition"]["name"] = "Bad Name"
        is_valid, _ = validate_manifest(valid_manifest)
        assert is_valid is False


class TestConsistencyErrors:
    """Tests for cross-field rules."""

    def test_permission_mismatch(self, valid_manifest) -> None:
        """Permissions must equal the catalog union for the tools."""
        valid_manifest["tools"]["permissions"] = ["files:read"]
        is_valid, errors = validate_manifest(valid_manifest)
        assert is_valid is False
        assert any("do not match" in e for e in errors)

    def test_unknown_tool(self, valid_manifest) -> None:
        valid_manifest["tools"]["tools"] = ["read", "delete-all"]
        is_valid, errors = validate_manifest(valid_manifest)
        assert is_valid is False
        assert any("delete-all" in e for e in errors)

    def test_path_outside_skill_root(self, valid_manifest) -> None:
        valid_manifest["artifacts"][0]["path"] = "skills/other-skill/skill.json"
        is_valid, errors = validate_manifest(valid_manifest)
        assert is_valid is False
        assert any("Artifact outside skills/format-test/" in e for e in errors)

    def test_traversal_in_path(self, valid_manifest) -> None:
        valid_manifest["artifacts"][0]["path"] = "skills/format-test/../../etc/passwd"
        is_valid, errors = validate_manifest(valid_manifest)
        assert is_valid is False
        assert any("traversal" in e for e in errors)

    def test_duplicate_paths(self, valid_manifest) -> None:
        valid_manifest["artifacts"][1]["path"] = valid_manifest["artifacts"][0]["path"]
        is_valid, errors = validate_manifest(valid_manifest)
        assert is_valid is False
        assert "Duplicate artifact paths" in errors

    def test_unsafe_output_dir(self, valid_manifest) -> None:
        valid_manifest["output_dir"] = "/etc/skills"
        is_valid, errors = validate_manifest(valid_manifest)
        assert is_valid is False
        assert any(e.startswith("Unsafe output_dir") for e in errors)

    def test_file_count_mismatch(self, valid_manifest) -> None:
        valid_manifest["structure_summary"]["file_count"] = 99
        is_valid, errors = validate_manifest(valid_manifest)
        assert is_valid is False
        assert any("file_count" in e for e in errors)

    def test_format_mismatch(self, valid_manifest) -> None:
        valid_manifest["structure_summary"]["format"] = "minimal"
        is_valid, errors = validate_manifest(valid_manifest)
        assert is_valid is False
        assert any("format" in e for e in errors)

    def test_all_errors_collected(self, valid_manifest) -> None:
        """Consistency errors are reported together."""
        valid_manifest["tools"]["permissions"] = ["files:read"]
        valid_manifest["structure_summary"]["file_count"] = 99
        _, errors = validate_manifest(valid_manifest)
        assert len(errors) == 2

"""Manifest validation against JSON Schema and cross-field rules."""

import json
from pathlib import Path

import jsonschema

from ..models.manifest import skill_root
from ..permissions.resolver import resolve_permissions
from ..security.path_guard import PathGuard

# Path to the manifest schema
SCHEMA_PATH = Path(__file__).parent.parent / "contracts" / "manifest_schema.json"


def _load_schema() -> dict:
    """Load the manifest JSON schema."""
    with open(SCHEMA_PATH) as f:
        return json.load(f)


def _check_consistency(manifest: dict) -> list[str]:
    """Cross-field rules a schema cannot express."""
    errors: list[str] = []
    name = manifest["skill_definition"]["name"]
    root = skill_root(name)
    guard = PathGuard()

    paths = [a["path"] for a in manifest["artifacts"]]
    if len(set(paths)) != len(paths):
        errors.append("Duplicate artifact paths")

    for path in paths:
        if not path.startswith(root):
            errors.append(f"Artifact outside {root}: {path}")
        errors.extend(f"Unsafe artifact path {path}: {v}" for v in guard.inspect(path))

    errors.extend(f"Unsafe output_dir: {v}" for v in guard.inspect(manifest["output_dir"]))

    tools = manifest["tools"]
    try:
        expected = list(resolve_permissions(tools["tools"]))
    except ValueError as e:
        errors.append(str(e))
    else:
        if tools["permissions"] != expected:
            errors.append(
                f"Permissions {tools['permissions']} do not match catalog union {expected}"
            )

    summary = manifest["structure_summary"]
    if summary["file_count"] != len(paths):
        errors.append("structure_summary.file_count does not match artifacts")
    if summary["format"] != manifest["skill_definition"]["output_format"]:
        errors.append("structure_summary.format does not match output_format")

    return errors


def validate_manifest(manifest: dict) -> tuple[bool, list[str]]:
    """
    Validate a manifest dump against the schema and consistency rules.

    Args:
        manifest: The manifest dictionary (GenerationManifest.model_dump(mode="json")).

    Returns:
        A tuple of (is_valid, list_of_errors).
        If valid, errors list is empty.
    """
    errors: list[str] = []

    try:
        schema = _load_schema()
        jsonschema.validate(instance=manifest, schema=schema)
    except jsonschema.ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        return (False, errors)
    except FileNotFoundError:
        errors.append(f"Schema file not found: {SCHEMA_PATH}")
        return (False, errors)
    except json.JSONDecodeError as e:
        errors.append(f"Schema JSON decode error: {e}")
        return (False, errors)

    errors.extend(_check_consistency(manifest))
    return (len(errors) == 0, errors)

"""Pytest fixtures for Skill Factory tests."""

from pathlib import Path

import pytest

from skill_factory.factory import SkillFactory


@pytest.fixture
def valid_request() -> dict:
    """Return a complete, valid raw skill request."""
    return {
        "skill_name": "format-test",
        "skill_type": "specialist",
        "description": "Checks the formatting of generated reports",
        "primary_function": "Review report formatting",
        "tools_needed": ["read", "write"],
        "use_cases": ["quick check", "release review"],
        "output_format": "full-package",
    }


@pytest.fixture
def minimal_request() -> dict:
    """Return a request with only the required fields."""
    return {
        "skill_name": "demo-skill",
        "description": "d",
        "primary_function": "f",
    }


@pytest.fixture
def audit_log(tmp_path: Path) -> Path:
    """Return a path for a temp audit log (not yet created)."""
    return tmp_path / "logs" / "audit.log"


@pytest.fixture
def factory(audit_log: Path) -> SkillFactory:
    """Return a factory writing to a temp audit log."""
    return SkillFactory(output_dir="generated-skills", audit_log_path=audit_log)

"""Skill Factory - plan skill packages from validated generation requests."""

from .factory import SkillFactory, generate_manifest

__all__ = ["SkillFactory", "generate_manifest"]

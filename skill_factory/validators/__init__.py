"""Request and manifest validators."""

from .manifest import validate_manifest
from .request import REQUIRED_FIELDS, validate_request, validate_tool_list

__all__ = ["REQUIRED_FIELDS", "validate_manifest", "validate_request", "validate_tool_list"]

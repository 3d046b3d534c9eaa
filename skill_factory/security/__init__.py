"""Security module for the skill factory.

Provides request sanitization and output path checks.
"""

from .path_guard import PathGuard
from .policy import (
    CONTROL_CHARACTERS,
    HIDDEN_UNICODE,
    MAX_PATH_LENGTH,
    RESERVED_DIRECTORIES,
)
from .sanitizer import sanitize, sanitize_text

__all__ = [
    "PathGuard",
    "sanitize",
    "sanitize_text",
    "CONTROL_CHARACTERS",
    "HIDDEN_UNICODE",
    "MAX_PATH_LENGTH",
    "RESERVED_DIRECTORIES",
]

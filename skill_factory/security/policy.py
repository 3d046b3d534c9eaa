"""Security policy constants for request sanitization and path checks.

These tables are fixed at import time and shared read-only by every request.
"""

import re

# C0 controls except tab, newline and carriage return, plus DEL
CONTROL_CHARACTERS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")

# Zero-width, bidi override and invisible formatting code points
HIDDEN_UNICODE = re.compile(r"[\u200B-\u200F\u202A-\u202E\u2060-\u206F\uFEFF]")

# Shell/SQL statement separators and quoting characters
INJECTION_CHARACTERS = re.compile(r"[;'\"`]")

# Script blocks (with body), then stray opening/closing tags
SCRIPT_BLOCK = re.compile(r"<script\b[^>]*>.*?</script\s*>", re.IGNORECASE | re.DOTALL)
SCRIPT_TAG = re.compile(r"</?script\b[^>]*>", re.IGNORECASE)

JAVASCRIPT_SCHEME = re.compile(r"javascript\s*:", re.IGNORECASE)

# Plain spacing only; other C0 whitespace is left for the control-character check
TRIM_CHARACTERS = " \t\r\n"
WHITESPACE_RUN = re.compile(r"[ \t\r\n]+")

# Free-text request fields the sanitizer rewrites
FREE_TEXT_FIELDS = ("skill_name", "description", "primary_function")

# Reserved system directories (lower-case, forward slashes, drive letter removed)
RESERVED_DIRECTORIES = (
    "/etc",
    "/bin",
    "/usr",
    "/root",
    "/windows",
    "/system32",
)

# Device and process filesystems
DEVICE_DIRECTORIES = (
    "/dev",
    "/proc",
)

DRIVE_PREFIX = re.compile(r"^[a-z]:")

# Windows MAX_PATH
MAX_PATH_LENGTH = 260

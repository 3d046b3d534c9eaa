"""Syntactic safety checks for output directory paths.

Checks run in order and the first violation wins:
1. Type and emptiness
2. Length
3. Traversal segments
4. Reserved system directories
5. Device and process filesystems

Nothing here touches the filesystem, so symlink traversal is out of reach;
a writer must re-check the resolved real path before writing.
"""

from ..errors import UnsafePathError
from .policy import DEVICE_DIRECTORIES, DRIVE_PREFIX, MAX_PATH_LENGTH, RESERVED_DIRECTORIES


def _normalize(path: str) -> str:
    """Lower-case, use forward slashes and drop any drive letter."""
    normalized = path.strip().replace("\\", "/").lower()
    return DRIVE_PREFIX.sub("", normalized)


def _canonical(path: str) -> str:
    """Collapse repeated separators and drop "." segments; ".." is kept."""
    segments = [s for s in path.split("/") if s not in ("", ".")]
    root = "/" if path.startswith("/") else ""
    return root + "/".join(segments)


def _under(path: str, directory: str) -> bool:
    return path == directory or path.startswith(directory + "/")


class PathGuard:
    """Validate destination paths against traversal and system directories."""

    def inspect(self, path: object) -> list[str]:
        """
        Collect violations for a candidate path.

        Args:
            path: Candidate output path (any type is accepted).

        Returns:
            List of violation messages, empty if the path is acceptable.
        """
        if not isinstance(path, str) or not path.strip():
            return ["path must be a non-empty string"]

        if len(path) > MAX_PATH_LENGTH:
            return [f"path is longer than {MAX_PATH_LENGTH} characters"]

        violations: list[str] = []
        normalized = _normalize(path)

        if ".." in normalized.split("/") or "../" in normalized:
            violations.append("contains directory traversal segments")

        canonical = _canonical(normalized)

        for directory in RESERVED_DIRECTORIES:
            if _under(canonical, directory):
                violations.append(f"cannot use system directory {directory}")

        for directory in DEVICE_DIRECTORIES:
            if _under(canonical, directory):
                violations.append(f"cannot use device directory {directory}")

        return violations

    def check(self, path: object) -> str:
        """
        Accept a path or raise UnsafePathError for its first violation.

        Returns:
            The path with surrounding whitespace removed.
        """
        violations = self.inspect(path)
        if violations:
            raise UnsafePathError(violations[0])
        return path.strip()  # type: ignore[union-attr]

"""Append-only audit trail for skill generation requests.

One event per line:

    2026-02-01T10:00:00Z [REJECT] kind=unknown_tool field=tools_needed error="Unknown tools: x"

Operations written by the factory: GENERATE, REJECT, ADVISORY, MANIFEST.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Any

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _format_value(value: Any) -> str:
    # Multi-line values are folded so one event stays on one line
    text = " ".join(str(value).splitlines())
    return f'"{text}"' if " " in text else text


def format_entry(operation: str, fields: dict[str, Any], when: datetime | None = None) -> str:
    """
    Render one audit line without the trailing newline.

    Args:
        operation: Event name, written in brackets.
        fields: Key-value pairs in output order. None values are dropped.
        when: Event time (UTC now if omitted).
    """
    stamp = (when or datetime.now(timezone.utc)).strftime(TIMESTAMP_FORMAT)
    pairs = [f"{key}={_format_value(value)}" for key, value in fields.items() if value is not None]
    return " ".join([stamp, f"[{operation}]", *pairs])


class AuditLogger:
    """Writes audit events to a file, creating parent directories on demand."""

    def __init__(self, log_path: Path) -> None:
        self.log_path = Path(log_path)

    def log(self, operation: str, **fields: Any) -> None:
        """Append one event; values containing spaces are quoted."""
        line = format_entry(operation, fields)
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.log_path, "a") as f:
            f.write(line + "\n")

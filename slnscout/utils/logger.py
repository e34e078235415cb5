"""File-based logging utility."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from slnscout.config.constants import SLNSCOUT_HOME


def write_log(level: str, message: str, data: dict[str, Any] | None = None) -> None:
    """Write log entry to file in SLNSCOUT_HOME/logs directory."""
    if not SLNSCOUT_HOME:
        # No-op when log home is not configured. stdout belongs to the protocol.
        return

    logs_dir = Path(SLNSCOUT_HOME) / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now(timezone.utc).isoformat()
    log_entry: dict[str, Any] = {
        "timestamp": timestamp,
        "level": level,
        "message": message,
    }

    if data:
        log_entry["data"] = data

    log_file = logs_dir / f"{level}.log"

    try:
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(log_entry, default=str) + "\n")
            f.flush()
    except OSError:
        return


def log_debug(message: str, data: dict[str, Any] | None = None) -> None:
    """Log a debug message."""
    write_log("debug", message, data)


def log_info(message: str, data: dict[str, Any] | None = None) -> None:
    """Log an info message."""
    write_log("info", message, data)


def log_error(message: str, data: dict[str, Any] | None = None) -> None:
    """Log an error message."""
    write_log("error", message, data)


def debug_trace(enabled: bool, message: str, data: dict[str, Any] | None = None) -> None:
    """Log a traversal trace message, only when verbose tracing is enabled."""
    if enabled:
        write_log("debug", message, data)

"""Loguru helpers for consistent console and file logging in CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

_SINK_IDS: dict[str, int] = {}


def get_log_dir() -> Path:
    return Path.home() / ".multichainrpc" / "logs"


def configure_console_logging(level: str = "WARNING") -> None:
    """Replace the default stderr sink with one at ``level``."""
    if "stderr" in _SINK_IDS:
        logger.remove(_SINK_IDS.pop("stderr"))
    else:
        logger.remove()
    _SINK_IDS["stderr"] = logger.add(sys.stderr, level=level.upper(), backtrace=False, diagnose=False)


def ensure_rotating_log_file(name: str, level: str = "INFO", log_dir: Path | None = None) -> Path:
    """Ensure a rotating log sink for the given command name."""
    log_dir = log_dir or get_log_dir()
    log_path = log_dir / f"{name}.log"
    if name in _SINK_IDS:
        return log_path
    log_dir.mkdir(parents=True, exist_ok=True)
    sink_id = logger.add(
        str(log_path),
        level=level,
        rotation="10 MB",
        retention="14 days",
        enqueue=True,
        encoding="utf-8",
        backtrace=False,
        diagnose=False,
    )
    _SINK_IDS[name] = sink_id
    return log_path

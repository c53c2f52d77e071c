"""Settings for Taskito MCP, read from environment variables.

Settings are loaded per call rather than cached at import time so the
project location follows the working directory of the process.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TASKITO"

PROJECT_DIR_NAME = "taskito"
TASKS_FILE_NAME = "tasks.json"
DEFAULT_ARCHIVE_DAYS = 30


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_level(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip().upper()
    if not raw:
        return default
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class Settings:
    root: Path
    archive_days: int = DEFAULT_ARCHIVE_DAYS
    log_level: int = logging.INFO
    log_file: Path | None = None

    @property
    def project_dir(self) -> Path:
        return self.root / PROJECT_DIR_NAME

    @property
    def tasks_file(self) -> Path:
        return self.project_dir / TASKS_FILE_NAME


def load_settings() -> Settings:
    log_file = os.getenv(_k("LOG_FILE"))
    return Settings(
        root=_env_path(_k("ROOT"), Path.cwd()),
        archive_days=max(0, _env_int(_k("ARCHIVE_DAYS"), DEFAULT_ARCHIVE_DAYS)),
        log_level=_env_level(_k("LOG_LEVEL"), logging.INFO),
        log_file=Path(log_file).expanduser() if log_file and log_file.strip() else None,
    )

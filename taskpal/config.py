"""Settings loaded from environment variables (+ optional .env in the working directory).

Real environment variables win over .env; CLI options override both.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASKPAL"

DEFAULT_FILE = Path("data") / "tasks.txt"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_level(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default


@dataclass(frozen=True)
class Settings:
    task_file: Path = DEFAULT_FILE
    db_file: Path | None = None
    log_dir: Path | None = None
    log_level: int = logging.WARNING


def _load_dotenv() -> None:
    """Load .env from the working directory (or a parent) without overriding the env."""
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(path, override=False)


def load_settings() -> Settings:
    _load_dotenv()
    return Settings(
        task_file=_env_path(_k("FILE"), DEFAULT_FILE),
        db_file=_env_path(_k("DB"), None),
        log_dir=_env_path(_k("LOG_DIR"), None),
        log_level=_env_level(_k("LOG_LEVEL"), logging.WARNING),
    )

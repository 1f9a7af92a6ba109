"""Configuration helpers and .env loading for direwolf."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional

from dotenv import load_dotenv

DEFAULT_ENV_FILES: tuple[Path, ...] = (
    Path(".env"),
    Path("config/.env"),
)

_TRUTHY = {"1", "true", "yes", "on"}


@lru_cache(maxsize=1)
def load_environment(*, extra_files: Iterable[Path] | None = None) -> dict[str, str]:
    """Load environment variables from .env files once per process."""

    candidates = list(DEFAULT_ENV_FILES)
    if extra_files:
        candidates = [*candidates, *extra_files]

    for path in candidates:
        try:
            if path.exists():
                load_dotenv(path, override=False)
        except OSError:
            continue

    return dict(os.environ)


def _flag(value: str | None) -> bool:
    return (value or "").strip().lower() in _TRUTHY


def _level(value: str | None) -> int:
    level = logging.getLevelName((value or "INFO").strip().upper())
    # Unknown names come back as the string "Level X".
    return level if isinstance(level, int) else logging.INFO


@dataclass(frozen=True)
class Settings:
    """Settings read from ``DIREWOLF_*`` environment variables."""

    strict_options: bool = False
    log_level: int = logging.INFO
    log_json: bool = False
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        log_file = env.get("DIREWOLF_LOG_FILE")
        return cls(
            strict_options=_flag(env.get("DIREWOLF_STRICT_OPTIONS")),
            log_level=_level(env.get("DIREWOLF_LOG_LEVEL")),
            log_json=_flag(env.get("DIREWOLF_LOG_JSON")),
            log_file=Path(log_file) if log_file else None,
        )


__all__ = ["DEFAULT_ENV_FILES", "Settings", "load_environment"]

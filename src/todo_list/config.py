# src/todo_list/config.py

"""Settings loaded from environment variables (+ optional .env).

The task file location is fixed (`.todo` in the working directory) and is
deliberately not part of the settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

COLOR_MODES = ("auto", "always", "never")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv() -> None:
    """Load .env from the working directory; real environment variables win."""
    load_dotenv(Path.cwd() / ".env", override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


def _color_mode() -> str:
    # NO_COLOR / FORCE_COLOR are the cross-tool conventions; they win over TODO_COLOR.
    if os.getenv("NO_COLOR") is not None:
        return "never"
    if _env_bool("FORCE_COLOR", False):
        return "always"
    mode = _env(_k("COLOR"), "auto").strip().lower()
    return mode if mode in COLOR_MODES else "auto"


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Logging ----
    log_level: str
    log_file: Optional[Path]

    # ---- Output ----
    color: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            log_file=_env_path(_k("LOG_FILE")),
            color=_color_mode(),
        )

    def use_color(self, is_tty: bool) -> bool:
        if self.color == "always":
            return True
        if self.color == "never":
            return False
        return is_tty


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_dotenv()
    return Settings.from_env()

from __future__ import annotations

import logging
import os
import pathlib
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from .drawer import DEFAULT_ATTEMPTS_FACTOR


def _bool_from_env(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _positive_int_from_env(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None or value.strip() == "":
        return default
    try:
        parsed = int(value)
    except ValueError as exc:
        raise RuntimeError(f"Environment variable {key} must be an integer, got {value!r}") from exc
    if parsed < 1:
        raise RuntimeError(f"Environment variable {key} must be positive, got {parsed}")
    return parsed


@dataclass(frozen=True)
class LottoSettings:
    log_level: str = "WARNING"
    verbose: bool = False
    attempts_factor: int = DEFAULT_ATTEMPTS_FACTOR
    presets_file: Optional[str] = None
    window_title: str = "Lotto Game"

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.verbose else self.log_level

    def copy(self, **updates) -> "LottoSettings":
        return replace(self, **updates)


def _log_level_from_env(key: str, default: str) -> str:
    value = (os.getenv(key) or "").strip().upper() or default
    if not isinstance(logging.getLevelName(value), int):
        raise RuntimeError(f"Environment variable {key} must be a logging level name, got {value!r}")
    return value


def load_from_environment() -> LottoSettings:
    return LottoSettings(
        log_level=_log_level_from_env("LOTTO_LOG_LEVEL", "WARNING"),
        verbose=_bool_from_env(os.getenv("LOTTO_VERBOSE"), False),
        attempts_factor=_positive_int_from_env("LOTTO_ATTEMPTS_FACTOR", DEFAULT_ATTEMPTS_FACTOR),
        presets_file=os.getenv("LOTTO_PRESETS_FILE") or None,
        window_title=os.getenv("LOTTO_WINDOW_TITLE", "Lotto Game"),
    )


@lru_cache(maxsize=1)
def load_settings(dotenv_path: Optional[str] = None) -> LottoSettings:
    if dotenv_path:
        load_dotenv(dotenv_path)
    else:
        default_path = pathlib.Path(".env")
        if default_path.exists():
            load_dotenv(default_path)
    return load_from_environment()

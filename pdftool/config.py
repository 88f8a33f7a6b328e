"""Environment-driven settings for :mod:`pdftool`."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .utils import ensure_path

TEMP_DIR_ENV_VARS = ("PDFTOOL_TEMP_DIR",)
STRICT_ENV_VARS = ("PDFTOOL_STRICT",)
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Runtime configuration resolved from the environment."""

    temp_dir: Optional[Path] = None
    strict: bool = False


def _first_env(names: tuple[str, ...]) -> Optional[str]:
    for env_name in names:
        value = os.getenv(env_name)
        if value is not None:
            return value
    return None


def _temp_dir() -> Optional[Path]:
    value = _first_env(TEMP_DIR_ENV_VARS)
    if value is None or not value.strip():
        return None
    return ensure_path(value.strip())


def _strict() -> bool:
    value = _first_env(STRICT_ENV_VARS)
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


def load_settings() -> Settings:
    """Read the current settings.

    The environment is consulted on every call so tests and long-running
    processes can change it without reloading the module.
    """

    return Settings(temp_dir=_temp_dir(), strict=_strict())


__all__ = ["Settings", "load_settings", "TEMP_DIR_ENV_VARS", "STRICT_ENV_VARS"]

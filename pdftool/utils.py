"""Utility helpers for the :mod:`pdftool` package."""

from __future__ import annotations

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def ensure_path(path: PathLike) -> Path:
    """Return a :class:`~pathlib.Path` instance for *path*.

    User-home references are expanded and relative paths are resolved
    against the current working directory.
    """

    return Path(path).expanduser().resolve(strict=False)


__all__ = ["PathLike", "ensure_path"]

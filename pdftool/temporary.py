"""Scoped temporary files holding private working copies of documents."""

from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path
from types import TracebackType
from typing import Optional, Type

from .config import load_settings
from .exceptions import DocumentNotFoundError
from .utils import PathLike, ensure_path

LOGGER = logging.getLogger("pdftool.temporary")

_PREFIX = "pdftool-"


class TemporaryFile:
    """A uniquely named file that is deleted when released.

    Use it as a context manager so the file is removed however the block
    exits. Releasing more than once is harmless.
    """

    def __init__(self, directory: Optional[PathLike] = None, *, suffix: str = ".pdf") -> None:
        if directory is None:
            directory = load_settings().temp_dir
        if directory is not None:
            directory = ensure_path(directory)
            directory.mkdir(parents=True, exist_ok=True)

        with tempfile.NamedTemporaryFile(
            prefix=_PREFIX, suffix=suffix, dir=directory, delete=False
        ) as tmp_file:
            self._path = Path(tmp_file.name)
        self._released = False
        LOGGER.debug("Allocated temporary file %s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Delete the file if it still exists."""

        if self._released:
            return
        self._released = True
        self._path.unlink(missing_ok=True)
        LOGGER.debug("Released temporary file %s", self._path)

    def __enter__(self) -> "TemporaryFile":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.release()

    def __repr__(self) -> str:
        state = "released" if self._released else "active"
        return f"<TemporaryFile {str(self._path)!r} {state}>"


def acquire_copy(source: PathLike, *, directory: Optional[PathLike] = None) -> TemporaryFile:
    """Copy *source* into a new :class:`TemporaryFile` and return it.

    Raises:
        DocumentNotFoundError: If *source* is not an existing file.
    """

    source_path = ensure_path(source)
    if not source_path.is_file():
        raise DocumentNotFoundError(f"'{source}' not found.")

    working_copy = TemporaryFile(directory)
    try:
        shutil.copyfile(source_path, working_copy.path)
    except BaseException:
        working_copy.release()
        raise

    LOGGER.debug("Copied %s to %s", source_path, working_copy.path)
    return working_copy


__all__ = ["TemporaryFile", "acquire_copy"]

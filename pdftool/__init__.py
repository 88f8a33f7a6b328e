"""Safe page-level editing of PDF documents through private working copies."""

from __future__ import annotations

from .angles import ACCEPTABLE_ANGLES, combine_rotation, is_acceptable_angle, reduce_angle
from .backends import PageSize, PypdfBackend
from .config import Settings, load_settings
from .document import PdfDocument, open_document
from .exceptions import (
    ArgumentError,
    DocumentNotFoundError,
    InvalidFormatError,
    OutOfRangeError,
    PdfToolError,
)
from .temporary import TemporaryFile, acquire_copy

__version__ = "1.0.0"

__all__ = [
    "PdfDocument",
    "open_document",
    "PageSize",
    "PypdfBackend",
    "ACCEPTABLE_ANGLES",
    "is_acceptable_angle",
    "combine_rotation",
    "reduce_angle",
    "TemporaryFile",
    "acquire_copy",
    "Settings",
    "load_settings",
    "PdfToolError",
    "DocumentNotFoundError",
    "InvalidFormatError",
    "ArgumentError",
    "OutOfRangeError",
    "__version__",
]

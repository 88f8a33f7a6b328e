"""Backend abstractions for pdftool."""

from .base import DocumentBackend, DocumentBuilder, DocumentModel, PageRef, PageSize
from .pypdf_backend import PypdfBackend

__all__ = [
    "DocumentBackend",
    "DocumentBuilder",
    "DocumentModel",
    "PageRef",
    "PageSize",
    "PypdfBackend",
]

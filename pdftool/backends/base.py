"""Backend protocols describing the document object model pdftool relies on."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Protocol, Sequence


@dataclass(frozen=True)
class PageSize:
    """Width and height of a page in PDF points."""

    width: float
    height: float


class PageRef(Protocol):
    """A view onto one page of an open model."""

    @property
    def rotation(self) -> Optional[int]:
        """The page's rotation entry, or ``None`` when it has none."""

    @rotation.setter
    def rotation(self, value: int) -> None: ...


class DocumentModel(Protocol):
    """A mutable, opened document."""

    def page_count(self) -> int:
        """Return the number of pages."""

    def get_page(self, page_number: int) -> PageRef:
        """Return the 1-based page *page_number*."""

    def select_pages(self, page_numbers: Sequence[int]) -> None:
        """Keep only *page_numbers*, in that order and multiplicity."""

    def get_page_size(self, page_number: int) -> PageSize:
        """Return the size of the 1-based page *page_number*."""

    def import_page(self, page_number: int) -> object:
        """Return content of a page that a :class:`DocumentBuilder` can append."""

    def serialize(self, stream: BinaryIO) -> None:
        """Write the document to *stream*."""

    def close(self) -> None:
        """Release resources held by the model."""


class DocumentBuilder(Protocol):
    """Assembles a new document out of pages imported from other models."""

    def append_imported_page(self, content: object) -> None:
        """Add a page carrying *content*."""

    def close(self) -> None:
        """Finish the document and write it to the target stream."""


class DocumentBackend(Protocol):
    """Protocol defining how documents are opened and created."""

    def open_model(self, path: Path) -> DocumentModel:
        """Open the document at *path*, raising ``InvalidFormatError`` if unreadable."""

    def new_document(self, page_size: PageSize, stream: BinaryIO) -> DocumentBuilder:
        """Start a new document whose pages all have *page_size*."""


__all__ = [
    "PageSize",
    "PageRef",
    "DocumentModel",
    "DocumentBuilder",
    "DocumentBackend",
]

"""pypdf backend implementation for pdftool."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Sequence

from pypdf import PageObject, PdfReader, PdfWriter
from pypdf.constants import PageAttributes as PG
from pypdf.generic import NameObject, NumberObject

from ..config import load_settings
from ..exceptions import InvalidFormatError
from .base import DocumentBackend, PageSize

LOGGER = logging.getLogger("pdftool.backends")


class PypdfPage:
    """Exposes the ``/Rotate`` entry of a :class:`~pypdf.PageObject`."""

    def __init__(self, page: PageObject) -> None:
        self._page = page

    @property
    def rotation(self) -> Optional[int]:
        if PG.ROTATE not in self._page:
            return None
        return int(self._page[PG.ROTATE])

    @rotation.setter
    def rotation(self, value: int) -> None:
        self._page[NameObject(PG.ROTATE)] = NumberObject(value)


class PypdfModel:
    """An opened document held in memory as a :class:`~pypdf.PdfWriter`."""

    def __init__(self, writer: PdfWriter) -> None:
        self._writer: Optional[PdfWriter] = writer

    @property
    def writer(self) -> PdfWriter:
        if self._writer is None:
            raise ValueError("Document model is closed")
        return self._writer

    def page_count(self) -> int:
        return len(self.writer.pages)

    def _page_object(self, page_number: int) -> PageObject:
        count = self.page_count()
        if page_number < 1 or page_number > count:
            raise IndexError(f"Page {page_number} does not exist (1-{count})")
        return self.writer.pages[page_number - 1]

    def get_page(self, page_number: int) -> PypdfPage:
        return PypdfPage(self._page_object(page_number))

    def select_pages(self, page_numbers: Sequence[int]) -> None:
        # Round-trip through bytes so every selected page, duplicates
        # included, is cloned from a reader into a fresh writer.
        buffer = io.BytesIO()
        self.writer.write(buffer)
        buffer.seek(0)
        reader = PdfReader(buffer)

        selected = PdfWriter()
        for page_number in page_numbers:
            LOGGER.debug("Selecting page %s", page_number)
            selected.add_page(reader.pages[page_number - 1])

        metadata = dict(reader.metadata or {})
        if metadata:
            selected.add_metadata(metadata)
        self._writer = selected

    def get_page_size(self, page_number: int) -> PageSize:
        mediabox = self._page_object(page_number).mediabox
        return PageSize(width=float(mediabox.width), height=float(mediabox.height))

    def import_page(self, page_number: int) -> PageObject:
        return self._page_object(page_number)

    def serialize(self, stream: BinaryIO) -> None:
        self.writer.write(stream)

    def close(self) -> None:
        # pypdf keeps the whole document in memory; dropping it is enough.
        self._writer = None


class PypdfDocumentBuilder:
    """Builds a document where every page has the same size."""

    def __init__(self, page_size: PageSize, stream: BinaryIO) -> None:
        self._writer = PdfWriter()
        self._page_size = page_size
        self._stream = stream

    def append_imported_page(self, content: object) -> None:
        if not isinstance(content, PageObject):
            raise TypeError(f"Cannot import {type(content).__name__} into a pypdf document")
        page = self._writer.add_blank_page(
            width=self._page_size.width, height=self._page_size.height
        )
        page.merge_page(content)

    def close(self) -> None:
        self._writer.write(self._stream)


class PypdfBackend(DocumentBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def __init__(self, *, strict: Optional[bool] = None) -> None:
        self._strict = strict

    def open_model(self, path: Path) -> PypdfModel:
        strict = load_settings().strict if self._strict is None else self._strict
        try:
            reader = PdfReader(str(path), strict=strict)
            writer = PdfWriter(clone_from=reader)
        except Exception as exc:
            LOGGER.error("Failed to read PDF %s: %s", path, exc)
            raise InvalidFormatError(f"Corrupted or invalid PDF file: {path}. Error: {exc}") from exc
        return PypdfModel(writer)

    def new_document(self, page_size: PageSize, stream: BinaryIO) -> PypdfDocumentBuilder:
        return PypdfDocumentBuilder(page_size, stream)


__all__ = ["PypdfBackend", "PypdfModel", "PypdfPage", "PypdfDocumentBuilder"]

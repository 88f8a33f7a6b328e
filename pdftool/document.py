"""Document handle operating on a private working copy of a PDF."""

from __future__ import annotations

import logging
from pathlib import Path
from types import TracebackType
from typing import Iterable, List, Optional, Sequence, Type

from .angles import ACCEPTABLE_ANGLES, combine_rotation, is_acceptable_angle
from .backends import DocumentBackend, DocumentModel, PageSize, PypdfBackend
from .exceptions import ArgumentError, OutOfRangeError
from .temporary import TemporaryFile, acquire_copy
from .utils import PathLike, ensure_path

LOGGER = logging.getLogger("pdftool.document")


class PdfDocument:
    """An open PDF whose edits never touch the file it was opened from.

    The source is copied into a temporary file and the document model is
    opened on that copy. Rotations and page selections change the
    in-memory model only; call :meth:`write` to persist them. Close the
    handle (or use it as a context manager) to delete the working copy.

    Example:
        >>> with PdfDocument("scan.pdf") as pdf:
        ...     pdf.rotate(1, 90)
        ...     pdf.select([1, 3])
        ...     pdf.write("fixed.pdf")
    """

    def __init__(self, source: PathLike, *, backend: Optional[DocumentBackend] = None) -> None:
        self.source = ensure_path(source)
        self._backend: DocumentBackend = backend or PypdfBackend()
        self._working_copy: TemporaryFile = acquire_copy(self.source)
        try:
            self._model: DocumentModel = self._backend.open_model(self._working_copy.path)
            LOGGER.info("Opened %s (%d pages)", self.source, self._model.page_count())
        except BaseException:
            self._working_copy.release()
            raise
        self._closed = False

    # ------------------------------------------------------------------
    # Page information
    # ------------------------------------------------------------------
    def count(self) -> int:
        """Return the number of pages in the document."""

        return self._model.page_count()

    def get_page_angle(self, page_number: int) -> int:
        """Return the rotation of *page_number*, ``0`` when it has none."""

        rotation = self._model.get_page(page_number).rotation
        return 0 if rotation is None else rotation

    def page_size(self, page_number: int) -> PageSize:
        self._check_page_number(page_number, "page_number")
        return self._model.get_page_size(page_number)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def rotate(self, page_number: int, rotate_angle: int) -> int:
        """Turn *page_number* by *rotate_angle* degrees.

        The angle is added to the page's current rotation and the sum is
        reduced modulo 360 keeping its sign, so ``270`` then ``180`` gives
        ``90`` while ``-270`` then ``-180`` gives ``-90``.

        Args:
            page_number: 1-based page to rotate.
            rotate_angle: One of :data:`~pdftool.angles.ACCEPTABLE_ANGLES`.

        Returns:
            The rotation stored on the page afterwards.

        Raises:
            OutOfRangeError: If the page does not exist (parameter
                ``page_number``) or the angle is not acceptable (parameter
                ``rotate_angle``).
        """

        self._check_page_number(page_number, "page_number")
        if not is_acceptable_angle(rotate_angle):
            raise OutOfRangeError(
                "Rotate angle is not acceptable. It must be ({})".format(
                    ", ".join(str(angle) for angle in ACCEPTABLE_ANGLES)
                ),
                "rotate_angle",
            )

        page = self._model.get_page(page_number)
        page.rotation = combine_rotation(page.rotation, int(rotate_angle))
        LOGGER.debug("Rotated page %s by %s to %s", page_number, rotate_angle, page.rotation)
        return self.get_page_angle(page_number)

    def select(self, page_numbers: Sequence[int]) -> None:
        """Keep only *page_numbers*, in the order given.

        Pages may be repeated. Afterwards page ``i`` is what used to be
        ``page_numbers[i - 1]``.
        """

        pages = list(page_numbers)
        if not pages:
            raise ArgumentError("Page must be selected.", "page_numbers")

        page_count = self.count()
        if any(number < 1 or number > page_count for number in pages):
            raise OutOfRangeError(
                f"Page number out of range. It must be (1-{page_count})", "page_numbers"
            )

        self._model.select_pages(pages)
        LOGGER.info("Selected pages %s of %s", pages, self.source)

    def merge(self, others: Iterable["PdfDocument"]) -> "PdfDocument":
        """Return a new document holding the pages of this one followed by *others*.

        Every page is imported onto a page the size of this document's first
        page. The operands are left untouched and stay open.
        """

        operands: List[PdfDocument] = list(others)
        if not operands:
            raise ArgumentError("Param need at least 1 PdfDocument object.", "others")

        page_size = self.page_size(1)
        with TemporaryFile() as output:
            with output.path.open("wb") as stream:
                builder = self._backend.new_document(page_size, stream)
                for document in [self, *operands]:
                    for page_number in range(1, document.count() + 1):
                        LOGGER.debug("Importing page %s from %s", page_number, document.source)
                        builder.append_imported_page(document._model.import_page(page_number))
                builder.close()

            merged = PdfDocument(output.path, backend=self._backend)

        LOGGER.info("Merged %d documents into %d pages", len(operands) + 1, merged.count())
        return merged

    # ------------------------------------------------------------------
    # Persistence and lifecycle
    # ------------------------------------------------------------------
    def write(self, destination: PathLike) -> Path:
        """Serialise the document to *destination*, replacing any existing file."""

        output_path = ensure_path(destination)
        with output_path.open("wb") as output_handle:
            self._model.serialize(output_handle)
        LOGGER.info("Wrote %s to %s", self.source, output_path)
        return output_path

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Close the model and delete the working copy."""

        if self._closed:
            return
        self._closed = True
        try:
            self._model.close()
        finally:
            self._working_copy.release()
        LOGGER.debug("Closed %s", self.source)

    def __enter__(self) -> "PdfDocument":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<PdfDocument {str(self.source)!r} {state}>"

    # ------------------------------------------------------------------
    def _check_page_number(self, page_number: int, parameter: str) -> None:
        page_count = self.count()
        if page_number < 1 or page_number > page_count:
            raise OutOfRangeError(
                f"Page number out of range. It must be (1-{page_count})", parameter
            )


def open_document(source: PathLike, *, backend: Optional[DocumentBackend] = None) -> PdfDocument:
    """Convenience wrapper around :class:`PdfDocument`."""

    return PdfDocument(source, backend=backend)


__all__ = ["PdfDocument", "open_document"]

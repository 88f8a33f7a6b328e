from __future__ import annotations

from pathlib import Path
from typing import Callable
import sys

import pytest
from pypdf import PdfWriter
from pypdf.generic import DecodedStreamObject, NameObject

PROJECT_ROOT = Path(__file__).resolve().parents[1]
RECTANGLE_OPERATORS = b"10 10 50 50 re f"

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def work_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Directory receiving every working copy created during a test."""

    path = tmp_path / "work"
    path.mkdir()
    monkeypatch.setenv("PDFTOOL_TEMP_DIR", str(path))
    monkeypatch.delenv("PDFTOOL_STRICT", raising=False)
    return path


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(
        filename: str,
        pages: int = 1,
        *,
        width: float = 72,
        height: float = 72,
        title: str | None = None,
    ) -> Path:
        path = tmp_path / filename
        writer = PdfWriter()
        for _ in range(pages):
            writer.add_blank_page(width=width, height=height)
        if title is not None:
            writer.add_metadata({"/Title": title})
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def sample_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory("sample.pdf", pages=5, width=200, height=200, title="Sample")


@pytest.fixture()
def broken_pdf(tmp_path: Path) -> Path:
    path = tmp_path / "broken.pdf"
    path.write_text("not a pdf")
    return path


@pytest.fixture()
def drawn_pdf(tmp_path: Path) -> Path:
    """Two pages that each fill a rectangle, so they carry a content stream."""

    path = tmp_path / "drawn.pdf"
    writer = PdfWriter()
    for _ in range(2):
        page = writer.add_blank_page(width=200, height=200)
        content = DecodedStreamObject()
        content.set_data(RECTANGLE_OPERATORS)
        page[NameObject("/Contents")] = writer._add_object(content)  # type: ignore[attr-defined]
    with path.open("wb") as handle:
        writer.write(handle)
    return path

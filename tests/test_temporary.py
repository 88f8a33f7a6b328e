from __future__ import annotations

from pathlib import Path

import pytest

from pdftool import DocumentNotFoundError, TemporaryFile, acquire_copy


def test_acquire_copy_duplicates_bytes(sample_pdf: Path, work_dir: Path) -> None:
    working_copy = acquire_copy(sample_pdf)
    try:
        assert working_copy.path != sample_pdf
        assert working_copy.path.parent == work_dir.resolve()
        assert working_copy.path.read_bytes() == sample_pdf.read_bytes()
    finally:
        working_copy.release()

    assert not working_copy.path.exists()
    assert sample_pdf.exists()


def test_acquire_copy_missing_source(tmp_path: Path, work_dir: Path) -> None:
    with pytest.raises(DocumentNotFoundError) as excinfo:
        acquire_copy(tmp_path / "missing.pdf")

    assert isinstance(excinfo.value, FileNotFoundError)
    assert list(work_dir.iterdir()) == []


def test_acquire_copy_rejects_directory(tmp_path: Path) -> None:
    with pytest.raises(DocumentNotFoundError):
        acquire_copy(tmp_path)


def test_failed_copy_releases_file(
    monkeypatch: pytest.MonkeyPatch, sample_pdf: Path, work_dir: Path
) -> None:
    def fake_copyfile(*_: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr("pdftool.temporary.shutil.copyfile", fake_copyfile)

    with pytest.raises(OSError, match="disk full"):
        acquire_copy(sample_pdf)

    assert list(work_dir.iterdir()) == []


def test_release_is_idempotent(work_dir: Path) -> None:
    temp = TemporaryFile()
    assert temp.path.exists()
    assert not temp.released

    temp.release()
    temp.release()

    assert temp.released
    assert not temp.path.exists()


def test_release_after_external_delete(work_dir: Path) -> None:
    temp = TemporaryFile()
    temp.path.unlink()

    temp.release()
    assert temp.released


def test_context_manager_releases_on_error(work_dir: Path) -> None:
    with pytest.raises(RuntimeError):
        with TemporaryFile() as temp:
            temp.path.write_bytes(b"data")
            raise RuntimeError("boom")

    assert not temp.path.exists()
    assert list(work_dir.iterdir()) == []


def test_names_are_unique(work_dir: Path) -> None:
    with TemporaryFile() as first, TemporaryFile() as second:
        assert first.path != second.path
        assert first.path.name.startswith("pdftool-")
        assert first.path.suffix == ".pdf"


def test_explicit_directory_is_created(tmp_path: Path) -> None:
    target = tmp_path / "nested" / "dir"
    with TemporaryFile(target) as temp:
        assert temp.path.parent == target.resolve()

from __future__ import annotations

from pathlib import Path

import pytest

from pdftool import Settings, load_settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PDFTOOL_TEMP_DIR", raising=False)
    monkeypatch.delenv("PDFTOOL_STRICT", raising=False)

    assert load_settings() == Settings(temp_dir=None, strict=False)


def test_temp_dir_from_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PDFTOOL_TEMP_DIR", f"  {tmp_path}  ")
    assert load_settings().temp_dir == tmp_path.resolve()

    monkeypatch.setenv("PDFTOOL_TEMP_DIR", "   ")
    assert load_settings().temp_dir is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [("1", True), ("TRUE", True), ("yes", True), (" on ", True), ("0", False), ("off", False), ("", False)],
)
def test_strict_flag(monkeypatch: pytest.MonkeyPatch, value: str, expected: bool) -> None:
    monkeypatch.setenv("PDFTOOL_STRICT", value)
    assert load_settings().strict is expected

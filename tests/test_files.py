from __future__ import annotations

import os
import stat
import sys
from pathlib import Path

import pytest

from toolbox.files import WRITE_SUCCESS, ReadFileParams, WriteFileParams, read_file, write_file


def test_write_then_read_round_trips(tmp_path: Path) -> None:
    target = tmp_path / "notes.txt"
    content = "line one\r\nline two\nünïcode ✓\n"

    assert write_file(WriteFileParams(path=str(target), content=content)) == WRITE_SUCCESS
    assert read_file(ReadFileParams(path=str(target))) == content


def test_write_overwrites_existing_file(tmp_path: Path) -> None:
    target = tmp_path / "data.txt"
    target.write_text("a much longer original body", encoding="utf-8")

    write_file(WriteFileParams(path=str(target), content="short"))

    assert read_file(ReadFileParams(path=str(target))) == "short"


def test_write_empty_content(tmp_path: Path) -> None:
    target = tmp_path / "empty.txt"
    assert write_file(WriteFileParams(path=str(target), content="")) == WRITE_SUCCESS
    assert read_file(ReadFileParams(path=str(target))) == ""


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
def test_new_file_mode_is_at_most_0644(tmp_path: Path) -> None:
    target = tmp_path / "mode.txt"
    old_umask = os.umask(0)
    try:
        write_file(WriteFileParams(path=str(target), content="x"))
    finally:
        os.umask(old_umask)
    assert stat.S_IMODE(target.stat().st_mode) == 0o644


def test_read_missing_file_is_error_tagged(tmp_path: Path) -> None:
    result = read_file(ReadFileParams(path=str(tmp_path / "missing.txt")))
    assert result.startswith("Error:")


def test_write_into_missing_directory_is_error_tagged(tmp_path: Path) -> None:
    result = write_file(WriteFileParams(path=str(tmp_path / "nope" / "f.txt"), content="x"))
    assert result.startswith("Error:")


def test_read_directory_is_error_tagged(tmp_path: Path) -> None:
    assert read_file(ReadFileParams(path=str(tmp_path))).startswith("Error:")

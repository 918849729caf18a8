"""File tools: ``read_file`` and ``write_file``."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

FILE_MODE = 0o644
WRITE_SUCCESS = "File written successfully"


class ReadFileParams(BaseModel):
    path: str = Field(description="The path to the file to read.")


class WriteFileParams(BaseModel):
    path: str = Field(description="The path to the file to write.")
    content: str = Field(description="The content to write to the file.")


def read_file(params: ReadFileParams) -> str:
    # newline="" keeps line endings exactly as stored.
    try:
        with open(params.path, "r", encoding="utf-8", errors="replace", newline="") as fh:
            return fh.read()
    except OSError as exc:
        return f"Error: {exc}"


def write_file(params: WriteFileParams) -> str:
    """Overwrite (or create) ``path`` with ``content``; new files get mode 0644."""
    try:
        fd = os.open(params.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, FILE_MODE)
        with open(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(params.content)
    except OSError as exc:
        return f"Error: {exc}"
    return WRITE_SUCCESS


__all__ = [
    "FILE_MODE",
    "WRITE_SUCCESS",
    "ReadFileParams",
    "WriteFileParams",
    "read_file",
    "write_file",
]

"""File access relative to an optional base directory."""

from __future__ import annotations

import os


class FileSystemError(OSError):
    """Raised when a file cannot be opened."""


class FileSystem:
    """Reads files, resolving paths against `base_path` when it is set."""

    def __init__(self, base_path: str = "") -> None:
        self.base_path = base_path

    def resolve_path(self, relative: str) -> str:
        """Join `relative` onto the base path, or return it unchanged if there is none."""
        if not self.base_path:
            return relative
        return f"{self.base_path}/{relative}"

    def read_text_file(self, path: str) -> str:
        """Return the whole content of a text file."""
        try:
            with open(self.resolve_path(path), encoding="utf-8") as handle:
                return handle.read()
        except OSError as exc:
            raise FileSystemError(f"Failed to open file: {path}") from exc

    def read_binary_file(self, path: str) -> bytes:
        """Return the whole content of a file as bytes."""
        try:
            with open(self.resolve_path(path), "rb") as handle:
                return handle.read()
        except OSError as exc:
            raise FileSystemError(f"Failed to open file: {path}") from exc

    def exists(self, path: str) -> bool:
        """Whether the path exists."""
        return os.path.exists(self.resolve_path(path))

    def list_files(self, directory: str) -> list[str]:
        """Paths of every entry directly inside `directory`."""
        with os.scandir(self.resolve_path(directory)) as entries:
            return [entry.path for entry in entries]
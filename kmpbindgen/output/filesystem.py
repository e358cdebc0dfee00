"""FileSystem — the only place generated output touches storage.

``LocalFileSystem`` writes real files.  ``MemoryFileSystem`` keeps them in
a dict so layout and writer logic can be exercised without a disk.
"""

from __future__ import annotations

import abc
import logging
from pathlib import Path

from kmpbindgen.errors import FileSystemError

logger = logging.getLogger(__name__)


class FileSystem(abc.ABC):
    """Minimal filesystem capability used by the bindings writer."""

    @abc.abstractmethod
    def create_dir_all(self, path: Path) -> None:
        """Create *path* and any missing parents.  Succeeds if it exists."""

    @abc.abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Replace the contents of *path* with *content*."""


class LocalFileSystem(FileSystem):
    """FileSystem backed by the local disk."""

    def create_dir_all(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileSystemError(path, f"Cannot create directory ({exc.strerror or exc})") from exc

    def write_text(self, path: Path, content: str) -> None:
        # Encode before opening so unencodable text never truncates the target
        try:
            data = content.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise FileSystemError(path, f"Cannot encode file content as UTF-8 ({exc.reason})") from exc
        try:
            with open(path, "wb") as f:
                f.write(data)
        except OSError as exc:
            raise FileSystemError(path, f"Cannot write file ({exc.strerror or exc})") from exc
        logger.debug("Wrote %s (%d chars)", path, len(content))


class MemoryFileSystem(FileSystem):
    """Dict-backed FileSystem.

    Mirrors the local semantics that matter to the writer: writing into a
    directory that was never created fails, and writes replace content.
    """

    def __init__(self) -> None:
        self.files: dict[Path, str] = {}
        self.directories: set[Path] = set()

    def create_dir_all(self, path: Path) -> None:
        if path in self.files:
            raise FileSystemError(path, "Cannot create directory (a file exists)")
        self.directories.add(path)
        self.directories.update(path.parents)

    def write_text(self, path: Path, content: str) -> None:
        if path.parent not in self.directories:
            raise FileSystemError(path, "Cannot write file (parent directory missing)")
        self.files[path] = content

    def read_text(self, path: Path) -> str:
        return self.files[path]

"""Filesystem capability used by include resolution."""

import os
from collections.abc import Iterator
from pathlib import Path
from typing import NamedTuple, Protocol


class DirEntry(NamedTuple):
    """One directory listing entry."""

    name: str
    is_dir: bool


class FileSystem(Protocol):
    """
    Minimal filesystem interface: read a file, list a directory.

    Implementations give no ordering guarantee for `list_dir`.
    """

    def read_file(self, path: str | Path) -> bytes: ...

    def list_dir(self, path: str | Path) -> Iterator[DirEntry]: ...


class LocalFileSystem:
    """Local disk; relative paths resolve against the process working directory."""

    def read_file(self, path: str | Path) -> bytes:
        """
        Read a file as raw bytes.

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: On any other read failure
        """
        return Path(path).read_bytes()

    def list_dir(self, path: str | Path) -> Iterator[DirEntry]:
        """
        List the entries of a directory in enumeration order (unsorted).

        Symlinks are followed when deciding whether an entry is a directory.
        """
        with os.scandir(path) as it:
            for entry in it:
                yield DirEntry(name=entry.name, is_dir=entry.is_dir())


def ensure_exists(path: Path, what: str) -> None:
    """
    Check that a path exists, raise FileNotFoundError if not.

    Args:
        path: Path to check
        what: Description of what this path represents (for error message)

    Raises:
        FileNotFoundError: If path does not exist
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing {what} at: {path}")

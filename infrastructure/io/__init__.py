"""I/O utilities: filesystem access for include resolution."""

from infrastructure.io.fs import DirEntry, FileSystem, LocalFileSystem, ensure_exists

__all__ = [
    "DirEntry",
    "FileSystem",
    "LocalFileSystem",
    "ensure_exists",
]

"""Filesystem infrastructure."""
from src.infrastructure.filesystem.file_ops import (
    dir_exists,
    dir_writable,
    ensure_dir,
    write_stream_exclusive,
)

__all__ = [
    "dir_exists",
    "dir_writable",
    "ensure_dir",
    "write_stream_exclusive",
]

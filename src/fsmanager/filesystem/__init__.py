"""Namespaced virtual filesystem used by the HTTP handlers."""

from .exceptions import (
    DuplicateNameExhausted,
    FileExists,
    FileNotFound,
    FilesystemError,
    InvalidPath,
    NamespaceNotFound,
    PermissionDenied,
)
from .local import FileInfo, FolderInfo, LocalFilesystem, normalize_path
from .manager import MountManager, join_path
from .naming import duplicate_name, split_extension

__all__ = [
    "DuplicateNameExhausted",
    "FileExists",
    "FileInfo",
    "FileNotFound",
    "FilesystemError",
    "FolderInfo",
    "InvalidPath",
    "LocalFilesystem",
    "MountManager",
    "NamespaceNotFound",
    "PermissionDenied",
    "duplicate_name",
    "join_path",
    "normalize_path",
    "split_extension",
]

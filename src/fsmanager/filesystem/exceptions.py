"""Typed errors raised by filesystem operations.

Each error carries a `kind` string, the value reported to HTTP clients in
the `error` field of an operation response.
"""


class FilesystemError(Exception):
    """Base error for a failed filesystem operation."""

    kind = "io_error"

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class FileNotFound(FilesystemError):
    kind = "not_found"


class FileExists(FilesystemError):
    kind = "already_exists"


class DuplicateNameExhausted(FileExists):
    """Raised when no free name for a duplicate was found."""


class PermissionDenied(FilesystemError):
    kind = "permission_denied"


class InvalidPath(FilesystemError):
    kind = "invalid_path"


class NamespaceNotFound(FilesystemError):
    kind = "namespace_not_found"

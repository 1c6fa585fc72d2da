"""Pydantic models for API responses."""

from pydantic import BaseModel

from ..filesystem import FilesystemError


class OperationResponse(BaseModel):
    """Outcome of a file or folder mutation."""

    success: bool
    error: str | None = None
    message: str | None = None
    path: str | None = None

    @classmethod
    def ok(cls, path: str | None = None) -> "OperationResponse":
        return cls(success=True, path=path)

    @classmethod
    def from_error(cls, error: FilesystemError) -> "OperationResponse":
        return cls(success=False, error=error.kind, message=str(error), path=error.path)


class RecordLink(BaseModel):
    """A record the editor can link to."""

    title: str
    id: int | str
    link: str

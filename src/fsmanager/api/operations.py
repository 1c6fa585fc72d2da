"""Run filesystem mutations and turn their outcome into a response."""

from typing import Callable

from fastapi.concurrency import run_in_threadpool

from ..console_utils import console
from ..filesystem import FilesystemError, InvalidPath
from .models import OperationResponse


def require_name(name: str | None, label: str = "name") -> str:
    """
    Reject entry names that are empty or reach outside their parent folder.

    A name is a single path component: no slashes, not "." or "..".
    """
    stripped = (name or "").strip()
    if not stripped:
        raise InvalidPath(f"A {label} is required")
    if "/" in stripped or "\\" in stripped or stripped in (".", ".."):
        raise InvalidPath(f"Invalid {label}: {name}", path=name)
    return name


async def perform(
    operation: str, target: str, func: Callable, *args, path: str | None = None
) -> OperationResponse:
    """
    Call `func(*args)` in the threadpool and report the outcome.

    Filesystem errors become a failed OperationResponse carrying the error
    kind; any other exception propagates.

    Args:
        operation: Short label shown on the console, e.g. "Delete file".
        target: URI the operation acts on.
        func: Blocking filesystem callable.
        path: Path to report on success. When omitted and `func` returns
            a string, that string is used.
    """
    console.print_operation(operation, target)
    try:
        result = await run_in_threadpool(func, *args)
    except FilesystemError as e:
        console.print_warning(f"{operation} failed ({e.kind}): {e}")
        return OperationResponse.from_error(e)

    if isinstance(result, str):
        return OperationResponse.ok(path=path or result)
    if not result:
        return OperationResponse(success=False, error="io_error", path=path)
    return OperationResponse.ok(path=path)

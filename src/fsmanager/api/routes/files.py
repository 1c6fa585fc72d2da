"""File API routes: autocomplete, create, delete, duplicate, rename."""

from fastapi import APIRouter, Depends, Form
from fastapi.concurrency import run_in_threadpool

from ...config import AppConfig
from ...console_utils import console
from ...filesystem import FileExists, FilesystemError, MountManager, join_path
from ..dependencies import get_config, get_manager
from ..models import OperationResponse
from ..operations import perform, require_name

router = APIRouter(prefix="/file", tags=["files"])

# New files get a single space so that every backend stores them.
PLACEHOLDER_CONTENT = " "


@router.get("/autocomplete", response_model=list[str], name="file/autocomplete")
async def files_autocomplete(
    term: str = "",
    ext: str | None = None,
    config: AppConfig = Depends(get_config),
    manager: MountManager = Depends(get_manager),
):
    """
    Return file paths matching a search term.

    Args:
        term: Case-insensitive substring of the path.
        ext: Comma separated list of allowed extensions, e.g. "jpg,png".
    """
    try:
        return await run_in_threadpool(
            manager.search,
            term,
            ext,
            namespace=config.autocomplete_namespace,
            limit=config.autocomplete_limit,
        )
    except FilesystemError as e:
        console.print_warning(f"Autocomplete failed ({e.kind}): {e}")
        return []


@router.post("/create", response_model=OperationResponse, name="file/create")
async def create_file(
    namespace: str = Form(...),
    parent_path: str = Form("", alias="parentPath"),
    filename: str = Form(...),
    manager: MountManager = Depends(get_manager),
):
    """Create an empty file."""
    path = join_path(parent_path, filename)
    uri = f"{namespace}://{path}"

    def create():
        require_name(filename, "file name")
        if manager.has(uri):
            raise FileExists(f"Already exists: {path}", path=path)
        return manager.put(uri, PLACEHOLDER_CONTENT)

    return await perform("Create file", uri, create, path=path)


@router.post("/delete", response_model=OperationResponse, name="file/delete")
async def delete_file(
    namespace: str = Form(...),
    filename: str = Form(...),
    manager: MountManager = Depends(get_manager),
):
    """Delete a file."""
    uri = f"{namespace}://{filename}"
    return await perform("Delete file", uri, manager.delete, uri)


@router.post("/duplicate", response_model=OperationResponse, name="file/duplicate")
async def duplicate_file(
    namespace: str = Form(...),
    filename: str = Form(...),
    config: AppConfig = Depends(get_config),
    manager: MountManager = Depends(get_manager),
):
    """
    Copy a file next to itself.

    The copy is named "<name>_copy.<ext>", or "<name>_copy<n>.<ext>" with the
    first free n when that name is taken. The new path is returned in `path`.
    """
    uri = f"{namespace}://{filename}"
    return await perform(
        "Duplicate file", uri, manager.duplicate, uri, config.max_duplicate_attempts
    )


@router.post("/rename", response_model=OperationResponse, name="file/rename")
async def rename_file(
    namespace: str = Form(...),
    parent: str = Form(""),
    oldname: str = Form(...),
    newname: str = Form(...),
    manager: MountManager = Depends(get_manager),
):
    """Rename a file within its folder."""
    source = f"{namespace}://{join_path(parent, oldname)}"
    destination = join_path(parent, newname)

    def rename():
        require_name(oldname, "file name")
        require_name(newname, "new name")
        return manager.rename(source, destination)

    return await perform("Rename file", source, rename, path=destination)

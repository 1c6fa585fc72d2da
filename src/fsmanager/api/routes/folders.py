"""Folder API routes: create, rename, remove."""

from fastapi import APIRouter, Depends, Form

from ...filesystem import MountManager, join_path
from ..dependencies import get_manager
from ..models import OperationResponse
from ..operations import perform, require_name

router = APIRouter(prefix="/folder", tags=["folders"])


@router.post("/create", response_model=OperationResponse, name="createfolder")
async def create_folder(
    namespace: str = Form(...),
    parent: str = Form(""),
    foldername: str = Form(...),
    manager: MountManager = Depends(get_manager),
):
    """Create a folder below `parent`."""
    path = join_path(parent, foldername)
    uri = f"{namespace}://{path}"

    def create():
        require_name(foldername, "folder name")
        return manager.create_dir(uri)

    return await perform("Create folder", uri, create, path=path)


@router.post("/rename", response_model=OperationResponse, name="renamefolder")
async def rename_folder(
    namespace: str = Form(...),
    parent: str = Form(""),
    oldname: str = Form(...),
    newname: str = Form(...),
    manager: MountManager = Depends(get_manager),
):
    """Rename a folder within its parent."""
    source = f"{namespace}://{join_path(parent, oldname)}"
    destination = join_path(parent, newname)

    def rename():
        require_name(oldname, "folder name")
        require_name(newname, "new name")
        return manager.rename(source, destination)

    return await perform("Rename folder", source, rename, path=destination)


@router.post("/remove", response_model=OperationResponse, name="removefolder")
async def remove_folder(
    namespace: str = Form(...),
    parent: str = Form(""),
    foldername: str = Form(...),
    manager: MountManager = Depends(get_manager),
):
    """Delete a folder and everything in it."""
    path = join_path(parent, foldername)
    uri = f"{namespace}://{path}"

    def remove():
        require_name(foldername, "folder name")
        return manager.delete_dir(uri)

    return await perform("Remove folder", uri, remove, path=path)

"""Browse routes: directory listing and record browser."""

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse

from ...console_utils import console
from ...filesystem import FilesystemError, MountManager, NamespaceNotFound
from ...flashes import FlashBag
from ...storage import ContentStorage
from ...translation import Translator
from ..dependencies import (
    get_flashes,
    get_manager,
    get_storage,
    get_translator,
    render_template,
)
from ..models import RecordLink

router = APIRouter(tags=["browse"])

DEFAULT_NAMESPACE = "files"


def build_path_segments(path: str) -> dict[str, str]:
    """
    Map each cumulative folder path to its last segment, in order.

    >>> build_path_segments("images/2024")
    {'images/': 'images', 'images/2024/': '2024'}
    """
    segments = {}
    cumulative = ""
    for segment in path.strip("/").split("/"):
        if not segment:
            continue
        cumulative += segment + "/"
        segments[cumulative] = segment
    return segments


@router.get("/browse", response_class=HTMLResponse)
@router.get("/browse/{namespace}", response_class=HTMLResponse)
@router.get("/browse/{namespace}/{path:path}", response_class=HTMLResponse, name="asyncbrowse")
async def browse(
    request: Request,
    namespace: str = DEFAULT_NAMESPACE,
    path: str = "",
    key: str | None = None,
    manager: MountManager = Depends(get_manager),
    translator: Translator = Depends(get_translator),
    flashes: FlashBag = Depends(get_flashes),
):
    """
    List the files and folders of a directory, for use in a file picker.

    Args:
        namespace: Namespace to browse. Defaults to "files".
        path: Folder inside the namespace. Trailing slashes are ignored.
        key: Name of the form field the picked file is inserted into.
    """
    path = path.rstrip("/")

    try:
        filesystem = manager.get_filesystem(namespace)
    except NamespaceNotFound:
        raise HTTPException(status_code=404, detail=f"Unknown namespace: {namespace}")

    try:
        await run_in_threadpool(filesystem.list_contents, path)
    except FilesystemError as e:
        console.print_warning(f"Browse {namespace}://{path} failed ({e.kind}): {e}")
        flashes.error(
            translator.trans(
                "Folder '%s' could not be found, or is not readable.", {"%s": path}
            )
        )

    files, folders = await run_in_threadpool(filesystem.browse, path)

    context = {
        "namespace": namespace,
        "path": path,
        "files": files,
        "folders": folders,
        "pathsegments": build_path_segments(path),
        "key": key,
    }
    return render_template(
        request,
        "files_async.html.j2",
        context,
        title=translator.trans("Files in %s", {"%s": path}),
    )


def collect_record_links(storage: ContentStorage) -> dict[str, list[RecordLink]]:
    """Published records of every content type, as title/id/link entries."""
    results: dict[str, list[RecordLink]] = {}
    for contenttype in storage.get_content_types():
        for record in storage.get_content(contenttype, published=True):
            results.setdefault(contenttype, []).append(
                RecordLink(title=record.get_title(), id=record.id, link=record.link())
            )
    return results


@router.get("/recordbrowser", response_class=HTMLResponse, name="recordbrowser")
async def record_browser(
    request: Request, storage: ContentStorage = Depends(get_storage)
):
    """List records so the editor can insert links to them."""
    results = await run_in_threadpool(collect_record_links, storage)
    context = {
        "results": results,
        "contenttypes": storage.contenttypes,
    }
    return render_template(request, "recordbrowser.html.j2", context)

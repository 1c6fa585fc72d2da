"""Local disk filesystem backing a single namespace."""

import os
import shutil
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .exceptions import (
    FileExists,
    FileNotFound,
    FilesystemError,
    InvalidPath,
    PermissionDenied,
)

IMAGE_EXTENSIONS = {"gif", "jpg", "jpeg", "png", "svg", "webp", "bmp", "ico"}


@dataclass
class FileInfo:
    """A file shown in a directory listing."""

    name: str
    path: str
    extension: str
    size: int
    modified: datetime
    url: str

    @property
    def is_image(self) -> bool:
        return self.extension in IMAGE_EXTENSIONS


@dataclass
class FolderInfo:
    """A folder shown in a directory listing."""

    name: str
    path: str
    writable: bool


def normalize_path(path) -> str:
    """Relative, slash separated form of a path inside a namespace."""
    if path is None:
        return ""
    return str(path).replace("\\", "/").strip("/")


@contextmanager
def _translate_errors(path: str):
    """Re-raise OS errors as typed filesystem errors."""
    try:
        yield
    except FilesystemError:
        raise
    except FileNotFoundError as e:
        raise FileNotFound(f"Not found: {path}", path=path) from e
    except FileExistsError as e:
        raise FileExists(f"Already exists: {path}", path=path) from e
    except PermissionError as e:
        raise PermissionDenied(f"Permission denied: {path}", path=path) from e
    except (NotADirectoryError, IsADirectoryError) as e:
        raise InvalidPath(f"Wrong entry type: {path}", path=path) from e
    except OSError as e:
        raise FilesystemError(f"I/O error on {path}: {e.strerror or e}", path=path) from e


class LocalFilesystem:
    """
    Filesystem rooted at a local directory.

    All paths are relative to the root; anything resolving outside of it is
    rejected with InvalidPath. Mutating methods return True on success and
    raise a FilesystemError subclass on failure.
    """

    def __init__(self, root, namespace: str = "files"):
        self.root = Path(root).resolve()
        self.namespace = namespace

    def __repr__(self) -> str:
        return f"LocalFilesystem({self.namespace!r}, {str(self.root)!r})"

    def _abs(self, path) -> Path:
        relative = normalize_path(path)
        resolved = (self.root / relative).resolve()
        if resolved != self.root and self.root not in resolved.parents:
            raise InvalidPath(f"Path outside of namespace root: {path}", path=relative)
        return resolved

    def _relative(self, absolute: Path) -> str:
        return absolute.relative_to(self.root).as_posix()

    def _url(self, relative: str) -> str:
        return f"/{self.namespace}/{relative}"

    def has(self, path) -> bool:
        try:
            return self._abs(path).exists()
        except InvalidPath:
            return False

    def list_contents(self, path="", recursive: bool = False) -> list[dict]:
        """
        List the entries of a directory.

        Returns:
            List of dicts with name, path and type ("file" or "dir").

        Raises:
            FileNotFound: The directory does not exist.
            InvalidPath: The path is not a directory.
            PermissionDenied: The directory is not readable.
        """
        relative = normalize_path(path)
        base = self._abs(relative)
        with _translate_errors(relative):
            if not base.exists():
                raise FileNotFound(f"Folder not found: {relative}", path=relative)
            if not base.is_dir():
                raise InvalidPath(f"Not a folder: {relative}", path=relative)

            if not recursive:
                children = list(base.iterdir())
            else:
                children = []
                for dirpath, dirnames, filenames in os.walk(base):
                    dirnames[:] = [d for d in dirnames if not d.startswith(".")]
                    current = Path(dirpath)
                    children.extend(current / d for d in dirnames)
                    children.extend(current / f for f in filenames)

        entries = []
        for child in children:
            entries.append(
                {
                    "name": child.name,
                    "path": self._relative(child),
                    "type": "dir" if child.is_dir() else "file",
                }
            )
        return sorted(entries, key=lambda e: e["path"].lower())

    def browse(self, path="") -> tuple[list[FileInfo], list[FolderInfo]]:
        """
        Collect the files and folders of a directory for display.

        Hidden entries are skipped. A missing or unreadable directory gives
        two empty lists.
        """
        try:
            base = self._abs(path)
            children = list(base.iterdir())
        except (OSError, InvalidPath):
            return [], []

        files: list[FileInfo] = []
        folders: list[FolderInfo] = []
        for child in children:
            if child.name.startswith("."):
                continue
            try:
                relative = self._relative(child)
                if child.is_dir():
                    folders.append(
                        FolderInfo(
                            name=child.name,
                            path=relative,
                            writable=os.access(child, os.W_OK),
                        )
                    )
                    continue
                stat = child.stat()
            except OSError:
                # Broken symlinks and entries we can't stat
                continue
            files.append(
                FileInfo(
                    name=child.name,
                    path=relative,
                    extension=child.suffix.lstrip(".").lower(),
                    size=stat.st_size,
                    modified=datetime.fromtimestamp(stat.st_mtime),
                    url=self._url(relative),
                )
            )

        files.sort(key=lambda f: f.name.lower())
        folders.sort(key=lambda f: f.name.lower())
        return files, folders

    def put(self, path, content) -> bool:
        """Write content to a file, creating parent folders as needed."""
        relative = normalize_path(path)
        target = self._abs(relative)
        if target == self.root:
            raise InvalidPath("A file name is required", path=relative)
        with _translate_errors(relative):
            if target.is_dir():
                raise InvalidPath(f"Is a folder: {relative}", path=relative)
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(content, encoding="utf-8")
        return True

    def delete(self, path) -> bool:
        relative = normalize_path(path)
        target = self._abs(relative)
        with _translate_errors(relative):
            if not target.exists():
                raise FileNotFound(f"File not found: {relative}", path=relative)
            if target.is_dir():
                raise InvalidPath(f"Is a folder: {relative}", path=relative)
            target.unlink()
        return True

    def create_dir(self, path) -> bool:
        relative = normalize_path(path)
        target = self._abs(relative)
        with _translate_errors(relative):
            if target.exists():
                raise FileExists(f"Already exists: {relative}", path=relative)
            target.mkdir(parents=True)
        return True

    def delete_dir(self, path) -> bool:
        """Delete a folder and everything below it."""
        relative = normalize_path(path)
        target = self._abs(relative)
        if target == self.root:
            raise InvalidPath("Refusing to delete the namespace root", path=relative)
        with _translate_errors(relative):
            if not target.exists():
                raise FileNotFound(f"Folder not found: {relative}", path=relative)
            if not target.is_dir():
                raise InvalidPath(f"Not a folder: {relative}", path=relative)
            shutil.rmtree(target)
        return True

    def copy(self, source, destination) -> bool:
        src_rel = normalize_path(source)
        dst_rel = normalize_path(destination)
        src = self._abs(src_rel)
        dst = self._abs(dst_rel)
        with _translate_errors(src_rel):
            if not src.is_file():
                raise FileNotFound(f"File not found: {src_rel}", path=src_rel)
            if dst.exists():
                raise FileExists(f"Already exists: {dst_rel}", path=dst_rel)
            dst.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src, dst)
        return True

    def rename(self, source, destination) -> bool:
        """Rename (or move) a file or folder within the namespace."""
        src_rel = normalize_path(source)
        dst_rel = normalize_path(destination)
        src = self._abs(src_rel)
        dst = self._abs(dst_rel)
        if src == self.root or dst == self.root:
            raise InvalidPath("Cannot rename the namespace root", path=src_rel)
        with _translate_errors(src_rel):
            if not src.exists():
                raise FileNotFound(f"Not found: {src_rel}", path=src_rel)
            if dst.exists():
                raise FileExists(f"Already exists: {dst_rel}", path=dst_rel)
            dst.parent.mkdir(parents=True, exist_ok=True)
            src.rename(dst)
        return True

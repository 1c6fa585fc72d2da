"""Mount manager routing namespace URIs to filesystems."""

import posixpath

from .exceptions import InvalidPath, NamespaceNotFound
from .local import LocalFilesystem, normalize_path
from .naming import duplicate_name

URI_SEPARATOR = "://"


def join_path(parent, name) -> str:
    """
    Join a parent folder and an entry name with exactly one slash.

    "." and ".." components are collapsed; a result that climbs above the
    namespace root keeps its leading ".." and is rejected by the filesystem.
    """
    joined = "/".join(p for p in (normalize_path(parent), normalize_path(name)) if p)
    if not joined:
        return ""
    normalized = posixpath.normpath(joined)
    return "" if normalized == "." else normalized


def _parse_extensions(extensions) -> set[str]:
    if not extensions:
        return set()
    if isinstance(extensions, str):
        extensions = extensions.split(",")
    return {e.strip().lstrip(".").lower() for e in extensions if e and e.strip()}


class MountManager:
    """
    Presents several namespaced filesystems behind "namespace://path" URIs.

    Example:
        manager = MountManager({"files": LocalFilesystem("files", "files")})
        manager.put("files://notes/todo.txt", " ")
    """

    def __init__(self, mounts: dict | None = None, default_namespace: str = "files"):
        self._mounts: dict = {}
        self.default_namespace = default_namespace
        for namespace, filesystem in (mounts or {}).items():
            self.mount(namespace, filesystem)

    @classmethod
    def from_config(cls, config) -> "MountManager":
        return cls(
            {
                name: LocalFilesystem(root, namespace=name)
                for name, root in config.namespaces.items()
            },
            default_namespace=config.autocomplete_namespace,
        )

    def mount(self, namespace: str, filesystem) -> None:
        if not namespace or URI_SEPARATOR in namespace:
            raise ValueError(f"Invalid namespace name: {namespace!r}")
        self._mounts[namespace] = filesystem

    def namespaces(self) -> list[str]:
        return sorted(self._mounts)

    def get_filesystem(self, namespace: str):
        try:
            return self._mounts[namespace]
        except KeyError:
            raise NamespaceNotFound(f"Unknown namespace: {namespace}") from None

    def parse_uri(self, uri: str) -> tuple[str, str]:
        """Split "namespace://path" into its namespace and relative path."""
        if not uri or URI_SEPARATOR not in uri:
            raise InvalidPath(f"Expected a namespace://path URI, got {uri!r}", path=uri)
        namespace, path = uri.split(URI_SEPARATOR, 1)
        return namespace, normalize_path(path)

    def _resolve(self, uri: str):
        namespace, path = self.parse_uri(uri)
        return self.get_filesystem(namespace), path

    def _destination(self, source_namespace: str, destination: str) -> str:
        if URI_SEPARATOR not in destination:
            return normalize_path(destination)
        namespace, path = self.parse_uri(destination)
        if namespace != source_namespace:
            raise InvalidPath(
                "Source and destination must share a namespace", path=destination
            )
        return path

    def has(self, uri: str) -> bool:
        filesystem, path = self._resolve(uri)
        return filesystem.has(path)

    def list_contents(self, uri: str, recursive: bool = False) -> list[dict]:
        filesystem, path = self._resolve(uri)
        return filesystem.list_contents(path, recursive=recursive)

    def put(self, uri: str, content) -> bool:
        filesystem, path = self._resolve(uri)
        return filesystem.put(path, content)

    def delete(self, uri: str) -> bool:
        filesystem, path = self._resolve(uri)
        return filesystem.delete(path)

    def create_dir(self, uri: str) -> bool:
        filesystem, path = self._resolve(uri)
        return filesystem.create_dir(path)

    def delete_dir(self, uri: str) -> bool:
        filesystem, path = self._resolve(uri)
        return filesystem.delete_dir(path)

    def copy(self, source_uri: str, destination: str) -> bool:
        namespace, path = self.parse_uri(source_uri)
        filesystem = self.get_filesystem(namespace)
        return filesystem.copy(path, self._destination(namespace, destination))

    def rename(self, source_uri: str, destination: str) -> bool:
        namespace, path = self.parse_uri(source_uri)
        filesystem = self.get_filesystem(namespace)
        return filesystem.rename(path, self._destination(namespace, destination))

    def duplicate(self, uri: str, max_attempts: int = 1000) -> str:
        """
        Copy a file next to itself under a generated "_copy" name.

        Returns:
            Path of the new file, relative to the namespace root.
        """
        namespace, path = self.parse_uri(uri)
        filesystem = self.get_filesystem(namespace)
        destination = duplicate_name(path, filesystem.has, max_attempts=max_attempts)
        filesystem.copy(path, destination)
        return destination

    def search(
        self, term: str | None, extensions=None, namespace: str | None = None, limit=None
    ) -> list[str]:
        """
        Find files whose path contains `term` (case-insensitive).

        Args:
            term: Substring to look for; empty matches every file.
            extensions: Comma separated string or list of allowed extensions.
            namespace: Namespace to search, defaults to default_namespace.
            limit: Maximum number of results.

        Returns:
            Sorted list of paths relative to the namespace root.
        """
        filesystem = self.get_filesystem(namespace or self.default_namespace)
        needle = (term or "").lower()
        allowed = _parse_extensions(extensions)

        matches = []
        for entry in filesystem.list_contents("", recursive=True):
            if entry["type"] != "file" or entry["name"].startswith("."):
                continue
            path = entry["path"]
            if needle and needle not in path.lower():
                continue
            if allowed:
                _, dot, ext = entry["name"].rpartition(".")
                if not dot or ext.lower() not in allowed:
                    continue
            matches.append(path)

        matches.sort(key=str.lower)
        if limit:
            matches = matches[: int(limit)]
        return matches

"""Name generation for duplicated files."""

import posixpath
from typing import Callable

from .exceptions import DuplicateNameExhausted

COPY_SUFFIX = "_copy"


def split_extension(filename: str) -> tuple[str, str]:
    """
    Split a path at the last dot of its final component.

    A leading dot (".env") does not start an extension.

    >>> split_extension("docs/report.pdf")
    ('docs/report', '.pdf')
    """
    directory, name = posixpath.split(filename)
    pos = name.rfind(".")
    if pos <= 0:
        stem, ext = name, ""
    else:
        stem, ext = name[:pos], name[pos:]
    return posixpath.join(directory, stem) if directory else stem, ext


def duplicate_name(
    filename: str, exists: Callable[[str], bool], max_attempts: int = 1000
) -> str:
    """
    Find a free name for a copy of `filename`.

    Tries "<stem>_copy<ext>" first, then "<stem>_copy<n><ext>" for
    n = 1..max_attempts.

    Args:
        filename: Path of the file being duplicated.
        exists: Callback telling whether a candidate path is taken.
        max_attempts: Upper bound on numbered candidates.

    Raises:
        DuplicateNameExhausted: When every candidate is taken.
    """
    stem, ext = split_extension(filename)
    base = f"{stem}{COPY_SUFFIX}"

    candidate = f"{base}{ext}"
    if not exists(candidate):
        return candidate

    for n in range(1, max_attempts + 1):
        candidate = f"{base}{n}{ext}"
        if not exists(candidate):
            return candidate

    raise DuplicateNameExhausted(
        f"No free name for a copy of {filename} after {max_attempts} attempts",
        path=filename,
    )

#
# This file is distributed under the MIT License. See LICENSE.md for details.
#

import logging
import os
import posixpath
import re
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Optional

from gitstream.errors import PathOutsideRepository, RepositoryNotFound

logger = logging.getLogger(__name__)

DEFAULT_REPOSITORY_MARKER = ".git"

_DRIVE_RE = re.compile(r"^\w:$")


def _normalize(path: str) -> str:
    """Use forward slashes and collapse `.` and `..` segments lexically."""
    path = posixpath.normpath(path.replace("\\", "/"))
    # normpath keeps a leading `//`
    if path.startswith("//"):
        path = "/" + path.lstrip("/")
    # Keep the root separator of drive paths like `C:/`
    if _DRIVE_RE.match(path):
        path += "/"
    return path


def _ancestors(path: str) -> Iterator[str]:
    current = path
    while True:
        yield current
        parent = posixpath.dirname(current)
        if parent == current:
            return
        current = parent


class Repository:
    """
    Handle to a repository root discovered on disk. Paths are treated as
    strings with forward slashes, nothing is resolved against the filesystem.
    """

    def __init__(self, root: str):
        self._root = _normalize(root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._root!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Repository):
            return NotImplemented
        return self._root == other._root

    def __hash__(self) -> int:
        return hash(self._root)

    def get_repository_path(self) -> str:
        return self._root

    def resolve_local_path(self, path: str) -> str:
        """Express the absolute `path` relative to the repository root."""
        path = _normalize(path)
        if path == self._root:
            return ""
        prefix = self._root if self._root.endswith("/") else self._root + "/"
        local_path = path[len(prefix) :] if path.startswith(prefix) else None
        if local_path is None or local_path == ".." or local_path.startswith("../"):
            raise PathOutsideRepository(path, self._root)
        return local_path


class RepositoryLocator(ABC):
    """Discovers the repository enclosing a path."""

    @abstractmethod
    def open(self, path: str) -> Repository:  # noqa: A003
        """
        Return the nearest repository at or above `path`, raise
        `RepositoryNotFound` if there is none.
        """


def find_repository_root(path: str, marker: str = DEFAULT_REPOSITORY_MARKER) -> Optional[str]:
    """
    Walk upwards from `path` (included) and return the first directory that
    contains `marker`. `path` itself does not need to exist. The walk stops at
    the filesystem root and never looks at relative candidates, so a drive
    path on POSIX finds nothing.
    """
    for candidate in _ancestors(_normalize(path)):
        if not os.path.isabs(candidate):
            continue
        if os.path.exists(os.path.join(candidate, marker)):
            return _normalize(candidate)
    return None


class FileSystemRepositoryLocator(RepositoryLocator):
    def __init__(self, marker: str = DEFAULT_REPOSITORY_MARKER):
        self.marker = marker

    def open(self, path: str) -> Repository:  # noqa: A003
        root = find_repository_root(path, self.marker)
        if root is None:
            raise RepositoryNotFound(path)
        logger.debug('Found repository "%s" for "%s"', root, path)
        return Repository(root)

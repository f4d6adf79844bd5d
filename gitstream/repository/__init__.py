#
# This file is distributed under the MIT License. See LICENSE.md for details.
#

from .repository import DEFAULT_REPOSITORY_MARKER, FileSystemRepositoryLocator, Repository
from .repository import RepositoryLocator, find_repository_root

__all__ = (
    "DEFAULT_REPOSITORY_MARKER",
    "FileSystemRepositoryLocator",
    "Repository",
    "RepositoryLocator",
    "find_repository_root",
)

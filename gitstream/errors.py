#
# This file is distributed under the MIT License. See LICENSE.md for details.
#

from typing import Optional


class GitStreamError(Exception):
    pass


class LocatorError(GitStreamError):
    def __init__(self, message: str, locator: str):
        self.locator = locator
        super().__init__(f'{message}: "{locator}"')


class MalformedLocator(LocatorError):
    """The locator cannot be tokenized as a URI."""


class InvalidLocator(LocatorError):
    """The locator was tokenized but does not address an absolute path."""


class RepositoryError(GitStreamError):
    pass


class RepositoryNotFound(RepositoryError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f'"{path}" is not inside a repository')


class PathOutsideRepository(RepositoryError):
    def __init__(self, path: str, repository_path: str):
        self.path = path
        self.repository_path = repository_path
        super().__init__(f'"{path}" is not located in repository "{repository_path}"')


class ConfigurationError(GitStreamError):
    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        context = f" at '{path}'" if path else ""
        super().__init__(f"{message}{context}")

#
# This file is distributed under the MIT License. See LICENSE.md for details.
#

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from gitstream.repository import FileSystemRepositoryLocator, RepositoryLocator

from .locator import ParsedComponents, parse_locator
from .path_information import PathInformation

if TYPE_CHECKING:
    from gitstream.config import Config

DEFAULT_PROTOCOL = "git"


class StreamWrapper:
    """
    Binds a protocol name to the collaborator used to discover repositories.
    Every call re-runs repository discovery, nothing is cached.
    """

    def __init__(
        self, protocol: str = DEFAULT_PROTOCOL, locator: Optional[RepositoryLocator] = None
    ):
        self.protocol = protocol
        self.locator = locator if locator is not None else FileSystemRepositoryLocator()

    @staticmethod
    def from_config(config: Config) -> StreamWrapper:
        return StreamWrapper(config.protocol, FileSystemRepositoryLocator(config.repository_marker))

    def handles(self, url: str) -> bool:
        prefix = f"{self.protocol}://"
        return url[: len(prefix)].lower() == prefix.lower()

    def parse(self, url: str) -> ParsedComponents:
        return parse_locator(url, self.protocol)

    def path_information(self, url: str) -> PathInformation:
        return PathInformation.from_url(url, self.protocol, self.locator)

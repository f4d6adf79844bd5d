#
# This file is distributed under the MIT License. See LICENSE.md for details.
#

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from gitstream.errors import InvalidLocator
from gitstream.repository import Repository, RepositoryLocator

from .locator import parse_locator
from .query import decode_query_string, encode_query_string

logger = logging.getLogger(__name__)

# Ref used when the locator has no fragment
DEFAULT_REF = "HEAD"

_ABSOLUTE_PATH_RE = re.compile(r"^(/|\w:/)")


@dataclass(frozen=True, slots=True)
class PathInformation:
    """
    The decomposition of a locator, resolved against the repository that
    contains the addressed file or directory.
    """

    repository: Repository
    url: str
    """Canonical locator: `<scheme>://<full_path>#<ref>?<arguments>`."""
    full_path: str
    local_path: str
    """`full_path` relative to the repository root, using forward slashes."""
    ref: str
    arguments: Mapping[str, str] = field(hash=False)

    @classmethod
    def from_url(cls, url: str, protocol: str, locator: RepositoryLocator) -> PathInformation:
        components = parse_locator(url, protocol)
        if components.scheme is None or components.scheme.lower() != protocol.lower():
            raise InvalidLocator(f'Expected a "{protocol}" locator', url)
        full_path = components.path
        if full_path is None:
            raise InvalidLocator("Locator has no path", url)
        if not _ABSOLUTE_PATH_RE.match(full_path):
            raise InvalidLocator("Locator path is not absolute", url)

        repository = locator.open(full_path)
        local_path = repository.resolve_local_path(full_path)
        ref = components.fragment if components.fragment is not None else DEFAULT_REF

        arguments: dict[str, str] = {}
        if components.query is not None:
            arguments = decode_query_string(components.query)

        # The `?` is emitted even without arguments, consumers rely on it
        canonical_url = f"{protocol}://{full_path}#{ref}?{encode_query_string(arguments)}"
        logger.debug('Resolved "%s" to "%s" in "%s"', url, local_path, repository)

        return cls(
            repository=repository,
            url=canonical_url,
            full_path=full_path,
            local_path=local_path,
            ref=ref,
            arguments=MappingProxyType(arguments),
        )

    @property
    def repository_path(self) -> str:
        return self.repository.get_repository_path()

    def has_argument(self, name: str) -> bool:
        return name in self.arguments

    def get_argument(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the argument value, `default` if it was not given."""
        return self.arguments.get(name, default)

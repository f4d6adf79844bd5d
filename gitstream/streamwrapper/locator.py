#
# This file is distributed under the MIT License. See LICENSE.md for details.
#

import logging
import re
from dataclasses import dataclass
from typing import Optional

from gitstream.errors import MalformedLocator

logger = logging.getLogger(__name__)

# Host used for locators that do not specify one, e.g. `git:///path/to/file`
GLOBAL_PATH_HOST = "__global__"

# RFC 3986, appendix B. Every group is optional so an absent component can be
# told apart from an empty one.
_URI_RE = re.compile(r"^(?:([^:/?#]+):)?(?://([^/?#]*))?([^?#]*)(?:\?([^#]*))?(?:#(.*))?$", re.S)
_DRIVE_PATH_RE = re.compile(r"^/\w:.+", re.S)
_DRIVE_HOST_RE = re.compile(r"^\w:$")
_SEPARATOR_RUN_RE = re.compile(r"/{2,}")


@dataclass(frozen=True, slots=True)
class ParsedComponents:
    """The components of a locator, `None` marks an absent component."""

    scheme: Optional[str] = None
    host: Optional[str] = None
    path: Optional[str] = None
    query: Optional[str] = None
    fragment: Optional[str] = None


def normalize_separators(raw: str) -> str:
    return raw.replace("\\", "/")


def relocate_fragment(raw: str) -> str:
    """
    Directory walkers produce locators such as `git:///repo/dir#ref/file`,
    where the fragment ended up in the middle of the path. Move the first
    fragment token (`#` followed by a run of non-separator characters) to the
    end of the string, leaving everything else in order.
    """
    start = raw.find("#", 1)
    while start != -1:
        end = start + 1
        while end < len(raw) and raw[end] != "/":
            end += 1
        if end > start + 1:
            return raw[:start] + raw[end:] + raw[start:end]
        start = raw.find("#", start + 1)
    return raw


def rewrite_global_host(raw: str, scheme: str) -> str:
    prefix = f"{scheme}:///"
    if raw[: len(prefix)].lower() == prefix.lower():
        return f"{raw[: len(scheme)]}://{GLOBAL_PATH_HOST}/{raw[len(prefix):]}"
    return raw


def split_components(raw: str) -> ParsedComponents:
    match = _URI_RE.match(raw)
    # The expression accepts any string, a scheme is what makes it a locator
    if match is None or match.group(1) is None:
        raise MalformedLocator("Missing scheme in locator", raw)
    scheme, host, path, query, fragment = match.groups()

    if host is not None:
        if ("[" in host) != ("]" in host):
            raise MalformedLocator("Unbalanced brackets in locator host", raw)
        if _DRIVE_HOST_RE.match(host):
            # `git://C:/dir` carries a drive letter, not a host
            path = host + path
            host = None

    # The locator grammar puts the ref before the query: `...#ref?a=b`
    if fragment is not None and query is None and "?" in fragment:
        fragment, query = fragment.split("?", 1)

    if path:
        path = _SEPARATOR_RUN_RE.sub("/", path)
        if _DRIVE_PATH_RE.match(path):
            path = path.lstrip("/")

    return ParsedComponents(
        scheme=scheme,
        host=host,
        path=path or None,
        query=query,
        fragment=fragment,
    )


def parse_locator(raw: str, scheme: str) -> ParsedComponents:
    """
    Parse a locator of the form
    `<scheme>://<host>/<absolute-path>[#<ref>][?<name>=<value>&...]`.

    Backslashes are turned into forward slashes, a fragment munged into the
    middle of the path is moved to the end, an empty host becomes
    `GLOBAL_PATH_HOST` and the leading slash in front of a drive letter is
    dropped.
    """
    if not raw or raw.isspace():
        raise MalformedLocator("Empty locator", raw)

    normalized = normalize_separators(raw)
    normalized = relocate_fragment(normalized)
    normalized = rewrite_global_host(normalized, scheme)
    if normalized != raw:
        logger.debug('Normalized locator "%s" to "%s"', raw, normalized)

    components = split_components(normalized)
    logger.debug("Parsed locator %s", components)
    return components

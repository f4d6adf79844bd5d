#
# This file is distributed under the MIT License. See LICENSE.md for details.
#

from collections.abc import Mapping
from urllib.parse import unquote_plus, urlencode


def decode_query_string(query: str) -> dict[str, str]:
    """
    Decode a form-encoded query string into an insertion-ordered dict.
    A pair without `=` maps to the empty string. When a name is repeated the
    last value wins, while the name keeps the position of its first
    occurrence.
    """
    arguments: dict[str, str] = {}
    for pair in query.split("&"):
        if not pair:
            continue
        name, _, value = pair.partition("=")
        name = unquote_plus(name)
        if not name:
            continue
        arguments[name] = unquote_plus(value)
    return arguments


def encode_query_string(arguments: Mapping[str, str]) -> str:
    """Form-encode `arguments` in iteration order."""
    return urlencode(list(arguments.items()))

#
# This file is distributed under the MIT License. See LICENSE.md for details.
#

from .locator import GLOBAL_PATH_HOST, ParsedComponents, parse_locator
from .path_information import DEFAULT_REF, PathInformation
from .query import decode_query_string, encode_query_string
from .wrapper import DEFAULT_PROTOCOL, StreamWrapper

__all__ = (
    "DEFAULT_PROTOCOL",
    "DEFAULT_REF",
    "GLOBAL_PATH_HOST",
    "ParsedComponents",
    "PathInformation",
    "StreamWrapper",
    "decode_query_string",
    "encode_query_string",
    "parse_locator",
)

#
# This file is distributed under the MIT License. See LICENSE.md for details.
#

from .config import Config, load_config
from .errors import ConfigurationError, GitStreamError, InvalidLocator, MalformedLocator
from .errors import PathOutsideRepository, RepositoryNotFound
from .streamwrapper import GLOBAL_PATH_HOST, PathInformation, StreamWrapper, parse_locator

__version__ = "0.1.0"

__all__ = (
    "Config",
    "ConfigurationError",
    "GLOBAL_PATH_HOST",
    "GitStreamError",
    "InvalidLocator",
    "MalformedLocator",
    "PathInformation",
    "PathOutsideRepository",
    "RepositoryNotFound",
    "StreamWrapper",
    "load_config",
    "parse_locator",
)

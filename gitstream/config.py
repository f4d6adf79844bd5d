#
# This file is distributed under the MIT License. See LICENSE.md for details.
#

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
import yaml

from .errors import ConfigurationError
from .repository import DEFAULT_REPOSITORY_MARKER
from .streamwrapper import DEFAULT_PROTOCOL

logger = logging.getLogger(__name__)

CONFIG_ENV = "GITSTREAM_CONFIG"
PROTOCOL_ENV = "GITSTREAM_PROTOCOL"


@dataclass(frozen=True, slots=True)
class Config:
    protocol: str = DEFAULT_PROTOCOL
    repository_marker: str = DEFAULT_REPOSITORY_MARKER
    log_level: str = "WARNING"


@lru_cache(maxsize=1)
def schema() -> dict[str, Any]:
    """Return the jsonschema for the configuration file."""
    with open(Path(__file__).parent / "config-schema.yml", "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


def _read_file(path: str | Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e.strerror}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse configuration file {path}: {e}") from e


def validate(values: Any) -> None:
    validator = jsonschema.Draft7Validator(schema())
    errors = sorted(validator.iter_errors(values), key=lambda e: list(e.path))
    if errors:
        error = errors[0]
        path = "/".join(str(p) for p in error.path) or None
        raise ConfigurationError(f"Invalid configuration: {error.message}", path)


def load_config(source: str | Path | dict[str, Any] | None = None) -> Config:
    """
    Load the configuration from a YAML file, a dict or, when `source` is
    None, from the file named by $GITSTREAM_CONFIG, falling back to the
    defaults. $GITSTREAM_PROTOCOL takes precedence over the configured
    protocol.
    """
    if source is None:
        source = os.environ.get(CONFIG_ENV) or None

    if source is None:
        values: Any = {}
    elif isinstance(source, dict):
        values = dict(source)
    else:
        logger.debug("Loading configuration from %s", source)
        values = _read_file(source)
        if values is None:
            values = {}

    if isinstance(values, dict) and os.environ.get(PROTOCOL_ENV):
        values = {**values, "protocol": os.environ[PROTOCOL_ENV]}

    validate(values)
    return Config(**values)

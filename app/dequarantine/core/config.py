"""Application configuration.

Configuration is stored in ~/.config/dequarantine/config.toml. A missing
file is not an error: every setting has a default. The quarantine
attribute name itself is deliberately absent from the configuration.
"""

import logging
import os
import tomllib
from enum import Enum
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dequarantine.core.paths import get_config_path

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Output format for reports."""

    TABLE = "table"
    JSON = "json"


class DequarantineConfig(BaseModel):
    """User configuration for dequarantine.

    Attributes:
        output_format: Default report format for CLI commands.
        max_resolvers: Maximum number of dropped items resolved concurrently.
        exit_nonzero_on_failure: Exit with status 1 when any failure was reported.
    """

    model_config = ConfigDict(extra="forbid")

    output_format: Annotated[
        OutputFormat,
        Field(description="Default output format"),
    ] = OutputFormat.TABLE
    max_resolvers: Annotated[
        int,
        Field(ge=1, le=64, description="Concurrent drop resolutions (1-64)"),
    ] = 4
    exit_nonzero_on_failure: Annotated[
        bool,
        Field(description="Exit with status 1 if any failure was reported"),
    ] = True


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> DequarantineConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated DequarantineConfig; defaults if the file does not exist.

    Raises:
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the file cannot be read or doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return DequarantineConfig()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return DequarantineConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content in {config_path}: {e}") from e


def save_config(config: DequarantineConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written to a temporary file in the same directory and
    then moved into place with os.replace().

    Args:
        config: The configuration to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = config.model_dump(mode="json")

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path

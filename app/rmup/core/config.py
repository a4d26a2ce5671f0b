"""User configuration for rmup.

Configuration is stored in ~/.config/rmup/config.toml and provides the
default values of command line flags, additional junk patterns, and
color overrides for the CLI theme.

Example::

    [defaults]
    force = true
    relative = false

    [junk]
    extra_patterns = ["*.bak"]

    [colors]
    success = "#00ff00"
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Any

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from rmup.core.paths import get_config_path
from rmup.errors import ConfigError, ConfigNotFoundError, ConfigParseError

logger = logging.getLogger(__name__)


class DefaultsConfig(BaseModel):
    """Default values for run options not given on the command line.

    Attributes:
        force: Ignore missing or non-directory targets.
        delete_initial: Delete targets even if they are non-empty or files.
        relative: Report paths relative to the working directory.
        verbose: Report every deleted entry.
    """

    model_config = ConfigDict(extra="forbid")

    force: bool = False
    delete_initial: bool = False
    relative: bool = True
    verbose: bool = False


class JunkConfig(BaseModel):
    """Junk file settings.

    Attributes:
        extra_patterns: Glob patterns ignored in addition to the built-in list.
    """

    model_config = ConfigDict(extra="forbid")

    extra_patterns: Annotated[
        list[str],
        Field(description="Additional junk file glob patterns"),
    ] = []


class RmupConfig(BaseModel):
    """Complete rmup configuration file.

    Attributes:
        defaults: Default run options.
        junk: Junk file settings.
        colors: Theme color overrides (validated by the theme loader).
    """

    model_config = ConfigDict(extra="forbid")

    defaults: DefaultsConfig = DefaultsConfig()
    junk: JunkConfig = JunkConfig()
    colors: dict[str, str] = {}


def load_config(path: Path | None = None) -> RmupConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated RmupConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return RmupConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> RmupConfig:
    """Load configuration, falling back to defaults if no file exists.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Loaded or default RmupConfig.

    Raises:
        ConfigError: If the file exists but is invalid.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file, using defaults")
        return RmupConfig()


def save_config(config: RmupConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written to a temporary file first and moved into place
    with os.replace().

    Args:
        config: The RmupConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data: dict[str, Any] = config.model_dump()

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

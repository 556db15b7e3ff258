"""
Configuration management for gitcal.

Loads the author identity from a YAML config file (gitcal.conf by default).
"""

import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# Load .env file from the working directory
load_dotenv()

DEFAULT_CONFIG_PATH = "gitcal.conf"
CONFIG_PATH = os.getenv("GITCAL_CONFIG", DEFAULT_CONFIG_PATH)


class ConfigError(Exception):
    """Base exception for configuration errors."""

    pass


class ConfigReadError(ConfigError):
    """Raised when the config file cannot be read."""

    pass


class ConfigParseError(ConfigError):
    """Raised when the config file is not a valid YAML mapping."""

    pass


class MissingAuthorError(ConfigError):
    """Raised when the config file does not name an author."""

    pass


class Config(BaseModel):
    """Settings read from gitcal.conf."""

    model_config = ConfigDict(frozen=True)

    author: str = Field("", description="Author identity passed to git log --author")


def load_config(path: str | os.PathLike | None = None) -> Config:
    """
    Load and validate the config file.

    Args:
        path: Path to the config file. Defaults to CONFIG_PATH.

    Returns:
        Config with a non-empty author

    Raises:
        ConfigReadError: If the file cannot be read
        ConfigParseError: If the file is not a YAML mapping with a string author
        MissingAuthorError: If no author is set
    """
    if path is None:
        path = CONFIG_PATH

    try:
        with open(path, encoding="utf-8") as f:
            content = f.read()
    except OSError as e:
        raise ConfigReadError(f"Error reading config file: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Error parsing config file: {e}") from e

    # An empty document loads as None
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigParseError(
            f"Error parsing config file: expected a mapping, got {type(data).__name__}"
        )

    # "author:" with no value loads as None; treat it like an absent key
    if data.get("author") is None:
        data = {key: value for key, value in data.items() if key != "author"}

    try:
        config = Config.model_validate(data)
    except ValidationError as e:
        raise ConfigParseError(f"Error parsing config file: {e}") from e

    if not config.author.strip():
        raise MissingAuthorError("No author specified in config file")

    return config

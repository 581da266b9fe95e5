"""Configuration file loading and saving."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import ValidationError

from peakxml.core.domain.config import PeakXMLConfig
from peakxml.core.shared.exceptions import ConfigError


def load_config(path: Path) -> PeakXMLConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        PeakXMLConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ConfigError: If the configuration is invalid.
    """
    if not path.exists():
        msg = f"Configuration file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open("rb") as f:
        data = tomllib.load(f)

    try:
        return PeakXMLConfig.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid configuration in {path}: {e}"
        raise ConfigError(msg) from e


def save_config(config: PeakXMLConfig, path: Path) -> None:
    """Save configuration to a TOML file.

    Args:
        config: Configuration object to save.
        path: Path where to save the TOML file.
    """
    data = config.model_dump(mode="json", exclude_none=True)

    with path.open("wb") as f:
        tomli_w.dump(data, f)


def generate_default_config() -> str:
    """Generate a default configuration file as a string.

    Returns:
        str: TOML-formatted default configuration.
    """
    return """# peakxml Configuration File
# Generated automatically - edit as needed

[output]
pretty_print = true     # Indent nested elements
encoding = "UTF-8"
xml_declaration = true  # Write <?xml version="1.0" ...?>

[logging]
level = "info"  # debug, info, warning, error
# file = "peakxml.log"  # Uncomment to write a session log (.json for structured logs)
"""


__all__ = ["generate_default_config", "load_config", "save_config"]

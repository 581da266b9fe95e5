"""Configuration models for peakxml."""

from pathlib import Path
from typing import Literal

from lxml import etree
from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["debug", "info", "warning", "error"]


class OutputConfig(BaseModel):
    """Configuration for writing PeakList.xml documents."""

    model_config = ConfigDict(extra="forbid")

    pretty_print: bool = Field(default=True, description="Indent nested elements.")
    encoding: str = Field(default="UTF-8", description="Character encoding of written files.")
    xml_declaration: bool = Field(
        default=True,
        description="Write an <?xml ...?> declaration at the top of the document.",
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Reject encodings lxml cannot write."""
        try:
            etree.tostring(etree.Element("x"), encoding=v, xml_declaration=True)
        except (LookupError, ValueError) as e:
            msg = f"Unknown encoding: {v}"
            raise ValueError(msg) from e
        return v


class LoggingConfig(BaseModel):
    """Configuration for the session log file."""

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = Field(default="info", description="Minimum level written to the log.")
    file: Path | None = Field(
        default=None,
        description="Log file path. A '.json' suffix selects structured output.",
    )


class PeakXMLConfig(BaseModel):
    """Top-level peakxml configuration.

    Example TOML configuration:
        [output]
        pretty_print = true
        encoding = "UTF-8"
        xml_declaration = true

        [logging]
        level = "debug"
        file = "peakxml.log"
    """

    model_config = ConfigDict(extra="forbid")

    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = ["LogLevel", "LoggingConfig", "OutputConfig", "PeakXMLConfig"]

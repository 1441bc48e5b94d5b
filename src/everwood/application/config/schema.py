"""Pydantic models for the Everwood application configuration file."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Supported schema versions for configuration files
# Version 1.0: Share link origin/path and logging
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class ShareConfig(BaseModel):
    """Where share links point."""

    model_config = ConfigDict(extra="forbid")

    origin: str = Field(
        default="", description="Scheme and host prefixed to share links, e.g. https://example.com"
    )
    path: str = Field(default="/order", description="Order page path receiving share parameters")

    @field_validator("origin")
    @classmethod
    def validate_origin(cls, v: str) -> str:
        if v and not v.startswith(("http://", "https://")):
            raise ValueError("origin must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("path must start with '/'")
        return v


class LoggingConfig(BaseModel):
    """Package logging settings."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["text", "json"] = "text"


class EverwoodConfiguration(BaseModel):
    """Root application configuration."""

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", description="Configuration schema version")
    share: ShareConfig = Field(default_factory=ShareConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(f"Unsupported schema version {v!r}; supported: {supported}")
        return v

"""Logging configuration schema."""
from pydantic import BaseModel, Field, field_validator


class LogFileConfig(BaseModel):
    """Rotating log file settings."""

    path: str = Field("logs/vro_driver.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum size of a log file before rotation")
    backup_count: int = Field(5, description="Number of rotated files to keep")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Root log level")
    destination: str = Field("stdout", description="stdout, file or both")
    file: LogFileConfig = Field(default_factory=LogFileConfig)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        valid_destinations = ["stdout", "file", "both"]
        if v not in valid_destinations:
            raise ValueError(f"Log destination must be one of {valid_destinations}")
        return v

"""Type definitions for gitspace."""

from enum import Enum

from pydantic import BaseModel, field_validator

DEFAULT_MANIFEST_NAME = "workspace.toml"
DEFAULT_LOG_LEVEL = "INFO"


class ProjectState(Enum):
    """Local presence of a project checkout."""

    UNCLONED = "uncloned"
    CLONED = "cloned"


class GitspaceSettings(BaseModel):
    """Runtime settings for the command line tool."""

    manifest: str = DEFAULT_MANIFEST_NAME
    log_level: str = DEFAULT_LOG_LEVEL

    model_config = {"extra": "forbid"}

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """Upper-case and validate the log level name."""
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level

"""Core layer for gitspace."""

from gitspace.core.config import Config
from gitspace.core.exceptions import (
    BuildError,
    GitspaceError,
    ManifestError,
    VcsCommandError,
    WorkingDirectoryError,
)
from gitspace.core.types import GitspaceSettings, ProjectState

__all__ = [
    "BuildError",
    "Config",
    "GitspaceError",
    "GitspaceSettings",
    "ManifestError",
    "ProjectState",
    "VcsCommandError",
    "WorkingDirectoryError",
]

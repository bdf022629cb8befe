"""gitspace - Multi-repository workspace manager.

This package keeps local checkouts of a set of git repositories, declared
in a ``workspace.toml`` manifest, in sync with their hosting provider.
"""

from gitspace.core.config import Config
from gitspace.core.exceptions import (
    BuildError,
    GitspaceError,
    ManifestError,
    VcsCommandError,
    WorkingDirectoryError,
)
from gitspace.core.types import GitspaceSettings, ProjectState
from gitspace.workspace.git import GitClient, VersionControlClient
from gitspace.workspace.manifest import load_workspace, save_workspace
from gitspace.workspace.project import Project
from gitspace.workspace.provider import Provider, Repository
from gitspace.workspace.workspace import Workspace

__version__ = "0.1.0"

__all__ = [
    # Core types
    "Config",
    "GitspaceSettings",
    "ProjectState",
    # Errors
    "BuildError",
    "GitspaceError",
    "ManifestError",
    "VcsCommandError",
    "WorkingDirectoryError",
    # Workspace model
    "GitClient",
    "Project",
    "Provider",
    "Repository",
    "VersionControlClient",
    "Workspace",
    # Manifest I/O
    "load_workspace",
    "save_workspace",
]


def main() -> None:
    """CLI entry point."""
    import sys

    from gitspace.cli import main as cli_main

    sys.exit(cli_main())

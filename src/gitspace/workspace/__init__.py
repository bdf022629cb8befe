"""Workspace management layer for gitspace."""

from gitspace.workspace.git import GitClient, VersionControlClient
from gitspace.workspace.manifest import load_workspace, save_workspace
from gitspace.workspace.project import Project
from gitspace.workspace.provider import Provider, Repository
from gitspace.workspace.workspace import Workspace

__all__ = [
    "GitClient",
    "Project",
    "Provider",
    "Repository",
    "VersionControlClient",
    "Workspace",
    "load_workspace",
    "save_workspace",
]

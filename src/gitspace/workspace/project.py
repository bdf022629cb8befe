"""Manifest projects and their synchronization."""

import logging
import subprocess
from pathlib import Path, PurePosixPath

from pydantic import BaseModel, Field

from gitspace.core.exceptions import BuildError
from gitspace.core.paths import checkout_dir_name, current_dir
from gitspace.core.types import ProjectState
from gitspace.workspace.git import GitClient, VersionControlClient
from gitspace.workspace.provider import Provider, Repository

logger = logging.getLogger(__name__)


def identity_path(path: str | PurePosixPath) -> PurePosixPath:
    """Get the remote path used to compare projects, without a ``.git`` suffix."""
    remote = PurePosixPath(path)
    if remote.suffix == ".git":
        return remote.with_suffix("")
    return remote


class Project(BaseModel):
    """A single manifest entry.

    Whether the project is cloned is never stored. Every operation checks
    the local checkout again, so running the same command twice is safe.
    """

    provider: Provider
    path: str
    cmd: list[str] = Field(default_factory=list)

    @property
    def key(self) -> tuple[Provider, PurePosixPath]:
        """Get the identity used to deduplicate manifest entries."""
        return self.provider, identity_path(self.path)

    def matches(self, path: str | PurePosixPath, provider: Provider) -> bool:
        """Check if this project has the given provider and remote path."""
        return self.key == (provider, identity_path(path))

    def local_path(self) -> Path:
        """Get the checkout directory below the current working directory."""
        return current_dir() / checkout_dir_name(self.path)

    def repository(self) -> Repository:
        """Get the repository for the current working directory."""
        return Repository(local_path=self.local_path(), remote_path=self.path)

    def state(self) -> ProjectState:
        """Get the local presence of the checkout."""
        if self.repository().exists_local():
            return ProjectState.CLONED
        return ProjectState.UNCLONED

    def git_pull(self, client: VersionControlClient | None = None) -> None:
        """Pull the project if it is cloned."""
        repo = self.repository()
        if repo.exists_local():
            self.provider.pull(repo, client or GitClient())
        else:
            logger.info(f"~ {self.path} is not cloned yet")

    def git_clone(self, client: VersionControlClient | None = None) -> None:
        """Clone the project unless it is already cloned."""
        repo = self.repository()
        if not repo.exists_local():
            self.provider.clone(repo, client or GitClient())
        else:
            logger.info(f"~ {self.path} is already cloned")

    def git_fetch(self, client: VersionControlClient | None = None) -> None:
        """Fetch the project if it is cloned."""
        repo = self.repository()
        if repo.exists_local():
            self.provider.fetch(repo, client or GitClient())
        else:
            logger.info(f"~ {self.path} is not cloned yet")

    def git_sync(self, client: VersionControlClient | None = None) -> None:
        """Pull the project if it is cloned, otherwise clone it."""
        if self.state() is ProjectState.CLONED:
            self.git_pull(client)
        else:
            self.git_clone(client)

    def build(self) -> int | None:
        """Run the build command inside the checkout.

        Only failing to start the command is an error. The exit code is
        logged and returned.

        Returns:
            Exit code of the build command, or None if there is none.

        Raises:
            BuildError: If the command cannot be started.
        """
        if not self.cmd:
            return None

        cwd = self.local_path()
        logger.info(f"- Build {self.path}: {' '.join(self.cmd)}")
        try:
            result = subprocess.run(
                self.cmd,
                cwd=cwd,
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise BuildError(self.cmd, cwd, str(e)) from e

        if result.stdout:
            logger.debug(result.stdout.rstrip())
        if result.returncode != 0:
            logger.warning(f"Build of {self.path} exited with code {result.returncode}")
        return result.returncode

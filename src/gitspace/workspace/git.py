"""Git command execution."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from git import Git
from git.exc import CommandError

from gitspace.core.exceptions import VcsCommandError

logger = logging.getLogger(__name__)


class VersionControlClient(ABC):
    """Abstract interface to the version control tool.

    Every operation blocks until the underlying command exits and raises
    VcsCommandError if it fails.
    """

    @abstractmethod
    def clone(self, url: str, cwd: Path | None = None) -> None:
        """Clone ``url`` into a new directory below ``cwd``.

        Args:
            url: Remote repository URL.
            cwd: Directory to run the clone in. Defaults to the process cwd.
        """
        pass

    @abstractmethod
    def pull(self, cwd: Path) -> None:
        """Pull the checkout at ``cwd``."""
        pass

    @abstractmethod
    def fetch(self, cwd: Path) -> None:
        """Fetch the checkout at ``cwd``."""
        pass

    @abstractmethod
    def get_remote_url(self, cwd: Path) -> str:
        """Get the ``origin`` remote URL of the checkout at ``cwd``."""
        pass


class GitClient(VersionControlClient):
    """Runs the git executable through GitPython."""

    def _run(
        self, operation: str, target: str, cwd: Path | None, command: str, *args: str
    ) -> str:
        """Run ``git <command> <args>`` in ``cwd`` and return its output.

        Raises:
            VcsCommandError: If git exits with an error or cannot be started.
        """
        git = Git(str(cwd) if cwd is not None else None)
        try:
            return getattr(git, command)(*args)
        except CommandError as e:
            stderr = e.stderr.strip() if isinstance(e.stderr, str) else ""
            logger.debug(f"git {command} failed in {cwd or '.'}: {e}")
            raise VcsCommandError(operation, target, stderr) from e

    def clone(self, url: str, cwd: Path | None = None) -> None:
        self._run("clone", url, cwd, "clone", url)

    def pull(self, cwd: Path) -> None:
        self._run("pull", str(cwd), cwd, "pull")

    def fetch(self, cwd: Path) -> None:
        self._run("fetch", str(cwd), cwd, "fetch")

    def get_remote_url(self, cwd: Path) -> str:
        return self._run(
            "read remote of", str(cwd), cwd, "config", "--get", "remote.origin.url"
        )

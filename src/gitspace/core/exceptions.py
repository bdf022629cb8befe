"""Exception types raised by gitspace."""

from pathlib import Path


class GitspaceError(Exception):
    """Base class for errors that abort a gitspace command."""


class VcsCommandError(GitspaceError):
    """Raised when a version control command fails."""

    def __init__(self, operation: str, target: str, stderr: str = "") -> None:
        """Initialize the error.

        Args:
            operation: Name of the failed operation (clone, pull, ...).
            target: URL or directory the operation was run against.
            stderr: Error output reported by the version control tool.
        """
        self.operation = operation
        self.target = target
        self.stderr = stderr
        message = f"Failed to {operation} {target}"
        if stderr:
            message = f"{message}: {stderr}"
        super().__init__(message)


class BuildError(GitspaceError):
    """Raised when a build command cannot be started."""

    def __init__(self, cmd: list[str], cwd: Path, reason: str) -> None:
        self.cmd = cmd
        self.cwd = cwd
        self.reason = reason
        super().__init__(f"Could not build {' '.join(cmd)!r} in {cwd}: {reason}")


class WorkingDirectoryError(GitspaceError):
    """Raised when the local path of a project cannot be determined."""


class ManifestError(GitspaceError):
    """Raised when a manifest exists but cannot be loaded or saved."""

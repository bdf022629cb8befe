"""Workspace: the set of projects declared in a manifest."""

import logging
from pathlib import Path, PurePosixPath
from urllib.parse import urlsplit

from pydantic import BaseModel, Field, field_validator

from gitspace.core.exceptions import GitspaceError, VcsCommandError
from gitspace.core.paths import current_dir
from gitspace.workspace.git import GitClient, VersionControlClient
from gitspace.workspace.project import Project
from gitspace.workspace.provider import Provider

logger = logging.getLogger(__name__)


def manifest_path_from_url(url_path: str) -> str:
    """Convert the path of a remote URL to a manifest path.

    A single leading ``/`` and a single trailing ``.git`` are removed, so
    ``/octo/widget.git`` becomes ``octo/widget``.
    """
    if url_path.startswith("/"):
        url_path = url_path[1:]
    if url_path.endswith(".git"):
        url_path = url_path[: -len(".git")]
    return url_path


class Workspace(BaseModel):
    """The manifest root.

    Projects keep their manifest order. No two projects share the same
    provider and path.

    Operations that touch git or run builds are applied to every project in
    order and stop at the first error. ``add``, ``remove`` and ``scan`` only
    report problems and never raise for them.
    """

    projects: list[Project] = Field(default_factory=list, alias="workspace")

    model_config = {"populate_by_name": True}

    @field_validator("projects")
    @classmethod
    def drop_duplicates(cls, projects: list[Project]) -> list[Project]:
        """Keep only the first project for each provider and path."""
        seen: set[tuple[Provider, PurePosixPath]] = set()
        unique: list[Project] = []
        for project in projects:
            if project.key in seen:
                logger.warning(
                    f"Ignoring duplicate project {project.path} ({project.provider})"
                )
                continue
            seen.add(project.key)
            unique.append(project)
        return unique

    def find(self, path: str | PurePosixPath, provider: Provider) -> Project | None:
        """Get the project with the given path and provider."""
        for project in self.projects:
            if project.matches(path, provider):
                return project
        return None

    def git_pull(self, client: VersionControlClient | None = None) -> None:
        """Pull all cloned projects."""
        logger.info("Pull...")
        client = client or GitClient()
        for project in self.projects:
            project.git_pull(client)

    def git_clone(self, client: VersionControlClient | None = None) -> None:
        """Clone all projects that are not cloned yet."""
        logger.info("Clone...")
        client = client or GitClient()
        for project in self.projects:
            project.git_clone(client)

    def git_fetch(self, client: VersionControlClient | None = None) -> None:
        """Fetch all cloned projects."""
        logger.info("Fetch...")
        client = client or GitClient()
        for project in self.projects:
            project.git_fetch(client)

    def git_sync(self, client: VersionControlClient | None = None) -> None:
        """Pull cloned projects and clone the others."""
        logger.info("Synchronize...")
        client = client or GitClient()
        for project in self.projects:
            project.git_sync(client)

    def build(self) -> None:
        """Run the build command of every project."""
        logger.info("Build...")
        for project in self.projects:
            project.build()

    def list_projects(self, cloned_only: bool = False) -> list[Project]:
        """Log and return the projects of the workspace.

        Args:
            cloned_only: Only include projects that are checked out locally.
        """
        listed = []
        for project in self.projects:
            if cloned_only and not project.repository().exists_local():
                continue
            logger.info(f" - {project.path}")
            listed.append(project)
        return listed

    def add(
        self,
        path: str | Path,
        cmd: str | None = None,
        client: VersionControlClient | None = None,
    ) -> Project | None:
        """Add the git checkout at ``path`` to the workspace.

        The provider and remote path are taken from the ``origin`` remote of
        the checkout. Adding a project that is already present does nothing.

        Args:
            path: Checkout directory, relative to the current directory.
            cmd: Optional build command, arguments separated by single spaces.
            client: Version control client used to read the remote URL.

        Returns:
            The added project, or None if nothing was added.
        """
        path = Path(path)
        if not (current_dir() / path / ".git").exists():
            logger.error(f"{path} is not a git repository")
            return None

        client = client or GitClient()
        try:
            # Queried with the path as given, not the resolved one.
            remote_url = client.get_remote_url(path).strip()
        except VcsCommandError:
            logger.error(f"Invalid remote for {path}")
            return None

        try:
            url = urlsplit(remote_url)
            host = url.hostname
        except ValueError:
            logger.error(f"Could not parse url {remote_url!r}")
            return None
        if not url.scheme:
            logger.error(f"Could not parse url {remote_url!r}")
            return None
        if not host:
            logger.error(f"Invalid remote-url {remote_url!r}. Could not determine host.")
            return None

        provider = Provider.from_name(host)
        if provider is None:
            logger.error(f"Could not identify provider for {host!r}")
            return None

        project_path = manifest_path_from_url(url.path)
        if not project_path:
            logger.error(f"Invalid remote-url {remote_url!r}. Could not determine path.")
            return None

        if self.find(project_path, provider) is not None:
            logger.debug(f"Path {project_path} with provider {provider} already exists")
            return None

        project = Project(
            provider=provider,
            path=project_path,
            cmd=cmd.split(" ") if cmd else [],
        )
        logger.info(f"Path {project.path} with provider {project.provider}")
        self.projects.append(project)
        return project

    def remove(self, path: str | PurePosixPath, provider: Provider) -> bool:
        """Remove the project with the given path and provider.

        Returns:
            True if a project was removed, False if there was none.
        """
        project = self.find(path, provider)
        if project is None:
            return False

        self.projects.remove(project)
        logger.info(f"Path {path} with provider {provider} was removed")
        return True

    def scan(
        self,
        path: str | Path | None = None,
        client: VersionControlClient | None = None,
    ) -> list[Project]:
        """Add every git checkout found directly inside a directory.

        Entries that are regular files are skipped. Directories that cannot
        be added are reported and skipped. Subdirectories are not searched.

        Args:
            path: Directory to scan, relative to the current directory.
                Defaults to the current directory.
            client: Version control client used to read remote URLs.

        Returns:
            Projects that were added.
        """
        root = current_dir() / path if path is not None else current_dir()
        logger.info(f"Scanning {root}...")

        try:
            entries = sorted(root.iterdir())
        except OSError as e:
            logger.error(f"Could not scan {root}: {e}")
            return []

        client = client or GitClient()
        added = []
        for entry in entries:
            if entry.is_file():
                continue
            try:
                project = self.add(entry, client=client)
            except GitspaceError as e:
                logger.error(f"Could not add {entry}: {e}")
                continue
            if project is not None:
                added.append(project)
        return added

"""Repository hosting providers."""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from gitspace.workspace.git import VersionControlClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Repository:
    """Local and remote location of a single project.

    Derived from a project on demand and never stored, so the local path
    always reflects the current working directory.
    """

    local_path: Path
    remote_path: str

    def exists_local(self) -> bool:
        """Check if the project is checked out locally."""
        return self.local_path.exists()


class Provider(str, Enum):
    """Supported hosting providers.

    The enum value is the name stored in the manifest.
    """

    GITHUB = "github"

    @classmethod
    def from_name(cls, name: str) -> "Provider | None":
        """Resolve a provider name or host name.

        Matching is case sensitive. Both the bare name (``github``) and the
        host name (``github.com``) resolve to the same provider.

        Returns:
            The provider, or None if the name is unknown.
        """
        for provider in cls:
            if name in _HOSTS[provider]:
                return provider
        return None

    @property
    def base_url(self) -> str:
        """Get the URL remote paths are relative to."""
        return _BASE_URLS[self]

    def clone_url(self, repo: Repository) -> str:
        """Get the URL to clone ``repo`` from."""
        return f"{self.base_url}/{repo.remote_path}"

    def clone(self, repo: Repository, client: VersionControlClient) -> None:
        """Clone ``repo`` into the current working directory."""
        url = self.clone_url(repo)
        logger.info(f"- Clone {url}...")
        client.clone(url)

    def pull(self, repo: Repository, client: VersionControlClient) -> None:
        """Pull the local checkout of ``repo``."""
        logger.info(f"- Pull {repo.remote_path}...")
        client.pull(repo.local_path)

    def fetch(self, repo: Repository, client: VersionControlClient) -> None:
        """Fetch the local checkout of ``repo``."""
        logger.info(f"- Fetch {repo.remote_path}...")
        client.fetch(repo.local_path)

    def __str__(self) -> str:
        return self.value


_BASE_URLS: dict[Provider, str] = {
    Provider.GITHUB: "https://github.com",
}

_HOSTS: dict[Provider, frozenset[str]] = {
    Provider.GITHUB: frozenset({"github", "github.com"}),
}

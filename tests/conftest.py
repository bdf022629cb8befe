"""Pytest fixtures and configuration."""

import gc
import shutil
import tempfile
from pathlib import Path
from typing import Callable, Generator

import pytest
from git import Repo

from gitspace.core.exceptions import VcsCommandError
from gitspace.workspace.git import VersionControlClient


class RecordingClient(VersionControlClient):
    """Version control client that records calls instead of running git.

    ``clone`` creates the checkout directory so later calls see the project
    as cloned.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []
        self.remote_urls: dict[str, str] = {}
        self.fail_on: set[str] = set()

    def _record(self, operation: str, target: str) -> None:
        self.calls.append((operation, target))
        if operation in self.fail_on:
            raise VcsCommandError(operation, target, "simulated failure")

    def clone(self, url: str, cwd: Path | None = None) -> None:
        self._record("clone", url)
        ((cwd or Path.cwd()) / Path(url).stem).mkdir()

    def pull(self, cwd: Path) -> None:
        self._record("pull", str(cwd))

    def fetch(self, cwd: Path) -> None:
        self._record("fetch", str(cwd))

    def get_remote_url(self, cwd: Path) -> str:
        self._record("remote", str(cwd))
        try:
            return self.remote_urls[Path(cwd).name]
        except KeyError:
            raise VcsCommandError("read remote of", str(cwd)) from None

    def operations(self) -> list[str]:
        return [operation for operation, _ in self.calls]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    try:
        yield Path(tmpdir).resolve()
    finally:
        # Clean up any git objects that might be holding file locks
        gc.collect()
        shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def workdir(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change the working directory to a temporary directory."""
    monkeypatch.chdir(temp_dir)
    return temp_dir


@pytest.fixture
def client() -> RecordingClient:
    """Create a recording version control client."""
    return RecordingClient()


@pytest.fixture
def make_checkout() -> Callable[..., Path]:
    """Create git checkouts with an ``origin`` remote."""

    def _make(parent: Path, name: str, remote_url: str | None = None) -> Path:
        path = parent / name
        path.mkdir(parents=True)
        repo = Repo.init(path)
        if remote_url is not None:
            repo.create_remote("origin", remote_url)
        repo.close()
        return path

    return _make

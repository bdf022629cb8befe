"""Tests for CLI module."""

import logging
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest

from gitspace.cli import create_parser, main
from gitspace.workspace.manifest import load_workspace

MANIFEST = """\
[[workspace]]
provider = "github"
path = "octo/widget"
cmd = []
"""


@pytest.fixture(autouse=True)
def isolated(
    workdir: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """Run the CLI in a temporary directory without user configuration."""
    monkeypatch.setenv("GITSPACE_CONFIG", str(workdir / "no-config.json"))
    with patch("gitspace.cli.setup_logging"):
        yield workdir


@pytest.fixture
def manifest(workdir: Path) -> Path:
    """Write a manifest with one project."""
    path = workdir / "workspace.toml"
    path.write_text(MANIFEST, encoding="utf-8")
    return path


@pytest.fixture
def git_client(client):
    """Route all git operations to the recording client."""
    with patch("gitspace.workspace.workspace.GitClient", return_value=client):
        yield client


class TestCreateParser:
    """Tests for create_parser function."""

    def test_subcommands(self) -> None:
        """Test that all subcommands parse."""
        parser = create_parser()
        for command in ["pull", "clone", "fetch", "sync", "build", "list", "scan"]:
            args = parser.parse_args([command])
            assert args.command == command

    def test_list_cloned(self) -> None:
        """Test list --cloned flag."""
        args = create_parser().parse_args(["list", "--cloned"])
        assert args.cloned is True

    def test_add_arguments(self) -> None:
        """Test add arguments."""
        args = create_parser().parse_args(["add", "--path", "widget", "--cmd", "make all"])
        assert args.path == Path("widget")
        assert args.cmd == "make all"

    def test_add_requires_path(self) -> None:
        """Test that add without --path is rejected."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["add"])

    def test_rm_arguments(self) -> None:
        """Test rm arguments."""
        args = create_parser().parse_args(
            ["rm", "--path", "octo/widget", "--provider", "github"]
        )
        assert args.path == "octo/widget"
        assert args.provider == "github"


class TestMain:
    """Tests for main function."""

    def test_no_command(self) -> None:
        """Test that help is shown without a command."""
        assert main([]) == 0

    def test_missing_manifest(
        self, workdir: Path, git_client, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that commands do nothing outside a workspace."""
        with caplog.at_level(logging.INFO):
            assert main(["sync"]) == 0

        assert "missing workspace.toml" in caplog.text
        assert git_client.calls == []
        assert not (workdir / "workspace.toml").exists()

    def test_sync(self, workdir: Path, manifest: Path, git_client) -> None:
        """Test sync clones and then pulls."""
        assert main(["sync"]) == 0
        assert git_client.calls == [("clone", "https://github.com/octo/widget")]

        git_client.calls.clear()
        assert main(["sync"]) == 0
        assert git_client.calls == [("pull", str(workdir / "widget"))]

    def test_read_only_commands_do_not_save(
        self, manifest: Path, git_client
    ) -> None:
        """Test that pull, fetch and list leave the manifest untouched."""
        manifest.write_text(MANIFEST + "\n# keep\n", encoding="utf-8")

        for command in (["pull"], ["fetch"], ["list"], ["list", "--cloned"], ["build"]):
            assert main(command) == 0

        assert manifest.read_text(encoding="utf-8").endswith("# keep\n")

    def test_clone_failure_exits_nonzero(self, manifest: Path, git_client) -> None:
        """Test that a failing git command ends with exit code 1."""
        git_client.fail_on.add("clone")
        assert main(["clone"]) == 1

    def test_invalid_manifest_exits_nonzero(self, workdir: Path) -> None:
        """Test that a broken manifest ends with exit code 1."""
        (workdir / "workspace.toml").write_text("[[workspace]\n", encoding="utf-8")
        assert main(["list"]) == 1

    def test_non_utf8_manifest_exits_nonzero(self, workdir: Path) -> None:
        """Test that a manifest that is not UTF-8 ends with exit code 1."""
        (workdir / "workspace.toml").write_bytes(b'[[workspace]]\npath = "\xff"\n')
        assert main(["list"]) == 1

    def test_add(self, workdir: Path, manifest: Path, git_client) -> None:
        """Test add stores the new project."""
        (workdir / "gadget" / ".git").mkdir(parents=True)
        git_client.remote_urls["gadget"] = "https://github.com/octo/gadget.git"

        assert main(["add", "--path", "gadget", "--cmd", "make all"]) == 0

        workspace = load_workspace(manifest)
        assert workspace is not None
        assert [p.path for p in workspace.projects] == ["octo/widget", "octo/gadget"]
        assert workspace.projects[1].cmd == ["make", "all"]

    def test_add_not_a_checkout_still_saves(
        self, workdir: Path, manifest: Path, git_client
    ) -> None:
        """Test add of a plain directory keeps the manifest valid."""
        (workdir / "plain").mkdir()

        assert main(["add", "--path", "plain"]) == 0

        workspace = load_workspace(manifest)
        assert workspace is not None
        assert [p.path for p in workspace.projects] == ["octo/widget"]

    def test_rm(self, manifest: Path) -> None:
        """Test rm removes the project."""
        assert main(["rm", "--path", "octo/widget", "--provider", "github.com"]) == 0

        workspace = load_workspace(manifest)
        assert workspace is not None
        assert workspace.projects == []

    def test_rm_invalid_provider(
        self, manifest: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test rm with an unknown provider changes nothing."""
        before = manifest.read_text(encoding="utf-8")

        assert main(["rm", "--path", "octo/widget", "--provider", "gitlab"]) == 0

        assert "Invalid provider: gitlab" in caplog.text
        assert manifest.read_text(encoding="utf-8") == before

    def test_scan(self, workdir: Path, manifest: Path, git_client) -> None:
        """Test scan adds checkouts from the given directory."""
        (workdir / "repos" / "gadget" / ".git").mkdir(parents=True)
        (workdir / "repos" / "README").write_text("", encoding="utf-8")
        git_client.remote_urls["gadget"] = "https://github.com/octo/gadget"

        assert main(["scan", "--path", "repos"]) == 0

        workspace = load_workspace(manifest)
        assert workspace is not None
        assert [p.path for p in workspace.projects] == ["octo/widget", "octo/gadget"]

    def test_custom_manifest(self, workdir: Path, git_client) -> None:
        """Test the --manifest option."""
        (workdir / "repos.toml").write_text(MANIFEST, encoding="utf-8")

        assert main(["--manifest", "repos.toml", "clone"]) == 0
        assert git_client.operations() == ["clone"]

    def test_manifest_from_config(
        self, workdir: Path, git_client, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test the manifest name from the user configuration."""
        config_path = workdir / "config.json"
        config_path.write_text('{"manifest": "repos.toml"}', encoding="utf-8")
        monkeypatch.setenv("GITSPACE_CONFIG", str(config_path))
        (workdir / "repos.toml").write_text(MANIFEST, encoding="utf-8")

        assert main(["clone"]) == 0
        assert git_client.operations() == ["clone"]

    def test_invalid_config(self, workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a broken configuration file ends with exit code 1."""
        config_path = workdir / "config.json"
        config_path.write_text('{"log_level": "chatty"}', encoding="utf-8")
        monkeypatch.setenv("GITSPACE_CONFIG", str(config_path))

        assert main(["list"]) == 1

    def test_unreadable_config(
        self, workdir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that a configuration path that cannot be read ends with exit code 1."""
        config_path = workdir / "config.json"
        config_path.mkdir()
        monkeypatch.setenv("GITSPACE_CONFIG", str(config_path))

        assert main(["list"]) == 1

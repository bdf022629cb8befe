"""Command line interface for gitspace.

This module provides commands to:
- Clone, pull, fetch or synchronize every project of a workspace
- Run the build command of every project
- Add, remove and discover projects in the workspace manifest
"""

import argparse
import logging
import sys
from pathlib import Path

from gitspace.core.config import Config
from gitspace.core.exceptions import GitspaceError
from gitspace.core.paths import get_config_path, resolve_manifest_path
from gitspace.log import setup_logging
from gitspace.workspace.manifest import load_workspace, save_workspace
from gitspace.workspace.provider import Provider
from gitspace.workspace.workspace import Workspace

logger = logging.getLogger(__name__)


def cmd_pull(args: argparse.Namespace, workspace: Workspace) -> int:
    """Pull command handler."""
    workspace.git_pull()
    return 0


def cmd_clone(args: argparse.Namespace, workspace: Workspace) -> int:
    """Clone command handler."""
    workspace.git_clone()
    return 0


def cmd_fetch(args: argparse.Namespace, workspace: Workspace) -> int:
    """Fetch command handler."""
    workspace.git_fetch()
    return 0


def cmd_sync(args: argparse.Namespace, workspace: Workspace) -> int:
    """Sync command handler."""
    workspace.git_sync()
    return 0


def cmd_list(args: argparse.Namespace, workspace: Workspace) -> int:
    """List command handler."""
    workspace.list_projects(cloned_only=args.cloned)
    return 0


def cmd_build(args: argparse.Namespace, workspace: Workspace) -> int:
    """Build command handler."""
    workspace.build()
    return 0


def cmd_add(args: argparse.Namespace, workspace: Workspace) -> int:
    """Add command handler.

    The manifest is saved even if the checkout could not be added.
    """
    workspace.add(args.path, args.cmd)
    save_workspace(workspace, args.manifest_path)
    return 0


def cmd_rm(args: argparse.Namespace, workspace: Workspace) -> int:
    """Remove command handler."""
    provider = Provider.from_name(args.provider)
    if provider is None:
        logger.error(f"Invalid provider: {args.provider}")
        return 0

    workspace.remove(args.path, provider)
    save_workspace(workspace, args.manifest_path)
    return 0


def cmd_scan(args: argparse.Namespace, workspace: Workspace) -> int:
    """Scan command handler."""
    workspace.scan(args.path)
    save_workspace(workspace, args.manifest_path)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        prog="gitspace",
        description="Manage a workspace of git repositories",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )
    parser.add_argument(
        "--manifest",
        "-m",
        help="Manifest file (default: workspace.toml in the current directory)",
    )
    parser.add_argument(
        "--log-level",
        help="Log level (DEBUG, INFO, WARNING, ERROR)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    pull_parser = subparsers.add_parser("pull", help="Pull all cloned repositories")
    pull_parser.set_defaults(func=cmd_pull)

    clone_parser = subparsers.add_parser(
        "clone", help="Clone all repositories that are not cloned yet"
    )
    clone_parser.set_defaults(func=cmd_clone)

    fetch_parser = subparsers.add_parser("fetch", help="Fetch all cloned repositories")
    fetch_parser.set_defaults(func=cmd_fetch)

    sync_parser = subparsers.add_parser(
        "sync",
        help="Pull all cloned repositories, clone all repositories not cloned yet",
    )
    sync_parser.set_defaults(func=cmd_sync)

    list_parser = subparsers.add_parser("list", help="List all workspace repositories")
    list_parser.add_argument(
        "--cloned",
        action="store_true",
        help="List only cloned repositories",
    )
    list_parser.set_defaults(func=cmd_list)

    build_parser = subparsers.add_parser("build", help="Build all cloned repositories")
    build_parser.set_defaults(func=cmd_build)

    add_parser = subparsers.add_parser("add", help="Add a new repository")
    add_parser.add_argument(
        "--path",
        required=True,
        type=Path,
        help="Path of the local checkout",
    )
    add_parser.add_argument(
        "--cmd",
        help="Optional build command for the repository",
    )
    add_parser.set_defaults(func=cmd_add)

    rm_parser = subparsers.add_parser("rm", help="Remove an existing repository")
    rm_parser.add_argument(
        "--path",
        required=True,
        help="Remote path of the repository (owner/repo)",
    )
    rm_parser.add_argument(
        "--provider",
        required=True,
        help="Provider of the repository",
    )
    rm_parser.set_defaults(func=cmd_rm)

    scan_parser = subparsers.add_parser(
        "scan", help="Scan for repositories and add them to the workspace"
    )
    scan_parser.add_argument(
        "--path",
        type=Path,
        help="Directory to scan (default: current directory)",
    )
    scan_parser.set_defaults(func=cmd_scan)

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point.

    Returns:
        Exit code.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        config = Config.from_file(get_config_path())
        settings = config.to_settings(manifest=args.manifest, log_level=args.log_level)
    except (OSError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    setup_logging(settings.log_level)

    try:
        args.manifest_path = resolve_manifest_path(settings.manifest)
        workspace = load_workspace(args.manifest_path)
        if workspace is None:
            logger.info(
                f"That is not a valid workspace; missing {settings.manifest}"
            )
            return 0
        return args.func(args, workspace)
    except GitspaceError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())

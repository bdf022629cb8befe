"""Application data directory and path utilities."""

import os
import platform
from pathlib import Path

from gitspace.core.exceptions import WorkingDirectoryError

CONFIG_ENV_VAR = "GITSPACE_CONFIG"
DEFAULT_CONFIG_FILENAME = "config.json"


def get_app_data_dir() -> Path:
    """Get the application data directory based on OS.

    Returns:
        Path to the application data directory.
        - Linux/macOS: ~/.gitspace
        - Windows: %APPDATA%/gitspace
    """
    system = platform.system()

    if system == "Windows":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata) / "gitspace"
        else:
            return Path.home() / "AppData" / "Roaming" / "gitspace"
    else:
        return Path.home() / ".gitspace"


def get_config_path() -> Path:
    """Get the user configuration file path.

    The ``GITSPACE_CONFIG`` environment variable takes precedence over the
    application data directory.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return get_app_data_dir() / DEFAULT_CONFIG_FILENAME


def current_dir() -> Path:
    """Get the process working directory.

    Raises:
        WorkingDirectoryError: If the working directory no longer exists.
    """
    try:
        return Path.cwd()
    except OSError as e:
        raise WorkingDirectoryError(f"Could not get current path: {e}") from e


def checkout_dir_name(remote_path: str) -> str:
    """Get the directory name git uses when cloning ``remote_path``.

    This is the last path segment without its extension, so both
    ``octo/widget`` and ``octo/widget.git`` map to ``widget``.

    Raises:
        WorkingDirectoryError: If the path has no final segment.
    """
    stem = Path(remote_path).stem
    if not stem:
        raise WorkingDirectoryError(f"Could not get folder for {remote_path!r}")
    return stem


def resolve_manifest_path(manifest: str | Path, base_dir: Path | None = None) -> Path:
    """Resolve a manifest file name against ``base_dir`` (default: cwd)."""
    manifest = Path(manifest)
    if manifest.is_absolute():
        return manifest
    return (base_dir or current_dir()) / manifest

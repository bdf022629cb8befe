"""Loading and saving the workspace manifest."""

import logging
import tomllib
from pathlib import Path

import tomli_w
from pydantic import ValidationError

from gitspace.core.exceptions import ManifestError
from gitspace.workspace.workspace import Workspace

logger = logging.getLogger(__name__)


def load_workspace(path: Path) -> Workspace | None:
    """Load a workspace from a TOML manifest.

    Args:
        path: Manifest file path.

    Returns:
        The workspace, or None if the manifest does not exist.

    Raises:
        ManifestError: If the manifest is not valid TOML or has invalid entries.
    """
    if not path.is_file():
        return None

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ManifestError(f"Could not load {path}: {e}") from e
    except OSError as e:
        raise ManifestError(f"Could not read {path}: {e}") from e

    try:
        workspace = Workspace.model_validate(data)
    except ValidationError as e:
        raise ManifestError(f"Invalid manifest {path}: {e}") from e

    logger.debug(f"Loaded {len(workspace.projects)} project(s) from {path}")
    return workspace


def dump_workspace(workspace: Workspace) -> str:
    """Serialize a workspace to TOML text."""
    data = workspace.model_dump(mode="json", by_alias=True)
    return tomli_w.dumps(data)


def save_workspace(workspace: Workspace, path: Path) -> None:
    """Write a workspace to a TOML manifest.

    Raises:
        ManifestError: If the manifest cannot be written.
    """
    content = dump_workspace(workspace)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ManifestError(f"Unable to write {path}: {e}") from e
    logger.debug(f"Saved {len(workspace.projects)} project(s) to {path}")

import asyncio
import logging
from pathlib import Path

from applypatch.patching.hunks import ReadFile

logger = logging.getLogger(__name__)


class PathEscapeError(Exception):
    def __init__(self, candidate: Path, workspace_root: Path):
        super().__init__(f"Candidate {str(candidate)} is not relative to workspace: {str(workspace_root)}")


class SymlinkError(Exception):
    def __init__(self, path: Path):
        super().__init__(f"Path contains symlink: {str(path)}")


def resolve_safe_path(
    workspace_root: Path,
    relative_path: str,
    allow_symlinks: bool = False
) -> Path:
    """
    Resolve a patch path inside a workspace root.

    Args:
        workspace_root: Directory patch paths are relative to
        relative_path: Path as written in the hunk
        allow_symlinks: If False, reject paths that pass through a symlink

    Returns:
        Resolved absolute Path guaranteed to be within workspace_root

    Raises:
        PathEscapeError: If the resolved path would escape the workspace
        SymlinkError: If symlinks are not allowed and the path contains one
    """
    workspace_root = Path(workspace_root).resolve()
    candidate = (workspace_root / relative_path.lstrip("/")).resolve()

    if not candidate.is_relative_to(workspace_root):
        logger.warning("Path escape attempt: %s is not relative to %s", candidate, workspace_root)
        raise PathEscapeError(candidate, workspace_root)

    if not allow_symlinks:
        path_so_far = workspace_root
        for part in Path(relative_path.lstrip("/")).parts:
            path_so_far = path_so_far / part
            if path_so_far.is_symlink():
                logger.warning("Symlink blocked: %s", path_so_far)
                raise SymlinkError(path_so_far)

    logger.debug("Resolved safe path: %s -> %s", relative_path, candidate)
    return candidate


def workspace_reader(
    workspace_root: Path,
    encoding: str = "utf-8",
    allow_symlinks: bool = False,
) -> ReadFile:
    """Build a ``read_file`` callback that reads hunk paths from a workspace."""

    async def read_file(path: str) -> str:
        resolved = resolve_safe_path(workspace_root, path, allow_symlinks=allow_symlinks)
        return await asyncio.to_thread(resolved.read_text, encoding=encoding)

    return read_file

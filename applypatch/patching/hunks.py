import logging
from collections.abc import Awaitable, Callable, Sequence

from applypatch.config import PatchSettings
from applypatch.patching.content import apply_chunks_to_content
from applypatch.patching.models import (
    AddChange,
    AddFile,
    DeleteChange,
    DeleteFile,
    FileChange,
    Hunk,
    UpdateChange,
    UpdateFile,
)

logger = logging.getLogger(__name__)

ReadFile = Callable[[str], Awaitable[str]]


async def process_hunk(
    hunk: Hunk,
    read_file: ReadFile,
    *,
    settings: PatchSettings | None = None,
) -> FileChange:
    """
    Compute the file change described by a single hunk.

    Errors raised by ``read_file`` propagate unchanged.
    """
    if settings is None:
        settings = PatchSettings.from_env()

    match hunk:
        case AddFile():
            logger.debug("Add %s", hunk.path)
            return AddChange(path=hunk.path, new_content=hunk.contents)

        case DeleteFile():
            original_content = await read_file(hunk.path)
            logger.debug("Delete %s", hunk.path)
            return DeleteChange(path=hunk.path, original_content=original_content)

        case UpdateFile():
            original_content = await read_file(hunk.path)
            new_content = apply_chunks_to_content(
                original_content,
                hunk.path,
                hunk.chunks,
                lenient=settings.lenient_match,
                snippet_chars=settings.error_snippet_chars,
            )
            if hunk.move_path:
                logger.debug("Update %s -> %s (%d chunk(s))", hunk.path, hunk.move_path, len(hunk.chunks))
            else:
                logger.debug("Update %s (%d chunk(s))", hunk.path, len(hunk.chunks))
            return UpdateChange(
                path=hunk.path,
                move_path=hunk.move_path,
                original_content=original_content,
                new_content=new_content,
            )

    raise TypeError(f"Unsupported hunk type: {type(hunk).__name__}")


async def process_all_hunks(
    hunks: Sequence[Hunk],
    read_file: ReadFile,
    *,
    settings: PatchSettings | None = None,
) -> list[FileChange]:
    """
    Process hunks one at a time, in order.

    Each hunk's read completes before the next hunk starts. Nothing is written
    between hunks, so two hunks for the same path both see whatever
    ``read_file`` returns at that moment. The first failure stops the batch.
    """
    if settings is None:
        settings = PatchSettings.from_env()

    changes: list[FileChange] = []
    for hunk in hunks:
        changes.append(await process_hunk(hunk, read_file, settings=settings))

    logger.info("Processed %d hunk(s)", len(changes))
    return changes

import logging
from collections.abc import Sequence

from applypatch.config import DEFAULT_ERROR_SNIPPET_CHARS
from applypatch.errors import ContextNotFoundError, PatternNotFoundError
from applypatch.patching.models import Chunk, Replacement
from applypatch.patching.seek import seek_sequence

logger = logging.getLogger(__name__)


def _insertion_index(lines: Sequence[str]) -> int:
    if lines and lines[-1] == "":
        return len(lines) - 1
    return len(lines)


def compute_replacements(
    original_lines: Sequence[str],
    path: str,
    chunks: Sequence[Chunk],
    *,
    lenient: bool = False,
    snippet_chars: int = DEFAULT_ERROR_SNIPPET_CHARS,
) -> list[Replacement]:
    """
    Locate every chunk of an update and describe the splices it needs.

    Chunks are searched in order with a cursor that only moves forward. Pure
    insertions (no old lines) are placed at end of file and leave the cursor
    where it is.

    Raises:
        ContextNotFoundError: A chunk's context line is missing after the cursor
        PatternNotFoundError: A chunk's old lines are missing after the cursor
    """
    replacements: list[Replacement] = []
    line_index = 0

    for chunk_number, chunk in enumerate(chunks, start=1):
        if chunk.change_context is not None:
            idx = seek_sequence(
                original_lines,
                [chunk.change_context],
                line_index,
                False,
                lenient=lenient,
            )
            if idx is None:
                logger.warning(
                    "Context %r not found in %s after line %d",
                    chunk.change_context,
                    path,
                    line_index,
                )
                raise ContextNotFoundError(path, chunk.change_context)
            line_index = idx + 1

        if not chunk.old_lines:
            insert_at = _insertion_index(original_lines)
            logger.debug("Chunk %d of %s: insert %d line(s) at %d", chunk_number, path, len(chunk.new_lines), insert_at)
            replacements.append(Replacement(insert_at, 0, list(chunk.new_lines)))
            continue

        pattern = list(chunk.old_lines)
        new_slice = list(chunk.new_lines)
        found = seek_sequence(original_lines, pattern, line_index, chunk.is_end_of_file, lenient=lenient)

        # Old lines ending in "" stand for a trailing newline the file may not have.
        if found is None and pattern[-1] == "":
            pattern = pattern[:-1]
            if new_slice and new_slice[-1] == "":
                new_slice = new_slice[:-1]
            found = seek_sequence(original_lines, pattern, line_index, chunk.is_end_of_file, lenient=lenient)

        if found is None:
            logger.warning("Expected lines of chunk %d not found in %s after line %d", chunk_number, path, line_index)
            raise PatternNotFoundError(path, list(chunk.old_lines), max_chars=snippet_chars)

        logger.debug(
            "Chunk %d of %s: replace %d line(s) at %d with %d line(s)",
            chunk_number,
            path,
            len(pattern),
            found,
            len(new_slice),
        )
        replacements.append(Replacement(found, len(pattern), new_slice))
        line_index = found + len(pattern)

    replacements.sort(key=lambda r: r.start_index)
    return replacements


def apply_replacements(lines: Sequence[str], replacements: Sequence[Replacement]) -> list[str]:
    """
    Splice replacements into a copy of ``lines``.

    Replacements must be sorted by start index and must not overlap. They are
    applied from last to first so that each splice only shifts lines that have
    already been handled.
    """
    result = list(lines)
    for replacement in reversed(replacements):
        result[replacement.start_index:replacement.end_index] = replacement.new_lines
    return result

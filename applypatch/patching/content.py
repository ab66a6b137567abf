import logging
from collections.abc import Sequence

from applypatch.config import DEFAULT_ERROR_SNIPPET_CHARS
from applypatch.patching.models import Chunk
from applypatch.patching.replacements import apply_replacements, compute_replacements

logger = logging.getLogger(__name__)


def split_content(content: str) -> list[str]:
    """Split file content into lines without a phantom line for the final newline."""
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines = lines[:-1]
    return lines


def join_lines(lines: Sequence[str]) -> str:
    """Join lines back into content ending with exactly one newline.

    Trailing blank lines fold into that newline, so an empty result is "\\n".
    """
    lines = list(lines)
    while lines and lines[-1] == "":
        lines.pop()
    return "\n".join(lines) + "\n"


def apply_chunks_to_content(
    original_content: str,
    path: str,
    chunks: Sequence[Chunk],
    *,
    lenient: bool = False,
    snippet_chars: int = DEFAULT_ERROR_SNIPPET_CHARS,
) -> str:
    original_lines = split_content(original_content)
    replacements = compute_replacements(
        original_lines,
        path,
        chunks,
        lenient=lenient,
        snippet_chars=snippet_chars,
    )
    new_lines = apply_replacements(original_lines, replacements)
    logger.debug(
        "Applied %d replacement(s) to %s: %d -> %d line(s)",
        len(replacements),
        path,
        len(original_lines),
        len(new_lines),
    )
    return join_lines(new_lines)

import logging
from collections.abc import Callable, Sequence

logger = logging.getLogger(__name__)


def _exact(line: str) -> str:
    return line


def _rstrip(line: str) -> str:
    return line.rstrip()


def _strip(line: str) -> str:
    return line.strip()


def _scan(
    lines: Sequence[str],
    pattern: Sequence[str],
    start: int,
    eof: bool,
    normalize: Callable[[str], str],
) -> int | None:
    last_start = len(lines) - len(pattern)
    if eof:
        candidates = range(last_start, last_start + 1) if last_start >= start else range(0)
    else:
        candidates = range(start, last_start + 1)

    wanted = [normalize(p) for p in pattern]
    for idx in candidates:
        if all(normalize(lines[idx + k]) == wanted[k] for k in range(len(wanted))):
            return idx
    return None


def seek_sequence(
    lines: Sequence[str],
    pattern: Sequence[str],
    start: int,
    eof: bool,
    *,
    lenient: bool = False,
) -> int | None:
    """
    Find ``pattern`` as a contiguous run inside ``lines``.

    Args:
        lines: Sequence to search
        pattern: Lines that must appear consecutively
        start: First index a match may begin at
        eof: If True, the match must end exactly at ``len(lines)``
        lenient: Retry with trailing, then surrounding, whitespace ignored
            when the exact comparison finds nothing

    Returns:
        The smallest qualifying start index, or None
    """
    if start < 0:
        start = 0
    if start > len(lines):
        return None
    if not pattern:
        return len(lines) if eof else start
    if len(pattern) > len(lines) - start:
        return None

    found = _scan(lines, pattern, start, eof, _exact)
    if found is not None or not lenient:
        return found

    for normalize in (_rstrip, _strip):
        found = _scan(lines, pattern, start, eof, normalize)
        if found is not None:
            logger.debug(
                "Matched %d line(s) at %d using %s comparison",
                len(pattern),
                found,
                normalize.__name__.lstrip("_"),
            )
            return found
    return None

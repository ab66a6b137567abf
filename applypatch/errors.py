from enum import StrEnum


class ApplyPatchErrorType(StrEnum):
    CONTEXT_NOT_FOUND = "context_not_found"
    PATTERN_NOT_FOUND = "pattern_not_found"


class ApplyPatchError(Exception):
    def __init__(
        self,
        error_type: ApplyPatchErrorType,
        message: str,
        path: str,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.error_type = error_type
        self.path = path
        self.details = details or {}


class ContextNotFoundError(ApplyPatchError):
    """A chunk's context anchor is missing at or after the search cursor."""

    def __init__(
        self,
        path: str,
        context: str,
    ):
        super().__init__(
            ApplyPatchErrorType.CONTEXT_NOT_FOUND,
            f"Failed to find context '{context}' in {path}",
            path,
            details={
                "context": context,
            },
        )
        self.context = context


class PatternNotFoundError(ApplyPatchError):
    """A chunk's old lines could not be located in the file."""

    def __init__(
        self,
        path: str,
        old_lines: list[str],
        max_chars: int = 200,
    ):
        block = "\n".join(old_lines)
        snippet = block[:max_chars]
        if len(block) > max_chars:
            snippet += "..."
        super().__init__(
            ApplyPatchErrorType.PATTERN_NOT_FOUND,
            f"Failed to find expected lines in {path}:\n{snippet}",
            path,
            details={
                "old_lines": list(old_lines),
            },
        )
        self.old_lines = list(old_lines)

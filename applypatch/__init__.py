from applypatch.config import PatchSettings
from applypatch.errors import (
    ApplyPatchError,
    ApplyPatchErrorType,
    ContextNotFoundError,
    PatternNotFoundError,
)
from applypatch.patching import (
    AddChange,
    AddFile,
    Chunk,
    DeleteChange,
    DeleteFile,
    FileChange,
    Hunk,
    UpdateChange,
    UpdateFile,
    apply_chunks_to_content,
    process_all_hunks,
    process_hunk,
)
from applypatch.workspace import workspace_reader

__all__ = [
    "PatchSettings",
    "ApplyPatchError",
    "ApplyPatchErrorType",
    "ContextNotFoundError",
    "PatternNotFoundError",
    "Chunk",
    "AddFile",
    "DeleteFile",
    "UpdateFile",
    "Hunk",
    "AddChange",
    "DeleteChange",
    "UpdateChange",
    "FileChange",
    "apply_chunks_to_content",
    "process_hunk",
    "process_all_hunks",
    "workspace_reader",
]

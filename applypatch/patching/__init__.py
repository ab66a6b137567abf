from applypatch.patching.content import apply_chunks_to_content
from applypatch.patching.hunks import ReadFile, process_all_hunks, process_hunk
from applypatch.patching.models import (
    FILE_CHANGE_ADAPTER,
    HUNK_ADAPTER,
    HUNK_LIST_ADAPTER,
    AddChange,
    AddFile,
    Chunk,
    DeleteChange,
    DeleteFile,
    FileChange,
    Hunk,
    Replacement,
    UpdateChange,
    UpdateFile,
)
from applypatch.patching.replacements import apply_replacements, compute_replacements
from applypatch.patching.seek import seek_sequence

__all__ = [
    "Chunk",
    "AddFile",
    "DeleteFile",
    "UpdateFile",
    "Hunk",
    "HUNK_ADAPTER",
    "HUNK_LIST_ADAPTER",
    "AddChange",
    "DeleteChange",
    "UpdateChange",
    "FileChange",
    "FILE_CHANGE_ADAPTER",
    "Replacement",
    "ReadFile",
    "seek_sequence",
    "compute_replacements",
    "apply_replacements",
    "apply_chunks_to_content",
    "process_hunk",
    "process_all_hunks",
]

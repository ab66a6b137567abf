from dataclasses import dataclass, field
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Chunk(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    change_context: str | None = None
    old_lines: list[str] = Field(default_factory=list)
    new_lines: list[str] = Field(default_factory=list)
    is_end_of_file: bool = False


class AddFile(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    type: Literal["add_file"] = "add_file"
    path: str
    contents: str


class DeleteFile(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    type: Literal["delete_file"] = "delete_file"
    path: str


class UpdateFile(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    type: Literal["update_file"] = "update_file"
    path: str
    move_path: str | None = None
    chunks: list[Chunk] = Field(default_factory=list)


Hunk = Annotated[AddFile | DeleteFile | UpdateFile, Field(discriminator="type")]

HUNK_ADAPTER: TypeAdapter[Hunk] = TypeAdapter(Hunk)
HUNK_LIST_ADAPTER: TypeAdapter[list[Hunk]] = TypeAdapter(list[Hunk])


class AddChange(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    type: Literal["add"] = "add"
    path: str
    new_content: str

    @property
    def target_path(self) -> str:
        return self.path


class DeleteChange(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    type: Literal["delete"] = "delete"
    path: str
    original_content: str

    @property
    def target_path(self) -> str:
        return self.path


class UpdateChange(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    type: Literal["update"] = "update"
    path: str
    move_path: str | None = None
    original_content: str
    new_content: str

    @property
    def target_path(self) -> str:
        """Path the new content belongs at once any rename is applied."""
        return self.move_path or self.path

    @property
    def is_noop(self) -> bool:
        return self.move_path is None and self.new_content == self.original_content


FileChange = Annotated[AddChange | DeleteChange | UpdateChange, Field(discriminator="type")]

FILE_CHANGE_ADAPTER: TypeAdapter[FileChange] = TypeAdapter(FileChange)


@dataclass(frozen=True)
class Replacement:
    start_index: int
    old_length: int
    new_lines: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.start_index < 0:
            raise ValueError(f"start_index must be >= 0, got {self.start_index}")
        if self.old_length < 0:
            raise ValueError(f"old_length must be >= 0, got {self.old_length}")

    @property
    def end_index(self) -> int:
        return self.start_index + self.old_length

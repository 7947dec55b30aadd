"""Pydantic schemas for runtime validation of generation inputs."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pkg_exports.core.generator import BuildEntry


class BuildEntryModel(BaseModel):
    """Validated build entry read from an external entry list."""

    model_config = ConfigDict(extra="forbid")

    path: str = Field(min_length=1)
    chunk: bool = False

    @field_validator("path")
    @classmethod
    def _validate_path(cls, value: str) -> str:
        normalized = value.replace("\\", "/")
        if normalized.startswith("/"):
            raise ValueError("path must be relative to the output directory.")
        return normalized.removeprefix("./")

    def to_entry(self) -> BuildEntry:
        """Convert to the core dataclass."""
        return BuildEntry(path=self.path, chunk=self.chunk)


class ExportsGenerationConfig(BaseModel):
    """Validated options for exports generation."""

    model_config = ConfigDict(extra="forbid")

    out_dir: str
    mode: bool | list[str] = False

    @field_validator("out_dir")
    @classmethod
    def _normalize_out_dir(cls, value: str) -> str:
        normalized = value.strip().replace("\\", "/").removeprefix("./").rstrip("/")
        if not normalized or normalized == ".":
            raise ValueError("out_dir cannot be empty.")
        if normalized.startswith("/"):
            raise ValueError("out_dir must be relative to the package root.")
        if ".." in normalized.split("/"):
            raise ValueError("out_dir cannot leave the package root.")
        return normalized

    @field_validator("mode")
    @classmethod
    def _validate_folders(cls, value: bool | list[str]) -> bool | list[str]:
        if isinstance(value, bool):
            return value
        folders = [item.strip() for item in value]
        if any(not item for item in folders):
            raise ValueError("folder names cannot be empty.")
        if any("/" in item for item in folders):
            raise ValueError("folder names must be single top-level path segments.")
        return folders

"""Snapshot models describing one build pass.

All timestamps are milliseconds since the epoch. Instances are frozen: the
reporting layer receives them once per pass and never mutates them.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator


class SourceFile(BaseModel):
    """An input file tracked by the build.

    Attributes
    ----------
    path
        Path of the source file.
    compilation_time
        When the file was last (re)compiled, or None if it never was.
    """

    path: str
    compilation_time: float | None = None

    model_config = {"frozen": True, "extra": "forbid"}


class GeneratedFile(BaseModel):
    """An output bundle and the ordered sources that feed it.

    Attributes
    ----------
    path
        Path of the generated file.
    source_files
        Sources concatenated or compiled into this file.
    """

    path: str
    source_files: tuple[SourceFile, ...] = ()

    model_config = {"frozen": True, "extra": "forbid"}


class CopiedAsset(BaseModel):
    """A static asset copied verbatim to the output."""

    path: str

    model_config = {"frozen": True, "extra": "forbid"}


class DisposedFiles(BaseModel):
    """Files removed during a pass.

    Attributes
    ----------
    generated
        Paths of generated files that were disposed (and so must be rewritten).
    source_paths
        Paths of source files removed from the build.
    """

    generated: frozenset[str] = Field(default_factory=frozenset)
    source_paths: tuple[str, ...] = ()

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("generated", mode="before")
    @classmethod
    def _generated_paths(cls, value: Any) -> Any:
        if isinstance(value, (str, bytes)):
            raise ValueError("generated must be a collection of paths")
        try:
            items = list(value)
        except TypeError:
            return value
        return frozenset(_generated_path(item) for item in items)


def _generated_path(item: Any) -> str:
    if isinstance(item, GeneratedFile):
        return item.path
    if isinstance(item, Mapping):
        item = item.get("path")
    if not isinstance(item, str):
        raise ValueError(f"generated entries must be paths or have a 'path', got {item!r}")
    return item


class BuildPass(BaseModel):
    """Everything the reporter needs to summarize one completed pass.

    Attributes
    ----------
    start_time
        Moment the pass started (milliseconds since epoch).
    copied_assets
        Assets copied during the pass.
    generated_files
        All generated files known to the build.
    disposed_files
        Generated and source files removed during the pass.
    """

    start_time: float
    copied_assets: tuple[CopiedAsset, ...] = ()
    generated_files: tuple[GeneratedFile, ...] = ()
    disposed_files: DisposedFiles = Field(default_factory=DisposedFiles)

    model_config = {"frozen": True, "extra": "forbid"}

"""Shared test fixtures for buildlog tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from buildlog.core.types import GeneratedFile, SourceFile

START = 1_700_000_000_000.0

BundleFactory = Callable[..., GeneratedFile]


@pytest.fixture
def start_time() -> float:
    """Start of the build pass under test."""
    return START


@pytest.fixture
def make_bundle(start_time: float) -> BundleFactory:
    """Build a GeneratedFile from lists of changed and cached source paths."""

    def factory(path: str, changed: list[str] | None = None, cached: list[str] | None = None) -> GeneratedFile:
        sources = [SourceFile(path=p, compilation_time=start_time + 5) for p in changed or []]
        sources += [SourceFile(path=p, compilation_time=start_time - 5000) for p in cached or []]
        return GeneratedFile(path=path, source_files=tuple(sources))

    return factory

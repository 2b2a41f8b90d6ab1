"""Unit tests for build pass snapshot models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from buildlog.core.types import BuildPass, CopiedAsset, DisposedFiles, GeneratedFile, SourceFile

pytestmark = pytest.mark.unit


class TestDisposedFiles:
    """Tests for DisposedFiles validation."""

    def test_defaults_are_empty(self) -> None:
        disposed = DisposedFiles()
        assert disposed.generated == frozenset()
        assert disposed.source_paths == ()

    def test_generated_files_coerced_to_paths(self) -> None:
        """Test that GeneratedFile instances are stored by path."""
        bundle = GeneratedFile(path="public/app.js")
        disposed = DisposedFiles(generated=[bundle, "public/vendor.js"])
        assert disposed.generated == frozenset({"public/app.js", "public/vendor.js"})

    def test_generated_mappings_coerced_to_paths(self) -> None:
        disposed = DisposedFiles(generated=[{"path": "public/app.js"}])
        assert disposed.generated == frozenset({"public/app.js"})

    def test_unhashable_generated_entry_rejected(self) -> None:
        """Test that entries that are not paths fail validation."""
        with pytest.raises(ValidationError):
            DisposedFiles(generated=[["public/app.js"]])

    def test_bare_string_rejected(self) -> None:
        """Test that a single string is not split into characters."""
        with pytest.raises(ValidationError):
            DisposedFiles(generated="app.js")

    def test_frozen(self) -> None:
        disposed = DisposedFiles()
        with pytest.raises(ValidationError):
            disposed.source_paths = ("a.js",)


class TestBuildPass:
    """Tests for BuildPass validation."""

    def test_from_plain_data(self) -> None:
        """Test building a snapshot from deserialized data."""
        build_pass = BuildPass.model_validate(
            {
                "start_time": 1000,
                "copied_assets": [{"path": "img.png"}],
                "generated_files": [
                    {"path": "app.js", "source_files": [{"path": "a.js", "compilation_time": 1500}]},
                ],
                "disposed_files": {"generated": ["app.js"], "source_paths": ["old.js"]},
            }
        )
        assert build_pass.copied_assets == (CopiedAsset(path="img.png"),)
        assert build_pass.generated_files[0].source_files == (SourceFile(path="a.js", compilation_time=1500),)
        assert build_pass.disposed_files.generated == frozenset({"app.js"})

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            BuildPass.model_validate({"start_time": 0, "watched": []})

    def test_start_time_required(self) -> None:
        with pytest.raises(ValidationError):
            BuildPass.model_validate({})

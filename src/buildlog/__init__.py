"""buildlog - concise status lines for incremental build passes."""

from buildlog.core.types import BuildPass, CopiedAsset, DisposedFiles, GeneratedFile, SourceFile
from buildlog.report.summary import generate_summary

__version__ = "0.1.0"

__all__ = [
    "BuildPass",
    "CopiedAsset",
    "DisposedFiles",
    "GeneratedFile",
    "SourceFile",
    "generate_summary",
]

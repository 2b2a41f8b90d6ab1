"""One-line summaries of a completed build pass.

Examples of produced lines::

    compiled 4 files and 145 cached into app.js in 1.2 sec
    compiled app.js and 10 cached files into app.js, copied 2 in 340 ms
    copied img.png in 12 ms
    copied 6 files in 20 ms
    compiled _partial.styl and 22 cached files into 2 files in 80 ms
    compiled init.ls into init.js in 9 ms
    compiled 5 files into ie7.css in 15 ms
    compiled 4 files and 1 cached into ie7.css in 31 ms
    removed old.coffee and wrote 12 cached files into app.js in 7 ms
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from pathlib import PurePosixPath

from buildlog.core.types import CopiedAsset, DisposedFiles, GeneratedFile

logger = logging.getLogger(__name__)

ONE_SECOND_MS = 1000
TENTH = Decimal("0.1")


@dataclass(frozen=True)
class CompilationNames:
    """Names collected from the generated files of a pass.

    Attributes
    ----------
    compiled
        Unique basenames of sources recompiled this pass, in first-seen order.
    generated
        Basenames of generated files touched this pass.
    cached_count
        Sources of touched generated files that were served from cache.
    """

    compiled: list[str]
    generated: list[str]
    cached_count: int


def basename(path: str) -> str:
    """Return the final segment of a `/` or `\\` separated path."""
    return PurePosixPath(path.replace("\\", "/")).name


def collect_names(
    start_time: float,
    generated_files: Iterable[GeneratedFile],
    disposed_generated: Iterable[str] = (),
) -> CompilationNames:
    """Classify generated files and their sources as changed or cached.

    Parameters
    ----------
    start_time
        Moment the pass started (milliseconds since epoch).
    generated_files
        Generated files known to the build.
    disposed_generated
        Paths of generated files disposed during the pass. These count as
        changed even when none of their sources were recompiled, provided
        they have at least one source.

    Returns
    -------
    CompilationNames
        Compiled and generated names plus the cached source count.
    """
    disposed = set(disposed_generated)
    compiled: list[str] = []
    seen: set[str] = set()
    generated: list[str] = []
    cached_count = 0

    for generated_file in generated_files:
        changed = bool(generated_file.source_files) and generated_file.path in disposed
        locally_compiled = 0
        for source in generated_file.source_files:
            if source.compilation_time is None or source.compilation_time < start_time:
                continue
            changed = True
            locally_compiled += 1
            name = basename(source.path)
            if name not in seen:
                seen.add(name)
                compiled.append(name)
        if changed:
            generated.append(basename(generated_file.path))
            cached_count += len(generated_file.source_files) - locally_compiled

    return CompilationNames(compiled=compiled, generated=generated, cached_count=cached_count)


def generated_clause(generated: Sequence[str]) -> str:
    if not generated:
        return ""
    if len(generated) == 1:
        return f" into {generated[0]}"
    return f" into {len(generated)} files"


def compiled_clause(compiled: Sequence[str], disposed: Sequence[str]) -> str:
    if len(compiled) == 1:
        return f"compiled {compiled[0]}"
    if compiled:
        return f"compiled {len(compiled)}"
    if len(disposed) == 1:
        return f"removed {disposed[0]}"
    if disposed:
        return f"removed {len(disposed)}"
    return ""


def cached_clause(cached_count: int, *, compiled_count: int, generated_count: int) -> str:
    """Render the cached-sources clause.

    The noun ("files") lands on whichever number reads naturally: after the
    compiled count when several sources were compiled, after the cached count
    otherwise.
    """
    if cached_count == 0:
        return "" if compiled_count <= 1 else " files"
    if compiled_count == 0:
        noun = "" if generated_count > 1 else " files"
        return f" and wrote {cached_count} cached{noun}"
    if compiled_count == 1:
        noun = "file" if cached_count == 1 else "files"
        return f" and {cached_count} cached {noun}"
    return f" files and {cached_count} cached"


def assets_clause(copied: Sequence[str], *, compiled_count: int) -> str:
    if not copied:
        return ""
    if len(copied) == 1:
        return f"copied {copied[0]}"
    if compiled_count:
        return f"copied {len(copied)}"
    return f"copied {len(copied)} files"


def format_duration(elapsed_ms: float) -> str:
    """Render elapsed milliseconds as ``"N ms"`` or, past one second, ``"N.N sec"``.

    Seconds round half up on the exact value of the float, so 1250 ms reads
    "1.3 sec".
    """
    if elapsed_ms > ONE_SECOND_MS:
        seconds = Decimal(elapsed_ms / ONE_SECOND_MS).quantize(TENTH, rounding=ROUND_HALF_UP)
        return f"{seconds} sec"
    return f"{round(elapsed_ms)} ms"


def generate_summary(
    start_time: float,
    copied_assets: Sequence[CopiedAsset],
    generated_files: Sequence[GeneratedFile],
    disposed_files: DisposedFiles,
    *,
    now: float | None = None,
) -> str:
    """Summarize a build pass in a single line.

    Parameters
    ----------
    start_time
        Moment the pass started (milliseconds since epoch).
    copied_assets
        Assets copied during the pass.
    generated_files
        All generated files known to the build; untouched ones are skipped.
    disposed_files
        Generated and source files removed during the pass.
    now
        Moment the pass finished (milliseconds since epoch). Defaults to the
        current time.

    Returns
    -------
    str
        Summary such as ``"compiled 2 files and 3 cached into ie7.css in 48 ms"``.
        Never empty; a pass with no activity reads ``"compiled in N ms"``.
    """
    copied = [basename(asset.path) for asset in copied_assets]
    names = collect_names(start_time, generated_files, disposed_files.generated)
    compiled_count = len(names.compiled)

    non_assets = (
        compiled_clause(names.compiled, disposed_files.source_paths)
        + cached_clause(
            names.cached_count,
            compiled_count=compiled_count,
            generated_count=len(names.generated),
        )
        + generated_clause(names.generated)
    )
    assets = assets_clause(copied, compiled_count=compiled_count)
    sep = ", " if non_assets and assets else ""
    main = non_assets + sep + assets

    if now is None:
        now = time.time() * 1000
    line = f"{main or 'compiled'} in {format_duration(now - start_time)}"
    logger.debug("Build pass summary: %s", line)
    return line

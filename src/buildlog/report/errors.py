"""Errors raised by build pipeline stages, formatted for the console."""

from __future__ import annotations

DEFAULT_STAGE = "Processing"
OPTIMIZER_STAGE = "Optimizing"


class BuildError(Exception):
    """A pipeline stage failed on a file.

    Attributes
    ----------
    stage
        Stage that failed (e.g. 'Compiling', 'Optimizing').
    path
        File the stage was working on.
    detail
        Original error message, continuation lines indented.
    """

    def __init__(self, stage: str, path: str, detail: str) -> None:
        self.stage = stage
        self.path = path
        self.detail = detail
        super().__init__(f"{stage} of {path} failed. {detail}")


def _indent_detail(message: str) -> str:
    lines = message.strip().splitlines()
    return "\n".join(lines[:1] + [f"   {line}" for line in lines[1:]])


def format_error(error: BaseException | str, path: str, *, stage: str | None = None) -> BuildError:
    """Wrap an error raised while processing ``path``.

    Parameters
    ----------
    error
        The exception (or bare message) raised by the stage.
    path
        File being processed.
    stage
        Stage name. Defaults to the error's ``pipeline_code`` attribute, then
        to 'Processing'.

    Returns
    -------
    BuildError
        Error whose message reads ``"<stage> of <path> failed. <message>"``.
        For an exception the message keeps its type, e.g.
        ``"TypeError: bad operand"``, and the exception is chained as the cause.
    """
    stage = stage or getattr(error, "pipeline_code", None) or DEFAULT_STAGE
    if not isinstance(error, BaseException):
        return BuildError(stage, path, _indent_detail(error))
    formatted = BuildError(stage, path, _indent_detail(f"{type(error).__name__}: {error}"))
    formatted.__cause__ = error
    return formatted


def format_optimizer_error(error: BaseException | str, path: str) -> BuildError:
    """Wrap an error raised while optimizing ``path``."""
    return format_error(error, path, stage=OPTIMIZER_STAGE)

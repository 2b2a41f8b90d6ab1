"""Periodic "compiling..." lines while a build pass is in flight."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class ProgressConfig(BaseModel):
    """Timing of progress lines.

    Attributes
    ----------
    interval_ms
        Delay between two progress lines.
    still_compiling_at
        Zero-based iteration that reads "still compiling" instead of "compiling".
    """

    interval_ms: int = Field(default=4000, ge=1)
    still_compiling_at: int = Field(default=7, ge=0)

    model_config = {"frozen": True, "extra": "forbid"}


def progress_line(iteration: int, *, still_compiling_at: int = 7) -> str:
    """Return the progress line for a zero-based iteration (0-3 trailing dots)."""
    msg = "still compiling" if iteration == still_compiling_at else "compiling"
    return msg + "." * (iteration % 4)


class CompilationProgress:
    """Emit progress lines on a background timer until cancelled.

    Parameters
    ----------
    emit
        Callable receiving each line. Defaults to this module's logger at INFO.
    time_passed_ms
        Time already spent on the pass; shortens the first delay.
    config
        Progress timing.
    """

    def __init__(
        self,
        emit: Callable[[str], object] | None = None,
        *,
        time_passed_ms: float = 0,
        config: ProgressConfig | None = None,
    ) -> None:
        self._emit = emit or logger.info
        self._config = config or ProgressConfig()
        self._time_passed_ms = time_passed_ms or 0
        self._iterations = 0
        self._lock = threading.RLock()
        self._timer: threading.Timer | None = None
        self._cancelled = False

    @property
    def iterations(self) -> int:
        return self._iterations

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def start(self) -> CompilationProgress:
        """Schedule the first progress line and return self."""
        delay_ms = max(self._config.interval_ms - self._time_passed_ms, 0)
        with self._lock:
            if self._cancelled or self._timer is not None:
                return self
            self._schedule(delay_ms)
        return self

    def cancel(self) -> None:
        """Stop emitting lines. Safe to call repeatedly and from any thread."""
        with self._lock:
            if self._cancelled:
                return
            self._cancelled = True
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None

    def _schedule(self, delay_ms: float) -> None:
        timer = threading.Timer(delay_ms / 1000, self._tick)
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _tick(self) -> None:
        with self._lock:
            if self._cancelled:
                return
            line = progress_line(self._iterations, still_compiling_at=self._config.still_compiling_at)
            self._iterations += 1
            self._emit(line)
            if not self._cancelled:
                self._schedule(self._config.interval_ms)


def start_compilation_progress(
    emit: Callable[[str], object] | None = None,
    *,
    time_passed_ms: float = 0,
    config: ProgressConfig | None = None,
) -> Callable[[], None]:
    """Start a progress ticker and return its cancel function."""
    progress = CompilationProgress(emit, time_passed_ms=time_passed_ms, config=config)
    return progress.start().cancel

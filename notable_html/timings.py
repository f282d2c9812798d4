"""Phase timings for the command-line front end.

Set NOTABLE_HTML_DEBUG_TIMING to "1", "true" or "yes" to have each phase's
duration written to stderr, so stdout stays a clean HTML fragment.
"""

import os
import sys
import time
from contextlib import contextmanager
from typing import Callable, Iterator, Optional, Union

DEBUG_TIMING = os.getenv("NOTABLE_HTML_DEBUG_TIMING", "").lower() in ("1", "true", "yes")


def _report(phase_name: str, elapsed: float, total: Optional[float]) -> None:
    line = f"[TIMING] {phase_name:40s} {elapsed:8.3f}s"
    if total is not None:
        line += f" (total: {total:8.3f}s)"
    print(line, file=sys.stderr, flush=True)


@contextmanager
def log_timing(
    phase: Union[str, Callable[[], str]],
    t_start: Optional[float] = None,
) -> Iterator[None]:
    """Time the enclosed block when DEBUG_TIMING is on.

    Args:
        phase: Phase name, or a callable returning it (evaluated at the end)
        t_start: ``time.time()`` at program start, to also report the total

    Example:
        with log_timing(lambda: f"Render ({len(chunks)} chunks)", t_start):
            chunks = list(formatter.stream(tokens))
    """
    if not DEBUG_TIMING:
        yield
        return

    started = time.time()
    try:
        yield
    finally:
        now = time.time()
        _report(
            phase() if callable(phase) else phase,
            now - started,
            None if t_start is None else now - t_start,
        )

"""Per-file change summaries across a set of tracked files"""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Optional

from linediff.core.models import FileChange, FileChangeSummary, FileDiff
from linediff.core.pipeline import (
    CONTEXT_LINES, MAX_LINES, MAX_OUTPUT_LINES, compute_line_diff_stats, render_unified_diff,
)
from linediff.util.log import get_logger


log = get_logger("summary")


def summarize_change(change: FileChange, max_lines: int = MAX_LINES) -> FileChangeSummary:
    """Fast-path stats for one file; truncated=True with no counts when unavailable."""
    stats = compute_line_diff_stats(change.original, change.modified, max_lines)
    if stats is None:
        return FileChangeSummary(path=change.path, truncated=True)
    return FileChangeSummary(path=change.path, added=stats.added, removed=stats.removed)


def summarize_changes(
    changes: Iterable[FileChange],
    max_lines: int = MAX_LINES,
    workers: int = 4,
    cancelled: Optional[Callable[[], bool]] = None,
    ) -> list[FileChangeSummary]:
    """Summarize every change on a bounded thread pool, preserving input order.

    cancelled is polled before each file starts; files not yet started once it
    returns True are left out of the result.
    """
    changes = list(changes)

    def _run(change: FileChange) -> Optional[FileChangeSummary]:
        if cancelled is not None and cancelled():
            return None
        return summarize_change(change, max_lines)

    with ThreadPoolExecutor(max_workers=max(1, workers)) as pool:
        results = list(pool.map(_run, changes))

    summaries = [r for r in results if r is not None]
    if len(summaries) < len(changes):
        log.info("summary cancelled after %d of %d file(s)", len(summaries), len(changes))
    return summaries


def file_diff(
    change: FileChange,
    context_lines: int = CONTEXT_LINES,
    max_output_lines: int = MAX_OUTPUT_LINES,
    ) -> FileDiff:
    """Stats plus rendered unified diff for a single file."""
    summary = summarize_change(change)
    unified = render_unified_diff(
        change.original, change.modified, change.path,
        context_lines=context_lines, max_output_lines=max_output_lines,
    )
    return FileDiff(
        **summary.model_dump(),
        unified_diff=unified.diff if unified else "",
        unified_truncated=unified.truncated if unified else False,
    )

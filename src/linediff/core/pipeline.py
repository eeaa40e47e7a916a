"""Public entry points: line diff stats (fast path) and unified diff rendering (full path)"""

from typing import Optional

from linediff.core.hunks import build_hunks
from linediff.core.models import DiffOp, LineDiffStats, UnifiedDiff
from linediff.core.myers import backtrack_counts, backtrack_ops, shortest_edit
from linediff.core.ops import expand_ops, merge_ops
from linediff.core.tokenize import split_lines
from linediff.core.unified import format_unified_diff
from linediff.util.log import get_logger


MAX_LINES = 8000
CONTEXT_LINES = 3
MAX_OUTPUT_LINES = 4000

log = get_logger("pipeline")


def _tokenize(old_text: Optional[str], new_text: Optional[str], max_lines: int):
    """Split both buffers, or return None when either exceeds max_lines lines."""
    old, new = split_lines(old_text), split_lines(new_text)
    if len(old) > max_lines or len(new) > max_lines:
        log.info("diff unavailable: %d/%d lines exceeds max_lines=%d", len(old), len(new), max_lines)
        return None
    return old, new


def compute_line_diff_stats(
    old_text: Optional[str],
    new_text: Optional[str],
    max_lines: int = MAX_LINES,
    ) -> Optional[LineDiffStats]:
    """Return added/removed line counts, or None when either input exceeds max_lines."""
    seqs = _tokenize(old_text, new_text, max_lines)
    if seqs is None:
        return None
    old, new = seqs
    trace = shortest_edit(old, new)
    stats = backtrack_counts(trace, old, new)
    log.debug("stats: old=%d new=%d d=%d", len(old), len(new), len(trace) - 1)
    return stats


def diff_lines(
    old_text: Optional[str],
    new_text: Optional[str],
    max_lines: int = MAX_LINES,
    ) -> Optional[list[DiffOp]]:
    """Return the per-line edit script, or None when either input exceeds max_lines."""
    seqs = _tokenize(old_text, new_text, max_lines)
    if seqs is None:
        return None
    old, new = seqs
    return backtrack_ops(shortest_edit(old, new), old, new)


def render_unified_diff(
    old_text: Optional[str],
    new_text: Optional[str],
    path_label: str,
    context_lines: int = CONTEXT_LINES,
    max_output_lines: int = MAX_OUTPUT_LINES,
    ) -> Optional[UnifiedDiff]:
    """Render a unified diff, or None when either input exceeds the fixed line cap.

    Line-identical inputs give UnifiedDiff(diff="", truncated=False).
    """
    ops = diff_lines(old_text, new_text, MAX_LINES)
    if ops is None:
        return None

    hunks = build_hunks(expand_ops(merge_ops(ops)), context_lines)
    if not hunks:
        return UnifiedDiff(diff="", truncated=False)

    result = format_unified_diff(hunks, path_label, max_output_lines)
    log.debug("rendered %d of %d hunk(s) for %s", result.hunk_count, len(hunks), path_label or "unknown")
    if result.truncated:
        log.info("diff for %s truncated at %d lines", path_label or "unknown", max_output_lines)
    return result

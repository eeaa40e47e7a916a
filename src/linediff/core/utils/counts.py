"""Approximate line stats scanned from already-rendered unified diff text"""

from linediff.core.models import LineDiffStats


def count_added_removed(unified_diff: str) -> LineDiffStats:
    """Count '+'/'-' lines, skipping '+++ '/'--- ' file headers.

    Less precise than the engine (a removed line whose text starts with '-- ' is skipped);
    only for use when the engine result is unavailable.
    """
    added = removed = 0
    for line in (unified_diff or "").replace("\r\n", "\n").split("\n"):
        if not line or line.startswith(("+++ ", "--- ")):
            continue
        if line[0] == "+":
            added += 1
        elif line[0] == "-":
            removed += 1
    return LineDiffStats(added=added, removed=removed)

"""Render hunks as a reduced unified-diff document"""

from linediff.core.models import PREFIX, Hunk, UnifiedDiff


def file_headers(path_label: str) -> list[str]:
    """Return the diff --git / --- / +++ header lines; an empty label becomes 'unknown'."""
    p = path_label or "unknown"
    return [f"diff --git a/{p} b/{p}", f"--- a/{p}", f"+++ b/{p}"]


def format_unified_diff(hunks: list[Hunk], path_label: str, max_output_lines: int = 4000) -> UnifiedDiff:
    """Render headers and hunks, stopping at max_output_lines total lines.

    The cap is checked before every line. A hunk header is written only if at
    least one of its body lines fits after it; the file headers are always written.
    """
    headers = file_headers(path_label)
    out = list(headers)
    truncated = False
    written = 0

    for hunk in hunks:
        if len(out) + 2 > max_output_lines:
            truncated = True
            break
        out.append(hunk.header)
        written += 1
        for op in hunk.ops:
            if len(out) >= max_output_lines:
                truncated = True
                break
            out.append(f"{PREFIX[op.kind]}{op.text}")
        if truncated:
            break

    return UnifiedDiff(diff="\n".join(out), truncated=truncated, header_lines=headers, hunk_count=written)

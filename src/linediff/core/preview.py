"""Previews of pending file writes: apply Write/Edit/MultiEdit inputs in memory and diff them"""

from typing import Any

from linediff.core.models import ProposedDiffPreview
from linediff.core.pipeline import compute_line_diff_stats, render_unified_diff
from linediff.core.utils.counts import count_added_removed
from linediff.util.log import get_logger


TOOL_NAMES = ("Write", "Edit", "MultiEdit")

log = get_logger("preview")


def apply_edit(original: str, old_string: str, new_string: str, replace_all: bool = False) -> str:
    """Replace the first occurrence of old_string (or every one with replace_all)."""
    if not old_string:
        raise ValueError("old_string must be non-empty")
    if replace_all:
        replaced = original.replace(old_string, new_string)
        if replaced == original:
            raise ValueError("old_string not found")
        return replaced
    idx = original.find(old_string)
    if idx == -1:
        raise ValueError("old_string not found")
    return original[:idx] + new_string + original[idx + len(old_string):]


def _edit_args(edit: dict[str, Any]) -> tuple[str, str, bool]:
    return (
        str(edit.get("old_string") or ""),
        str(edit.get("new_string") or ""),
        bool(edit.get("replace_all")),
    )


def apply_tool_input(before: str, tool_name: str, tool_input: dict[str, Any]) -> str:
    """Return the file contents after applying a Write, Edit or MultiEdit tool input."""
    tool_input = tool_input or {}
    if tool_name == "Write":
        return str(tool_input.get("content") or "")
    if tool_name == "Edit":
        return apply_edit(before, *_edit_args(tool_input))
    if tool_name == "MultiEdit":
        edits = tool_input.get("edits")
        if not isinstance(edits, list) or not edits:
            raise ValueError("missing edits")
        after = before
        for edit in edits:
            after = apply_edit(after, *_edit_args(edit or {}))
        return after
    raise ValueError(f"Unsupported tool {tool_name!r}; expected one of {', '.join(TOOL_NAMES)}")


def compute_proposed_preview(before: str, after: str, path_label: str) -> ProposedDiffPreview:
    """Diff before/after for display. Falls back to scanning the diff text when stats are unavailable."""
    unified = render_unified_diff(before, after, path_label)
    unified_diff = unified.diff if unified else ""
    stats = compute_line_diff_stats(before, after)
    if stats is None:
        stats = count_added_removed(unified_diff)

    if unified is None:
        log.info("preview for %s unavailable", path_label)
        return ProposedDiffPreview(
            path_label=path_label, unified_diff="",
            added=stats.added, removed=stats.removed,
            error="diff preview unavailable",
        )
    return ProposedDiffPreview(
        path_label=path_label, unified_diff=unified_diff,
        added=stats.added, removed=stats.removed, truncated=unified.truncated,
    )

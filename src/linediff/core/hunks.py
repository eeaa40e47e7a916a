"""Group changed line ranges and their context into unified-diff hunks"""

from linediff.core.models import DiffOp, Hunk, OpKind


def _line_numbers(ops: list[DiffOp]) -> tuple[list[int], list[int]]:
    """Return the 1-based old/new line number each op starts at."""
    old_nos, new_nos = [], []
    old_line = new_line = 1
    for op in ops:
        old_nos.append(old_line)
        new_nos.append(new_line)
        if op.kind is not OpKind.add:
            old_line += 1
        if op.kind is not OpKind.delete:
            new_line += 1
    return old_nos, new_nos


def change_ranges(ops: list[DiffOp], context_lines: int = 3) -> list[tuple[int, int]]:
    """Return [start, end) op index ranges covering each changed run plus context.

    Ranges whose context windows touch or overlap are merged.
    """
    context_lines = max(context_lines, 0)
    ranges: list[tuple[int, int]] = []
    i, total = 0, len(ops)
    while i < total:
        while i < total and ops[i].kind is OpKind.equal:
            i += 1
        if i >= total:
            break
        first = i
        while i < total and ops[i].kind is not OpKind.equal:
            i += 1
        start = max(0, first - context_lines)
        end = min(total, i + context_lines)
        if ranges and start <= ranges[-1][1]:
            ranges[-1] = (ranges[-1][0], max(ranges[-1][1], end))
        else:
            ranges.append((start, end))
    return ranges


def build_hunks(ops: list[DiffOp], context_lines: int = 3) -> list[Hunk]:
    """Build hunks from a per-line op sequence. No changes yields an empty list."""
    ranges = change_ranges(ops, context_lines)
    if not ranges:
        return []

    old_nos, new_nos = _line_numbers(ops)
    hunks = []
    for start, end in ranges:
        window = ops[start:end]
        hunks.append(Hunk(
            old_start=old_nos[start],
            old_count=sum(1 for op in window if op.kind is not OpKind.add),
            new_start=new_nos[start],
            new_count=sum(1 for op in window if op.kind is not OpKind.delete),
            ops=window,
        ))
    return hunks

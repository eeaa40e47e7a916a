"""Myers O(N*D) shortest edit script search and trace backtracking.

The forward search records, for every edit distance d, a snapshot of the
furthest x reached on each diagonal k = x - y. Snapshot d is a flat list
indexed by k + d (length 2d + 1); only diagonals with the parity of d are
written, the rest stay at -1.

Both backtracking modes replay the same backward walk, so the counts-only
fast path and the materialized ops path always agree on the edit script.
"""

from typing import Iterator, Sequence

from linediff.core.models import DiffOp, LineDiffStats, OpKind


Trace = list[list[int]]


def _x_at(v: list[int], d: int, k: int) -> int:
    """Furthest x on diagonal k in the round-d snapshot, -1 when k lies outside it."""
    i = k + d
    return v[i] if 0 <= i < len(v) else -1


def _prefers_down(v: list[int], d: int, k: int) -> bool:
    """Tie-break shared by search and backtrack: step down from k+1 unless right is at least as far."""
    return k == -d or (k != d and _x_at(v, d - 1, k + 1) > _x_at(v, d - 1, k - 1))


def shortest_edit(old: Sequence[str], new: Sequence[str]) -> Trace:
    """Run the forward search and return the trace; len(trace) - 1 is the edit distance."""
    n, m = len(old), len(new)
    trace: Trace = []
    prev: list[int] = []

    for d in range(n + m + 1):
        v = [-1] * (2 * d + 1)
        trace.append(v)
        for k in range(-d, d + 1, 2):
            if d == 0:
                x = 0
            elif _prefers_down(prev, d, k):
                x = _x_at(prev, d - 1, k + 1)
            else:
                x = _x_at(prev, d - 1, k - 1) + 1
            y = x - k
            while x < n and y < m and old[x] == new[y]:
                x += 1
                y += 1
            v[k + d] = x
            if x >= n and y >= m:
                return trace
        prev = v
    return trace


def _walk_back(trace: Trace, old: Sequence[str], new: Sequence[str]) -> Iterator[tuple[OpKind, int]]:
    """Yield (kind, index) moves from (N, M) back to (0, 0).

    The index points into old for equal/delete moves and into new for add moves.
    """
    x, y = len(old), len(new)
    for d in range(len(trace) - 1, 0, -1):
        v = trace[d - 1]
        k = x - y
        prev_k = k + 1 if _prefers_down(v, d, k) else k - 1
        prev_x = max(_x_at(v, d - 1, prev_k), 0)
        prev_y = prev_x - prev_k

        while x > prev_x and y > prev_y:
            x -= 1
            y -= 1
            yield OpKind.equal, x
        if x == prev_x:
            y -= 1
            yield OpKind.add, y
        else:
            x -= 1
            yield OpKind.delete, x

    # d == 0: whatever is left is the opening snake from (0, 0)
    while x > 0 and y > 0 and old[x - 1] == new[y - 1]:
        x -= 1
        y -= 1
        yield OpKind.equal, x
    while x > 0:
        x -= 1
        yield OpKind.delete, x
    while y > 0:
        y -= 1
        yield OpKind.add, y


def backtrack_counts(trace: Trace, old: Sequence[str], new: Sequence[str]) -> LineDiffStats:
    """Count adds and deletes along the backtracked path without building any ops."""
    added = removed = 0
    for kind, _ in _walk_back(trace, old, new):
        if kind is OpKind.add:
            added += 1
        elif kind is OpKind.delete:
            removed += 1
    return LineDiffStats(added=added, removed=removed)


def backtrack_ops(trace: Trace, old: Sequence[str], new: Sequence[str]) -> list[DiffOp]:
    """Materialize the backtracked path as per-line ops in forward order."""
    rev = [
        DiffOp(kind, new[i] if kind is OpKind.add else old[i])
        for kind, i in _walk_back(trace, old, new)
    ]
    rev.reverse()
    return rev

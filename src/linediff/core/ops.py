"""Coalesce and re-expand edit-script operations"""

from typing import Iterable

from linediff.core.models import DiffOp


def merge_ops(ops: Iterable[DiffOp]) -> list[DiffOp]:
    """Join adjacent ops of the same kind into one newline-joined block."""
    out: list[DiffOp] = []
    for op in ops:
        if out and out[-1].kind is op.kind:
            out[-1] = DiffOp(op.kind, f"{out[-1].text}\n{op.text}")
        else:
            out.append(op)
    return out


def expand_ops(ops: Iterable[DiffOp]) -> list[DiffOp]:
    """Split merged blocks back into one op per line. Inverse of merge_ops."""
    return [DiffOp(op.kind, line) for op in ops for line in op.text.split("\n")]

"""Unit tests for core/ops.py"""

from linediff.core.models import DiffOp, OpKind
from linediff.core.ops import expand_ops, merge_ops


def test_merge_ops_joins_adjacent_same_kind():
    ops = [DiffOp(OpKind.equal, "a"), DiffOp(OpKind.equal, "b"), DiffOp(OpKind.add, "c")]
    assert merge_ops(ops) == [DiffOp(OpKind.equal, "a\nb"), DiffOp(OpKind.add, "c")]


def test_merge_ops_keeps_alternating_kinds_apart(make_ops):
    ops = make_ops("E D E A")
    assert merge_ops(ops) == ops


def test_merge_ops_empty():
    assert merge_ops([]) == []


def test_merge_ops_does_not_mutate_input(make_ops):
    ops = make_ops("A A")
    merge_ops(ops)
    assert ops == make_ops("A A")


def test_merge_then_expand_is_transparent(make_ops):
    """expand_ops(merge_ops(x)) reproduces the per-line sequence."""
    ops = make_ops("E E D D D A E A A E")
    assert expand_ops(merge_ops(ops)) == ops


def test_expand_preserves_empty_lines():
    """Empty lines inside a block survive the round trip."""
    ops = [DiffOp(OpKind.add, ""), DiffOp(OpKind.add, ""), DiffOp(OpKind.add, "x")]
    merged = merge_ops(ops)
    assert merged == [DiffOp(OpKind.add, "\n\nx")]
    assert expand_ops(merged) == ops

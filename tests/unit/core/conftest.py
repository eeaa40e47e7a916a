"""Shared fixtures for core unit tests"""

import random

import pytest

from linediff.core.models import DiffOp, OpKind


SCENARIO_OLD = "a\nb\nc"
SCENARIO_NEW = "a\nx\nc"


def _lcs_length(a, b) -> int:
    """Classic O(N*M) longest common subsequence length."""
    dp = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            if a[i - 1] == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])
    return dp[-1][-1]


def _random_text(rng: random.Random, max_lines: int = 12) -> str:
    return "\n".join(rng.choice("abcd ") for _ in range(rng.randint(0, max_lines)))


@pytest.fixture(name="lcs_length")
def lcs_length_fixture():
    return _lcs_length


@pytest.fixture(name="text_pairs")
def text_pairs_fixture():
    """Hand-picked and seeded random (old, new) text pairs of at most ~12 lines."""
    rng = random.Random(1234)
    pairs = [
        ("", ""),
        ("", "hello"),
        ("hello", ""),
        (SCENARIO_OLD, SCENARIO_NEW),
        ("a\nb\nc\nd", "d\nc\nb\na"),
        ("a\nb", "b\na"),
        ("x\ny\nz", "p\nq"),
        ("a\na\na", "a\na"),
        ("a\n", "a"),
        ("a\r\nb\r\n", "a\nb\nc\n"),
    ]
    pairs += [(_random_text(rng), _random_text(rng)) for _ in range(60)]
    return pairs


@pytest.fixture(name="make_ops")
def make_ops_fixture():
    """Build a per-line op list from a compact spec like 'E D E E A'."""
    kinds = {"E": OpKind.equal, "A": OpKind.add, "D": OpKind.delete}

    def _make(spec: str) -> list[DiffOp]:
        return [DiffOp(kinds[c], f"{c.lower()}{i}") for i, c in enumerate(spec.split())]
    return _make

"""Data models for edit scripts, hunks, and rendered diffs"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class OpKind(str, Enum):
    """Kind of a single edit-script operation."""
    equal = "equal"
    add = "add"
    delete = "delete"


PREFIX = {OpKind.equal: " ", OpKind.delete: "-", OpKind.add: "+"}


@dataclass(frozen=True)
class DiffOp:
    """One edit-script entry; text is a single line or a newline-joined block after merging."""
    kind: OpKind
    text: str


@dataclass
class Hunk:
    """Context-padded window of the edit script with 1-based start lines."""
    old_start: int
    old_count: int
    new_start: int
    new_count: int
    ops: list[DiffOp] = field(default_factory=list)

    @property
    def header(self) -> str:
        return f"@@ -{self.old_start},{self.old_count} +{self.new_start},{self.new_count} @@"


class LineDiffStats(BaseModel):
    """Added/removed line counts of an edit script."""
    added: int
    removed: int


class UnifiedDiff(BaseModel):
    """Rendered unified diff text; truncated is set when the output cap was hit."""
    diff: str
    truncated: bool = False
    header_lines: list[str] = []
    hunk_count: int = 0


class ProposedDiffPreview(BaseModel):
    """Preview of a pending file write: diff text plus line stats."""
    path_label: str
    unified_diff: str
    added: int
    removed: int
    truncated: bool = False
    error: Optional[str] = None


class FileChange(BaseModel):
    """Original and modified contents of one tracked file."""
    path: str
    original: str
    modified: str


class FileChangeSummary(BaseModel):
    """Per-file stats; counts are None and truncated is True when the diff was unavailable."""
    path: str
    added: Optional[int] = None
    removed: Optional[int] = None
    truncated: bool = False


class FileDiff(FileChangeSummary):
    """Per-file stats together with the rendered unified diff."""
    unified_diff: str = ""
    unified_truncated: bool = False

"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from linediff.config import Settings, load_config
from linediff.core.models import FileChange
from linediff.core.pipeline import compute_line_diff_stats, render_unified_diff
from linediff.core.summary import summarize_changes
from linediff.core.utils.paths import normalize_rel_path
from linediff.util.log import setup_logging


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(ctx: typer.Context, overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling and configure logging."""
    overrides = dict(overrides or {})
    if ctx.obj and ctx.obj.get("verbose"):
        overrides["log_level"] = "DEBUG"
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    setup_logging(settings.log_level)
    return settings


def _read(path: Path) -> str:
    """Read a text file, exiting with an error when it is missing or not UTF-8."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"cannot read {path}", e)


def _files_under(root: Path) -> set[str]:
    """Relative posix paths of all files under root (empty when root does not exist)."""
    if not root.is_dir():
        return set()
    return {p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file()}


def diff_cmd(
    ctx: typer.Context,
    old: Annotated[Path, typer.Argument(help="Original file")],
    new: Annotated[Path, typer.Argument(help="Modified file")],
    label: Annotated[Optional[str], typer.Option("--label", help="Path label for diff headers")] = None,
    context: Annotated[Optional[int], typer.Option("--context-lines", "-U", help="Context lines around changes")] = None,
    max_output: Annotated[Optional[int], typer.Option("--max-output-lines", help="Cap on rendered lines")] = None,
    ):
    """Print a unified diff between two text files."""
    settings = _settings(ctx, overrides={"context_lines": context, "max_output_lines": max_output})
    old_text, new_text = _read(old), _read(new)
    path_label = normalize_rel_path(label) if label else normalize_rel_path(str(new)) or settings.path_label

    result = render_unified_diff(
        old_text, new_text, path_label,
        context_lines=settings.context_lines, max_output_lines=settings.max_output_lines,
    )
    if result is None:
        _fail(f"diff unavailable (input too large, max {settings.max_lines} lines)")
    if not result.diff:
        typer.echo("No differences.")
        return
    typer.echo(result.diff)
    if result.truncated:
        typer.echo(f"(diff truncated at {settings.max_output_lines} lines)", err=True)


def stats_cmd(
    ctx: typer.Context,
    old: Annotated[Path, typer.Argument(help="Original file")],
    new: Annotated[Path, typer.Argument(help="Modified file")],
    max_lines: Annotated[Optional[int], typer.Option("--max-lines", help="Line cap for either input")] = None,
    ):
    """Print added/removed line counts between two text files."""
    settings = _settings(ctx, overrides={"max_lines": max_lines})
    stats = compute_line_diff_stats(_read(old), _read(new), settings.max_lines)
    if stats is None:
        _fail(f"diff unavailable (input too large, max {settings.max_lines} lines)")
    typer.echo(f"+{stats.added} -{stats.removed}")


def summary_cmd(
    ctx: typer.Context,
    old_dir: Annotated[Path, typer.Argument(help="Directory with original files")],
    new_dir: Annotated[Path, typer.Argument(help="Directory with modified files")],
    workers: Annotated[Optional[int], typer.Option("--workers", help="Parallel diff workers")] = None,
    ):
    """Print per-file added/removed counts for files that differ between two directories."""
    settings = _settings(ctx, overrides={"workers": workers})
    if not old_dir.is_dir() and not new_dir.is_dir():
        _fail(f"neither {old_dir} nor {new_dir} is a directory")

    changes = []
    for rel in sorted(_files_under(old_dir) | _files_under(new_dir)):
        a, b = old_dir / rel, new_dir / rel
        changes.append(FileChange(
            path=normalize_rel_path(rel),
            original=_read(a) if a.is_file() else "",
            modified=_read(b) if b.is_file() else "",
        ))

    changed = 0
    for s in summarize_changes(changes, settings.max_lines, settings.workers):
        if s.truncated:
            typer.echo(f"? {s.path}")
        elif s.added or s.removed:
            typer.echo(f"+{s.added} -{s.removed} {s.path}")
        else:
            continue
        changed += 1
    typer.echo(f"{changed} of {len(changes)} file(s) changed")

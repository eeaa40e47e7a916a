"""CLI entrypoint: Typer app definition and command registration"""

from typing import Annotated

import typer

from linediff.cli.commands import diff_cmd, stats_cmd, summary_cmd


app = typer.Typer(name="linediff", no_args_is_help=True, help="Line-based Myers diff and unified diff rendering")


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")] = False,
    ):
    ctx.obj = {"verbose": verbose}


app.command(name="diff")(diff_cmd)
app.command(name="stats")(stats_cmd)
app.command(name="summary")(summary_cmd)

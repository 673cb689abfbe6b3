# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer

from gitdaily.terminal import branch, configuration, task
from gitdaily.terminal.custom_typer import OrderedAliasedTyperGroup
from gitdaily.terminal.graph import graph
from gitdaily.terminal.stats import stats
from gitdaily.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="gitdaily - your life as a commit graph",
    no_args_is_help=True,
)
app.add_typer(configuration.app, name="config, c")
app.add_typer(branch.app, name="branch, b")
app.add_typer(task.app, name="task, t")
app.command(name="graph, g")(graph)
app.command(name="stats, s")(stats)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """
    gitdaily - your life as a commit graph

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)


def run() -> None:
    app()

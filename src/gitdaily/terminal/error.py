# SPDX-License-Identifier: MIT

from typing import NoReturn

import typer
from rich.console import Console


def exit_with_error(error: Exception) -> NoReturn:
    console = Console(stderr=True)
    console.print(f"[red]Error: {error}[/red]")
    raise typer.Exit(1)

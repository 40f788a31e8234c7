"""
CLI Orchestrator - Main Entry Point

Wires the cardledger commands into a single typer application.
"""

import logging

import typer

from cardledger import __version__
from cardledger.interface.cli.commands import inspect_command, shell_command

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="cardledger",
    help="🗂️ Visitor card registers (recipients and active cards)",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cardledger {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """
    🗂️ cardledger - Visitor card registers

    ✨ **Registers:**
    - **Recipients**: who received which visitor card, and when
    - **Active cards**: cards currently in circulation

    🎯 **Available Commands:**
    - `cardledger shell` - Edit the registers interactively, export, import and print
    - `cardledger inspect FILE` - Preview how a spreadsheet is imported
    """


app.command("shell")(shell_command)
app.command("inspect")(inspect_command)

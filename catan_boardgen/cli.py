from __future__ import annotations

import json
import logging

import click
from rich.console import Console

from .common.logging import get_logger
from .config import GeneratorConfig
from .domain.generator import BoardGenerationError, generate_valid_board
from .report import board_table, format_board_grid


@click.command()
@click.option(
    "--seed",
    default=None,
    type=int,
    help="Seed for the random source. Default: fresh randomness each run.",
)
@click.option(
    "--attempts",
    "max_attempts",
    default=1,
    show_default=True,
    type=click.IntRange(1, None),
    help="Resource layouts to try before giving up.",
)
@click.option(
    "--output",
    "output_format",
    default="grid",
    show_default=True,
    type=click.Choice(["grid", "table", "json"], case_sensitive=False),
    help="How to print the generated board.",
)
@click.option(
    "--verbose/--quiet",
    default=False,
    show_default=True,
    help="Log every placement and backtracking step.",
)
def generate_board(seed: int | None, max_attempts: int, output_format: str, verbose: bool):
    """Generate a standard 19-tile board and print it."""
    get_logger("catan_boardgen", logging.DEBUG if verbose else logging.WARNING)
    console = Console()

    config = GeneratorConfig(seed=seed, max_attempts=max_attempts)
    try:
        board = generate_valid_board(config)
    except BoardGenerationError as exc:
        raise click.ClickException(str(exc)) from exc

    output_format = output_format.lower()
    if output_format == "json":
        click.echo(json.dumps(board.to_dict(), indent=2))
    elif output_format == "table":
        console.print(board_table(board, title=f"Board (seed={seed})"))
    else:
        click.echo(format_board_grid(board))


def main() -> None:
    generate_board()


if __name__ == "__main__":
    main()

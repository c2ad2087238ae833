from __future__ import annotations

import logging
import sys
from collections.abc import Iterable

import click
import typer
from rich.console import Console
from rich.logging import RichHandler

from matchr import __version__
from matchr.rendering import render_results
from matchr.search import match_items

__all__ = [
    "cli",
    "read_candidates",
    "run",
]


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f"matchr {__version__}")
    raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _stdin_is_interactive() -> bool:
    return sys.stdin.isatty()


def read_candidates(stream: Iterable[str]) -> list[str]:
    candidates: list[str] = []
    for line in stream:
        candidate = line.rstrip("\r\n")
        if candidate:
            candidates.append(candidate)
    return candidates


cli = typer.Typer(
    add_completion=False,
    help="Rank candidates by how well they fuzzy-match a query.",
)


@cli.command()
def run(
    query: str = typer.Argument(..., help="Query to match."),
    candidates: list[str] | None = typer.Argument(
        None,
        help="Candidates to rank. Read from stdin, one per line, when omitted.",
        show_default=False,
    ),
    limit: int | None = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        help="Print at most this many results.",
    ),
    scores: bool = typer.Option(
        False,
        "--scores",
        "-s",
        help="Prefix every result with its score.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug output to stderr.",
    ),
    _version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    _configure_logging(verbose)

    if not candidates:
        if _stdin_is_interactive():
            typer.echo("No candidates given and stdin is a terminal.", err=True)
            raise typer.Exit(code=2)
        # Undecodable bytes round-trip to stdout as surrogate escapes.
        candidates = read_candidates(
            click.get_text_stream("stdin", errors="surrogateescape")
        )

    results = match_items(query, candidates)
    if not results:
        typer.echo(f"No candidates match {query!r}.", err=True)
        raise typer.Exit(code=1)

    if limit is not None:
        results = results[:limit]

    console = Console(
        file=click.get_text_stream("stdout", errors="surrogateescape"),
        highlight=False,
        soft_wrap=True,
    )
    for line in render_results(query, results, show_scores=scores):
        console.print(line)


if __name__ == "__main__":
    cli()

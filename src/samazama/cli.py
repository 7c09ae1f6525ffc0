"""Command-line interface for samazama.

Uses Typer for a type-hinted CLI and Rich for output.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console

# Load environment variables from .env files
# Priority: local .env > ~/.samazama/.env
_user_env = Path.home() / ".samazama" / ".env"
if _user_env.exists():
    load_dotenv(_user_env)
load_dotenv()
from rich.markup import escape
from rich.table import Table

from samazama import __version__
from samazama.config import config_from_env, load_config
from samazama.errors import SamazamaError, format_error_for_display
from samazama.logging import LogLevel, set_verbosity
from samazama.matching import VariantMatcher
from samazama.tokenizer import tokenized

app = typer.Typer(
    name="samazama",
    help="Match shorthand input against full answers by sound and by repeated-letter variants.",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"samazama version {__version__}")
        raise typer.Exit()


def _print_error(error: Exception) -> None:
    console.print(f"[red]Error:[/red] {escape(format_error_for_display(error))}")


def _build_matcher(ceiling: int | None = None) -> VariantMatcher:
    try:
        config = config_from_env()
        if ceiling is not None:
            config = load_config({**config.model_dump(), "recursion_ceiling": ceiling})
    except SamazamaError as e:
        _print_error(e)
        raise typer.Exit(1)
    return VariantMatcher(config)


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log engine activity to stderr."),
    ] = False,
) -> None:
    """Samazama: fewer keystrokes for quiz answers."""
    if verbose:
        set_verbosity(LogLevel.DEBUG)


@app.command()
def variants(
    text: Annotated[str, typer.Argument(help="Word or phrase to expand.")],
    unique: Annotated[bool, typer.Option("--unique", "-u", help="Only list distinct variants.")] = False,
    reduce: Annotated[
        Optional[int],
        typer.Option("--reduce", "-r", help="Remove at most N repeats per character first."),
    ] = None,
    ceiling: Annotated[
        Optional[int],
        typer.Option("--ceiling", help="Recursion ceiling for this run."),
    ] = None,
    tokenize: Annotated[
        bool,
        typer.Option("--tokenize", "-t", help="Strip punctuation and spacing before expanding."),
    ] = False,
) -> None:
    """List repeat-character variants of TEXT."""
    matcher = _build_matcher(ceiling)

    if tokenize:
        text = tokenized(text)
    if reduce is not None:
        text = matcher.remove_repeats(text, remove_at_most=reduce)

    try:
        bag = matcher.generate_variants(text)
    except SamazamaError as e:
        _print_error(e)
        console.print("[dim]Try --reduce to remove repeated characters first.[/dim]")
        raise typer.Exit(1)

    distinct = list(dict.fromkeys(bag))
    shown = distinct if unique else bag

    table = Table(title=f"Variants of '{text}'")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Variant", style="cyan")
    for index, variant in enumerate(shown, start=1):
        table.add_row(str(index), variant)
    console.print(table)
    console.print(f"Total: {len(bag)}  Unique: {len(distinct)}")


@app.command()
def reduce(
    text: Annotated[str, typer.Argument(help="Text to shrink.")],
    at_most: Annotated[
        Optional[int],
        typer.Option("--at-most", "-n", help="Remove at most N repeats per character."),
    ] = None,
) -> None:
    """Remove repeated characters from TEXT."""
    matcher = _build_matcher()
    try:
        console.print(matcher.remove_repeats(text, remove_at_most=at_most))
    except ValueError as e:
        _print_error(e)
        raise typer.Exit(1)


@app.command()
def encode(
    words: Annotated[list[str], typer.Argument(help="Words or phrases to encode.")],
) -> None:
    """Print the Soundex code of each argument."""
    matcher = _build_matcher()

    table = Table()
    table.add_column("Input")
    table.add_column("Code", style="green")
    for word in words:
        table.add_row(word, matcher.encode(word))
    console.print(table)


@app.command()
def match(
    shorthand: Annotated[str, typer.Argument(help="What the user typed.")],
    answer: Annotated[str, typer.Argument(help="The reference answer.")],
    ceiling: Annotated[
        Optional[int],
        typer.Option("--ceiling", help="Recursion ceiling for this run."),
    ] = None,
) -> None:
    """Check whether SHORTHAND matches ANSWER.

    Variants are only compared when the Soundex codes differ. Exits with
    status 1 when there is no match and 2 when the variant check runs out
    of budget.
    """
    matcher = _build_matcher(ceiling)

    phonetic = matcher.soundex_equal(shorthand, answer)
    variant = False
    if not phonetic:
        try:
            variant = matcher.variants_intersect(shorthand, answer)
        except SamazamaError as e:
            _print_error(e)
            raise typer.Exit(2)

    console.print(
        f"Soundex: {matcher.encode(shorthand)} vs {matcher.encode(answer)} "
        f"({'[green]equal[/green]' if phonetic else '[yellow]different[/yellow]'})"
    )
    if phonetic:
        console.print("Variants: [dim]skipped[/dim]")
    else:
        console.print(f"Variants: {'[green]overlap[/green]' if variant else '[yellow]disjoint[/yellow]'}")

    if phonetic or variant:
        console.print("[green]Match[/green]")
    else:
        console.print("[red]No match[/red]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()

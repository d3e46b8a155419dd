"""
CLI Interface
=============
Command-line interface for the roman numeral parser.

Usage:
    rome                               (interactive prompt)
    rome repl
    rome parse <numeral>... [--tokens] [--json-output]
    rome batch <file> [--json-output]
    rome render <number>...
    rome serve [--host] [--port] [--debug]
"""

from __future__ import annotations

import json
import sys
from dataclasses import replace

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .digits import int_to_roman
from .engine import ParserConfig, ParserEngine

console = Console()

PROMPT = "Write a roman numeral: "


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="rome")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level",
)
@click.option(
    "--log-file",
    default=None,
    help="Path to log file",
)
@click.pass_context
def cli(ctx, log_level: str, log_file: str):
    """Roman numeral parser: strict numeral to integer conversion."""
    ctx.ensure_object(dict)
    ctx.obj["config"] = ParserConfig(log_level=log_level, log_file=log_file)

    if ctx.invoked_subcommand is None:
        ctx.invoke(repl)


def _engine(ctx, **overrides) -> ParserEngine:
    config = replace(ctx.obj["config"], **overrides)
    return ParserEngine(config)


@cli.command()
@click.pass_context
def repl(ctx):
    """Prompt for numerals until end of input."""
    engine = _engine(ctx)
    stdin = click.get_text_stream("stdin")

    while True:
        click.echo(PROMPT, nl=False)
        line = stdin.readline()
        if not line:
            break

        result = engine.parse(line)
        if result.ok:
            click.echo(f"Result: {result.value}")
        else:
            click.echo(f"Invalid input: {result.error.message}")


@cli.command()
@click.argument("numerals", nargs=-1, required=True)
@click.option(
    "--tokens", "-t",
    is_flag=True,
    default=False,
    help="Show the tokens each numeral was split into",
)
@click.option(
    "--json-output",
    is_flag=True,
    default=False,
    help="Output only JSON results to stdout (for programmatic use)",
)
@click.pass_context
def parse(ctx, numerals: tuple[str, ...], tokens: bool, json_output: bool):
    """Parse one or more numerals."""
    engine = _engine(ctx)
    results = [engine.parse(n) for n in numerals]

    if json_output:
        print(json.dumps(
            [r.model_dump(mode="json") for r in results],
            indent=2,
            ensure_ascii=False,
        ))
    else:
        _display_results(results, show_tokens=tokens)

    if not all(r.ok for r in results):
        sys.exit(1)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--json-output",
    is_flag=True,
    default=False,
    help="Output only JSON results to stdout (for programmatic use)",
)
@click.pass_context
def batch(ctx, path: str, json_output: bool):
    """Parse a file holding one numeral per line."""
    engine = _engine(ctx, strip_whitespace=True)

    with open(path, "r", encoding="utf-8") as f:
        results = engine.parse_many(f)

    if json_output:
        print(json.dumps(
            [r.model_dump(mode="json") for r in results],
            indent=2,
            ensure_ascii=False,
        ))
        return

    console.print()
    console.print(
        Panel.fit(
            f"[bold cyan]Batch Numeral Parser[/]\n"
            f"[dim]Found {len(results)} numerals in: {escape(path)}[/]",
            border_style="cyan",
        )
    )
    _display_results(results)
    _display_batch_summary(results)


@cli.command()
@click.argument("numbers", nargs=-1, required=True, type=int)
def render(numbers: tuple[int, ...]):
    """Print the canonical numeral for each positive integer."""
    failed = False
    for n in numbers:
        try:
            click.echo(f"{n}: {int_to_roman(n)}")
        except ValueError as e:
            console.print(f"[red]Error:[/] {escape(str(e))}")
            failed = True

    if failed:
        sys.exit(1)


@cli.command()
@click.option("--host", default="127.0.0.1", help="Server host")
@click.option("--port", default=5000, type=int, help="Server port")
@click.option("--debug", is_flag=True, default=False, help="Debug mode")
def serve(host: str, port: int, debug: bool):
    """Start the HTTP parsing service."""
    from .server import run_server

    console.print()
    console.print(
        Panel.fit(
            f"[bold cyan]Roman Numeral Service[/]\n"
            f"[dim]Starting on {host}:{port}[/]",
            border_style="cyan",
        )
    )
    console.print()

    run_server(host=host, port=port, debug=debug)


# ─── Display Helpers ──────────────────────────────────────────────────────────


def _display_results(results, show_tokens: bool = False):
    """Display parse results in a formatted table."""
    table = Table(title="Parse Results", border_style="cyan")
    table.add_column("Numeral", style="bold")
    table.add_column("Value", justify="right")
    if show_tokens:
        table.add_column("Tokens")
    table.add_column("Status")

    for r in results:
        row = [escape(r.input.rstrip("\r\n"))]
        if r.ok:
            row.append(str(r.value))
            if show_tokens:
                row.append(" ".join(str(t) for t in r.tokens))
            row.append("[green]✓[/]")
        else:
            row.append("-")
            if show_tokens:
                row.append("-")
            row.append(f"[red]✗ {escape(r.error.message)}[/]")
        table.add_row(*row)

    console.print(table)
    console.print()


def _display_batch_summary(results):
    """Display a count of failures by kind."""
    breakdown: dict[str, int] = {}
    for r in results:
        if not r.ok:
            key = r.error.kind.value
            breakdown[key] = breakdown.get(key, 0) + 1

    valid = len(results) - sum(breakdown.values())
    console.print(
        f"[bold]Total:[/] {len(results)} numerals, "
        f"{valid} valid, {sum(breakdown.values())} invalid"
    )

    if breakdown:
        table = Table(title="Failure Breakdown", border_style="yellow")
        table.add_column("Kind", style="bold")
        table.add_column("Count", justify="right")
        for kind, count in sorted(breakdown.items()):
            table.add_row(kind, str(count))
        console.print(table)

    console.print()


# ─── Entry point (for python -m rome.cli) ─────────────────────────────────────


if __name__ == "__main__":
    cli()

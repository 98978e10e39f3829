"""CLI entry point for morphtags."""

from __future__ import annotations

import json
import sys

import click
from click.core import ParameterSource
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from morphtags import __version__
from morphtags.config import ConfigError, load_settings
from morphtags.decode import (
    DecodeResult,
    decode_rmac,
    decode_wivu,
    describe,
    describe_grammar_class,
)
from morphtags.logging_setup import setup_logging

console = Console()


def _print_results(title: str, results: list[DecodeResult]) -> None:
    table = Table(title=title)
    table.add_column("Code", style="cyan")
    table.add_column("Description")

    for result in results:
        if result.recognized:
            table.add_row(result.code, result.text)
        else:
            table.add_row(result.code, "[yellow]unrecognized[/yellow]")

    console.print(table)


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default="WARNING", help="Log level")
def cli(log_level: str):
    """morphtags - Readable RMAC and WIVU morphology descriptions."""
    try:
        setup_logging(log_level)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level")


@cli.command()
@click.argument("codes", nargs=-1, required=True)
def rmac(codes: tuple[str, ...]):
    """Describe Greek RMAC codes.

    Example: morphtags rmac V-PAI-3S N-NSM
    """
    _print_results("RMAC", [decode_rmac(code.upper()) for code in codes])


@cli.command()
@click.argument("codes", nargs=-1, required=True)
def wivu(codes: tuple[str, ...]):
    """Describe Hebrew/Aramaic WIVU tags.

    Example: morphtags wivu HNcbsa HC/Vqw3ms
    """
    _print_results("WIVU", [decode_wivu(code) for code in codes])


@cli.command("describe")
@click.argument("codes", nargs=-1, required=True)
@click.option("--strict", is_flag=True, help="Exit with status 1 on any unrecognized code")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
def describe_cmd(codes: tuple[str, ...], strict: bool, as_json: bool):
    """Describe codes of either scheme, detecting the scheme per code."""
    results = [describe(code) for code in codes]

    if as_json:
        payload = [
            {
                "code": r.code,
                "scheme": r.scheme.value if r.scheme else None,
                "description": r.text,
                "recognized": r.recognized,
            }
            for r in results
        ]
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        _print_results("Morphology", results)

    if strict:
        unrecognized = [r.code for r in results if not r.recognized]
        if unrecognized:
            console.print(f"[red]Error: unrecognized: {', '.join(unrecognized)}[/red]")
            sys.exit(1)


@cli.command()
@click.argument("tokens", nargs=-1, required=True)
def classify(tokens: tuple[str, ...]):
    """Describe grammar CSS class tokens (gr-... or gw-!...)."""
    results = []
    for token in tokens:
        result = describe_grammar_class(token)
        if result is None:
            console.print(f"[yellow]Not a grammar class: {token}[/yellow]")
            continue
        results.append(result)

    if results:
        _print_results("Grammar classes", results)


@cli.command()
@click.option("--host", default=None, help="Bind host")
@click.option("--port", default=None, type=int, help="Bind port")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML settings file",
)
@click.pass_context
def serve(
    ctx: click.Context, host: str | None, port: int | None, config_path: str | None
):
    """Start the API server."""
    import uvicorn

    from morphtags.api.main import create_app

    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        # the message starts with "[path]", which rich would read as markup
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    # An explicit --log-level wins over the settings file
    root = ctx.find_root()
    if root.get_parameter_source("log_level") is ParameterSource.DEFAULT:
        log_level = settings.log_level
        setup_logging(log_level)
    else:
        log_level = root.params["log_level"]

    if host is None:
        host = settings.api_host
    if port is None:
        port = settings.api_port

    console.print(f"[bold blue]Starting morphtags API at http://{host}:{port}[/bold blue]")
    uvicorn.run(
        create_app(settings),
        host=host,
        port=port,
        log_level=log_level.lower(),
    )


if __name__ == "__main__":
    cli()

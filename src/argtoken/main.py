import json
from typing import NoReturn, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from rich.text import Text

from argtoken.application.parsers import (
    build,
    parse_arguments,
    split_abbreviation_cluster,
    to_abbreviation,
    to_option,
)
from argtoken.config import ArgTokenConfig, load_config
from argtoken.domain.errors import ArgumentTokenError
from argtoken.domain.token import ArgumentToken
from argtoken.domain.types import TokenType
from argtoken.logger import get_logger, setup_logger

logger = get_logger("main")

console = Console()
err_console = Console(stderr=True)

cli = typer.Typer(
    name="argtoken",
    help="Classify, parse and rebuild single command-line argument tokens",
    epilog="""
    Examples:
    $ argtoken parse -- --port=8080 -v deploy "'hello world'"
    $ argtoken build --type equal-separated-option --name port --value 8080
    """,
    add_completion=False,
)


def _fail(message: str, code: int) -> NoReturn:
    err_console.print(f"[bold red]Error:[/bold red] {message}", highlight=False)
    raise typer.Exit(code=code)


def _token_row(token: ArgumentToken) -> dict:
    return {
        "position": token.position,
        "raw": token.raw,
        "type": token.type.name,
        "name": token.name,
        "value": token.value,
        "abbreviated": token.abbreviated,
        "built": token.build(),
    }


@cli.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging on stderr"),
):
    """Configure logging from the environment before running a command."""
    config = load_config()
    setup_logger(
        log_file=config.log_file,
        log_level="DEBUG" if debug else config.log_level,
        console_output=debug or config.console_output,
    )
    ctx.obj = config


@cli.command("parse", context_settings={"ignore_unknown_options": True})
def parse_command(
    ctx: typer.Context,
    arguments: list[str] = typer.Argument(..., help="Arguments to parse (put them after '--')"),
    expand: Optional[bool] = typer.Option(
        None, "--expand/--no-expand", help="Expand abbreviation clusters such as -abc first"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print one JSON object per token"),
):
    """Parse each argument and show how it was classified."""
    config: ArgTokenConfig = ctx.obj or load_config()
    expand_clusters = config.expand_clusters if expand is None else expand

    tokens = parse_arguments(arguments, expand_clusters=expand_clusters)
    logger.info(f"Parsed {len(tokens)} argument(s) (expand_clusters={expand_clusters})")

    if as_json:
        for token in tokens:
            typer.echo(json.dumps(_token_row(token)))
        return

    table = Table(title="Argument tokens")
    for column in ("#", "raw", "type", "name", "value", "abbreviated", "built"):
        table.add_column(column)
    for token in tokens:
        row = _token_row(token)
        cells = (
            str(row["position"]),
            row["raw"],
            row["type"],
            "-" if row["name"] is None else row["name"],
            "-" if row["value"] is None else row["value"],
            "yes" if row["abbreviated"] else "no",
            row["built"],
        )
        # Plain Text cells, user input is never rich markup
        table.add_row(*(Text(cell) for cell in cells))
    console.print(table)


@cli.command("build")
def build_command(
    kind: str = typer.Option(
        ..., "--type", help="option, equal-separated-option, value or command"
    ),
    name: Optional[str] = typer.Option(None, "--name", help="Option name"),
    value: Optional[str] = typer.Option(None, "--value", help="Option value, literal or command word"),
    abbreviated: bool = typer.Option(False, "--abbreviated", help="Use a single dash"),
):
    """Build the canonical text of a token from its parts."""
    try:
        token_type = TokenType[kind.strip().upper().replace("-", "_")]
    except KeyError:
        _fail(f"unknown token type {kind!r}", code=2)

    try:
        token = ArgumentToken(type=token_type, name=name, value=value, abbreviated=abbreviated)
    except ValidationError as e:
        logger.warning(f"Invalid token parts for {token_type.name}: {e}")
        _fail(f"invalid {token_type.name} token: {e.errors()[0]['msg']}", code=2)

    typer.echo(build(token))


@cli.command("expand", context_settings={"ignore_unknown_options": True})
def expand_command(
    cluster: str = typer.Argument(..., help="Abbreviation cluster, e.g. -abc"),
    prefix: bool = typer.Option(True, "--prefix/--no-prefix", help="Prefix each flag with '-'"),
):
    """Split an abbreviation cluster into single flags."""
    for flag in split_abbreviation_cluster(cluster, with_prefix=prefix):
        typer.echo(flag)


@cli.command("option", context_settings={"ignore_unknown_options": True})
def option_command(name: str = typer.Argument(..., help="Name to convert")):
    """Print the long option form of a name."""
    typer.echo(to_option(name))


@cli.command("abbreviation", context_settings={"ignore_unknown_options": True})
def abbreviation_command(name: str = typer.Argument(..., help="Name to convert")):
    """Print the abbreviated option form of a name."""
    try:
        typer.echo(to_abbreviation(name))
    except ArgumentTokenError as e:
        _fail(str(e), code=1)


def run():
    """Entry point for the argtoken CLI."""
    cli()


if __name__ == "__main__":
    run()

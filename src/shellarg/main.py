import json
from typing import List, Optional

import typer
from dotenv import load_dotenv

from shellarg.application import CommandLineArguments
from shellarg.config import ShellArgConfig
from shellarg.domain.exceptions import ParseError, SchemaError
from shellarg.domain.types import OptionKind
from shellarg.logger import get_logger, setup_logger

load_dotenv()

logger = get_logger("main")

cli = typer.Typer(
    name="shellarg",
    help="Try short-flag option and trailing parameter schemas against an argument vector",
    epilog="""
    Examples:
    $ shellarg parse -p source -p destination -s r -i z -- copy.py -r -z out.zip ./src ./dst
    $ shellarg copy -- copy.py -r -zout.zip ./src ./dst
    """,
    add_completion=False,
)


@cli.callback()
def configure(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging to the console"),
):
    """Configure logging from SHELLARG_* environment variables."""
    try:
        config = ShellArgConfig.from_env()
    except ValueError as e:
        typer.echo(f"Config error: {e}", err=True)
        raise typer.Exit(code=1)

    setup_logger(
        log_file=config.log_file,
        log_level="DEBUG" if debug else config.log_level,
        console_output=debug or config.console_output,
    )


def _run(args: CommandLineArguments, argv: List[str]) -> None:
    try:
        parsed = args.parse(argv)
    except ParseError as e:
        logger.warning(f"Rejected argument vector {argv!r}: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    typer.echo(json.dumps(parsed.as_dict(), indent=2))


@cli.command()
def parse(
    argv: List[str] = typer.Argument(..., help="Full argument vector, program name first (put it after --)"),
    params: Optional[List[str]] = typer.Option(None, "--param", "-p", help="Declare a parameter (repeatable, in order)"),
    switches: Optional[List[str]] = typer.Option(None, "--switch", "-s", help="Declare a switch flag (repeatable)"),
    inputs: Optional[List[str]] = typer.Option(None, "--input", "-i", help="Declare an input flag (repeatable)"),
):
    """Parse ARGV against the declared schema and print the result as JSON."""
    args = CommandLineArguments()
    try:
        args.add_parameters(params or [])
        args.add_options({flag: OptionKind.SWITCH for flag in switches or []})
        args.add_options({flag: OptionKind.INPUT for flag in inputs or []})
    except SchemaError as e:
        typer.echo(f"Schema error: {e}", err=True)
        raise typer.Exit(code=1)

    logger.debug(f"Schema: {args.schema!r}")
    _run(args, argv)


@cli.command()
def copy(
    argv: List[str] = typer.Argument(..., help="Full argument vector, program name first (put it after --)"),
):
    """Parse ARGV as the example copy command: [-r] [-z zipfile] source destination."""
    args = CommandLineArguments()
    args.add_parameters(["source", "destination"])
    args.add_options({
        "r": OptionKind.SWITCH,  # recursively copy
        "z": OptionKind.INPUT,  # zip the files to a location
    })
    _run(args, argv)


def run():
    """Entry point for the shellarg command line tool."""
    cli()


if __name__ == "__main__":
    run()

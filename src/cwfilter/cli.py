"""Command-line interface for cwfilter.

This module provides commands to parse CloudWatch filter expressions and
to check two expressions for equivalence.
"""

import json
from typing import NoReturn

import click

from cwfilter import __version__
from cwfilter.core.config import Settings, get_settings
from cwfilter.core.filters import (
    FilterError,
    are_equivalent,
    clean_expression,
    parse,
    to_filter_string,
)
from cwfilter.core.logging import configure_logging, get_logger
from cwfilter.schemas import CompareResponse, ParseResponse, expression_to_schema

EXIT_NOT_EQUIVALENT = 1
EXIT_INVALID_EXPRESSION = 2

max_depth_option = click.option(
    "--max-depth",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum parenthesis nesting depth (overrides config)",
)
json_option = click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the result as JSON",
)
clean_option = click.option(
    "--clean",
    is_flag=True,
    default=False,
    help="Strip '$', '.' and braces from expressions before parsing",
)


@click.group()
@click.version_option(version=__version__, prog_name="cwfilter")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Set log level (overrides config)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """cwfilter - CloudWatch filter expression tools.

    Parses metric filter patterns and checks whether two patterns describe
    the same filter up to operand and sub-expression order.
    """
    settings = get_settings()
    if log_level is not None:
        settings = settings.model_copy(update={"log_level": log_level.upper()})

    configure_logging(settings)
    ctx.obj = settings


def _fail(error: FilterError) -> NoReturn:
    click.echo(f"Error: {error}", err=True)
    raise SystemExit(EXIT_INVALID_EXPRESSION)


@cli.command("parse")
@click.argument("expression")
@max_depth_option
@json_option
@clean_option
@click.pass_obj
def parse_command(
    settings: Settings, expression: str, max_depth: int | None, as_json: bool, clean: bool
) -> None:
    """Parse EXPRESSION and print its canonical form."""
    logger = get_logger(__name__)
    text = clean_expression(expression) if clean else expression

    try:
        tree = parse(text, max_depth or settings.max_depth)
    except FilterError as e:
        _fail(e)

    canonical = to_filter_string(tree)
    logger.info("Parsed filter expression", canonical=canonical)

    if as_json:
        response = ParseResponse(
            expression=expression,
            canonical=canonical,
            tree=expression_to_schema(tree),
        )
        click.echo(json.dumps(response.model_dump(mode="json"), indent=2))
    else:
        click.echo(canonical)


@cli.command("compare")
@click.argument("expression_a")
@click.argument("expression_b")
@max_depth_option
@json_option
@clean_option
@click.pass_obj
def compare_command(
    settings: Settings,
    expression_a: str,
    expression_b: str,
    max_depth: int | None,
    as_json: bool,
    clean: bool,
) -> None:
    """Check whether EXPRESSION_A and EXPRESSION_B are equivalent.

    Exits with 0 when they are, 1 when they are not and 2 when either
    expression is invalid.
    """
    logger = get_logger(__name__)
    if clean:
        expression_a = clean_expression(expression_a)
        expression_b = clean_expression(expression_b)

    try:
        equivalent = are_equivalent(expression_a, expression_b, max_depth or settings.max_depth)
    except FilterError as e:
        _fail(e)

    logger.info("Compared filter expressions", equivalent=equivalent)

    if as_json:
        response = CompareResponse(
            expression_a=expression_a,
            expression_b=expression_b,
            equivalent=equivalent,
        )
        click.echo(json.dumps(response.model_dump(mode="json"), indent=2))
    else:
        click.echo("equivalent" if equivalent else "not equivalent")

    if not equivalent:
        raise SystemExit(EXIT_NOT_EQUIVALENT)


def main() -> None:
    """Main entry point for the CLI.

    This function is called when the `cwfilter` command is run
    or when using `python -m cwfilter`.
    """
    cli()


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""Main CLI entry point for gpgkey-rules.

This module provides a Click CLI interface for checking key algorithm
types against the validation rules.
"""

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from gpgkey_rules import __version__
from gpgkey_rules.algorithms import load_public_key_algorithm, supported_algorithm_names
from gpgkey_rules.config import apply as apply_config
from gpgkey_rules.config import load as load_config
from gpgkey_rules.config import write_default as write_default_config
from gpgkey_rules.defaults import DEFAULT_CONFIG_FILENAME, ENV_CATALOG, ENV_CONFIG, LOG_DATE_FORMAT, LOG_FORMAT
from gpgkey_rules.result import Failure
from gpgkey_rules.rules import IsValidGpgkeyTypeValidationRule


def _setup_logging(level: str) -> None:
    """Initializes logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    help="Path to configuration file",
    envvar=ENV_CONFIG,
)
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    help="Path to message catalog (overrides the configuration)",
    envvar=ENV_CATALOG,
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None = None, catalog_path: Path | None = None) -> None:
    """gpgkey-rules - Validate OpenPGP public key algorithm types."""
    ctx.ensure_object(dict)
    ctx.obj["console"] = Console(soft_wrap=True)
    console = ctx.obj["console"]

    if config_path is None:
        config_path = Path.cwd() / DEFAULT_CONFIG_FILENAME
    ctx.obj["config_path"] = config_path

    # Config management must work even when the current file is broken
    if ctx.invoked_subcommand == "config":
        return

    config_result = load_config(config_path)
    if isinstance(config_result, Failure):
        console.print(f"[bold red]Error:[/bold red] {escape(config_result.error)}")
        ctx.exit(1)

    rules_config = config_result.unwrap()
    if catalog_path is not None:
        rules_config = rules_config.model_copy(update={"catalog": catalog_path})
    _setup_logging(rules_config.log_level.value)

    translator_result = apply_config(rules_config)
    if isinstance(translator_result, Failure):
        console.print(f"[bold red]Error:[/bold red] {escape(translator_result.error)}")
        ctx.exit(1)

    ctx.obj["config"] = rules_config
    ctx.obj["rule"] = IsValidGpgkeyTypeValidationRule()


@cli.command(name="check")
@click.argument("values", nargs=-1, required=True)
@click.pass_context
def check(ctx: click.Context, values: tuple[str, ...]) -> None:
    """Check that each VALUE names a supported key algorithm."""
    console = ctx.obj["console"]
    rule: IsValidGpgkeyTypeValidationRule = ctx.obj["rule"]

    has_errors = False
    for value in values:
        result = rule.check(value)
        if isinstance(result, Failure):
            console.print(f"❌ [bold]{escape(repr(value))}[/bold]: {escape(result.error)}", highlight=False)
            has_errors = True
        else:
            console.print(f"✅ [bold]{escape(repr(value))}[/bold] is a valid key type", highlight=False)

    if has_errors:
        ctx.exit(1)


@cli.command(name="algorithms")
@click.pass_context
def algorithms(ctx: click.Context) -> None:
    """List the supported key algorithm types."""
    console = ctx.obj["console"]
    for name in supported_algorithm_names():
        console.print(name)


@cli.command(name="inspect")
@click.argument("pem_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def inspect(ctx: click.Context, pem_file: Path) -> None:
    """Report the algorithm type of a PEM encoded public key."""
    console = ctx.obj["console"]
    rule: IsValidGpgkeyTypeValidationRule = ctx.obj["rule"]

    result = load_public_key_algorithm(pem_file.read_bytes())
    if isinstance(result, Failure):
        console.print(f"[bold red]Error:[/bold red] {escape(result.error)}")
        ctx.exit(1)

    algorithm = result.unwrap()
    if rule.is_valid(algorithm):
        console.print(f"✅ {escape(pem_file.name)}: {algorithm} (supported)", highlight=False)
    else:
        console.print(f"❌ {escape(pem_file.name)}: {algorithm} (unsupported)", highlight=False)
        ctx.exit(1)


@cli.group()
def config() -> None:
    """Manage the configuration file."""


@config.command(name="init")
@click.option("--force", is_flag=True, help="Force overwrite of an existing config file")
@click.pass_context
def config_init(ctx: click.Context, force: bool) -> None:
    """Write a default configuration file."""
    console = ctx.obj["console"]

    result = write_default_config(ctx.obj["config_path"], force=force)
    if isinstance(result, Failure):
        console.print(f"[bold red]Error:[/bold red] {escape(result.error)}")
        ctx.exit(1)
    console.print(f"✅ Configuration written to [bold]{escape(str(result.unwrap()))}[/bold]")


def main() -> None:
    """Run the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()

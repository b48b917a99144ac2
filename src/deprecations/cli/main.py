# topmark:header:start
#
#   project      : Deprecations
#   file         : main.py
#   file_relpath : src/deprecations/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ``deprecations`` command.

Commands:
    - ``config``: print the effective configuration (file + environment) as TOML.
    - ``check``: validate a configuration file.
    - ``version``: print the installed version.
"""

from __future__ import annotations

from pathlib import Path

import click
from yachalk import chalk

from deprecations.cli.exit_codes import ExitCode
from deprecations.config.loaders import find_config_file, read_config, render_config_toml
from deprecations.config.logging import get_logger, resolve_env_log_level, setup_logging
from deprecations.config.model import DeprecationsConfig
from deprecations.constants import DEPRECATIONS_VERSION

logger = get_logger(__name__)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Inspect deprecations configuration.",
)
def cli() -> None:
    """Entry point for the deprecations CLI."""
    setup_logging(level=resolve_env_log_level())


@cli.command("config")
@click.option(
    "--file",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Configuration file to read (default: discovered from the current directory).",
)
@click.option(
    "--pyproject/--no-pyproject",
    default=False,
    help="Nest the output under [tool.deprecations].",
)
def config_command(config_file: Path | None, pyproject: bool) -> None:
    """Print the effective configuration as TOML."""
    path: Path | None = config_file if config_file is not None else find_config_file()
    try:
        config: DeprecationsConfig = read_config(path) if path is not None else DeprecationsConfig()
        config = config.merged_with_env()
    except ValueError as e:
        click.echo(chalk.red(f"Invalid configuration: {e}"), err=True)
        raise SystemExit(ExitCode.INVALID_CONFIG) from e

    source: str = str(path) if path is not None else "<defaults>"
    click.echo(f"# source: {source}")
    click.echo(render_config_toml(config, for_pyproject=pyproject), nl=False)


@cli.command("check")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
def check_command(path: Path) -> None:
    """Validate the configuration file PATH."""
    if not path.is_file():
        click.echo(chalk.red(f"No such file: {path}"), err=True)
        raise SystemExit(ExitCode.FAILURE)
    try:
        read_config(path)
    except ValueError as e:
        click.echo(chalk.red(f"{path}: {e}"), err=True)
        raise SystemExit(ExitCode.INVALID_CONFIG) from e
    logger.debug("Validated %s", path)
    click.echo(chalk.green(f"{path}: OK"))


@cli.command("version")
def version_command() -> None:
    """Print the installed version."""
    click.echo(DEPRECATIONS_VERSION)

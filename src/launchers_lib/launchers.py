# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys

import click
from click_help_colors import HelpColorsGroup

from launchers_lib.defaults.cli import defaults
from launchers_lib.gaussian.cli import gaussian
from launchers_lib.gmx.cli import gmx
from launchers_lib.orca.cli import orca
from launchers_lib.replicate.cli import replicate
from launchers_lib.script.cli import script
from launchers_lib.vasp.cli import vasp

__version__ = "2.0.0"

# support both --help and -h
_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(
    cls=HelpColorsGroup,
    help_options_color="bright_blue",
    invoke_without_command=True,
    context_settings=_CONTEXT_SETTINGS,
)
@click.option(
    "--version",
    is_flag=True,
    help="Print the current version of the launchers and exit.",
)
@click.pass_context
def cli(ctx: click.Context, version: bool):
    """
    Run any launcher.

    The launchers write batch-system job files for GROMACS, Gaussian, ORCA, VASP,
    and generic bash scripts and submit them. Every launcher is also available
    as a standalone command (e.g., `GMX_launcher`). Use `<command> -h`
    to print the options of a launcher.
    """
    if version:
        print(__version__)
        sys.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        sys.exit(0)


cli.add_command(gmx)
cli.add_command(replicate)
cli.add_command(gaussian)
cli.add_command(orca)
cli.add_command(vasp)
cli.add_command(script)
cli.add_command(defaults)

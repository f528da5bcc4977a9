# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from typing import NoReturn

import click

from launchers_lib.launch.cli import LAUNCHER_CONTEXT_SETTINGS, run_launcher

from .launcher import GmxLauncher


@click.command(
    short_help="Submit GROMACS simulations.",
    help=GmxLauncher.DESCRIPTION,
    context_settings=LAUNCHER_CONTEXT_SETTINGS,
    add_help_option=False,
)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def gmx(tokens: tuple[str, ...]) -> NoReturn:
    """
    Submit `gmx mdrun` for every provided .tpr file.
    """
    run_launcher(GmxLauncher, tokens)

# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from typing import NoReturn

import click

from launchers_lib.launch.cli import LAUNCHER_CONTEXT_SETTINGS, run_launcher

from .launcher import ReplicateLauncher


@click.command(
    short_help="Submit GROMACS equilibration and production chains.",
    help=ReplicateLauncher.DESCRIPTION,
    context_settings=LAUNCHER_CONTEXT_SETTINGS,
    add_help_option=False,
)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def replicate(tokens: tuple[str, ...]) -> NoReturn:
    """
    Submit one grompp/mdrun chain per replica.
    """
    run_launcher(ReplicateLauncher, tokens)

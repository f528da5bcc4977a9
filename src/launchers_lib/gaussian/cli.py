# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from typing import NoReturn

import click

from launchers_lib.launch.cli import LAUNCHER_CONTEXT_SETTINGS, run_launcher

from .launcher import GaussianLauncher


@click.command(
    short_help="Submit Gaussian calculations.",
    help=GaussianLauncher.DESCRIPTION,
    context_settings=LAUNCHER_CONTEXT_SETTINGS,
    add_help_option=False,
)
@click.argument("tokens", nargs=-1, type=click.UNPROCESSED)
def gaussian(tokens: tuple[str, ...]) -> NoReturn:
    """
    Submit a Gaussian calculation for every provided input file.
    """
    run_launcher(GaussianLauncher, tokens)

# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from typing import NoReturn

import click

from launchers_lib.core.config import CFG
from launchers_lib.core.error import HelpRequested, LauncherError
from launchers_lib.core.logger import get_logger

from .launcher import Launcher

logger = get_logger(__name__)

# launchers parse their own command line
LAUNCHER_CONTEXT_SETTINGS = {
    "ignore_unknown_options": True,
    "allow_interspersed_args": False,
    "help_option_names": [],
}


def run_launcher(launcher_cls: type[Launcher], tokens: tuple[str, ...]) -> NoReturn:
    """
    Run a launcher with the given command-line tokens and exit.

    Prints the usage block and exits with 0 if help was requested.
    """
    try:
        launcher = launcher_cls()
        try:
            exit_code = launcher.launch(tokens)
        except HelpRequested:
            click.echo(launcher.usage())
            sys.exit(0)
        sys.exit(exit_code)
    except LauncherError as e:
        logger.error(e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)

# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from typing import NoReturn

import click
from click_option_group import optgroup
from rich.console import Console
from rich.text import Text

from launchers_lib.core.click_format import GNUHelpColorsCommand
from launchers_lib.core.common import yes_or_no_prompt
from launchers_lib.core.config import CFG
from launchers_lib.core.error import LauncherError, NoArgumentsError
from launchers_lib.core.logger import get_logger
from launchers_lib.properties.defaults import Defaults

from .presenter import DefaultsPresenter

logger = get_logger(__name__)
console = Console()


# Note that all options must be part of an optgroup otherwise Parser breaks.
@click.command(
    short_help="Change the default resources of all launchers.",
    help=f"""Set the default value of a resource requested by all launchers.

{click.style("VARIABLE", fg="green")}   One of: {", ".join(Defaults.ALLOWED_VARIABLES)}.

{click.style("VALUE", fg="green")}      The new default value.

Defaults are stored in `{CFG.paths.defaults_file}` and take precedence over
the defaults from the configuration file. Values specified on the command line
of a launcher always take precedence over the defaults.""",
    cls=GNUHelpColorsCommand,
    help_options_color="bright_blue",
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.argument(
    "variable",
    type=str,
    metavar=click.style("VARIABLE", fg="green"),
    required=False,
    default=None,
)
@click.argument(
    "value",
    type=str,
    metavar=click.style("VALUE", fg="green"),
    required=False,
    default=None,
)
@optgroup.group(f"{click.style('Actions', fg='yellow')}")
@optgroup.option(
    "--show", is_flag=True, help="Print the effective default values and exit."
)
@optgroup.option(
    "--reset", is_flag=True, help="Remove all defaults set using this command."
)
@optgroup.option(
    "-y", "--yes", is_flag=True, help="Reset the defaults without confirmation."
)
def defaults(
    variable: str | None,
    value: str | None,
    show: bool = False,
    reset: bool = False,
    yes: bool = False,
) -> NoReturn:
    """
    Set, show, or reset the default resources of the launchers.
    """
    try:
        user_defaults = Defaults.fromConfig(CFG)

        if show:
            console.print(Text.from_ansi(DefaultsPresenter(user_defaults).createTable()))
            sys.exit(0)

        if reset:
            if not yes and not yes_or_no_prompt(
                f"Remove defaults stored in '{user_defaults.getFile()}'?"
            ):
                logger.info("Operation aborted.")
                sys.exit(0)
            if user_defaults.reset():
                logger.info("Defaults reset.")
            else:
                logger.info("No defaults to reset.")
            sys.exit(0)

        if variable is None or value is None:
            raise NoArgumentsError(
                "No input arguments. Variable and value needed. Use -h for help."
            )

        user_defaults.set(variable, value)
        logger.info(f"Default {variable} set to '{value}'.")
        sys.exit(0)
    except LauncherError as e:
        logger.error(e)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        sys.exit(CFG.exit_codes.unexpected_error)

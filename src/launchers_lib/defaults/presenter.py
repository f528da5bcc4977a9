# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import asdict

from tabulate import Line, TableFormat, tabulate

from launchers_lib.core.config import DefaultResources
from launchers_lib.properties.defaults import Defaults


class DefaultsPresenter:
    """
    Present the effective default resources and where each value comes from.
    """

    # Table formatting configuration for `tabulate`.
    _COMPACT_TABLE = TableFormat(
        lineabove=Line("", "", "", ""),
        linebelowheader="",
        linebetweenrows="",
        linebelow=Line("", "", "", ""),
        headerrow=("", "  ", ""),
        datarow=("", "  ", ""),
        padding=0,
        with_header_hide=["lineabove", "linebelow"],
    )

    _BOLD = "\033[1m"
    _RESET = "\033[0m"

    def __init__(self, defaults: Defaults):
        self._defaults = defaults

    def createTable(self) -> str:
        """
        Build a table of the default resources.

        Returns:
            str: Tabulated variables, their values, and their sources with ANSI codes applied.
        """
        effective = self._defaults.load()
        stored = self._defaults.stored()
        builtin = asdict(DefaultResources())

        rows = []
        for variable in Defaults.ALLOWED_VARIABLES:
            value = getattr(effective, variable)
            if variable in stored:
                source = "user"
            elif value != builtin[variable]:
                source = "config"
            else:
                source = "built-in"
            rows.append([variable, "-" if value is None else value, source])

        headers = [
            f"{DefaultsPresenter._BOLD}{h}{DefaultsPresenter._RESET}"
            for h in ("Variable", "Value", "Source")
        ]
        return tabulate(
            rows,
            headers=headers,
            tablefmt=DefaultsPresenter._COMPACT_TABLE,
            stralign="left",
            numalign="left",
        )

# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import shlex

from launchers_lib.launch.launcher import Launcher
from launchers_lib.properties.request import JobRequest


class OrcaLauncher(Launcher):
    """
    Submits an ORCA calculation for each provided input file.
    """

    PROG = "ORCA_launcher"
    DESCRIPTION = "Run an ORCA calculation for each INPUT_FILE."
    ARGS = "[OPTIONS] INPUT_FILE..."
    EXTENSIONS = (".inp",)

    def _modules(self) -> tuple[list[str], list[str]]:
        settings = self._cfg.orca
        return settings.modules_unload, settings.modules_load

    def _body(self, request: JobRequest) -> list[str]:
        # parallel ORCA runs must be started using the full path to the executable
        return [
            f"$(which {self._cfg.orca.executable}) {shlex.quote(request.input_file.name)} "
            f"> {request.input_file.stem}.out"
        ]

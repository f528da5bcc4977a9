# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import shlex
from pathlib import Path

from launchers_lib.launch.launcher import Launcher
from launchers_lib.launch.resolver import Resolver
from launchers_lib.parse import Flag
from launchers_lib.properties.request import JobRequest


class ScriptLauncher(Launcher):
    """
    Submits a single script, forwarding all following arguments to it.
    """

    PROG = "SCRIPT_launcher"
    DESCRIPTION = (
        "Run SCRIPT using bash. All arguments following SCRIPT are passed to the script."
    )
    ARGS = "[OPTIONS] SCRIPT [ARGS...]"
    FLAGS = [
        Flag(
            ("--name",),
            "name",
            metavar="NAME",
            help="Name of the job. Default: name of the script without its extension.",
        ),
    ]

    def _items(self) -> list:
        # only the first positional token is the script
        return self._args.positional[:1]

    def _jobName(self, path: Path) -> str:
        return self._args.get("name") or Resolver.nameFromFile(path)

    def _modules(self) -> tuple[list[str], list[str]]:
        settings = self._cfg.script
        return settings.modules_unload, settings.modules_load

    def _body(self, request: JobRequest) -> list[str]:
        command = [
            self._cfg.script.executable,
            shlex.quote(request.input_file.name),
            *(shlex.quote(arg) for arg in self._args.positional[1:]),
            f"> {request.name}.log 2>&1",
        ]
        return [" ".join(command)]

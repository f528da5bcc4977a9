# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from pathlib import Path

from launchers_lib.core.error import LauncherError, MissingFileError
from launchers_lib.launch.launcher import Launcher
from launchers_lib.launch.resolver import Resolver
from launchers_lib.parse import Flag
from launchers_lib.properties.request import JobRequest


class VaspLauncher(Launcher):
    """
    Submits a VASP calculation prepared in a directory.
    """

    PROG = "VASP_launcher"
    DESCRIPTION = (
        "Run a VASP calculation in a directory containing the INCAR, POSCAR, "
        "KPOINTS, and POTCAR files."
    )
    ARGS = "[OPTIONS]"
    REQUIRES_ARGUMENTS = False
    FLAGS = [
        Flag(
            ("--dir",),
            "dir",
            metavar="DIR",
            help="Directory of the calculation. Default: current directory.",
        ),
        Flag(
            ("--name",),
            "name",
            metavar="NAME",
            help="Name of the job. Default: name of the calculation directory.",
        ),
    ]

    def _items(self) -> list:
        if self._args.positional:
            raise LauncherError(
                f"Unexpected argument '{self._args.positional[0]}'. Use -h for help."
            )
        return [self._work_dir / self._args.get("dir", ".")]

    def _makeRequest(self, item: object, resolver: Resolver) -> JobRequest:
        directory = Path(item)
        if not directory.is_dir():
            raise MissingFileError(f"Directory '{directory}' does not exist.")

        if missing := [
            f for f in self._cfg.vasp.required_files if not (directory / f).is_file()
        ]:
            raise MissingFileError(
                f"Missing VASP input files in '{directory}': {', '.join(missing)}."
            )

        name = self._args.get("name") or Resolver.nameFromDirectory(directory)
        return JobRequest(
            name=resolver.resolveName(name),
            resources=resolver.resolveResources(self._explicitResources()),
            work_dir=directory.resolve(),
            input_files=[
                (directory / f).resolve() for f in self._cfg.vasp.required_files
            ],
            mode=self._mode(),
        )

    def _modules(self) -> tuple[list[str], list[str]]:
        settings = self._cfg.vasp
        return settings.modules_unload, settings.modules_load

    def _body(self, request: JobRequest) -> list[str]:
        settings = self._cfg.vasp
        return [f"{settings.mpi_launcher} {settings.executable} > vasp.out 2>&1"]

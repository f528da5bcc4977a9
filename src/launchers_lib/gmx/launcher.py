# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import shlex
from pathlib import Path

from launchers_lib.core.logger import get_logger
from launchers_lib.launch.launcher import Launcher
from launchers_lib.parse import VARIADIC, Flag
from launchers_lib.properties.request import JobRequest

logger = get_logger(__name__)


class GmxLauncher(Launcher):
    """
    Submits `gmx mdrun` for each provided .tpr file.
    """

    PROG = "GMX_launcher"
    DESCRIPTION = (
        "Run a GROMACS simulation for each TPR_FILE. The job is executed in the directory "
        "of the input file and all output files are named after it."
    )
    ARGS = "[OPTIONS] TPR_FILE..."
    EXTENSIONS = (".tpr",)
    FLAGS = [
        Flag(
            ("--cpi",),
            "cpi",
            arity=0,
            help="Continue the simulation from the checkpoint file named after the input file.",
        ),
        Flag(
            ("--extend",),
            "extend",
            metavar="PS",
            help="Extend the simulation by PS picoseconds and continue from the checkpoint.",
        ),
        Flag(
            ("-r", "--replica"),
            "replica",
            arity=VARIADIC,
            metavar="DIR",
            help="Run the simulation as replicas in the given directories (mdrun -multidir).\n"
            "Each directory must contain the input file.",
        ),
    ]

    def _inputExists(self, path: Path) -> bool:
        if directories := self._replicas():
            return all((path.parent / d / path.name).is_file() for d in directories)
        return path.is_file()

    def _modules(self) -> tuple[list[str], list[str]]:
        settings = self._cfg.gromacs
        return settings.modules_unload, settings.modules_load

    def _body(self, request: JobRequest) -> list[str]:
        settings = self._cfg.gromacs
        base = request.input_file.stem
        extend = self._args.get("extend")
        continuing = self._args.isSet("cpi") or extend is not None
        directories = self._replicas()

        commands = []
        mdrun = [f"{settings.executable} mdrun -deffnm {base}"]
        if directories:
            mdrun = [
                f"{settings.mpi_launcher} {settings.mpi_executable} mdrun",
                f"-multidir {' '.join(shlex.quote(d) for d in directories)}",
                f"-deffnm {base}",
            ]

        if extend is not None:
            extended = f"{base}_ext.tpr"
            commands.append(
                GmxLauncher._convertTpr(
                    settings.executable,
                    request.input_file.name,
                    extended,
                    str(extend),
                    directories,
                )
            )
            mdrun.append(f"-s {extended}")

        if continuing:
            self._checkCheckpoint(request, base, directories)
            mdrun.append(f"-cpi {base}.cpt -noappend")

        if settings.mdrun_options:
            mdrun.append(settings.mdrun_options)

        mdrun.append(f"> {base}.mdrun.log 2>&1")
        commands.append(" ".join(mdrun))

        if continuing:
            commands.append(GmxLauncher._renameParts(base, directories))

        return commands

    def _replicas(self) -> list[str]:
        return list(self._args.get("replica", []))

    @staticmethod
    def _checkCheckpoint(
        request: JobRequest, base: str, directories: list[str]
    ) -> None:
        """
        Warn about missing checkpoint files. The simulation then starts from the beginning.
        """
        locations = [request.work_dir / d for d in directories] or [request.work_dir]
        for location in locations:
            if not (location / f"{base}.cpt").is_file():
                logger.warning(
                    f"Checkpoint file '{base}.cpt' not found in '{location}'. "
                    "The simulation will start from the beginning."
                )

    @staticmethod
    def _convertTpr(
        executable: str, tpr: str, extended: str, extend: str, directories: list[str]
    ) -> str:
        """
        Return the command extending the run input file.

        With replicas, the input file of every replica directory is extended.
        """
        extend = shlex.quote(extend)
        if not directories:
            return f"{executable} convert-tpr -s {tpr} -extend {extend} -o {extended}"

        dirs = " ".join(shlex.quote(d) for d in directories)
        return (
            f'for d in {dirs}; do {executable} convert-tpr -s "$d"/{tpr} '
            f'-extend {extend} -o "$d"/{extended} || exit 1; done'
        )

    @staticmethod
    def _renameParts(base: str, directories: list[str]) -> str:
        """
        Return a shell loop renaming `<base>.partNNNN.<ext>` output files to `<base>.<ext>`.
        """
        pattern = f"{base}.part[0-9][0-9][0-9][0-9].*"
        if not directories:
            return f'for f in {pattern}; do [ -e "$f" ] && mv "$f" "{base}.${{f##*.}}"; done'

        dirs = " ".join(shlex.quote(d) for d in directories)
        return (
            f'for d in {dirs}; do for f in "$d"/{pattern}; do '
            f'[ -e "$f" ] && mv "$f" "$d/{base}.${{f##*.}}"; done; done'
        )

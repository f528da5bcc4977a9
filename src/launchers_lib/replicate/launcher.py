# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import os
import shlex
from pathlib import Path

from launchers_lib.core.error import LauncherError, MissingFileError
from launchers_lib.core.logger import get_logger
from launchers_lib.launch.launcher import Launcher
from launchers_lib.launch.resolver import Resolver
from launchers_lib.parse import VARIADIC, Flag
from launchers_lib.properties.request import JobRequest

logger = get_logger(__name__)


class ReplicateLauncher(Launcher):
    """
    Submits grompp/mdrun chains of equilibration and production phases,
    one job per replica.
    """

    PROG = "GMX_replicater"
    DESCRIPTION = (
        "Prepare and run GROMACS equilibration phases followed by a production run. "
        "Each replica is executed in its own directory; without replicas, "
        "a single job is executed in the current directory."
    )
    ARGS = "[OPTIONS]"
    FLAGS = [
        Flag(
            ("--coord",),
            "coord",
            metavar="FILE",
            help="Initial coordinates. Default: value from the configuration (conf.gro).",
        ),
        Flag(
            ("--topol",),
            "topol",
            metavar="FILE",
            help="System topology. Default: value from the configuration (topol.top).",
        ),
        Flag(
            ("--equi",),
            "equi",
            arity=VARIADIC,
            metavar="MDP",
            help="Parameter files of the equilibration phases, in execution order.",
        ),
        Flag(
            ("--prod",),
            "prod",
            metavar="MDP",
            help="Parameter file of the production run. Required.",
        ),
        Flag(("--index",), "index", metavar="FILE", help="Index file."),
        Flag(
            ("--name",),
            "name",
            metavar="NAME",
            help="Name of the job. Default: name of the current directory.",
        ),
        Flag(
            ("-r", "--replica"),
            "replica",
            arity=VARIADIC,
            metavar="ID",
            help="Identifiers of the replicas. Each replica runs in a directory named after it.",
        ),
        Flag(
            ("-n",),
            "count",
            kind=int,
            metavar="N",
            help="Number of replicas, identified as 1 to N.",
        ),
        Flag(
            ("--ign-chk",),
            "ign_chk",
            arity=0,
            help="Do not pass checkpoint files between phases, only coordinates.",
        ),
    ]

    def _items(self) -> list:
        if self._args.positional:
            raise LauncherError(
                f"Unexpected argument '{self._args.positional[0]}'. Use -h for help."
            )

        self._validateInputs()

        if replicas := self._args.get("replica"):
            if self._args.isSet("count"):
                logger.warning("Both -r and -n specified. Ignoring -n.")
            return list(replicas)

        if (count := self._args.get("count")) is not None:
            if count < 1:
                raise LauncherError(f"Invalid number of replicas '{count}'.")
            return [str(i) for i in range(1, count + 1)]

        return [None]

    def _validateInputs(self) -> None:
        """
        Check that all files shared by the replicas exist.

        Raises:
            MissingFileError: If the production parameter file or any input file is missing.
            LauncherError: If two phases would produce output files of the same name.
        """
        if not self._args.isSet("prod"):
            raise MissingFileError(
                "No production parameter file specified (--prod). Use -h for help."
            )

        for path in [*self._phases(), *self._shared().values()]:
            if not path.is_file():
                raise MissingFileError(f"File '{path}' does not exist.")

        stems = [phase.stem for phase in self._phases()]
        if duplicated := sorted({s for s in stems if stems.count(s) > 1}):
            raise LauncherError(
                f"Multiple phases share the name '{duplicated[0]}'. Output files would be overwritten."
            )

        if not self._args.get("equi"):
            logger.warning(
                "No equilibration phases specified (--equi). Production will start from the initial coordinates."
            )

    def _phases(self) -> list[Path]:
        """Return the parameter files of all phases in execution order."""
        mdps = [*self._args.get("equi", []), self._args.get("prod")]
        return [self._work_dir / mdp for mdp in mdps]

    def _shared(self) -> dict[str, Path]:
        """Return the input files shared by all phases, keyed by their role."""
        settings = self._cfg.gromacs
        files = {
            "coordinates": self._work_dir / self._args.get("coord", settings.coord),
            "topology": self._work_dir / self._args.get("topol", settings.topol),
        }
        if index := self._args.get("index"):
            files["index"] = self._work_dir / index
        return files

    def _makeRequest(self, item: object, resolver: Resolver) -> JobRequest:
        name = self._args.get("name") or Resolver.nameFromDirectory(self._work_dir)
        work_dir = self._work_dir
        if item is not None:
            name = f"{name}_{item}"
            work_dir = self._work_dir / str(item)

        return JobRequest(
            name=resolver.resolveName(name),
            resources=resolver.resolveResources(self._explicitResources()),
            work_dir=work_dir.resolve(),
            input_files=[phase.resolve() for phase in self._phases()],
            aux_files={role: f.resolve() for role, f in self._shared().items()},
            mode=self._mode(),
        )

    def _prepare(self, request: JobRequest) -> None:
        if not request.work_dir.is_dir():
            logger.info(f"Creating replica directory '{request.work_dir}'.")
            request.work_dir.mkdir(parents=True, exist_ok=True)

    def _modules(self) -> tuple[list[str], list[str]]:
        settings = self._cfg.gromacs
        return settings.modules_unload, settings.modules_load

    def _body(self, request: JobRequest) -> list[str]:
        settings = self._cfg.gromacs
        gmx = settings.executable

        def rel(path: Path) -> str:
            return shlex.quote(os.path.relpath(path, request.work_dir))

        coordinates = rel(request.aux_files["coordinates"])
        topology = rel(request.aux_files["topology"])
        index = request.aux_files.get("index")

        commands = []
        if len(request.input_files) == 1:
            commands.append(
                "# WARNING: no equilibration phases, production starts from the initial coordinates"
            )

        previous: str | None = None
        for mdp in request.input_files:
            base = mdp.stem
            coords = coordinates if previous is None else f"{previous}.gro"

            grompp = [
                f"{gmx} grompp -f {rel(mdp)} -c {coords} -r {coords} -p {topology}"
            ]
            if index:
                grompp.append(f"-n {rel(index)}")
            if previous is not None and not self._args.isSet("ign_chk"):
                grompp.append(f"-t {previous}.cpt")
            grompp.append(f"-o {base}.tpr -maxwarn {settings.maxwarn}")
            commands.append(" ".join(grompp))

            mdrun = [f"{gmx} mdrun -deffnm {base}"]
            if settings.mdrun_options:
                mdrun.append(settings.mdrun_options)
            mdrun.append(f"> {base}.mdrun.log 2>&1")
            commands.append(" ".join(mdrun))

            previous = base

        return commands

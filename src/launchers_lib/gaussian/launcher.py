# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import shlex
from pathlib import Path

from launchers_lib.core.logger import get_logger
from launchers_lib.launch.launcher import Launcher
from launchers_lib.parse import Flag
from launchers_lib.properties.request import JobRequest
from launchers_lib.properties.resources import Resources

from .input import GaussianInput

logger = get_logger(__name__)


class GaussianLauncher(Launcher):
    """
    Submits a Gaussian calculation for each provided input file.
    """

    PROG = "G16_launcher"
    DESCRIPTION = (
        "Run a Gaussian calculation for each INPUT_FILE. Cores and memory are taken from "
        "the command line, then from the %NProcShared and %Mem directives of the input file, "
        "then from the defaults. The directives in the input file are rewritten to match "
        "the requested resources."
    )
    ARGS = "[OPTIONS] INPUT_FILE..."
    EXTENSIONS = (".com", ".gjf")
    FLAGS = [
        Flag(
            ("--fchk",),
            "fchk",
            arity=0,
            help="Convert the checkpoint file to a formatted checkpoint file after the calculation.",
        ),
        Flag(("--g09",), "g09", arity=0, help="Use Gaussian 09 instead of Gaussian 16."),
        Flag(("--nbo",), "nbo", arity=0, help="Load the NBO module."),
    ]

    def _embeddedResources(self, path: Path) -> Resources | None:
        return GaussianInput.fromFile(path).embeddedResources()

    def _prepare(self, request: JobRequest) -> None:
        gaussian_input = GaussianInput.fromFile(request.input_file)
        checkpoint = gaussian_input.directives().get("chk")

        added = None
        if self._args.isSet("fchk") and not checkpoint:
            added = checkpoint = f"{request.name}.chk"
            logger.warning(
                f"No %Chk directive in '{request.input_file.name}'. Adding '%Chk={added}'."
            )

        if checkpoint:
            checkpoint_file = Path(checkpoint)
            # Gaussian appends the extension if it is missing
            if not checkpoint_file.suffix:
                checkpoint_file = checkpoint_file.with_suffix(".chk")
            request.aux_files["checkpoint"] = checkpoint_file

        if gaussian_input.rewrite(
            request.resources.cores, request.resources.memory, added
        ):
            logger.info(f"Updated resource directives in '{request.input_file.name}'.")

    def _modules(self) -> tuple[list[str], list[str]]:
        settings = self._cfg.gaussian
        load = (
            settings.legacy_modules_load
            if self._args.isSet("g09")
            else settings.modules_load
        )
        if self._args.isSet("nbo"):
            load = [*load, settings.nbo_module]
        return settings.modules_unload, load

    def _body(self, request: JobRequest) -> list[str]:
        settings = self._cfg.gaussian
        executable = (
            settings.legacy_executable if self._args.isSet("g09") else settings.executable
        )
        base = request.input_file.stem

        commands = [
            f"export GAUSS_SCRDIR={settings.scratch_dir}",
            f"{executable} < {shlex.quote(request.input_file.name)} > {base}.log",
        ]
        if self._args.isSet("fchk"):
            checkpoint = shlex.quote(str(request.aux_files["checkpoint"]))
            commands.append(f"{settings.formchk} {checkpoint} {base}.fchk")

        return commands

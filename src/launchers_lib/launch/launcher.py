# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from pathlib import Path

from launchers_lib.batch import Slurm
from launchers_lib.batch.interface import BatchInterface, BatchMeta
from launchers_lib.core.common import ensure_directories, jobs_dir, messages_dir
from launchers_lib.core.config import CFG, Config
from launchers_lib.core.error import (
    InvalidExtensionError,
    InvalidNameError,
    MissingFileError,
    NoArgumentsError,
    UnreadableFileError,
)
from launchers_lib.core.error_handlers import handle_skipped_item
from launchers_lib.core.logger import get_logger
from launchers_lib.core.repeater import Repeater
from launchers_lib.jobfile import ScriptGenerator
from launchers_lib.parse import COMMON_FLAGS, HELP_FLAG, Flag, FlagParser
from launchers_lib.parse.parser import ParsedArguments
from launchers_lib.properties.defaults import Defaults
from launchers_lib.properties.request import JobRequest, Mode
from launchers_lib.properties.resources import Resources
from launchers_lib.submit import Submitter

from .resolver import Resolver

logger = get_logger(__name__)


class Launcher:
    """
    Base class of all launchers.

    A launcher turns a command line into one or more submission scripts.
    Subclasses declare their flags and accepted extensions and implement
    `_body` producing the commands of the computation. Launchers that do not
    operate on input files override `_items` and `_makeRequest`.
    """

    # Name of the program shown in the usage block
    PROG: str = ""

    # Short description shown in the usage block
    DESCRIPTION: str = ""

    # Positional arguments shown in the usage block
    ARGS: str = "[OPTIONS] FILE..."

    # Flags specific to the launcher
    FLAGS: list[Flag] = []

    # Accepted extensions of input files (including the leading dot)
    EXTENSIONS: tuple[str, ...] = ()

    # Whether running the launcher without arguments is an error
    REQUIRES_ARGUMENTS: bool = True

    def __init__(
        self,
        cfg: Config = CFG,
        defaults: Resources | None = None,
        batch_system: type[BatchInterface] | None = None,
        work_dir: Path | None = None,
    ):
        """
        Initialize the launcher.

        Args:
            cfg (Config): Configuration to use.
            defaults (Resources | None): Default resources. Loaded from the configuration
                and the user defaults file if not provided.
            batch_system (type[BatchInterface] | None): Batch system to submit to.
                Obtained from the environment if not provided.
            work_dir (Path | None): Directory the launcher was invoked from.
                Defaults to the current working directory.
        """
        self._cfg = cfg
        self._defaults = defaults
        self._batch_system = batch_system
        self._work_dir = work_dir or Path.cwd()
        self._parser = FlagParser(self.flags(), self.REQUIRES_ARGUMENTS)
        self._args = ParsedArguments()

    @classmethod
    def flags(cls) -> list[Flag]:
        """Return all flags understood by the launcher, help being the last one."""
        common = [flag for flag in COMMON_FLAGS if flag is not HELP_FLAG]
        return [*common, *cls.FLAGS, HELP_FLAG]

    def usage(self) -> str:
        """Return the usage block of the launcher."""
        return self._parser.usage(self.PROG, self.ARGS, self.DESCRIPTION)

    def launch(self, tokens: list[str] | tuple[str, ...]) -> int:
        """
        Generate and submit jobs for the given command line.

        Args:
            tokens (list[str] | tuple[str, ...]): Command-line tokens without the program name.

        Returns:
            int: 0 in dry-run mode, otherwise the exit code of the last submission.

        Raises:
            HelpRequested: If help was requested.
            LauncherError: If the command line is invalid. Errors tied to
                individual inputs are reported and the inputs skipped.
        """
        self._args = self._parser.parse(tokens)
        items = self._items()
        if not items:
            raise NoArgumentsError("No input files specified. Use -h for help.")

        ensure_directories(self._cfg)

        # dry runs only write the job file, so they do not need a scheduler
        fallback = Slurm if self._mode() == Mode.DRY_RUN else None
        batch_system = self._batch_system or BatchMeta.obtain(fallback=fallback)
        logger.debug(f"Using batch system '{batch_system}'.")

        defaults = self._defaults or Defaults.fromConfig(self._cfg).load()
        resolver = Resolver(defaults)
        generator = ScriptGenerator(batch_system, messages_dir(self._cfg), self._cfg)
        submitter = Submitter(batch_system, jobs_dir(self._cfg))

        repeater = Repeater(items, self._process, resolver, generator, submitter)
        for exc_type in (
            InvalidExtensionError,
            MissingFileError,
            UnreadableFileError,
            InvalidNameError,
        ):
            repeater.onException(exc_type, handle_skipped_item)
        repeater.run()

        return Launcher._exitCode(repeater)

    def _process(
        self,
        item: object,
        resolver: Resolver,
        generator: ScriptGenerator,
        submitter: Submitter,
    ) -> int | None:
        """
        Generate, write, and submit the job for a single item.
        """
        request = self._makeRequest(item, resolver)
        self._prepare(request)
        unload, load = self._modules()
        script = generator.generate(request, self._body(request), unload, load)
        job_file = script.write(self._work_dir)
        return submitter.submit(job_file, request.mode)

    def _items(self) -> list:
        """Return the items to create jobs for. By default, the input files."""
        return list(self._args.positional)

    def _makeRequest(self, item: object, resolver: Resolver) -> JobRequest:
        """
        Build the job request for an input file.

        The job runs in the directory containing the input file.

        Raises:
            InvalidExtensionError: If the file has an unsupported extension.
            MissingFileError: If the file does not exist.
            InvalidNameError: If the file name cannot be used as a job name.
        """
        path = self._work_dir / str(item)
        if self.EXTENSIONS and path.suffix not in self.EXTENSIONS:
            raise InvalidExtensionError(
                f"File '{item}' has an unsupported extension (expected {', '.join(self.EXTENSIONS)})."
            )
        if not self._inputExists(path):
            raise MissingFileError(f"File '{item}' does not exist.")

        name = resolver.resolveName(self._jobName(path))
        resources = resolver.resolveResources(
            self._explicitResources(), self._embeddedResources(path)
        )
        return JobRequest(
            name=name,
            resources=resources,
            work_dir=path.resolve().parent,
            input_files=[path.resolve()],
            aux_files=self._auxFiles(path.resolve()),
            mode=self._mode(),
        )

    def _inputExists(self, path: Path) -> bool:
        return path.is_file()

    def _jobName(self, path: Path) -> str:
        """Return the name of the job created for the input file."""
        return Resolver.nameFromFile(path)

    def _explicitResources(self) -> Resources:
        """Return the resources specified on the command line."""
        return Resources.fromDict(self._args.options)

    def _embeddedResources(self, _path: Path) -> Resources | None:
        """Return the resources declared inside the input file, if any."""
        return None

    def _auxFiles(self, _path: Path) -> dict[str, Path]:
        """Return companion files of the input file, keyed by their role."""
        return {}

    def _mode(self) -> Mode:
        return Mode.DRY_RUN if self._args.isSet("dry") else Mode.SUBMIT

    def _prepare(self, _request: JobRequest) -> None:
        """Prepare the input before the job script is generated."""
        pass

    def _modules(self) -> tuple[list[str], list[str]]:
        """Return environment modules to unload and to load."""
        return [], []

    def _body(self, request: JobRequest) -> list[str]:
        """Return the commands of the computation."""
        raise NotImplementedError(
            f"_body method is not implemented for {type(self).__name__}"
        )

    @staticmethod
    def _exitCode(repeater: Repeater) -> int:
        codes = [code for code in repeater.results.values() if code is not None]
        return codes[-1] if codes else 0

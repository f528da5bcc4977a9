# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import shlex
from pathlib import Path

from launchers_lib.batch.interface import BatchInterface
from launchers_lib.core.config import CFG, Config
from launchers_lib.core.logger import get_logger
from launchers_lib.properties.request import JobRequest

from .script import SubmissionScript

logger = get_logger(__name__)


class ScriptGenerator:
    """
    Assembles submission scripts for a specific batch system.
    """

    def __init__(
        self,
        batch_system: type[BatchInterface],
        messages_dir: Path,
        cfg: Config = CFG,
    ):
        """
        Initialize the generator.

        Args:
            batch_system (type[BatchInterface]): Batch system translating the header.
            messages_dir (Path): Directory collecting stdout and stderr of the jobs.
            cfg (Config): Configuration to use.
        """
        self._batch_system = batch_system
        self._messages_dir = messages_dir
        self._cfg = cfg

    def generate(
        self,
        request: JobRequest,
        body: list[str],
        modules_unload: list[str] | None = None,
        modules_load: list[str] | None = None,
    ) -> SubmissionScript:
        """
        Generate the submission script of a job.

        The body is preceded by a command changing into the job's working directory.

        Args:
            request (JobRequest): The job to generate the script for.
            body (list[str]): Commands of the computation in execution order.
            modules_unload (list[str] | None): Environment modules to unload.
            modules_load (list[str] | None): Environment modules to load.

        Returns:
            SubmissionScript: The generated script.
        """
        message_file = self._messages_dir / f"{request.name}{self._cfg.suffixes.message}"
        header = self._batch_system.translateHeader(
            request.name, request.resources, message_file
        )

        script = SubmissionScript(
            name=request.name,
            header=header,
            environment=ScriptGenerator.moduleLines(modules_unload, modules_load),
            body=[f"cd {shlex.quote(str(request.work_dir))}", *body],
        )
        logger.debug(f"Generated script for job '{request.name}':\n{script.render()}")
        return script

    @staticmethod
    def moduleLines(
        modules_unload: list[str] | None, modules_load: list[str] | None
    ) -> list[str]:
        """
        Return `module unload` lines followed by `module load` lines.
        """
        return [f"module unload {m}" for m in modules_unload or []] + [
            f"module load {m}" for m in modules_load or []
        ]

# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import shutil
from pathlib import Path

from launchers_lib.batch.interface import BatchInterface
from launchers_lib.core.logger import get_logger
from launchers_lib.properties.request import Mode

logger = get_logger(__name__)


class Submitter:
    """
    Class to submit job files to a batch system.

    Responsibilities:
        - Leave the job file untouched in dry-run mode.
        - Pass the job file to the batch system's submission command.
        - Archive the submitted job file.

    The outcome of the submission command is not inspected: its exit code is
    returned and the job file is archived regardless.
    """

    def __init__(self, batch_system: type[BatchInterface], jobs_dir: Path):
        """
        Initialize a Submitter instance.

        Args:
            batch_system (type[BatchInterface]): The batch system used for submission.
            jobs_dir (Path): Directory into which submitted job files are moved.
        """
        self._batch_system = batch_system
        self._jobs_dir = jobs_dir

    def submit(self, job_file: Path, mode: Mode) -> int | None:
        """
        Submit the job file (or not, in dry-run mode).

        Args:
            job_file (Path): Path to the generated job file.
            mode (Mode): Whether to submit the job or only keep the job file.

        Returns:
            int | None: Exit code of the submission command or None for a dry run.
        """
        if mode == Mode.DRY_RUN:
            logger.info(f"Job file '{job_file}' created ({mode}, not submitted).")
            return None

        exit_code = self._batch_system.jobSubmit(job_file)

        archived = self._jobs_dir / job_file.name
        shutil.move(job_file, archived)
        logger.info(
            f"Job file '{job_file.name}' submitted using '{self._batch_system.submitCommand()}' and moved to '{self._jobs_dir}'."
        )
        return exit_code


# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab


import shlex
import subprocess
from abc import ABC
from pathlib import Path

from launchers_lib.core.logger import get_logger
from launchers_lib.properties.resources import Resources

logger = get_logger(__name__)


class BatchInterface(ABC):
    """
    Abstract base class for batch system integrations.

    Concrete batch system classes must implement these methods to allow
    the launchers to write and submit job files for different batch systems uniformly.
    """

    @staticmethod
    def envName() -> str:
        """
        Return the name of the batch system environment.

        Returns:
            str: The batch system name.
        """
        raise NotImplementedError(
            "envName method is not implemented for this batch system implementation"
        )

    @staticmethod
    def isAvailable() -> bool:
        """
        Determine whether the batch system is available on the current host.

        Implementations typically verify this by checking for the presence
        of the submission command.

        Returns:
            bool: True if the batch system is available, False otherwise.
        """
        raise NotImplementedError(
            "isAvailable method is not implemented for this batch system implementation"
        )

    @staticmethod
    def submitCommand() -> str:
        """
        Return the command used to submit a job file.

        Returns:
            str: Name of the submission command.
        """
        raise NotImplementedError(
            "submitCommand method is not implemented for this batch system implementation"
        )

    @staticmethod
    def translateHeader(
        job_name: str, res: Resources, message_file: Path
    ) -> list[str]:
        """
        Translate the job name and resources into scheduler directives.

        Args:
            job_name (str): Name of the job.
            res (Resources): Fully resolved resources of the job.
            message_file (Path): File collecting stdout and stderr of the job.

        Returns:
            list[str]: Directive lines, one directive per line, in a fixed order.
        """
        raise NotImplementedError(
            "translateHeader method is not implemented for this batch system implementation"
        )

    @classmethod
    def jobSubmit(cls, job_file: Path) -> int:
        """
        Submit a job file to the batch system.

        The output of the submission command is discarded and its exit code
        is not inspected, only returned.

        Args:
            job_file (Path): Path to the job file to submit.

        Returns:
            int: Exit code of the submission command.
        """
        command = f"{cls.submitCommand()} {shlex.quote(str(job_file))}"
        logger.debug(command)

        result = subprocess.run(
            ["bash"],
            input=command,
            text=True,
            check=False,
            stdout=subprocess.DEVNULL,
        )

        logger.debug(f"Submission command returned {result.returncode}.")
        return result.returncode
